import pytest
from google.protobuf.descriptor_pb2 import FileDescriptorProto, FileDescriptorSet

from prototool.desc import sort_file_descriptor_set


def _set(*names):
    return FileDescriptorSet(file=[FileDescriptorProto(name=name) for name in names])


def test_moves_target_to_end():
    fds = _set("a.proto", "b.proto", "c.proto")
    result = sort_file_descriptor_set(fds, FileDescriptorProto(name="b.proto"))
    assert [f.name for f in result.file] == ["a.proto", "c.proto", "b.proto"]


def test_input_is_not_modified():
    fds = _set("a.proto", "b.proto")
    sort_file_descriptor_set(fds, FileDescriptorProto(name="a.proto"))
    assert [f.name for f in fds.file] == ["a.proto", "b.proto"]


def test_uses_given_proto():
    fds = _set("a.proto", "b.proto")
    target = FileDescriptorProto(name="a.proto", package="foo")
    result = sort_file_descriptor_set(fds, target)
    assert result.file[-1].package == "foo"
    assert len(result.file) == 2


def test_missing_name_raises():
    with pytest.raises(ValueError, match="no name on FileDescriptorProto"):
        sort_file_descriptor_set(_set("a.proto", ""), FileDescriptorProto(name="a.proto"))


def test_duplicate_raises():
    with pytest.raises(ValueError, match="duplicate FileDescriptorProto"):
        sort_file_descriptor_set(
            _set("a.proto", "a.proto"), FileDescriptorProto(name="a.proto")
        )


def test_target_not_in_set_raises():
    with pytest.raises(ValueError, match="no FileDescriptorProto named z.proto"):
        sort_file_descriptor_set(_set("a.proto"), FileDescriptorProto(name="z.proto"))
"""Helpers for FileDescriptorSets."""

from __future__ import annotations

from google.protobuf.descriptor_pb2 import FileDescriptorProto, FileDescriptorSet


def sort_file_descriptor_set(
    file_descriptor_set: FileDescriptorSet,
    file_descriptor_proto: FileDescriptorProto,
) -> FileDescriptorSet:
    """Return a new set with ``file_descriptor_proto`` moved to the end.

    Raises ValueError if a file has no name, if names repeat, or if the
    given file's name is not in the set.
    """
    names: set[str] = set()
    for proto in file_descriptor_set.file:
        if not proto.name:
            raise ValueError("no name on FileDescriptorProto")
        if proto.name in names:
            raise ValueError(
                f"duplicate FileDescriptorProto in FileDescriptorSet: {proto.name}"
            )
        names.add(proto.name)
    if file_descriptor_proto.name not in names:
        raise ValueError(
            f"no FileDescriptorProto named {file_descriptor_proto.name} "
            f"in FileDescriptorSet with names {sorted(names)}"
        )
    result = FileDescriptorSet()
    result.file.extend(
        proto for proto in file_descriptor_set.file if proto.name != file_descriptor_proto.name
    )
    result.file.append(file_descriptor_proto)
    return result
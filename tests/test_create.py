import os

import pytest

from prototool.create import (
    DEFAULT_PACKAGE,
    check_file_path,
    package_from_rel,
    render,
    resolve_package,
)


@pytest.fixture
def one_config(tmp_path):
    root = tmp_path / "one"
    mapping = {
        str(root / "a"): "foobar",
        str(root / "a" / "b"): "foo",
    }
    return root, mapping


def test_longest_override_wins(one_config):
    root, mapping = one_config
    abs_dir = str(root / "a" / "b" / "bar")
    assert resolve_package(abs_dir, str(root), mapping) == "foo.bar"


def test_shorter_override(one_config):
    root, mapping = one_config
    abs_dir = str(root / "a" / "c" / "bar")
    assert resolve_package(abs_dir, str(root), mapping) == "foobar.c.bar"


def test_no_override_uses_relative_path(one_config):
    root, mapping = one_config
    abs_dir = str(root / "b" / "c" / "bar")
    assert resolve_package(abs_dir, str(root), mapping) == "b.c.bar"


def test_config_dir_itself_uses_default(one_config):
    root, mapping = one_config
    assert resolve_package(str(root), str(root), mapping) == "uber.prototool.generated"


def test_override_on_config_dir(tmp_path):
    root = tmp_path / "two"
    assert resolve_package(str(root), str(root), {str(root): "foo"}) == "foo"
    assert (
        resolve_package(str(root / "another" / "dir"), str(root), {str(root): "foo.bar"})
        == "foo.bar.another.dir"
    )


def test_no_config_uses_default(tmp_path):
    assert resolve_package(str(tmp_path), "", {}) == DEFAULT_PACKAGE
    assert resolve_package(str(tmp_path), None) == DEFAULT_PACKAGE


def test_outside_config_dir_uses_default(tmp_path):
    config_dir = str(tmp_path / "repo")
    other = str(tmp_path / "elsewhere" / "x")
    assert resolve_package(other, config_dir, {}) == DEFAULT_PACKAGE


@pytest.mark.parametrize(
    ("rel", "base", "expected"),
    [
        (".", "", DEFAULT_PACKAGE),
        (".", "uber", "uber"),
        (os.path.join("foo", "bar"), "uber", "uber.foo.bar"),
        (os.path.join("another", "dir"), "", "another.dir"),
        ("bat", "special", "special.bat"),
    ],
)
def test_package_from_rel(rel, base, expected):
    assert package_from_rel(rel, base) == expected


def test_render_derived_package():
    expected = """syntax = "proto3";

package foo.bar;

option go_package = "barpb";
option java_multiple_files = true;
option java_outer_classname = "BazProto";
option java_package = "com.foo.bar";"""
    assert render("foo.bar", "barpb", "BazProto", "com.foo.bar") == expected


def test_render_package_override():
    expected = """syntax = "proto3";

package bat;

option go_package = "batpb";
option java_multiple_files = true;
option java_outer_classname = "BazProto";
option java_package = "com.bat";"""
    assert render("bat", "batpb", "BazProto", "com.bat") == expected


def test_render_default_package():
    expected = """syntax = "proto3";

package uber.prototool.generated;

option go_package = "generatedpb";
option java_multiple_files = true;
option java_outer_classname = "BazProto";
option java_package = "com.uber.prototool.generated";"""
    assert (
        render(DEFAULT_PACKAGE, "generatedpb", "BazProto", "com.uber.prototool.generated")
        == expected
    )


def test_check_file_path_empty():
    with pytest.raises(ValueError, match="filePath empty"):
        check_file_path("")


def test_check_file_path_existing(tmp_path):
    target = tmp_path / "baz.proto"
    target.write_text("x")
    with pytest.raises(FileExistsError, match="already exists"):
        check_file_path(str(target))


def test_check_file_path_missing_dir(tmp_path):
    with pytest.raises(FileNotFoundError):
        check_file_path(str(tmp_path / "missing" / "baz.proto"))


def test_check_file_path_parent_not_dir(tmp_path):
    parent = tmp_path / "file"
    parent.write_text("x")
    with pytest.raises(NotADirectoryError, match="is not a directory somehow"):
        check_file_path(str(parent / "baz.proto"))


def test_check_file_path_new_file(tmp_path):
    target = tmp_path / "baz.proto"
    assert check_file_path(str(target)) is None
    assert not target.exists()
"""Creation of new Protobuf files from a template."""

from __future__ import annotations

import os
from collections.abc import Mapping

DEFAULT_PACKAGE = "uber.prototool.generated"
"""Package used when none can be derived from the file path."""

_TEMPLATE = """syntax = "proto3";

package {pkg};

option go_package = "{go_pkg}";
option java_multiple_files = true;
option java_outer_classname = "{java_outer_classname}";
option java_package = "{java_pkg}";"""


def check_file_path(file_path: str) -> None:
    """Check that a new Protobuf file can be created at ``file_path``.

    Raises ValueError for an empty path, OSError if the parent directory
    cannot be read, NotADirectoryError if the parent is not a directory and
    FileExistsError if the file is already there.
    """
    if not file_path:
        raise ValueError("filePath empty")
    dir_path = os.path.dirname(file_path) or "."
    if not os.path.isdir(os.stat(dir_path) and dir_path):
        raise NotADirectoryError(f'"{dir_path}" is not a directory somehow')
    if os.path.lexists(file_path):
        raise FileExistsError(f'"{file_path}" already exists')


def package_from_rel(rel: str, base_pkg: str = "") -> str:
    """Build a package name from a relative directory and a base package."""
    if rel == ".":
        return base_pkg or DEFAULT_PACKAGE
    rel_pkg = ".".join(rel.split(os.sep))
    if not base_pkg:
        return rel_pkg
    return f"{base_pkg}.{rel_pkg}"


def resolve_package(
    abs_dir_path: str,
    config_dir_path: str | None,
    dir_path_to_base_package: Mapping[str, str] | None = None,
) -> str:
    """Derive the package for a new file in ``abs_dir_path``.

    ``config_dir_path`` is the directory holding the applicable config file,
    or empty if there is none. ``dir_path_to_base_package`` maps absolute
    directories to base packages; the longest matching directory wins.
    """
    if not config_dir_path:
        return DEFAULT_PACKAGE
    matches = [
        (create_dir_path, base_pkg)
        for create_dir_path, base_pkg in (dir_path_to_base_package or {}).items()
        if create_dir_path and abs_dir_path.startswith(create_dir_path)
    ]
    if matches:
        create_dir_path, base_pkg = max(matches, key=lambda item: len(item[0]))
        return package_from_rel(os.path.relpath(abs_dir_path, create_dir_path), base_pkg)
    if not abs_dir_path.startswith(config_dir_path):
        return DEFAULT_PACKAGE
    return package_from_rel(os.path.relpath(abs_dir_path, config_dir_path), "")


def render(pkg: str, go_pkg: str, java_outer_classname: str, java_pkg: str) -> str:
    """Render the contents of a new Protobuf file."""
    return _TEMPLATE.format(
        pkg=pkg,
        go_pkg=go_pkg,
        java_outer_classname=java_outer_classname,
        java_pkg=java_pkg,
    )
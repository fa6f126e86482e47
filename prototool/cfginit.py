"""Starter contents for prototool.yaml files."""

from __future__ import annotations

from collections.abc import Iterator

_ESCAPES = {
    "\0": "\ufffd",
    '"': "&#34;",
    "'": "&#39;",
    "&": "&amp;",
    "+": "&#43;",
    "<": "&lt;",
    ">": "&gt;",
}

# (indent, text, optional): optional lines get the comment marker inserted
# after the indent unless the example settings are uncommented.
_Line = tuple[int, str, bool]
_BLANK: _Line = (0, "", False)


def _escape(value: str) -> str:
    return "".join(_ESCAPES.get(char, char) for char in value)


def _note(indent: int, text: str) -> _Line:
    return indent, "# " + text, False


def _fixed(indent: int, text: str) -> _Line:
    return indent, text, False


def _opt(indent: int, text: str) -> _Line:
    return indent, text, True


def _excludes() -> Iterator[_Line]:
    yield _note(0, "Paths to skip when searching for Protobuf files.")
    yield _opt(0, "excludes:")
    yield _opt(0, "  - path/to/a")
    yield _opt(0, "  - path/to/b/file.proto")


def _protoc(version: str) -> Iterator[_Line]:
    yield _note(0, "Settings for protoc.")
    yield _fixed(0, "protoc:")
    yield _note(2, "The Protobuf release to use.")
    yield _note(2, f"Defaults to {version}.")
    yield _note(2, "Pin this to keep builds reproducible.")
    yield _fixed(2, f"version: {version}")
    yield _BLANK
    yield _note(2, "Extra paths passed to protoc with -I.")
    yield _note(2, "The directory holding the config file is always included,")
    yield _note(2, "or the working directory when there is no config file.")
    yield _opt(2, "includes:")
    yield _opt(2, "  - ../../third_party/googleapis")
    yield _BLANK
    yield _BLANK
    yield _note(2, "Compilation fails on unused imports unless this is set.")
    yield _opt(2, "allow_unused_imports: true")


def _create() -> Iterator[_Line]:
    yield _note(0, "Settings for create.")
    yield _opt(0, "create:")
    yield _note(2, "Maps directories, relative to this file, to base packages")
    yield _note(2, "used for newly created files.")
    yield _opt(2, "packages:")
    yield _note(4, 'A new "foo.proto" next to this file gets package "bar",')
    yield _note(4, 'and a new "a/b/foo.proto" gets package "bar.a.b".')
    yield _opt(4, "- directory: .")
    yield _opt(4, "  name: bar")
    yield _note(4, 'A new "idl/code.uber/a/b/c.proto" gets package "uber.a.b".')
    yield _opt(4, "- directory: idl/code.uber")
    yield _opt(4, "  name: uber")


def _lint() -> Iterator[_Line]:
    yield _note(0, "Settings for lint.")
    yield _opt(0, "lint:")
    yield _note(2, "Files excluded from particular linters.")
    yield _opt(0, "  ignores:")
    for linter_id, files in (
        ("RPC_NAMES_CAMEL_CASE", ("path/to/foo.proto", "path/to/bar.proto")),
        ("SYNTAX_PROTO3", ("path/to/foo.proto",)),
    ):
        yield _opt(0, f"    - id: {linter_id}")
        yield _opt(0, "      files:")
        for name in files:
            yield _opt(0, f"        - {name}")
    yield _BLANK
    yield _note(2, "Which linters run.")
    yield _note(2, "prototool list-all-linters shows every available linter.")
    yield _opt(0, "  rules:")
    yield _note(4, "Leave out the default linters when true.")
    yield _opt(0, "    no_default: true")
    yield _BLANK
    yield _note(4, "Linters to add.")
    yield _opt(0, "    add:")
    yield _opt(0, "      - ENUM_NAMES_CAMEL_CASE")
    yield _opt(0, "      - ENUM_NAMES_CAPITALIZED")
    yield _BLANK
    yield _note(4, "Linters to remove.")
    yield _opt(0, "    remove:")
    yield _opt(0, "      - ENUM_NAMES_CAMEL_CASE")


def _generate() -> Iterator[_Line]:
    modifiers_target = "example.com/genproto/googleapis/api/annotations"
    yield _note(0, "Settings for code generation.")
    yield _opt(0, "generate:")
    yield _note(2, "Options shared by every plugin of type go or gogo.")
    yield _opt(0, "  go_options:")
    yield _note(4, "Import path of the directory holding this file.")
    yield _note(4, "Required when any plugin of type go or gogo is configured.")
    yield _opt(0, "    import_path: uber/foo/bar.git/idl/uber")
    yield _BLANK
    yield _note(4, "Extra Mfile=package modifiers.")
    yield _opt(0, "    extra_modifiers:")
    yield _opt(0, f"      google/api/annotations.proto: {modifiers_target}")
    yield _opt(0, f"      google/api/http.proto: {modifiers_target}")
    yield _BLANK
    yield _note(2, "The plugins to run.")
    yield _opt(0, "  plugins:")
    yield _note(6, "Passed to protoc as --name_out, so this is either a built-in")
    yield _note(6, "generator such as java or a plugin found as protoc-gen-name.")
    yield _opt(0, "    - name: gogo")
    yield _BLANK
    yield _note(6, "Optional plugin type, go or gogo: go for plugins using the")
    yield _note(6, "standard protobuf runtime, gogo for plugins using gogo.")
    yield _opt(0, "      type: gogo")
    yield _BLANK
    yield _note(6, "Extra flags for the plugin, usually plugins=grpc for gRPC stubs.")
    yield _note(6, "Mfile=package flags are added automatically.")
    yield _opt(0, "      flags: plugins=grpc")
    yield _BLANK
    yield _note(6, "Relative directory for generated files, created when missing.")
    yield _opt(0, "      output: ../../.gen/proto/go")
    yield _BLANK
    yield _note(6, "Optional plugin binary; with this value protoc is given")
    yield _note(6, '"--plugin=protoc-gen-gogo=/usr/local/bin/gogo".')
    yield _opt(0, "      path: /usr/local/bin/gogo")
    for name, kind, output in (
        ("yarpc-go", "gogo", "../../.gen/proto/go"),
        ("grpc-gateway", "go", "../../.gen/proto/go"),
        ("java", None, "../../.gen/proto/java"),
    ):
        yield _BLANK
        yield _opt(0, f"    - name: {name}")
        if kind is not None:
            yield _opt(0, f"      type: {kind}")
        yield _opt(0, f"      output: {output}")


def _sections(version: str) -> Iterator[Iterator[_Line]]:
    yield _excludes()
    yield _protoc(version)
    yield _create()
    yield _lint()
    yield _generate()


def generate(protoc_version: str, uncomment: bool = False) -> bytes:
    """Render a prototool.yaml file for the given protoc version.

    Unless ``uncomment`` is true, every example setting except
    ``protoc.version`` is commented out.
    """
    prefix = "" if uncomment else "#"
    version = _escape(protoc_version)
    blocks = []
    for section in _sections(version):
        rendered = [
            " " * indent + (prefix if optional else "") + text if text else ""
            for indent, text, optional in section
        ]
        blocks.append("\n".join(rendered))
    return "\n\n".join(blocks).encode("utf-8")
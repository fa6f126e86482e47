"""Static descriptions of the prototool commands."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Protocol

from prototool.flags import Flags

WORD_WRAP_LENGTH = 80
"""Width the long help text is wrapped to."""

ROOT_FLAG_NAMES: tuple[str, ...] = ("debug",)
"""Flags bound to the root command."""

DEVEL_ROOT_FLAG_NAMES: tuple[str, ...] = ("cache-path", "print-fields")
"""Extra root flags available only in development mode."""


class Runner(Protocol):
    """The operations the commands delegate to."""

    def all(self, args: list[str], disable_format: bool, disable_lint: bool, fix: bool) -> None:
        """Compile, format, generate and lint."""

    def binary_to_json(self, args: list[str]) -> None:
        """Convert binary message data to JSON."""

    def clean(self) -> None:
        """Delete the cache."""

    def compile(self, args: list[str], dry_run: bool) -> None:
        """Compile with protoc."""

    def create(self, args: list[str], pkg: str) -> None:
        """Create new Protobuf files."""

    def descriptor_proto(self, args: list[str]) -> None:
        """Print a message descriptor."""

    def download(self) -> None:
        """Download protoc to the cache."""

    def field_descriptor_proto(self, args: list[str]) -> None:
        """Print a field descriptor."""

    def files(self, args: list[str]) -> None:
        """Print the matching files."""

    def format(self, args: list[str], overwrite: bool, diff_mode: bool,
               lint_mode: bool, fix: bool) -> None:
        """Format Protobuf files."""

    def gen(self, args: list[str], dry_run: bool) -> None:
        """Generate with protoc."""

    def grpc(self, args: list[str], headers: list[str], address: str, method: str,
             data: str, call_timeout: str, connect_timeout: str,
             keepalive_time: str, stdin: bool) -> None:
        """Call a gRPC endpoint."""

    def init(self, args: list[str], uncomment: bool) -> None:
        """Write an initial config file."""

    def json_to_binary(self, args: list[str]) -> None:
        """Convert JSON message data to binary."""

    def lint(self, args: list[str], list_all_linters: bool, list_linters: bool) -> None:
        """Lint Protobuf files."""

    def list_all_lint_groups(self) -> None:
        """List the lint groups."""

    def list_lint_group(self, group: str) -> None:
        """List the linters of a lint group."""

    def service_descriptor_proto(self, args: list[str]) -> None:
        """Print a service descriptor."""

    def version(self) -> None:
        """Print the version."""


RunFunc = Callable[[Runner, list[str], Flags], None]


def wrap_text(text: str, width: int) -> str:
    """Wrap ``text`` at whitespace so lines stay within ``width``.

    Existing newlines are kept and words longer than ``width`` are not split.
    """
    out: list[str] = []
    current = 0
    word = ""
    space = ""
    for char in text:
        if char == "\n":
            if not word:
                if current + len(space) <= width:
                    out.append(space)
            else:
                out.append(space)
                out.append(word)
                word = ""
            space = ""
            out.append(char)
            current = 0
        elif char.isspace():
            if not space or word:
                current += len(space) + len(word)
                out.append(space)
                out.append(word)
                space = ""
                word = ""
            space += char
        else:
            word += char
            if current + len(space) + len(word) > width and len(word) < width:
                out.append("\n")
                current = 0
                space = ""
    if not word:
        if current + len(space) <= width:
            out.append(space)
    else:
        out.append(space)
        out.append(word)
    return "".join(out)


@dataclass(frozen=True)
class CommandTemplate:
    """The static parts of a command: documentation, arity, flags and action."""

    use: str
    short: str
    run: RunFunc
    long: str = ""
    min_args: int = 0
    max_args: int | None = None
    flag_names: tuple[str, ...] = ()
    parent: str | None = None

    @property
    def name(self) -> str:
        """The command name, the first word of ``use``."""
        return self.use.split()[0]

    @property
    def path(self) -> str:
        """The full command path starting at the program name."""
        parts = ["prototool"]
        if self.parent:
            parts.append(self.parent)
        parts.append(self.name)
        return " ".join(parts)

    def help_text(self) -> str:
        """Return the long help: the short text, then the long text, wrapped."""
        short = self.short.strip()
        if not self.long:
            return short
        return wrap_text(f"{short}\n\n{self.long.strip()}", WORD_WRAP_LENGTH)

    def check_args(self, args: Sequence[str]) -> list[str]:
        """Return the arguments if their count is allowed, else raise ValueError."""
        count = len(args)
        low, high = self.min_args, self.max_args
        if high == 0:
            if count:
                raise ValueError(f'unknown command "{args[0]}" for "{self.path}"')
        elif high is None:
            if count < low:
                raise ValueError(f"requires at least {low} arg(s), only received {count}")
        elif low == high:
            if count != low:
                raise ValueError(f"accepts {low} arg(s), received {count}")
        elif low == 0:
            if count > high:
                raise ValueError(f"accepts at most {high} arg(s), received {count}")
        elif count < low or count > high:
            raise ValueError(f"accepts between {low} and {high} arg(s), received {count}")
        return list(args)


_CREATE_LONG = """Assuming the filename "example_create_file.proto", the file will look like the following:

  syntax = "proto3";

  package SOME.PKG;

  option go_package = "PKGpb";
  option java_multiple_files = true;
  option java_outer_classname = "ExampleCreateFileProto";
  option java_package = "com.SOME.PKG.pb";

This matches what the linter expects. "SOME.PKG" will be computed as follows:

- If "--package" is specified, "SOME.PKG" will be the value passed to
  "--package".
- Otherwise, if there is no "prototool.yaml" that would apply to the new file,
  use "uber.prototool.generated".
- Otherwise, if there is a "prototool.yaml" file, check if it has a
  "packages" setting under the "create" section. If it does, this
  package, concatenated with the relative path from the directory with the
 "prototool.yaml" will be used.
- Otherwise, if there is no "packages" directive, just use the
  relative path from the directory with the "prototool.yaml" file. If the file
  is in the same directory as the "prototool.yaml" file, use
  "uber.prototool.generated".

For example, assume you have the following file at "repo/prototool.yaml":

create:
  packages:
\t- directory: idl
\t  name: uber
\t- directory: idl/baz
\t  name: special

- "prototool create repo/idl/foo/bar/bar.proto" will have the package
  "uber.foo.bar".
- "prototool create repo/idl/bar.proto" will have the package "uber".
- "prototool create repo/idl/baz/baz.proto" will have the package "special".
- "prototool create repo/idl/baz/bat/bat.proto" will have the package
  "special.bat".
- "prototool create repo/another/dir/bar.proto" will have the package
  "another.dir".
- "prototool create repo/bar.proto" will have the package
  "uber.prototool.generated".

This is meant to mimic what you generally want - a base package for your idl directory, followed by packages matching the directory structure.

Note you can override the directory that the "prototool.yaml" file is in as well. If we update our file at "repo/prototool.yaml" to this:

create:
  packages:
\t- directory: .
\t  name: foo.bar

Then "prototool create repo/bar.proto" will have the package "foo.bar", and "prototool create repo/another/dir/bar.proto" will have the package "foo.bar.another.dir".

If Vim integration is set up, files will be generated when you open a new Protobuf file."""

_GRPC_LONG = """This command compiles your proto files with "protoc", converts JSON input to binary and converts the result from binary to JSON. All these steps take on the order of milliseconds. For example, the overhead for a file with four dependencies is about 30ms, so there is little overhead for CLI calls to gRPC.

There is a full example for gRPC in the example directory of Prototool. Run "make init example" to make sure everything is installed and generated.

Start the example server in a separate terminal.

prototool grpc [dirOrFile] \\
  --address serverAddress \\
  --method package.service/Method \\
  --data 'requestData'

Either use "--data 'requestData'" as the the JSON data to input, or "--stdin" which will result in the input being read from stdin as JSON.

$ prototool grpc example \\
  --address 0.0.0.0:8080 \\
  --method foo.ExcitedService/Exclamation \\
  --data '{"value":"hello"}'
{
  "value": "hello!"
}

$ prototool grpc example \\
  --address 0.0.0.0:8080 \\
  --method foo.ExcitedService/ExclamationServerStream \\
  --data '{"value":"hello"}'
{
  "value": "h"
}
{
  "value": "e"
}
{
  "value": "l"
}
{
  "value": "l"
}
{
  "value": "o"
}
{
  "value": "!"
}

$ cat input.json
{"value":"hello"}
{"value":"salutations"}

$ cat input.json | prototool grpc example \\
  --address 0.0.0.0:8080 \\
  --method foo.ExcitedService/ExclamationClientStream \\
  --stdin
{
  "value": "hellosalutations!"
}

$ cat input.json | prototool grpc example \\
  --address 0.0.0.0:8080 \\
  --method foo.ExcitedService/ExclamationBidiStream \\
  --stdin
{
  "value": "hello!"
}
{
  "value": "salutations!"
}"""


def _grpc(runner: Runner, args: list[str], flags: Flags) -> None:
    runner.grpc(args, flags.headers, flags.address, flags.method, flags.data,
                flags.call_timeout, flags.connect_timeout, flags.keepalive_time, flags.stdin)


_PUBLIC = (
    CommandTemplate(
        use="all [dirOrFile]",
        short="Compile, then format and overwrite, then re-compile and generate, "
              "then lint, stopping if any step fails.",
        max_args=1,
        run=lambda r, a, f: r.all(a, f.disable_format, f.disable_lint, f.fix),
        flag_names=("disable-format", "disable-lint", "fix", "protoc-url"),
    ),
    CommandTemplate(
        use="compile [dirOrFile]",
        short="Compile with protoc to check for failures.",
        long='Stubs will not be generated. To generate stubs, use the "gen" command. '
             'Calling "compile" has the effect of calling protoc with "-o /dev/null".',
        max_args=1,
        run=lambda r, a, f: r.compile(a, f.dry_run),
        flag_names=("dry-run", "protoc-url"),
    ),
    CommandTemplate(
        use="create files...",
        short="Create the given Protobuf files according to a template that passes "
              "default prototool lint.",
        long=_CREATE_LONG,
        min_args=1,
        run=lambda r, a, f: r.create(a, f.pkg),
        flag_names=("package",),
    ),
    CommandTemplate(
        use="files [dirOrFile]",
        short="Print all files that match the input arguments.",
        max_args=1,
        run=lambda r, a, f: r.files(a),
    ),
    CommandTemplate(
        use="format [dirOrFile]",
        short="Format a proto file and compile with protoc to check for failures.",
        max_args=1,
        run=lambda r, a, f: r.format(a, f.overwrite, f.diff_mode, f.lint_mode, f.fix),
        flag_names=("diff", "lint", "overwrite", "fix", "protoc-url"),
    ),
    CommandTemplate(
        use="generate [dirOrFile]",
        short="Generate with protoc.",
        max_args=1,
        run=lambda r, a, f: r.gen(a, f.dry_run),
        flag_names=("dry-run", "protoc-url"),
    ),
    CommandTemplate(
        use="grpc [dirOrFile]",
        short="Call a gRPC endpoint. Be sure to set required flags address, method, "
              "and either data or stdin.",
        long=_GRPC_LONG,
        max_args=1,
        run=_grpc,
        flag_names=("address", "call-timeout", "connect-timeout", "data", "header",
                    "keepalive-time", "method", "stdin", "protoc-url"),
    ),
    CommandTemplate(
        use="init [dirPath]",
        short="Generate an initial config file in the current or given directory.",
        long='All available options will be generated and commented out except for '
             '"protoc.version". Pass the "--uncomment" flag to uncomment all options.',
        max_args=1,
        run=lambda r, a, f: r.init(a, f.uncomment),
        flag_names=("uncomment",),
        parent="config",
    ),
    CommandTemplate(
        use="lint [dirOrFile]",
        short="Lint proto files and compile with protoc to check for failures.",
        long="The default rule set follows the Style Guide in "
             "etc/style/uber/uber.proto. You can add or exclude lint rules in your "
             '"prototool.yaml" file. The default rule set is very strict and is meant '
             "to enforce consistent development patterns.",
        max_args=1,
        run=lambda r, a, f: r.lint(a, f.list_all_linters, f.list_linters),
        flag_names=("list-all-linters", "list-linters", "protoc-url"),
    ),
    CommandTemplate(
        use="version",
        short="Print the version.",
        max_args=0,
        run=lambda r, a, f: r.version(),
    ),
)

_DEVEL = (
    CommandTemplate(
        use="binary-to-json [dirOrFile] messagePath data",
        short="Convert the data from json to binary for the message path and data.",
        min_args=2,
        max_args=3,
        run=lambda r, a, f: r.binary_to_json(a),
    ),
    CommandTemplate(
        use="clean",
        short="Delete the cache.",
        max_args=0,
        run=lambda r, a, f: r.clean(),
    ),
    CommandTemplate(
        use="descriptor-proto [dirOrFile] messagePath",
        short="Get the descriptor proto for the message path.",
        max_args=2,
        run=lambda r, a, f: r.descriptor_proto(a),
    ),
    CommandTemplate(
        use="download",
        short="Download the protobuf artifacts to a cache.",
        max_args=0,
        run=lambda r, a, f: r.download(),
    ),
    CommandTemplate(
        use="field-descriptor-proto [dirOrFile] fieldPath",
        short="Get the field descriptor proto for the field path.",
        min_args=1,
        max_args=2,
        run=lambda r, a, f: r.field_descriptor_proto(a),
    ),
    CommandTemplate(
        use="json-to-binary [dirOrFile] messagePath data",
        short="Convert the data from json to binary for the message path and data.",
        min_args=2,
        max_args=3,
        run=lambda r, a, f: r.json_to_binary(a),
    ),
    CommandTemplate(
        use="list-all-lint-groups",
        short="List all the available lint groups.",
        max_args=0,
        run=lambda r, a, f: r.list_all_lint_groups(),
    ),
    CommandTemplate(
        use="list-lint-group group",
        short="List the linters in the given lint group.",
        min_args=1,
        max_args=1,
        run=lambda r, a, f: r.list_lint_group(a[0]),
    ),
    CommandTemplate(
        use="service-descriptor-proto [dirOrFile] servicePath",
        short="Get the service descriptor proto for the service path.",
        min_args=1,
        max_args=2,
        run=lambda r, a, f: r.service_descriptor_proto(a),
    ),
)


def command_templates(devel_mode: bool = False) -> list[CommandTemplate]:
    """Return the command templates in registration order.

    Development mode adds the commands not exposed in regular builds.
    """
    templates = list(_PUBLIC)
    if devel_mode:
        templates.extend(_DEVEL)
    return templates
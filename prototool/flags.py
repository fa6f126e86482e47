"""Command-line flags shared by the prototool commands."""

from __future__ import annotations

import argparse
import csv
import dataclasses
import enum
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any


class FlagKind(enum.Enum):
    """How a flag's value is parsed."""

    BOOL = "bool"
    STRING = "string"
    STRING_LIST = "string_list"


@dataclass(frozen=True)
class FlagSpec:
    """Description of a single command-line flag."""

    name: str
    dest: str
    kind: FlagKind
    default: Any
    help: str
    short: str | None = None

    @property
    def option_strings(self) -> list[str]:
        """The option strings the flag is reachable under."""
        options = [f"--{self.name}"]
        if self.short:
            options.append(f"-{self.short}")
        return options


@dataclass
class Flags:
    """Parsed flag values; unbound flags keep their zero values."""

    address: str = ""
    cache_path: str = ""
    call_timeout: str = ""
    connect_timeout: str = ""
    data: str = ""
    debug: bool = False
    diff_mode: bool = False
    disable_format: bool = False
    disable_lint: bool = False
    dry_run: bool = False
    fix: bool = False
    headers: list[str] = field(default_factory=list)
    keepalive_time: str = ""
    list_all_linters: bool = False
    list_linters: bool = False
    lint_mode: bool = False
    method: str = ""
    overwrite: bool = False
    pkg: str = ""
    print_fields: str = ""
    protoc_url: str = ""
    stdin: bool = False
    uncomment: bool = False

    @classmethod
    def from_namespace(cls, namespace: argparse.Namespace) -> Flags:
        """Collect the flag values found on an argparse namespace."""
        values = {
            f.name: getattr(namespace, f.name)
            for f in dataclasses.fields(cls)
            if hasattr(namespace, f.name)
        }
        return cls(**values)


_SPECS = (
    FlagSpec("address", "address", FlagKind.STRING, "",
             "The GRPC endpoint to connect to. This is required."),
    FlagSpec("cache-path", "cache_path", FlagKind.STRING, "",
             "The path to use for the cache, otherwise uses the default behavior."),
    FlagSpec("call-timeout", "call_timeout", FlagKind.STRING, "60s",
             "The maximum time to for all calls to be completed."),
    FlagSpec("connect-timeout", "connect_timeout", FlagKind.STRING, "10s",
             "The maximum time to wait for the connection to be established."),
    FlagSpec("data", "data", FlagKind.STRING, "",
             "The GRPC request data in JSON format. Either this or --stdin is required."),
    FlagSpec("debug", "debug", FlagKind.BOOL, False,
             "Run in debug mode, which will print out debug logging."),
    FlagSpec("diff", "diff_mode", FlagKind.BOOL, False,
             "Write a diff instead of writing the formatted file to stdout.", "d"),
    FlagSpec("disable-format", "disable_format", FlagKind.BOOL, False,
             "Do not run formatting."),
    FlagSpec("disable-lint", "disable_lint", FlagKind.BOOL, False,
             "Do not run linting."),
    FlagSpec("dry-run", "dry_run", FlagKind.BOOL, False,
             "Print the protoc commands that would have been run without actually running them."),
    FlagSpec("header", "headers", FlagKind.STRING_LIST, (),
             "Additional request headers in 'name:value' format.", "H"),
    FlagSpec("keepalive-time", "keepalive_time", FlagKind.STRING, "",
             "The maximum idle time after which a keepalive probe is sent."),
    FlagSpec("lint", "lint_mode", FlagKind.BOOL, False,
             "Write a lint error saying that the file is not formatted instead of "
             "writing the formatted file to stdout.", "l"),
    FlagSpec("list-all-linters", "list_all_linters", FlagKind.BOOL, False,
             "List all available linters instead of running lint."),
    FlagSpec("list-linters", "list_linters", FlagKind.BOOL, False,
             "List the configured linters instead of running lint."),
    FlagSpec("method", "method", FlagKind.STRING, "",
             "The GRPC method to call in the form package.Service/Method. This is required."),
    FlagSpec("overwrite", "overwrite", FlagKind.BOOL, False,
             "Overwrite the existing file instead of writing the formatted file to stdout.", "w"),
    FlagSpec("package", "pkg", FlagKind.STRING, "",
             "The Protobuf package to use in the created file."),
    FlagSpec("print-fields", "print_fields", FlagKind.STRING, "filename:line:column:message",
             "The colon-separated fields to print out on error."),
    FlagSpec("protoc-url", "protoc_url", FlagKind.STRING, "",
             "The url to use to download the protoc zip file, otherwise uses GitHub Releases. "
             "Setting this option will ignore the config protoc.version setting."),
    FlagSpec("stdin", "stdin", FlagKind.BOOL, False,
             "Read the GRPC request data from stdin in JSON format. "
             "Either this or --data is required."),
    FlagSpec("uncomment", "uncomment", FlagKind.BOOL, False,
             "Uncomment the example config settings."),
    FlagSpec("fix", "fix", FlagKind.BOOL, False,
             "Fix the file according to the Style Guide.", "f"),
)

FLAG_SPECS: dict[str, FlagSpec] = {spec.name: spec for spec in _SPECS}
"""Every known flag, keyed by its long name."""


class _ExtendSplitAction(argparse.Action):
    """Append comma-separated values, as a string slice flag does."""

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        current = list(getattr(namespace, self.dest, None) or [])
        current.extend(next(csv.reader([values])) if values else [])
        setattr(namespace, self.dest, current)


def _add(parser: argparse.ArgumentParser, spec: FlagSpec) -> None:
    if spec.kind is FlagKind.BOOL:
        parser.add_argument(
            *spec.option_strings,
            dest=spec.dest,
            action="store_true",
            default=spec.default,
            help=spec.help,
        )
    elif spec.kind is FlagKind.STRING_LIST:
        parser.add_argument(
            *spec.option_strings,
            dest=spec.dest,
            action=_ExtendSplitAction,
            default=list(spec.default),
            metavar=spec.name.upper(),
            help=spec.help,
        )
    else:
        parser.add_argument(
            *spec.option_strings,
            dest=spec.dest,
            default=spec.default,
            metavar=spec.name.upper(),
            help=spec.help,
        )


def bind_flags(parser: argparse.ArgumentParser, names: Iterable[str]) -> None:
    """Add the named flags to ``parser``.

    Raises ValueError for a name that is not a known flag.
    """
    names = list(names) if not isinstance(names, Sequence) else names
    for name in names:
        spec = FLAG_SPECS.get(name)
        if spec is None:
            raise ValueError(f"unknown flag: {name}")
        _add(parser, spec)
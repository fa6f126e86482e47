"""The prototool command line: parsing, dispatch and exit codes."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from contextlib import redirect_stdout
from typing import IO, NoReturn

from prototool.commands import (
    DEVEL_ROOT_FLAG_NAMES,
    ROOT_FLAG_NAMES,
    CommandTemplate,
    Runner,
    command_templates,
)
from prototool.flags import FLAG_SPECS, Flags, bind_flags

PROG = "prototool"

_SUPPORTED_PLATFORMS = ("darwin", "linux")
_PLATFORM_NAMES = {"win32": "windows", "cygwin": "windows"}

_logger = logging.getLogger("prototool")


class ExitError(Exception):
    """An error that carries the exit code the process should end with."""

    def __init__(self, code: int, message: str = "") -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return self.message


class _UsageError(ValueError):
    """Raised when the command line cannot be parsed."""


class _ParserExit(Exception):
    """Raised instead of exiting the process, for example after --help."""

    def __init__(self, status: int, message: str | None) -> None:
        super().__init__(message or "")
        self.status = status
        self.message = message


class _Parser(argparse.ArgumentParser):
    """An argument parser that raises instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise _UsageError(message)

    def exit(self, status: int = 0, message: str | None = None) -> NoReturn:
        raise _ParserExit(status, message)


def check_os(platform: str | None = None) -> None:
    """Raise OSError unless ``platform`` (default: this one) is supported."""
    name = platform if platform is not None else sys.platform
    if name.startswith("linux"):
        name = "linux"
    name = _PLATFORM_NAMES.get(name, name)
    if name not in _SUPPORTED_PLATFORMS:
        raise OSError(f"{name} is not a supported operating system")


def exit_code_for_error(error: BaseException, stdout: IO[str]) -> int:
    """Print the error's message, if any, and return the exit code for it."""
    message = str(error)
    if message:
        stdout.write(message + "\n")
    if isinstance(error, ExitError):
        return error.code
    return 1


def _bind_inherited(parser: argparse.ArgumentParser, names: Sequence[str]) -> None:
    """Bind root flags to a sub-command without overriding values given earlier."""
    bind_flags(parser, names)
    dests = {FLAG_SPECS[name].dest for name in names}
    for action in parser._actions:
        if action.dest in dests:
            action.default = argparse.SUPPRESS


def _add_command(
    subparsers: argparse._SubParsersAction,
    template: CommandTemplate,
    root_flags: Sequence[str],
) -> None:
    sub = subparsers.add_parser(
        template.name,
        help=template.short.strip(),
        description=template.help_text(),
        usage=f"{template.path} {template.use.partition(' ')[2]}".rstrip() + " [flags]",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    sub.add_argument("args", nargs="*", metavar="arg")
    bind_flags(sub, template.flag_names)
    _bind_inherited(sub, root_flags)
    sub.set_defaults(template=template, help_parser=sub)


def build_parser(devel_mode: bool = False) -> argparse.ArgumentParser:
    """Build the argument parser for all commands.

    Development mode adds the commands and root flags that regular builds hide.
    """
    root_flags = list(ROOT_FLAG_NAMES)
    if devel_mode:
        root_flags.extend(DEVEL_ROOT_FLAG_NAMES)

    parser = _Parser(prog=PROG)
    bind_flags(parser, root_flags)
    parser.set_defaults(template=None, help_parser=parser)
    subparsers = parser.add_subparsers(dest="command", metavar="command")

    config_parser = subparsers.add_parser("config", help="Config commands.")
    _bind_inherited(config_parser, root_flags)
    config_parser.set_defaults(template=None, help_parser=config_parser)
    config_subparsers = config_parser.add_subparsers(dest="config_command", metavar="command")

    for template in command_templates(devel_mode):
        target = config_subparsers if template.parent == "config" else subparsers
        _add_command(target, template, root_flags)
    return parser


def _configure_logging(debug: bool) -> None:
    _logger.setLevel(logging.DEBUG if debug else logging.INFO)


def run(
    args: Sequence[str],
    runner: Runner,
    stdout: IO[str] | None = None,
    devel_mode: bool = False,
) -> int:
    """Run the command line ``args`` against ``runner`` and return the exit code."""
    out = stdout if stdout is not None else sys.stdout
    try:
        check_os()
    except OSError as error:
        return exit_code_for_error(error, out)

    parser = build_parser(devel_mode)
    try:
        with redirect_stdout(out):
            namespace = parser.parse_args(list(args))
    except _ParserExit as exited:
        if exited.message:
            out.write(exited.message)
        return exited.status
    except _UsageError as error:
        return exit_code_for_error(error, out)

    template: CommandTemplate | None = namespace.template
    if template is None:
        out.write(namespace.help_parser.format_help())
        return 0

    flags = Flags.from_namespace(namespace)
    _configure_logging(flags.debug)
    try:
        command_args = template.check_args(namespace.args)
    except ValueError as error:
        return exit_code_for_error(error, out)
    try:
        template.run(runner, command_args, flags)
    except Exception as error:  # any failure of the command ends the process
        return exit_code_for_error(error, out)
    return 0
import argparse
import dataclasses

import pytest

from prototool.flags import FLAG_SPECS, FlagKind, Flags, FlagSpec, bind_flags


def _parse(names, argv):
    parser = argparse.ArgumentParser()
    bind_flags(parser, names)
    return Flags.from_namespace(parser.parse_args(argv))


def test_unbound_flags_keep_zero_values():
    flags = _parse([], [])
    assert flags == Flags()
    assert flags.call_timeout == ""
    assert flags.headers == []


def test_bound_flags_take_source_defaults():
    flags = _parse(["call-timeout", "connect-timeout", "print-fields"], [])
    assert flags.call_timeout == "60s"
    assert flags.connect_timeout == "10s"
    assert flags.print_fields == "filename:line:column:message"


def test_short_options():
    flags = _parse(["diff", "lint", "overwrite", "fix"], ["-d", "-l", "-w", "-f"])
    assert flags.diff_mode is True
    assert flags.lint_mode is True
    assert flags.overwrite is True
    assert flags.fix is True


def test_string_values():
    flags = _parse(["address", "method", "package"],
                   ["--address", "0.0.0.0:8080", "--method", "foo.ExcitedService/Exclamation",
                    "--package", "bat"])
    assert flags.address == "0.0.0.0:8080"
    assert flags.method == "foo.ExcitedService/Exclamation"
    assert flags.pkg == "bat"


def test_headers_split_and_accumulate():
    flags = _parse(["header"], ["-H", "a:b,c:d", "--header", "e:f"])
    assert flags.headers == ["a:b", "c:d", "e:f"]


def test_headers_default_not_shared():
    first = _parse(["header"], ["-H", "x:y"])
    second = _parse(["header"], [])
    assert first.headers == ["x:y"]
    assert second.headers == []


def test_unknown_flag_name():
    with pytest.raises(ValueError):
        bind_flags(argparse.ArgumentParser(), ["no-such-flag"])


def test_unbound_flag_is_rejected_by_parser():
    parser = argparse.ArgumentParser()
    bind_flags(parser, ["debug"])
    with pytest.raises(SystemExit):
        parser.parse_args(["--dry-run"])


def test_specs_match_flags_fields():
    field_names = {f.name for f in dataclasses.fields(Flags)}
    dests = {spec.dest for spec in FLAG_SPECS.values()}
    assert dests == field_names
    for name, spec in FLAG_SPECS.items():
        assert spec.name == name
        if spec.kind is FlagKind.BOOL:
            assert spec.default is False


def test_from_namespace_ignores_unrelated_attributes():
    namespace = argparse.Namespace(debug=True, other="value")
    assert Flags.from_namespace(namespace) == Flags(debug=True)


def test_option_strings():
    spec = FLAG_SPECS["header"]
    assert spec.option_strings == ["--header", "-H"]
    plain = FlagSpec("data", "data", FlagKind.STRING, "", "help")
    assert plain.option_strings == ["--data"]
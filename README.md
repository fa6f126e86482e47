# prototool

Building blocks for Protobuf tooling around `protoc`:

- `prototool.cfginit` – renders a documented starter `prototool.yaml`.
- `prototool.create` – works out the package of a new `.proto` file and
  renders its contents from a template that passes the default lint rules.
- `prototool.diff` – unified diffs between a file and its formatted form.
- `prototool.desc` – reorders a `FileDescriptorSet` so a chosen file is last.
- `prototool.excited` – the behaviour of the "excited" example gRPC service.
- `prototool.flags`, `prototool.commands`, `prototool.cli` – the command
  set, its flags, help text, argument checks and a dispatcher that hands
  each command to a runner object you supply.

The only runtime dependency is `protobuf`; the `test` extra adds `pytest`.

## Config scaffolding

```python
from prototool.cfginit import generate

data = generate("3.6.0")                  # bytes
data = generate("3.6.0", uncomment=True)
```

By default every example setting is commented out with `#`, except
`protoc:` and `protoc.version`, which is set to the given version. With
`uncomment=True` all example settings (excludes, includes,
`allow_unused_imports`, `create.packages`, `lint.ignores`, `lint.rules`,
`generate.go_options` and `generate.plugins`) are active.

## Creating Protobuf files

```python
from prototool.create import (
    DEFAULT_PACKAGE, check_file_path, package_from_rel, resolve_package, render,
)

check_file_path("idl/foo/bar.proto")
pkg = resolve_package("/repo/idl/foo/bar", "/repo", {"/repo/idl": "uber"})
# "uber.foo.bar"
text = render(pkg, "barpb", "BarProto", "com.uber.foo.bar")
```

- `check_file_path` raises `ValueError` for an empty path, `OSError` if the
  parent directory cannot be found, `NotADirectoryError` if the parent is not
  a directory, and `FileExistsError` if the file already exists.
- `resolve_package(abs_dir_path, config_dir_path, dir_path_to_base_package)`
  returns `DEFAULT_PACKAGE` (`"uber.prototool.generated"`) when there is no
  config directory. Otherwise the longest mapped directory that prefixes the
  file's directory wins, and its base package is joined with the relative
  path; with no match, the path relative to the config directory is used,
  or `DEFAULT_PACKAGE` if the file lies outside it or next to the config.
- `package_from_rel(rel, base_pkg)` turns a relative directory into dotted
  form: `package_from_rel("foo/bar", "uber")` is `"uber.foo.bar"`,
  `package_from_rel(".", "")` is `DEFAULT_PACKAGE`.
- `render` returns the file text: `syntax = "proto3";`, the package, and the
  `go_package`, `java_multiple_files`, `java_outer_classname` and
  `java_package` options, using the values you pass.

## Formatting diffs

```python
from prototool.diff import unified_diff

patch = unified_diff(original_bytes, formatted_bytes, "foo/bar.proto")
```

The header lines name `foo/bar.proto.orig` and `foo/bar.proto` (always with
forward slashes) and carry the current local time. Identical inputs give
`b""`.

## Reordering a descriptor set

```python
from prototool.desc import sort_file_descriptor_set

ordered = sort_file_descriptor_set(file_descriptor_set, target_file)
```

Returns a new `FileDescriptorSet` holding every other file in its original
order followed by `target_file`. Raises `ValueError` if a file has no name,
a name repeats, or the target's name is not in the set.

## Example service behaviour

```python
from prototool.excited import (
    exclamation, exclamation_bidi_stream,
    exclamation_client_stream, exclamation_server_stream,
)

exclamation("hello")                                      # "hello!"
exclamation_client_stream(["hello", "salutations"])       # "hellosalutations!"
list(exclamation_server_stream("hello"))                  # ["h", "e", "l", "l", "o", "!"]
list(exclamation_bidi_stream(["hello", "salutations"]))   # ["hello!", "salutations!"]
```

## Commands and flags

`prototool.commands.command_templates(devel_mode=False)` lists the
`CommandTemplate`s in order: `all`, `compile`, `create`, `files`, `format`,
`generate`, `grpc`, `config init`, `lint` and `version`. Development mode adds
`binary-to-json`, `clean`, `descriptor-proto`, `download`,
`field-descriptor-proto`, `json-to-binary`, `list-all-lint-groups`,
`list-lint-group` and `service-descriptor-proto`. Each template has
`help_text()` (the short description, then the long one, wrapped at 80
columns by `wrap_text`) and `check_args(args)`, which raises `ValueError`
when the number of positional arguments is not allowed.

`prototool.flags` describes every flag as a `FlagSpec` in `FLAG_SPECS`;
`bind_flags(parser, names)` adds named flags to an `argparse` parser, and
`Flags.from_namespace` collects the parsed values. `--header`/`-H` may be
repeated and splits comma-separated values.

`prototool.cli.build_parser(devel_mode)` builds the full parser, with
`--debug` on every command (plus `--cache-path` and `--print-fields` in
development mode). `prototool.cli.run(args, runner, stdout, devel_mode)`
parses the arguments, checks them and calls the matching method of the
runner, returning an exit code:

```python
import io
from prototool.cli import ExitError, run

class MyRunner:
    def version(self):
        print("my version")

    def lint(self, args, list_all_linters, list_linters):
        raise ExitError(255, "lint failed")

out = io.StringIO()
run(["version"], MyRunner(), out)          # 0
run(["lint", "idl"], MyRunner(), out)      # 255, "lint failed" written to out
run(["version", "extra"], MyRunner(), out) # 1, argument error written to out
```

Any exception raised by the runner is written to `stdout` and gives exit
code 1, or the `code` of an `ExitError`. With no command, help is written
and 0 is returned. `check_os` accepts only Linux and macOS, and `run` fails
with exit code 1 elsewhere.

## What this package does not do

The package holds no runner: it does not download or invoke `protoc`,
compile, format, lint or generate code, read `prototool.yaml` files, convert
between JSON and binary messages, or make gRPC calls. The `Runner` protocol
in `prototool.commands` names the operations a runner must provide, and
`run` only dispatches to them. `prototool.create` computes packages and file
text but does not write files or derive the Go and Java option values. There
is no installed console command.
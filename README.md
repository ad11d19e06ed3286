# swcli

`swcli` gives command-line tools a common shape:

- a fixed set of **standard flags** every tool understands:
  `-V/--version`, `-h` (short help), `--help` (long help),
  `-v/--verbose` and `-n/--dry-run`;
- a **config object** (`BaseConfig`, `CliConfig`) that carries those flags
  next to the tool's own options;
- **commands** (`Command`) that decide for themselves whether they can handle
  a given config, each with a priority;
- a **dispatcher** (`Dispatcher`) that runs the first command, in priority
  order, able to handle the request, and raises `DispatchError` when none can.

The version command (priority 0) and the help command (priority 1) are
registered by the dispatcher automatically, so `-V` and `-h`/`--help` win over
anything a tool adds. Commands you register have priority 100 unless they say
otherwise; among equal priorities, commands are consulted in the order they
were registered, so a catch-all command registered last acts as the default.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Building a tool

The pieces live in these modules:

| Module | What it holds |
| --- | --- |
| `swcli.config` | `HelpType`, `BaseConfig`, `CliConfig` |
| `swcli.command` | the `Command` base class |
| `swcli.builder` | `add_standard_args(parser)` and `parse_base_config(namespace)` for `argparse` |
| `swcli.commands` | `HelpCommand`, `VersionCommand` and `MissingVersionError` |
| `swcli.dispatcher` | `Dispatcher` and `DispatchError` |
| `swcli.version` | `BuildInfo`, `Version` and `check_version_flag(argv)` |
| `swcli.buildinfo` | writing and reading build metadata and help texts (`collect_build_info`, `define_build_info`, `load_version_info`, `read_help_texts`, `define_help_info`, `load_help_info`, `HelpInfo`) |
| `swcli.app` | `FieldDef`, `CliApp`, `cli_command` and `dispatch` for declaring a whole tool in a few lines |

A typical tool:

1. declares its options with `CliApp` and `FieldDef` (or adds them to an
   `argparse` parser, created with `add_help=False`, next to
   `add_standard_args`);
2. writes one `Command` per action, each with `can_handle` and `execute`
   (or builds them with `cli_command`);
3. hands the parsed config to a `Dispatcher` built with the tool's short and
   long help text and, optionally, a `Version`, registering its commands in
   the order it wants.

`VersionCommand` raises `MissingVersionError` when `-V` is given but the
dispatcher was built without a `Version`.

## Help texts and build metadata

`read_help_texts(project_dir)` takes help text from either a single
`src/help.txt`, used for both `-h` and `--help`, or the pair
`src/short-help.txt` and `src/long-help.txt`; with neither present it raises
`HelpFilesNotFoundError`. `define_help_info(out_dir, project_dir)` writes
those texts to `help_info.json` in `out_dir`, and `load_help_info(out_dir)`
reads them back.

`define_build_info(out_dir, version, license_name, repository, project_dir)`
reads the notice in the `COPYRIGHT` file of `project_dir`, runs `hostname`
and `git rev-parse HEAD` (recording `unknown` when either cannot be started),
takes the current time, and writes everything to `version_info.json`.
`load_version_info(out_dir)` turns that file back into a `Version`. A
malformed file raises `InvalidInfoFileError`.

## Version output

Printing a `Version` gives four lines: `Version: ` and the version number;
the copyright notice; the licence name and the licence URL; and a build line
such as

```
Build: abc123d @ builder.local (2023-11-14T22:13:20+00:00)
```

The commit hash is shortened to seven characters and the build time is
shown in UTC.

## Demo tools

Two small tools come with the package. Both look for `help_info.json` and
`version_info.json` in the directory named by the `SWCLI_INFO_DIR`
environment variable.

`working-cli-demo` copies, counts, searches or reverses lines of the given
files, or of standard input when no `-i` is given:

```
working-cli-demo -i notes.txt                 # copy lines
working-cli-demo --count -i a.txt -i b.txt    # count lines per file
working-cli-demo -v --count -i a.txt          # "a.txt: N lines"
working-cli-demo -p TODO -i notes.txt         # lines containing TODO
working-cli-demo --reverse -i notes.txt       # lines in reverse order
working-cli-demo -n --count -i a.txt          # say what would be done
```

Without generated help texts, `-h` prints the parser's usage line and
`--help` its full help.

`demo-cli` shows version information when its first argument is `-V` or
`--version`, and a short greeting otherwise:

```
demo-cli -V
```

Both tools exit with status 1 and print `Error: ...` on standard error when
their command fails, for instance when version information is asked for but
none has been generated.

## What is not included

The package has no text-echoing demo tool (upper-casing or repeating a piece
of text); the two tools above are the only commands it installs.
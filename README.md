# modelhelper

A command-line helper and library for code generation from database models,
templates and project settings. It keeps its configuration and named
connections under `~/.modelhelper`, lists connections and language
definitions as tables, builds the models that code templates are rendered
with, and writes generated code to the screen, to files, or into existing
files at marked snippet positions.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Command line

The package installs the `mh` command.

```
mh                                   # show the help
mh connection list                   # table of the connections in ~/.modelhelper/connections
mh connection default NAME           # make NAME the default connection
mh connection delete NAME --confirm  # delete a connection file
mh config open --editor vim          # open ~/.modelhelper/config.yaml in an editor
mh language list                     # table of the language definitions
mh code extract -f docker-stack.yml  # print the ${VARIABLE} names used in a file
mh serve --port 8080                 # print the server start-up message
```

Notes on the commands:

- `--config-dir DIR` (before the command) uses another directory instead of
  `~/.modelhelper`.
- `mh connection default` without a name, or with the name that is already
  the default, shows a numbered list of the connections and asks you to pick
  one by number or name.
- `mh connection delete` without a name asks you to pick a connection and
  then to confirm. With a name it only deletes when `--confirm` is given;
  otherwise it prints "Please confirm the deletion".
- `mh config open` uses `--editor`, else the `defaultEditor` from the
  configuration, else asks which editor to use.
- `mh language list` reads the YAML files in the directory named by
  `languages.definitions` in the configuration.
- `code` may be shortened to `c`, `extract` to `e`, `list` to `ls`, and
  `delete` to `del` or `rm`.

Run `mh --help` or `mh <command> --help` for every option.

## Configuration

The configuration lives in `~/.modelhelper/config.yaml`. Its location is
returned by `modelhelper.config.location()`, and `modelhelper.config.load()`
reads it into a `Config` (`default_editor`, `default_connection`, `port`,
`templates`, `languages`, `developer`). `ConfigService` loads and saves the
file in a given directory. The `set_*` functions in `modelhelper.config`
(`set_default_connection`, `set_default_editor`, `set_developer`,
`set_port`, `set_template_location`, `set_lang_def_location`) load the
file, change one setting and write it back.

Connections are YAML files in `~/.modelhelper/connections`. Each holds a
`name`, a `type` (`mssql`, `postgres` or `file`), a `description` and a
`connectionString`. `ConnectionService` from `modelhelper.connections`
lists, creates and deletes them; the connection named by
`defaultConnection` in the configuration is marked as the default.

## Library use

- `modelhelper.converter.CodeModelConverter` builds the template models
  (`BasicModel`, `EntityModel`, `EntityListModel`, `NameModel`,
  `CustomModel`, `CommitModel`) from a `ProjectConfig`, `Entity` values or a
  `CommitHistory`.
- `modelhelper.exporter` writes generated code: `ScreenExporter`,
  `FileExporter` (raises `FileExistsError` unless `overwrite` is set) and
  `SnippetExporter`, which inserts code after each `%%identifier%%` marker
  in an existing file (see also `write_snippet`).
- `modelhelper.extractor.extract_variables` returns the names inside
  `${...}` placeholders of a text.
- `modelhelper.codegen` parses the options of a code generator run
  (`parse_code_options`), formats its statistics (`format_statistics`) and
  sends a `GenerationResult` to the screen, files, snippets or the clipboard
  (`export_results`; the clipboard is reached through `pbcopy`, `xclip`,
  `xsel`, `wl-copy` or `clip`, whichever is installed).
- `modelhelper.changelog` turns a commit history into a changelog with
  features, fixes, refactors, breaking changes and an author table.
- `modelhelper.sources` filters and sorts entity lists and renders them,
  their indexes and relations as tables; `format_entity_summary` describes
  one entity.
- `modelhelper.projectinfo` describes a `ProjectConfig` as text or as its
  basic model in JSON.
- `modelhelper.projects` lists project templates and writes `SourceFile`
  values below a destination directory.
- `modelhelper.templates_view` and `modelhelper.listings` build the tables
  of code templates, connections and language definitions;
  `modelhelper.console.render_table` prints any of them.

## What it does not do

- It does not render templates or read templates from disk: there is no
  code generator, so `GenerationResult` values must come from your own code.
- It does not connect to databases. Entities, indexes and relations are
  plain values you supply; there are no `source`, `template` or `project`
  commands.
- It does not create connections interactively; use
  `ConnectionService.create` or write the YAML file yourself.
- `mh serve` only prints the start-up message; no web server is started.
- It does not read git history; a `CommitHistory` must be built by the
  caller.
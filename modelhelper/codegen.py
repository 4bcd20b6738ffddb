"""Options, statistics and export of the ``code generate`` command."""

from __future__ import annotations

import argparse
import shutil
import subprocess
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Sequence

from modelhelper.exporter import FileExporter, ScreenExporter, SnippetExporter

RELATIONS = ["direct", "all", "complete", "children", "parents"]

_CLIPBOARD_COMMANDS = (
    ["pbcopy"],
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
    ["wl-copy"],
    ["clip"],
)


@dataclass
class CodeGeneratorOptions:
    """What the user asked the code generator to do."""

    name: str = ""
    code_only: bool = False
    use_demo: bool = False
    source_items: list[str] = field(default_factory=list)
    source_item_groups: list[str] = field(default_factory=list)
    template_path: str = ""
    config_file_path: str = ""
    project_file_path: str = ""
    templates: list[str] = field(default_factory=list)
    feature_templates: list[str] = field(default_factory=list)
    export_to_screen: bool = False
    export_to_clipboard: bool = False
    export_by_location_key: bool = False
    connection_name: str = ""
    overwrite: bool = False
    verbose: bool = False
    run_interactively: bool = False
    model_path: str = ""
    export_path: str = ""
    base_path: str = ""
    can_use_templates: bool = False


@dataclass
class GeneratorStatistics:
    """Counts gathered while generating code."""

    templates_used: int = 0
    entities_used: int = 0
    files_created: int = 0
    files_exported: int = 0
    chars: int = 0
    words: int = 0
    lines: int = 0
    duration: timedelta = field(default_factory=timedelta)


@dataclass
class GeneratedFile:
    """Generated code meant for a file of its own."""

    destination: str = ""
    body: str = ""


@dataclass
class GeneratedSnippet:
    """Generated code meant to be inserted at a marker in an existing file."""

    destination: str = ""
    snippet_identifier: str = ""
    body: str = ""


@dataclass
class GenerationResult:
    """Everything one generator run produced."""

    files: list[GeneratedFile] = field(default_factory=list)
    snippets: list[GeneratedSnippet] = field(default_factory=list)
    statistics: GeneratorStatistics | None = None


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser of ``code generate``."""
    parser = argparse.ArgumentParser(prog="mh code generate", description="Generate code")
    add = parser.add_argument
    add("-t", "--template", action="append", default=[],
        help="A list of template to convert")
    add("-f", "--feature", action="append", default=[],
        help="Use a group of templates")
    add("--template-path", default="",
        help="Instructs the program to use this path as root for templates")
    add("-g", "--source-group", action="append", default=[],
        help="Use a group of source items (must be defined in the current connection)")
    add("-s", "--source", action="append", default=[],
        help="A list of source items to use as a model")
    add("--screen", action="store_true",
        help="List the output to the screen, default false")
    add("--copy", action="store_true",
        help="Copies the generated code to the clipboard (ctrl + v), default false")
    add("--export-path", default="", help="Exports to a directory")
    add("--export-bykey", action="store_true",
        help="Exports the code using the template location key, default false")
    add("--overwrite", action="store_true",
        help="Overwrite any existing file when exporting to file on disk")
    add("-v", "--verbose", action="store_true",
        help="Prints verbose messages, default false")
    add("-i", "--interactive", action="store_true",
        help="Goes into interactive mode, default false")
    add("--code-only", action="store_true",
        help="Writes only the generated code to the console, default false")
    add("--demo", action="store_true",
        help="Uses a demo as input source, overriding any other input sources")
    add("--project-path", default="",
        help="Instructs the program to use this project as input")
    add("-c", "--connection", default="",
        help="The connection key to be used, uses default connection if not provided")
    add("-n", "--name", default="",
        help="Sets the name for a template using the 'NameModel'")
    add("--base-path", default="",
        help="Sets the base path for where all templates will be placed in")
    add("--model", default="", help="Points to a model file to be used as input")
    return parser


def parse_code_options(argv: Sequence[str] | None = None) -> CodeGeneratorOptions:
    """Parse ``code generate`` arguments into generator options."""
    ns = build_parser().parse_args(list(argv or []))
    options = CodeGeneratorOptions(
        name=ns.name,
        code_only=ns.code_only,
        use_demo=ns.demo,
        source_items=list(ns.source),
        source_item_groups=list(ns.source_group),
        template_path=ns.template_path,
        project_file_path=ns.project_path,
        templates=list(ns.template),
        feature_templates=list(ns.feature),
        export_to_screen=ns.screen,
        export_to_clipboard=ns.copy,
        export_by_location_key=ns.export_bykey,
        connection_name=ns.connection,
        overwrite=ns.overwrite,
        verbose=ns.verbose,
        run_interactively=ns.interactive,
        model_path=ns.model,
        export_path=ns.export_path,
    )
    if ns.base_path:
        options.base_path = ns.base_path
    options.can_use_templates = bool(options.templates or options.feature_templates)
    return options


def complete_relations() -> list[str]:
    """Return the values offered for completing ``--relations``."""
    return list(RELATIONS)


def format_statistics(stats: GeneratorStatistics | None) -> str:
    """Return the statistics report printed after generating code."""
    if stats is None:
        return ""
    milliseconds = stats.duration // timedelta(milliseconds=1)

    def line(label: str, value: int) -> str:
        return f"{label:<20}{value:>8d}\n"

    minutes = int(stats.chars / 250.0)
    return "".join(
        [
            "\n\nStatistics:\n---------------------------------------\n",
            line("Templates used", stats.templates_used),
            line("Entities used", stats.entities_used),
            line("Files created", stats.files_created),
            line("Files exported", stats.files_exported),
            "\n",
            line("Character count", stats.chars),
            line("Word count", stats.words),
            line("Line count", stats.lines),
            line("Time used (ms)", milliseconds),
            f"\nIn summary... It took \033[32m{milliseconds}ms\033[0m to generate "
            f"\033[34m{stats.words}\033[0m words and \033[34m{stats.lines}\033[0m lines. "
            f"\nYou saved around \033[32m{minutes} minutes\033[0m by not typing it youreself\n",
        ]
    )


def _copy_to_clipboard(text: str) -> bool:
    for command in _CLIPBOARD_COMMANDS:
        if shutil.which(command[0]) is None:
            continue
        try:
            completed = subprocess.run(command, input=text.encode("utf-8"), check=False)
        except OSError:
            continue
        if completed.returncode == 0:
            return True
    return False


def _write_file(filename: str, overwrite: bool, body: str) -> None:
    try:
        FileExporter(filename=filename, overwrite=overwrite).write(body.encode("utf-8"))
    except OSError as exc:
        print(f"Err when writing to '{filename}', err: {exc}", end="")


def export_results(
    result: GenerationResult, options: CodeGeneratorOptions, project_exists: bool
) -> str:
    """Send generated files and snippets where the options say; return the clipboard text."""
    collected: list[str] = []

    for generated in result.files:
        if options.export_to_screen:
            ScreenExporter().write(generated.body.encode("utf-8"))
        if options.export_to_clipboard:
            collected.append(generated.body)
        if options.export_by_location_key and project_exists:
            _write_file(generated.destination, options.overwrite, generated.body)
        if options.export_path:
            _write_file(options.export_path, options.overwrite, generated.body)

    for snippet in result.snippets:
        if options.export_to_screen:
            ScreenExporter().write(snippet.body.encode("utf-8"))
        if options.export_to_clipboard:
            collected.append(snippet.body)
        if options.export_by_location_key and project_exists and snippet.destination:
            try:
                SnippetExporter(snippet.destination, snippet.snippet_identifier).write(
                    snippet.body.encode("utf-8")
                )
            except OSError as exc:
                print("Error reading file:", exc)

    text = "".join(collected)
    if options.export_to_clipboard:
        print(
            "\nGenerated code is copied to the \033[37mclipboard\033[0m. "
            "Use \033[34mctrl+v\033[0m to paste it where you like",
            end="",
        )
        _copy_to_clipboard(text)

    if not options.code_only:
        print(format_statistics(result.statistics), end="")
    return text
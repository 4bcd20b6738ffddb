"""The ``mh`` command line."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Callable, Mapping, Sequence

from modelhelper.config import Config, ConfigService
from modelhelper.connections import ConnectionList, ConnectionService
from modelhelper.console import console_title, get_editor, open_path_in_editor, render_table
from modelhelper.extractor import extract_variables
from modelhelper.language import LanguageDefinitionService
from modelhelper.listings import ConnectionTableRenderer, LanguageTableRenderer

DEFAULT_PORT = 8080


def serve_message(port: int) -> str:
    """Return the text shown when the web server starts."""
    return (
        "\n\t\n\t\t\t\n\t\n"
        f"\tModelHelper website is now running on http://localhost:{port}\n"
        f"\tYou may also access the ModelHelper API here: http://localhost:{port}/api\n"
        "\t\n"
        f"\tAnd read the API documentation here: http://localhost:{port}/api/docs.\n"
        "\t\n"
        "\tTo exit and stop the service, press ctrl + c"
    )


def connection_options(connections: Mapping[str, ConnectionList]) -> list[tuple[str, str]]:
    """Return ``(label, name)`` choices for the connections, sorted by name."""
    width = max((len(name) for name in connections), default=0)
    return [
        (
            f"{name:<{width}} [{connections[name].type:<8}] - {connections[name].description}",
            name,
        )
        for name in sorted(connections)
    ]


def _choose_connection(
    connections: Mapping[str, ConnectionList], ask: Callable[[str], str]
) -> str:
    options = connection_options(connections)
    if not options:
        return ""
    print("Select a connection from the list")
    for number, (label, _) in enumerate(options, start=1):
        print(f"{number:>3}) {label}")
    answer = ask("> ").strip()
    if answer in connections:
        return answer
    if answer.isdigit() and 1 <= int(answer) <= len(options):
        return options[int(answer) - 1][1]
    return ""


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser of ``mh``."""
    parser = argparse.ArgumentParser(
        prog="mh", description="Shows information about the ModelHelper CLI"
    )
    parser.add_argument("--config-dir", default=None,
                        help="Use this directory instead of the default configuration folder")
    commands = parser.add_subparsers(dest="command")

    code = commands.add_parser(
        "code", aliases=["c"], help="Generates code based on language, template and source"
    )
    code_commands = code.add_subparsers(dest="code_command")
    extract = code_commands.add_parser("extract", aliases=["e"], help="Extract variables")
    extract.add_argument("-f", "--file", default="", help="The file to extract from")

    connection = commands.add_parser("connection", help="Manage modelhelper connections")
    connection_commands = connection.add_subparsers(dest="connection_command")
    connection_commands.add_parser("list", aliases=["ls"], help="List all connections")
    delete = connection_commands.add_parser(
        "delete", aliases=["del", "rm"], help="Deletes a named connection"
    )
    delete.add_argument("name", nargs="?", default="")
    delete.add_argument("--confirm", action="store_true", help="Confirms the deletion")
    default = connection_commands.add_parser("default", help="Sets a new default connection")
    default.add_argument("name", nargs="?", default="")

    config = commands.add_parser("config", help="Manage modelhelper configuration")
    config_commands = config.add_subparsers(dest="config_command")
    open_cmd = config_commands.add_parser(
        "open", help="Opens the project config file in an editor"
    )
    open_cmd.add_argument("--editor", default="", help="The editor to use when opening the file")

    language = commands.add_parser("language", help="Manage modelhelper languages")
    language_commands = language.add_subparsers(dest="language_command")
    language_commands.add_parser("list", aliases=["ls"], help="List all languages")

    serve = commands.add_parser("serve", help="Starts the modelhelper web server")
    serve.add_argument("-p", "--port", type=int, default=DEFAULT_PORT, help="The port to serve")
    serve.add_argument("-o", "--open", action="store_true",
                       help="Opens a browser and the modelhelper website")
    return parser


def _load_config(directory: str | None) -> tuple[ConfigService, Config]:
    service = ConfigService(directory)
    if service.config_exists():
        config = service.load()
    else:
        config = Config(directory_name=str(service.directory))
    return service, config


def _extract(file_name: str) -> int:
    if not file_name:
        return 0
    try:
        text = Path(file_name).read_text(encoding="utf-8")
    except OSError as exc:
        print("Error reading file:", exc)
        return 1
    for variable in extract_variables(text):
        print(variable)
    return 0


def _list_connections(config: Config) -> int:
    connections = ConnectionService(config).connections()
    print(console_title("Connections list"))
    print("\nThis is a list of all available connections you can use as a source input "
          "for templates\n")
    render_table(ConnectionTableRenderer(connections))
    return 0


def _delete_connection(config: Config, name: str, confirmed: bool) -> int:
    service = ConnectionService(config)
    if not name:
        name = _choose_connection(service.connections(), input)
        if not name:
            print("No connection selected")
            return 1
    elif not confirmed:
        print("Please confirm the deletion")
        return 0

    if not confirmed:
        answer = input(f"Are you sure to delete {name} [y/N]? ").strip().lower()
        confirmed = answer in ("y", "yes")

    if confirmed:
        try:
            service.delete(name)
        except OSError as exc:
            print("Failed to delete connection: ", exc)
            return 1
        print("Connection deleted", end="")
    return 0


def _set_default_connection(service: ConfigService, config: Config, name: str) -> int:
    if not name or config.default_connection == name:
        name = _choose_connection(ConnectionService(config).connections(), input)
        if not name:
            return 0
    config.default_connection = name
    try:
        service.save_config(config)
    except OSError as exc:
        print(f"Failed to set default connection: {exc}", end="")
        return 1
    print(f"'{name}' is the new default connection", end="")
    return 0


def _open_config(service: ConfigService, config: Config, editor: str) -> int:
    editor = editor or get_editor(config, lambda prompt: input(f"{prompt}: ").strip())
    return 0 if open_path_in_editor(editor, service.path) else 1


def _list_languages(config: Config) -> int:
    definitions = LanguageDefinitionService(config).list()
    print("\n\tThis is a list of all available languages defined for model helper\n")
    render_table(LanguageTableRenderer(definitions))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ``mh`` command line and return its exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0
    if args.command == "serve":
        print(serve_message(args.port))
        return 0
    if args.command in ("code", "c"):
        if args.code_command in ("extract", "e"):
            return _extract(args.file)
        parser.parse_args([args.command, "--help"])
        return 0

    service, config = _load_config(args.config_dir)

    if args.command == "connection":
        if args.connection_command in ("list", "ls"):
            return _list_connections(config)
        if args.connection_command in ("delete", "del", "rm"):
            return _delete_connection(config, args.name, args.confirm)
        if args.connection_command == "default":
            return _set_default_connection(service, config, args.name)
    elif args.command == "config":
        if args.config_command == "open":
            return _open_config(service, config, args.editor)
    elif args.command == "language":
        if args.language_command in ("list", "ls"):
            return _list_languages(config)

    parser.parse_args([args.command, "--help"])
    return 0
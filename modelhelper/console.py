"""Console helpers shared by the commands: editors, tables and titles."""

from __future__ import annotations

import subprocess
from os import PathLike
from typing import Any, Callable, Protocol, Sequence

from tabulate import tabulate

EDITOR_PROMPT = "Please select editor to open the config"


class TableRenderer(Protocol):
    """Anything that can describe a table by its header and rows."""

    def header(self) -> Sequence[str]: ...

    def rows(self) -> Sequence[Sequence[str]]: ...


def open_path_in_editor(editor: str, location: str | PathLike[str]) -> bool:
    """Open ``location`` with ``editor`` and wait for it; True if it exited cleanly."""
    try:
        completed = subprocess.run([editor, str(location)], check=False)
    except OSError:
        return False
    return completed.returncode == 0


def get_editor(config: Any, ask: Callable[[str], str]) -> str:
    """Return the configured default editor, or ask the user for one."""
    editor = getattr(config, "default_editor", "") or ""
    if editor:
        return editor
    return ask(EDITOR_PROMPT)


def format_table(renderer: TableRenderer) -> str:
    """Render a table renderer to text."""
    rows = [list(row) for row in renderer.rows() or []]
    return tabulate(rows, headers=list(renderer.header()), disable_numparse=True)


def render_table(renderer: TableRenderer) -> str:
    """Print the table described by ``renderer`` and return the printed text."""
    text = format_table(renderer)
    print(text)
    return text


def console_title(text: str) -> str:
    """Return ``text`` formatted as a title with an underline."""
    return f"\n{text}\n{'-' * len(text)}\n"
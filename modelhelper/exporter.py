"""Writers for generated code: screen, files and snippets inside files."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from pathlib import Path


class ScreenExporter:
    """Prints the data to standard output."""

    def write(self, data: bytes) -> int:
        print(data.decode("utf-8", errors="replace"))
        return len(data)


@dataclass
class FileExporter:
    """Writes the data to a file, refusing to replace one unless told to."""

    filename: str = ""
    overwrite: bool = False

    def write(self, data: bytes) -> int:
        if not self.filename:
            return 0
        path = Path(self.filename)
        if path.exists() and not self.overwrite:
            raise FileExistsError("File exists")
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return len(data)


@dataclass
class SnippetExporter:
    """Inserts the data after each ``%%identifier%%`` marker in a file."""

    file_name: str
    identifier: str

    def write(self, data: bytes) -> int:
        write_snippet_file(self.identifier, data.decode("utf-8"), self.file_name)
        return 1


def write_snippet(identifier: str, code: str, content: bytes) -> bytes:
    """Return ``content`` with ``code`` and a newline inserted after every marker line."""
    identifier = identifier.replace("%", "")
    pattern = re.compile(f"%%{identifier}%%".encode("utf-8"))
    insert = code.encode("utf-8") + b"\n"
    for match in reversed(list(pattern.finditer(content))):
        index = match.end() + 1
        content = content[:index] + insert + content[index:]
    return content


def write_snippet_file(identifier: str, code: str, path: str | PathLike[str]) -> None:
    """Insert ``code`` after the markers in the file at ``path``."""
    path = Path(path)
    path.write_bytes(write_snippet(identifier, code, path.read_bytes()))
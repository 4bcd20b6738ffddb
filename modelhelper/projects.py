"""Project templates and writing generated project files to disk."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Iterable


@dataclass
class SourceFile:
    """A file produced from a project template."""

    file_name: str = ""
    relative_path: str = ""
    content: bytes = b""


@dataclass
class ProjectTemplate:
    """A template that a new project is created from."""

    name: str = ""
    language: str = ""
    tags: list[str] = field(default_factory=list)
    description: str = ""
    root_directory: str = ""


@dataclass
class ProjectTemplatePrinter:
    """A table of the available project templates."""

    templates: dict[str, ProjectTemplate] = field(default_factory=dict)

    def header(self) -> list[str]:
        return ["Name", "Language", "Tags", "Description"]

    def rows(self) -> list[list[str]]:
        return [
            [name, template.language, ", ".join(template.tags), template.description]
            for name, template in self.templates.items()
        ]


def write_location(destination: str | PathLike[str], root_folder: str) -> Path:
    """Return where a project is written: ``root_folder`` below the destination.

    An empty destination means the current working directory.
    """
    base = Path(destination) if str(destination) else Path(os.getcwd())
    return base / root_folder


def write_files_to_location(
    destination: str | PathLike[str], files: Iterable[SourceFile]
) -> list[Path]:
    """Write every source file below ``destination``; return the paths written."""
    written: list[Path] = []
    for source in files:
        path = Path(destination) / source.relative_path / source.file_name
        directory = path.parent
        if not directory.exists():
            try:
                directory.mkdir(mode=0o700, parents=True, exist_ok=True)
            except OSError:
                print(f"Could not create '{directory}'", end="")
        try:
            path.write_bytes(source.content)
        except OSError:
            print(f"Could not write '{path}' to disk", end="")
            continue
        written.append(path)
    return written
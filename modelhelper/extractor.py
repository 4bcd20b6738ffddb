"""Extraction of ``${VARIABLE}`` references from docker stack files."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

_VARIABLE = re.compile(r"\$\{([A-Z_].*)\}")


def extract_variables(text: str) -> list[str]:
    """Return the names inside ``${...}`` references, in order of appearance."""
    return [match.group(1) for match in _VARIABLE.finditer(text)]


@dataclass
class DockerStackVariableExtractor:
    """Extracts variable references from one file."""

    filename: str

    def extract(self) -> list[str]:
        return extract_variables(Path(self.filename).read_text(encoding="utf-8"))
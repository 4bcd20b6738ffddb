"""Language definitions: datatypes, imports and keys for each code language."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Any

import yaml


class LanguageDefinitionError(ValueError):
    """Raised when a language definition file cannot be read."""


@dataclass
class LanguageDefinition:
    """What a template needs to know about one code language."""

    language: str = ""
    version: str = ""
    short: str = ""
    description: str = ""
    data_types: dict[str, Any] = field(default_factory=dict)
    default_imports: list[str] = field(default_factory=list)
    keys: dict[str, Any] = field(default_factory=dict)
    inject: dict[str, Any] = field(default_factory=dict)
    path: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LanguageDefinition":
        """Build a definition from its YAML mapping."""
        data_types = data.get("dataTypes", data.get("datatypes")) or {}
        imports = data.get("defaultImports", data.get("defaultimports")) or []
        if isinstance(imports, str):
            imports = [imports]
        return cls(
            language=str(data.get("language") or ""),
            version=str(data.get("version") or ""),
            short=str(data.get("short") or ""),
            description=str(data.get("description") or ""),
            data_types=dict(data_types),
            default_imports=[str(item) for item in imports],
            keys=dict(data.get("keys") or {}),
            inject=dict(data.get("inject") or {}),
        )


def load_definition(path: str | PathLike[str]) -> LanguageDefinition | None:
    """Read one definition file; an empty file gives None."""
    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise LanguageDefinitionError(f"cannot unmarshal data: {exc}") from exc
    if data is None:
        return None
    if not isinstance(data, dict):
        raise LanguageDefinitionError(
            f"cannot unmarshal data: {path} does not hold a mapping"
        )
    definition = LanguageDefinition.from_dict(data)
    definition.path = str(path)
    return definition


def load_from_path(directory: str | PathLike[str]) -> dict[str, LanguageDefinition]:
    """Load every YAML definition directly inside ``directory``, keyed by language."""
    directory = Path(directory)
    if not directory.exists():
        raise FileNotFoundError(f"no such directory: {directory}")
    definitions: dict[str, LanguageDefinition] = {}
    for path in sorted(directory.iterdir()):
        if path.is_dir() or not path.name.endswith(("yaml", "yml")):
            continue
        definition = load_definition(path)
        if definition is not None:
            definitions[definition.language] = definition
    return definitions


class LanguageDefinitionService:
    """Lists the language definitions found where the configuration points."""

    def __init__(self, config: Any) -> None:
        self.config = config

    @property
    def directory(self) -> Path | None:
        languages = getattr(self.config, "languages", None)
        location = getattr(languages, "definitions", "") if languages else ""
        return Path(location) if location else None

    def list(self) -> dict[str, LanguageDefinition]:
        """Return all definitions by language; none when the location is missing."""
        directory = self.directory
        if directory is None or not directory.is_dir():
            return {}
        return load_from_path(directory)

    def get_definition(self, lang: str) -> LanguageDefinition | None:
        """Return the definition of ``lang``, or None."""
        return self.list().get(lang)
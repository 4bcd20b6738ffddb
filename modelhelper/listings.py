"""Tables of connections and language definitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from modelhelper.connections import ConnectionList
from modelhelper.language import LanguageDefinition


def _count(value: Any) -> str:
    return f"{len(value or ()):,d}"


@dataclass
class ConnectionTableRenderer:
    """A table of the available connections."""

    connections: dict[str, ConnectionList] = field(default_factory=dict)

    def header(self) -> list[str]:
        return ["Name", "Type", "Default", "Groups", "Synonyms", "Options", "Description"]

    def rows(self) -> list[list[str]]:
        return [
            [
                connection.name,
                connection.type,
                "Yes" if connection.is_default else "No",
                _count(connection.groups),
                _count(connection.synonyms),
                _count(connection.options),
                connection.description,
            ]
            for connection in self.connections.values()
        ]


@dataclass
class LanguageTableRenderer:
    """A table of the available language definitions."""

    definitions: dict[str, LanguageDefinition] = field(default_factory=dict)

    def header(self) -> list[str]:
        return ["Language", "Version", "Datatypes", "Imports", "Keys", "Injects", "Description"]

    def rows(self) -> list[list[str]]:
        return [
            [
                definition.language,
                definition.version,
                _count(definition.data_types),
                _count(definition.default_imports),
                _count(definition.keys),
                _count(definition.inject),
                definition.short,
            ]
            for definition in self.definitions.values()
        ]
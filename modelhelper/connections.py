"""Named connections stored as YAML files in the configuration directory."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Any

import yaml

CONNECTION_TYPES = frozenset({"mssql", "postgres", "file"})


class ConnectionFileError(ValueError):
    """Raised when a connection file cannot be read."""


def _read_mapping(path: Path) -> dict[str, Any] | None:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConnectionFileError(f"cannot unmarshal data: {exc}") from exc
    if data is None:
        return None
    if not isinstance(data, dict):
        raise ConnectionFileError(f"cannot unmarshal data: {path} does not hold a mapping")
    return data


@dataclass
class ConnectionList:
    """The summary of a connection, as listed by the connection commands."""

    name: str = ""
    description: str = ""
    type: str = ""
    connection_string: str = ""
    groups: Any = field(default_factory=dict)
    synonyms: Any = field(default_factory=dict)
    options: Any = field(default_factory=dict)
    is_default: bool = False
    path: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ConnectionList":
        return cls(
            name=str(data.get("name") or ""),
            description=str(data.get("description") or ""),
            type=str(data.get("type") or ""),
            connection_string=str(data.get("connectionString") or ""),
            groups=data.get("groups") or {},
            synonyms=data.get("synonyms") or {},
            options=data.get("options") or {},
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "type": self.type,
            "connectionString": self.connection_string,
            "groups": self.groups,
            "synonyms": self.synonyms,
            "options": self.options,
        }


@dataclass
class GenericConnection:
    """A full connection of one of the known types, with its own settings."""

    name: str = ""
    type: str = ""
    description: str = ""
    connection_string: str = ""
    path: str = ""
    settings: dict[str, Any] = field(default_factory=dict)


_COMMON_KEYS = ("name", "type", "description", "connectionString")


def _load_generic_connection(path: Path) -> GenericConnection:
    data = _read_mapping(path) or {}
    return GenericConnection(
        name=str(data.get("name") or ""),
        type=str(data.get("type") or ""),
        description=str(data.get("description") or ""),
        connection_string=str(data.get("connectionString") or ""),
        path=str(path),
        settings={k: v for k, v in data.items() if k not in _COMMON_KEYS},
    )


def load_connection_list(path: str | PathLike[str]) -> ConnectionList | None:
    """Read a connection file; an empty file gives None."""
    path = Path(path)
    data = _read_mapping(path)
    if data is None:
        return None
    connection = ConnectionList.from_dict(data)
    connection.path = str(path)
    return connection


class ConnectionService:
    """Manages the connection files under ``<config dir>/connections``."""

    def __init__(self, config: Any) -> None:
        self.config = config

    @property
    def directory(self) -> Path:
        return Path(self.config.directory_name) / "connections"

    def create(self, connection: ConnectionList) -> None:
        """Write ``connection`` to its own file."""
        text = yaml.safe_dump(connection.to_dict(), sort_keys=False)
        (self.directory / f"{connection.name}.yaml").write_text(text, encoding="utf-8")

    def delete(self, name: str) -> None:
        """Remove the file of the named connection."""
        (self.directory / f"{name}.yaml").unlink()

    def connections(self) -> dict[str, ConnectionList]:
        """Return all connections by name, marking the default one."""
        default = self.config.default_connection
        found: dict[str, ConnectionList] = {}
        if not self.directory.is_dir():
            return found
        files = sorted(
            p for p in self.directory.rglob("*")
            if p.is_file() and p.name.endswith(("yaml", "yml"))
        )
        for path in files:
            connection = load_connection_list(path)
            if connection is None:
                continue
            connection.is_default = connection.name == default
            found[connection.name] = connection
        return found

    def base_connection(self, name: str) -> ConnectionList | None:
        """Return the summary of the named connection, or None."""
        return self.connections().get(name)

    def connection(self, name: str) -> GenericConnection | None:
        """Load the full named connection if it is of a known type."""
        item = self.connections().get(name)
        if item is None or item.type not in CONNECTION_TYPES:
            return None
        return _load_generic_connection(Path(item.path))
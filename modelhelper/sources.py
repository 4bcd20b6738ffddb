"""Listing, filtering and describing the entities of a source."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping

from modelhelper.connections import ConnectionList
from modelhelper.console import console_title, format_table
from modelhelper.converter import Column, Entity, Index, Relation

SEARCH_CHARACTERS = "*%"
ROW_SORT_KEYS = frozenset({"rows", "row", "rowcount"})

CONNECTION_NOT_FOUND = (
    "Could not find the connection. "
    "Please use the --connection flag to specify the connection to use."
)
NO_CONNECTIONS = (
    "Could not find any connections to use, please add a connection to the config file"
)


def _number(value: int) -> str:
    return f"{value:,d}"


def is_search_pattern(text: str) -> bool:
    """Tell whether ``text`` holds a wildcard and so names a search."""
    return any(character in text for character in SEARCH_CHARACTERS)


def filter_by_type(entities: Iterable[Entity], types: Iterable[str]) -> list[Entity]:
    """Keep the entities whose type is one of ``types``."""
    wanted = set(types)
    return [entity for entity in entities if entity.type in wanted]


def filter_by_schema(entities: Iterable[Entity], schemas: Iterable[str]) -> list[Entity]:
    """Keep the entities whose schema is one of ``schemas``."""
    wanted = set(schemas)
    return [entity for entity in entities if entity.schema in wanted]


def filter_with_rows(entities: Iterable[Entity]) -> list[Entity]:
    """Keep the entities that hold at least one row."""
    return [entity for entity in entities if entity.row_count > 0]


def filter_with_relations(entities: Iterable[Entity]) -> list[Entity]:
    """Keep the entities that take part in at least one relation."""
    return [
        entity
        for entity in entities
        if entity.parent_relation_count + entity.child_relation_count > 0
    ]


def filter_versioned(entities: Iterable[Entity]) -> list[Entity]:
    """Keep the system-versioned entities."""
    return [entity for entity in entities if entity.is_versioned]


def sort_entities(entities: Iterable[Entity], by: str, descending: bool) -> list[Entity]:
    """Order entities by ``name`` or by row count; any other key keeps the order."""
    entities = list(entities)
    if by == "name":
        return sorted(entities, key=lambda entity: entity.name, reverse=descending)
    if by in ROW_SORT_KEYS:
        return sorted(entities, key=lambda entity: entity.row_count, reverse=descending)
    return entities


def resolve_connection(
    connections: Mapping[str, ConnectionList], requested: str, default: str
) -> tuple[str, str]:
    """Pick the connection to read from and return its name and type.

    Without a requested name the default connection is used; otherwise the
    requested name must match a known connection.
    """
    if not connections:
        raise LookupError(NO_CONNECTIONS)
    name = "" if requested else default
    if not name:
        name = next(
            (item.name for item in connections.values() if item.name == requested), ""
        )
    if not name:
        raise LookupError(CONNECTION_NOT_FOUND)
    item = connections.get(name)
    return name, item.type if item is not None else ""


@dataclass
class EntitiesTableRenderer:
    """A table of entities, with either statistics or descriptions."""

    entities: list[Entity] = field(default_factory=list)
    with_desc: bool = False
    with_stat: bool = True

    def header(self) -> list[str]:
        header = ["Name", "Schema"]
        if not self.with_desc:
            header += ["Type", "Alias", "Rows"]
        if self.with_stat:
            header += ["Col Cnt", "P Relations", "C Relations"]
        if self.with_desc:
            header.append("Description")
        return header

    def rows(self) -> list[list[str]]:
        rows = []
        for entity in self.entities:
            row = [entity.name, entity.schema]
            if not self.with_desc:
                row += [entity.type, entity.alias, _number(entity.row_count)]
            if self.with_stat:
                row += [
                    _number(entity.column_count),
                    _number(entity.parent_relation_count),
                    _number(entity.child_relation_count),
                ]
            if self.with_desc:
                row.append(entity.description)
            rows.append(row)
        return rows


@dataclass
class IndexTableRenderer:
    """A table of the indexes of an entity."""

    indexes: list[Index] = field(default_factory=list)

    def header(self) -> list[str]:
        return ["Name", "Clustered", "Primary", "Unique"]

    def rows(self) -> list[list[str]]:
        rows = []
        for index in self.indexes:
            flags = (index.is_clustered, index.is_primary_key, index.is_unique)
            rows.append([index.name, *("Yes" if flag else "No" for flag in flags)])
        return rows


@dataclass
class RelationTableRenderer:
    """A table of the relations of an entity."""

    relations: list[Relation] = field(default_factory=list)

    def header(self) -> list[str]:
        return ["Schema", "Name", "ChildCol", "ParentCol", "Constraint"]

    def rows(self) -> list[list[str]]:
        rows = []
        for relation in self.relations:
            owner_null = "NULL" if relation.owner_column_nullable else "NOT NULL"
            column_null = "NULL" if relation.column_nullable else "NOT NULL"
            rows.append(
                [
                    relation.schema,
                    relation.name,
                    f"{relation.owner_column_name} ({relation.owner_column_type} {owner_null})",
                    f"{relation.column_name} ({relation.column_type} {column_null})",
                    relation.constraint_name,
                ]
            )
        return rows


@dataclass
class _ColumnTableRenderer:
    columns: list[Column] = field(default_factory=list)

    def header(self) -> list[str]:
        return ["Name", "Type", "Nullable", "PK", "FK", "Identity"]

    def rows(self) -> list[list[str]]:
        rows = []
        for column in self.columns:
            flags = (
                column.is_nullable,
                column.is_primary_key,
                column.is_foreign_key,
                column.is_identity,
            )
            rows.append(
                [column.name, column.data_type, *("Yes" if flag else "No" for flag in flags)]
            )
        return rows


def format_entity_summary(entity: Entity) -> str:
    """Return the description of one entity: rows, columns, indexes and relations."""
    parts = [
        f"\nEntity:         {entity.schema}.{entity.name}",
        f"\nRows:           {_number(entity.row_count)}",
    ]
    if entity.is_versioned:
        parts.append(f"\nHist. Table:    {entity.history_table}")
    if entity.description:
        parts += [console_title("Description:"), entity.description, "\n"]

    parts += [console_title("Columns"), format_table(_ColumnTableRenderer(entity.columns)), "\n"]

    if entity.indexes:
        parts += [console_title("Indexes"), format_table(IndexTableRenderer(entity.indexes)), "\n"]
    if entity.child_relations:
        parts += [
            console_title("One to many (.ChildRelations)"),
            format_table(RelationTableRenderer(entity.child_relations)),
            "\n",
        ]
    if entity.parent_relations:
        parts += [
            console_title("Many to one (.ParentRelations)"),
            format_table(RelationTableRenderer(entity.parent_relations)),
            "\n",
        ]
    parts.append("\n")
    return "".join(parts)
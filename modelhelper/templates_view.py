"""Tables of code templates for the template list commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping

# Columns that may be hidden, in the order they follow Name and Language.
OPTIONAL_COLUMNS = (
    ("type", "Type"),
    ("model", "Model"),
    ("key", "Key"),
    ("groups", "Groups"),
    ("desc", "Description"),
)


@dataclass
class CodeTemplate:
    """A code template as listed to the user."""

    name: str = ""
    language: str = ""
    type: str = ""
    model: str = ""
    key: str = ""
    features: list[str] = field(default_factory=list)
    short: str = ""
    description: str = ""
    template_file_path: str = ""


@dataclass
class TemplateListOptions:
    """Filters and presentation choices for listing code templates."""

    database_type: str = "pg"
    filter_types: list[str] = field(default_factory=list)
    filter_languages: list[str] = field(default_factory=list)
    filter_models: list[str] = field(default_factory=list)
    filter_keys: list[str] = field(default_factory=list)
    filter_groups: list[str] = field(default_factory=list)
    hide_columns: frozenset[str] = field(default_factory=frozenset)


def hidden_columns(names: Iterable[str] | None) -> frozenset[str]:
    """Return the set of column names the user asked to hide."""
    return frozenset(names or ())


def templates_by_name(templates: Mapping[str, CodeTemplate]) -> list[CodeTemplate]:
    """Return the templates of a mapping ordered by their name."""
    return sorted(templates.values(), key=lambda template: template.name)


@dataclass
class TemplatePrinter:
    """A table of code templates, leaving out the hidden columns."""

    templates: list[CodeTemplate] = field(default_factory=list)
    options: TemplateListOptions = field(default_factory=TemplateListOptions)

    def _visible(self) -> list[tuple[str, str]]:
        hidden = self.options.hide_columns
        return [(key, title) for key, title in OPTIONAL_COLUMNS if key not in hidden]

    def header(self) -> list[str]:
        return ["Name", "Language", *(title for _, title in self._visible())]

    def rows(self) -> list[list[str]]:
        visible = [key for key, _ in self._visible()]
        rows = []
        for template in self.templates:
            values = {
                "type": template.type,
                "model": template.model,
                "key": template.key,
                "groups": ", ".join(template.features),
                "desc": template.short,
            }
            rows.append(
                [template.name, template.language, *(values[key] for key in visible)]
            )
        return rows
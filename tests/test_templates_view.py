import pytest

from modelhelper.templates_view import (
    CodeTemplate,
    TemplateListOptions,
    TemplatePrinter,
    hidden_columns,
    templates_by_name,
)


def _template(name, **kwargs):
    return CodeTemplate(
        name=name,
        language=kwargs.get("language", "cs"),
        type=kwargs.get("type", "file"),
        model=kwargs.get("model", "entity"),
        key=kwargs.get("key", "api"),
        features=kwargs.get("features", ["crud", "dapper"]),
        short=kwargs.get("short", "A template"),
    )


def test_templates_by_name_sorts():
    templates = {"b": _template("beta"), "a": _template("alpha"), "c": _template("gamma")}
    names = [t.name for t in templates_by_name(templates)]
    assert names == sorted(["beta", "alpha", "gamma"])


def test_templates_by_name_empty():
    assert templates_by_name({}) == []


def test_hidden_columns_from_list():
    assert hidden_columns(["type", "desc", "type"]) == frozenset({"type", "desc"})
    assert hidden_columns(None) == frozenset()


def test_header_all_columns_by_default():
    printer = TemplatePrinter(templates=[])
    assert printer.header() == [
        "Name", "Language", "Type", "Model", "Key", "Groups", "Description",
    ]


def test_row_all_columns():
    printer = TemplatePrinter(templates=[_template("entity-model")])
    assert printer.rows() == [
        ["entity-model", "cs", "file", "entity", "api", "crud, dapper", "A template"]
    ]


@pytest.mark.parametrize("hidden,title", [
    ("type", "Type"), ("model", "Model"), ("key", "Key"),
    ("groups", "Groups"), ("desc", "Description"),
])
def test_hidden_column_removed_from_header_and_rows(hidden, title):
    options = TemplateListOptions(hide_columns=hidden_columns([hidden]))
    printer = TemplatePrinter(templates=[_template("x"), _template("y")], options=options)
    header = printer.header()
    assert title not in header
    assert all(len(row) == len(header) for row in printer.rows())


def test_hiding_everything_keeps_name_and_language():
    options = TemplateListOptions(
        hide_columns=hidden_columns(["type", "model", "key", "groups", "desc"])
    )
    printer = TemplatePrinter(templates=[_template("x", language="go")], options=options)
    assert printer.header() == ["Name", "Language"]
    assert printer.rows() == [["x", "go"]]


def test_default_database_type():
    assert TemplateListOptions().database_type == "pg"
from modelhelper.connections import ConnectionList
from modelhelper.console import format_table
from modelhelper.language import LanguageDefinition
from modelhelper.listings import ConnectionTableRenderer, LanguageTableRenderer


def test_connection_header():
    assert ConnectionTableRenderer().header() == [
        "Name", "Type", "Default", "Groups", "Synonyms", "Options", "Description",
    ]


def test_connection_rows():
    connections = {
        "stages": ConnectionList(
            name="stages", type="mssql", description="Stage db",
            groups={"g1": [], "g2": []}, synonyms={"s": "t"}, options={},
            is_default=True,
        ),
        "local": ConnectionList(name="local", type="postgres"),
    }
    rows = ConnectionTableRenderer(connections).rows()
    assert rows[0] == ["stages", "mssql", "Yes", "2", "1", "0", "Stage db"]
    assert rows[1][:3] == ["local", "postgres", "No"]


def test_connection_rows_empty():
    assert ConnectionTableRenderer({}).rows() == []


def test_connection_table_renders_names():
    text = format_table(ConnectionTableRenderer({"a": ConnectionList(name="alpha", type="file")}))
    assert "alpha" in text
    assert "Description" in text


def test_language_header():
    assert LanguageTableRenderer().header() == [
        "Language", "Version", "Datatypes", "Imports", "Keys", "Injects", "Description",
    ]


def test_language_rows():
    definition = LanguageDefinition(
        language="cs", version="1.0", short="C sharp",
        data_types={"int": "int", "varchar": "string", "bit": "bool"},
        default_imports=["System"], keys={}, inject={"logger": {}},
    )
    rows = LanguageTableRenderer({"cs": definition}).rows()
    assert rows == [["cs", "1.0", "3", "1", "0", "1", "C sharp"]]


def test_language_row_width_matches_header():
    renderer = LanguageTableRenderer({"go": LanguageDefinition(language="go")})
    assert all(len(row) == len(renderer.header()) for row in renderer.rows())


def test_language_counts_use_thousands_separator():
    definition = LanguageDefinition(
        language="big", data_types={str(i): i for i in range(1200)}
    )
    rows = LanguageTableRenderer({"big": definition}).rows()
    assert rows[0][2] == "1,200"
from pathlib import Path

import pytest

from modelhelper.config import Config, LanguageSettings
from modelhelper.language import (
    LanguageDefinition,
    LanguageDefinitionError,
    LanguageDefinitionService,
    load_definition,
    load_from_path,
)

CS_DEF = """\
language: cs
version: "1.0"
short: C sharp
dataTypes:
  int: int
  varchar: string
defaultImports:
  - System
keys:
  model: {}
inject:
  logger: {}
"""

GO_DEF = """\
language: go
version: "2.0"
short: Go
"""


@pytest.fixture
def defs_dir(tmp_path: Path) -> Path:
    (tmp_path / "cs.yaml").write_text(CS_DEF, encoding="utf-8")
    (tmp_path / "go.yml").write_text(GO_DEF, encoding="utf-8")
    (tmp_path / "notes.txt").write_text("language: txt\n", encoding="utf-8")
    (tmp_path / "empty.yaml").write_text("", encoding="utf-8")
    return tmp_path


def test_could_load_files(defs_dir):
    defs = load_from_path(defs_dir)
    assert sorted(defs) == ["cs", "go"]
    for key, value in defs.items():
        assert key == value.language


def test_definition_fields(defs_dir):
    cs = load_from_path(defs_dir)["cs"]
    assert cs.version == "1.0"
    assert cs.short == "C sharp"
    assert cs.data_types == {"int": "int", "varchar": "string"}
    assert cs.default_imports == ["System"]
    assert list(cs.keys) == ["model"]
    assert list(cs.inject) == ["logger"]
    assert cs.path == str(defs_dir / "cs.yaml")


def test_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_from_path(tmp_path / "missing")


def test_empty_definition_is_none(defs_dir):
    assert load_definition(defs_dir / "empty.yaml") is None


def test_invalid_definition_raises(tmp_path):
    bad = tmp_path / "bad.yaml"
    bad.write_text("language: [unclosed\n", encoding="utf-8")
    with pytest.raises(LanguageDefinitionError):
        load_definition(bad)


def test_from_dict_defaults():
    definition = LanguageDefinition.from_dict({"language": "ts"})
    assert definition.language == "ts"
    assert definition.data_types == {}
    assert definition.default_imports == []


def test_service_list_and_get(defs_dir):
    config = Config(languages=LanguageSettings(definitions=str(defs_dir)))
    service = LanguageDefinitionService(config)
    assert set(service.list()) == {"cs", "go"}
    assert service.get_definition("go").version == "2.0"
    assert service.get_definition("cobol") is None


def test_service_without_location_is_empty(tmp_path):
    service = LanguageDefinitionService(Config())
    assert service.list() == {}
    missing = Config(languages=LanguageSettings(definitions=str(tmp_path / "nope")))
    assert LanguageDefinitionService(missing).list() == {}
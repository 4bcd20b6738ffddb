import pytest

from modelhelper.config import (
    CONFIG_FILE,
    Config,
    ConfigError,
    ConfigService,
    Developer,
    TemplateLocations,
    load,
    location,
    location_exists,
    set_default_connection,
    set_default_editor,
    set_developer,
    set_lang_def_location,
    set_port,
    set_template_location,
    update,
)


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    return tmp_path


@pytest.fixture
def saved(home):
    ConfigService().save_config(Config(default_editor="code"))
    return home


def _sample():
    return Config(
        default_editor="vim",
        default_connection="stages",
        port=8080,
        templates=TemplateLocations(code=["/tpl/code"], database=["/tpl/db"]),
        developer=Developer("Dev", "dev@example.com", "dev"),
    )


def test_location_is_in_home(home):
    assert location() == home / ".modelhelper"


def test_location_exists(home):
    assert location_exists() is False
    location().mkdir()
    assert location_exists() is True


def test_dict_round_trip():
    config = _sample()
    assert Config.from_dict(config.to_dict()) == config


def test_save_and_load_round_trip(home):
    service = ConfigService()
    assert service.config_exists() is False
    service.save_config(_sample())
    assert service.config_exists() is True
    assert (home / ".modelhelper" / CONFIG_FILE).is_file()
    loaded = service.load()
    assert loaded.directory_name == str(home / ".modelhelper")
    loaded.directory_name = ""
    assert loaded == _sample()


def test_service_with_explicit_directory(tmp_path):
    service = ConfigService(tmp_path / "cfg")
    service.save_config(_sample())
    assert service.load().default_connection == "stages"


def test_load_from_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConfigService(tmp_path).load_from_file(tmp_path / "missing.yaml")


def test_load_from_invalid_yaml_raises(tmp_path):
    bad = tmp_path / "bad.yaml"
    bad.write_text("a: [unclosed\n")
    with pytest.raises(ConfigError):
        ConfigService(tmp_path).load_from_file(bad)


def test_load_from_empty_file_gives_defaults(tmp_path):
    empty = tmp_path / "empty.yaml"
    empty.write_text("")
    assert ConfigService(tmp_path).load_from_file(empty) == Config()


def test_update_writes_default_location(saved):
    config = load()
    config.default_connection = "other"
    update(config)
    assert load().default_connection == "other"


def test_set_default_connection(saved):
    set_default_connection("stages")
    assert load().default_connection == "stages"


def test_set_default_editor_lowercases(saved):
    set_default_editor("VIM")
    assert load().default_editor == "vim"


def test_set_developer_merge_keeps_existing(saved):
    set_developer("Dev", "dev@example.com", "dev", False)
    set_developer("", "new@example.com", "", True)
    assert load().developer == Developer("Dev", "new@example.com", "dev")


def test_set_developer_replace(saved):
    set_developer("Dev", "dev@example.com", "dev", False)
    set_developer("Other", "", "", False)
    assert load().developer == Developer("Other", "", "")


def test_set_port_uses_api_port(saved):
    set_port(5000, 6000)
    assert load().port == 5000


def test_set_template_location_appends(saved):
    set_template_location("/a")
    set_template_location("/b")
    assert load().templates.code == ["/a", "/b"]


def test_set_lang_def_location(saved):
    set_lang_def_location("/defs")
    assert load().languages.definitions == "/defs"


def test_setters_fail_without_config(home):
    with pytest.raises(FileNotFoundError):
        set_default_editor("vim")
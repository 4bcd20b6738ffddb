"""The modelhelper configuration file and the commands that change it."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

CONFIG_FILE = "config.yaml"
CONFIG_DIRECTORY = ".modelhelper"


class ConfigError(ValueError):
    """Raised when a configuration file cannot be read."""


def _str_list(value: Any) -> list[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    return [str(item) for item in value]


@dataclass
class TemplateLocations:
    """Directories where templates are found."""

    code: list[str] = field(default_factory=list)
    database: list[str] = field(default_factory=list)
    project: list[str] = field(default_factory=list)


@dataclass
class LanguageSettings:
    """Where language definitions live."""

    definitions: str = ""


@dataclass
class Developer:
    """The developer using the tool."""

    name: str = ""
    email: str = ""
    github_account: str = ""


@dataclass
class Config:
    """The user configuration."""

    default_editor: str = ""
    default_connection: str = ""
    port: int = 0
    templates: TemplateLocations = field(default_factory=TemplateLocations)
    languages: LanguageSettings = field(default_factory=LanguageSettings)
    developer: Developer = field(default_factory=Developer)
    directory_name: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        """Build a configuration from its YAML mapping."""
        templates = data.get("templates") or {}
        languages = data.get("languages") or {}
        developer = data.get("developer") or {}
        return cls(
            default_editor=str(data.get("defaultEditor") or ""),
            default_connection=str(data.get("defaultConnection") or ""),
            port=int(data.get("port") or 0),
            templates=TemplateLocations(
                code=_str_list(templates.get("code")),
                database=_str_list(templates.get("database")),
                project=_str_list(templates.get("project")),
            ),
            languages=LanguageSettings(
                definitions=str(languages.get("definitions") or "")
            ),
            developer=Developer(
                name=str(developer.get("name") or ""),
                email=str(developer.get("email") or ""),
                github_account=str(developer.get("github") or ""),
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the YAML mapping for this configuration."""
        return {
            "defaultEditor": self.default_editor,
            "defaultConnection": self.default_connection,
            "port": self.port,
            "templates": {
                "code": list(self.templates.code),
                "database": list(self.templates.database),
                "project": list(self.templates.project),
            },
            "languages": {"definitions": self.languages.definitions},
            "developer": {
                "name": self.developer.name,
                "email": self.developer.email,
                "github": self.developer.github_account,
            },
        }


def location() -> Path:
    """Return the configuration directory in the user's home."""
    return Path.home() / CONFIG_DIRECTORY


def location_exists() -> bool:
    """Tell whether the configuration directory exists."""
    return location().exists()


def _write(config: Config, directory: Path) -> None:
    text = yaml.safe_dump(config.to_dict(), sort_keys=False)
    (directory / CONFIG_FILE).write_text(text, encoding="utf-8")


class ConfigService:
    """Loads and saves the configuration file in one directory."""

    def __init__(self, directory: str | PathLike[str] | None = None) -> None:
        self.directory = Path(directory) if directory is not None else location()

    @property
    def path(self) -> Path:
        return self.directory / CONFIG_FILE

    def config_exists(self) -> bool:
        """Tell whether the configuration file exists."""
        return self.path.exists()

    def load(self) -> Config:
        """Load the configuration file and record where it came from."""
        config = self.load_from_file(self.path)
        config.directory_name = str(self.directory)
        return config

    def load_from_file(self, path: str | PathLike[str]) -> Config:
        """Load a configuration from a YAML file."""
        text = Path(path).read_text(encoding="utf-8")
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigError(f"cannot unmarshal data: {exc}") from exc
        if data is None:
            return Config()
        if not isinstance(data, dict):
            raise ConfigError(f"cannot unmarshal data: {path} does not hold a mapping")
        return Config.from_dict(data)

    def save_config(self, config: Config) -> None:
        """Write ``config`` to the configuration file, creating the directory."""
        logger.info("Saving config path=%s", self.directory)
        self.directory.mkdir(parents=True, exist_ok=True)
        _write(config, self.directory)


def load() -> Config:
    """Load the configuration from the default location."""
    return ConfigService().load()


def update(config: Config) -> None:
    """Write ``config`` to the default configuration file."""
    logger.info("Updating config")
    _write(config, location())


def set_default_connection(key: str) -> None:
    config = load()
    config.default_connection = key
    update(config)


def set_default_editor(editor: str) -> None:
    config = load()
    config.default_editor = editor.lower()
    update(config)


def set_developer(name: str, email: str, github: str, merge: bool) -> None:
    """Set developer details; with ``merge`` only non-empty values replace."""
    config = load()
    if merge:
        if name:
            config.developer.name = name
        if email:
            config.developer.email = email
        if github:
            config.developer.github_account = github
    else:
        config.developer = Developer(name, email, github)
    update(config)


def set_port(api: int, web: int) -> None:
    config = load()
    config.port = api
    update(config)


def set_template_location(loc: str) -> None:
    config = load()
    config.templates.code.append(loc)
    update(config)


def set_lang_def_location(loc: str) -> None:
    config = load()
    config.languages.definitions = loc
    update(config)
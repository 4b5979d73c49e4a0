"""Configuration loading for your-gitignore."""

from __future__ import annotations

import codecs
import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from your_gitignore.core.apply import DEFAULT_TARGET_FILENAME
from your_gitignore.core.store import TemplateStore, validate_template_name

logger = logging.getLogger(__name__)

APP_NAME = "your-gitignore"
CONFIG_FILENAME = "config.yaml"
STORE_DIRNAME = "user-gitignore"

ENV_CONFIG_DIR = "YOUR_GITIGNORE_CONFIG_DIR"
ENV_STORE_DIR = "YOUR_GITIGNORE_STORE_DIR"
ENV_TARGET = "YOUR_GITIGNORE_TARGET"


class ConfigError(Exception):
    """The configuration file is unreadable or invalid."""


class Settings(BaseModel):
    """Validated contents of ``config.yaml``."""

    model_config = ConfigDict(extra="forbid")

    store_dir: Path | None = None
    target_filename: str = Field(default=DEFAULT_TARGET_FILENAME)
    encoding: str = "utf-8"

    @field_validator("target_filename")
    @classmethod
    def check_target_filename(cls, value: str) -> str:
        error = validate_template_name(value)
        if error is not None:
            raise ValueError(f"invalid target_filename {value!r}: {error}")
        return value

    @field_validator("encoding")
    @classmethod
    def check_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"unknown encoding {value!r}") from e
        return value

    @field_validator("store_dir")
    @classmethod
    def expand_store_dir(cls, value: Path | None) -> Path | None:
        return value.expanduser() if value is not None else None


def default_config_dir() -> Path:
    """``$XDG_CONFIG_HOME/your-gitignore``, falling back to ``~/.config``."""
    override = os.environ.get(ENV_CONFIG_DIR)
    if override:
        return Path(override).expanduser()
    base = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
    return base / APP_NAME


class ConfigurationManager:
    """Resolves where templates live and which file they are applied to.

    Precedence, highest first: explicit constructor arguments (CLI
    options), environment variables, ``config.yaml``, built-in defaults.
    """

    def __init__(
        self,
        config_dir: Path | str | None = None,
        store_dir: Path | str | None = None,
        target_filename: str | None = None,
    ) -> None:
        self.config_dir = (
            Path(config_dir).expanduser() if config_dir else default_config_dir()
        )
        self._store_dir_override = (
            Path(store_dir).expanduser() if store_dir else None
        )
        self._target_override = target_filename
        self._settings: Settings | None = None

    @property
    def config_path(self) -> Path:
        return self.config_dir / CONFIG_FILENAME

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = self._resolve_settings()
        return self._settings

    @property
    def store_dir(self) -> Path:
        configured = self.settings.store_dir
        if configured is not None:
            return configured
        return self.config_dir / STORE_DIRNAME

    @property
    def target_filename(self) -> str:
        return self.settings.target_filename

    def load_file_config(self) -> dict[str, Any]:
        """Return the raw mapping from ``config.yaml`` (empty if absent).

        Raises:
            ConfigError: If the file cannot be read or parsed.
        """
        if not self.config_path.exists():
            return {}
        try:
            with open(self.config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Failed to parse {self.config_path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to read {self.config_path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"{self.config_path} must contain a mapping")
        return data

    def _resolve_settings(self) -> Settings:
        data = self.load_file_config()

        env_store = os.environ.get(ENV_STORE_DIR)
        if env_store:
            data["store_dir"] = env_store
        env_target = os.environ.get(ENV_TARGET)
        if env_target:
            data["target_filename"] = env_target

        if self._store_dir_override is not None:
            data["store_dir"] = self._store_dir_override
        if self._target_override is not None:
            data["target_filename"] = self._target_override

        try:
            settings = Settings.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e
        logger.debug("Resolved settings: %s", settings)
        return settings

    def create_store(self) -> TemplateStore:
        """Build the template store and make sure its directory exists."""
        store = TemplateStore(self.store_dir, encoding=self.settings.encoding)
        store.ensure_ready()
        return store

    def init_config(self) -> Path:
        """Write a default ``config.yaml``.

        Raises:
            ValueError: If a configuration file already exists.
        """
        if self.config_path.exists():
            raise ValueError(f"Configuration already exists at {self.config_path}")
        self.config_dir.mkdir(parents=True, exist_ok=True)
        data = {
            "store_dir": str(self.config_dir / STORE_DIRNAME),
            "target_filename": DEFAULT_TARGET_FILENAME,
        }
        with open(self.config_path, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
        return self.config_path

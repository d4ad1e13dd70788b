"""Unified settings: init kwargs, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs: passed by the embedding tool
  2. Env vars: ``UNITRULES_*`` prefix, ``__`` for nested sections
  3. TOML file: ``unitrules.toml`` found by walking up from the start dir,
     or named by ``UNITRULES_CONFIG`` / *config_path*
  4. Code defaults: baked into the section models
"""

from __future__ import annotations

import os
import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from unitrules.config.models import CheckConfig

CONFIG_FILENAMES = ("unitrules.toml", ".unitrules.toml")
CONFIG_ENV_VAR = "UNITRULES_CONFIG"


class ConfigError(ValueError):
    """Unreadable or malformed configuration file."""


def find_config(start: Path | None = None) -> Path | None:
    """Locate the config file for *start* (default: cwd).

    ``UNITRULES_CONFIG`` wins when set; otherwise each directory from
    *start* up to the filesystem root is searched for ``CONFIG_FILENAMES``.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        candidate = Path(env_path)
        return candidate if candidate.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        for name in CONFIG_FILENAMES:
            candidate = directory / name
            if candidate.is_file():
                return candidate
    return None


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a discovered or explicit TOML file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path is not None and toml_path.is_file():
            try:
                self._data = tomllib.loads(toml_path.read_text(encoding="utf-8"))
            except tomllib.TOMLDecodeError as exc:
                raise ConfigError(f"Invalid TOML in {toml_path}: {exc}") from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for the TOML path during construction.
_tls = threading.local()


class UnitRulesSettings(BaseSettings):
    """Settings for embedding tools: logging flags and check policy.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
        verbose: DEBUG logging for the ``unitrules`` logger.
        log_json: Structured JSON log lines instead of console output.
        check: Violation policy applied by :class:`UnitCheckService`.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "UNITRULES_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None
    verbose: bool = False
    log_json: bool = False
    check: CheckConfig = Field(default_factory=CheckConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the TOML source between env vars and defaults."""
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_tls, "toml_path", None)),
        )

    @classmethod
    def load(
        cls,
        *,
        config_path: str | Path | None = None,
        start: Path | None = None,
        **overrides: Any,
    ) -> UnitRulesSettings:
        """Build settings, reading *config_path* or a discovered config file.

        Raises:
            ConfigError: If the TOML file cannot be parsed.
        """
        if config_path is not None:
            explicit = Path(config_path)
            toml_path = explicit if explicit.is_file() else None
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None

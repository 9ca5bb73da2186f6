"""Screenplayer configuration settings."""

from __future__ import annotations

import codecs
import json
import os
import tomllib
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from screenplayer.exceptions import ConfigurationError, check_config_keys

_LOADERS = {
    ".yml": lambda text: yaml.safe_load(text) or {},
    ".yaml": lambda text: yaml.safe_load(text) or {},
    ".toml": tomllib.loads,
    ".json": json.loads,
}


def read_config_file(path: Path) -> dict[str, Any]:
    """Read a YAML, TOML or JSON config file into a plain mapping.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigurationError: For unsupported suffixes or misspelled keys.
    """
    if not path.is_file():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    loader = _LOADERS.get(path.suffix.lower())
    if loader is None:
        raise ConfigurationError(
            message=f"Unsupported configuration file format: {path.suffix}",
            hint="Use one of the supported formats: " + ", ".join(_LOADERS),
            details={"file": str(path)},
        )

    data = loader(path.read_text(encoding="utf-8"))
    check_config_keys(data)
    return data


class ScreenplayerSettings(BaseSettings):
    """Settings for reading screenplays and for logging.

    Config file values win over ``SCREENPLAYER_*`` environment variables,
    which win over a ``.env`` file and the defaults below.
    """

    model_config = SettingsConfigDict(
        env_prefix="SCREENPLAYER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    source_encoding: str = Field(
        default="utf-8",
        description="Text encoding used when reading screenplay files",
    )
    debug: bool = Field(default=False, description="Add call sites to log events")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    log_format: Literal["console", "json", "structured"] = "console"
    log_file: Path | None = Field(
        default=None,
        description="Rotating log file, in addition to stderr",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v

    @field_validator("log_format", mode="before")
    @classmethod
    def lower_log_format(cls, v: Any) -> Any:
        return v.lower() if isinstance(v, str) else v

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_log_file(cls, v: Any) -> Any:
        """Expand ``$VARS`` and ``~`` and make the path absolute."""
        if isinstance(v, str | Path):
            return Path(os.path.expandvars(str(v))).expanduser().resolve()
        return v

    @field_validator("source_encoding")
    @classmethod
    def known_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"Unknown source encoding: {v}") from e
        return v

    @classmethod
    def from_file(cls, config_path: Path | str) -> ScreenplayerSettings:
        """Load settings from one YAML, TOML or JSON file."""
        return cls(**read_config_file(Path(config_path)))


def load_settings(config_files: Iterable[Path] = ()) -> ScreenplayerSettings:
    """Merge config files over the environment, later files winning."""
    data: dict[str, Any] = {}
    for path in config_files:
        data.update(read_config_file(path))
    return ScreenplayerSettings(**data)


_settings: ScreenplayerSettings | None = None


def get_settings() -> ScreenplayerSettings:
    """Return the process-wide settings.

    The first call reads ``~/.config/screenplayer/config.{yaml,toml}`` and
    then ``screenplayer.{yaml,json,toml}`` in the working directory, if any.
    """
    global _settings
    if _settings is None:
        user_dir = Path.home() / ".config" / "screenplayer"
        candidates = [user_dir / "config.yaml", user_dir / "config.toml"]
        candidates += [
            Path.cwd() / f"screenplayer{ext}" for ext in (".yaml", ".json", ".toml")
        ]
        _settings = load_settings(path for path in candidates if path.is_file())
    return _settings


def set_settings(settings: ScreenplayerSettings) -> None:
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Forget the cached settings so the next lookup rereads them."""
    global _settings
    _settings = None


def get_settings_for_cli(config_file: Path | None = None) -> ScreenplayerSettings:
    """Settings for a command, from ``--config`` when given.

    Raises:
        FileNotFoundError: If ``config_file`` does not exist.
    """
    if config_file is None:
        return get_settings()
    return load_settings([config_file])

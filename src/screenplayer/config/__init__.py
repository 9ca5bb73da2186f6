"""Settings and logging for Screenplayer.

Logging is configured from the global settings the first time a logger is
requested, and again after ``reset_settings``.
"""

from __future__ import annotations

from functools import cache
from typing import Any

from screenplayer.config import settings as _settings_module
from screenplayer.config.logging import configure_logging
from screenplayer.config.logging import get_logger as _structlog_logger
from screenplayer.config.settings import (
    ScreenplayerSettings,
    get_settings,
    set_settings,
)

__all__ = [
    "ScreenplayerSettings",
    "configure_logging",
    "get_logger",
    "get_settings",
    "reset_settings",
    "set_settings",
]

_configured = False


@cache
def get_logger(name: str) -> Any:
    """Return the structlog logger for ``name``, one instance per name."""
    global _configured
    if not _configured:
        configure_logging(get_settings())
        _configured = True
    return _structlog_logger(name)


def reset_settings() -> None:
    """Drop cached settings and loggers; logging is set up again on next use."""
    global _configured
    _settings_module.reset_settings()
    _configured = False
    get_logger.cache_clear()

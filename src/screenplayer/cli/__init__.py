"""Screenplayer CLI package."""

from .main import app

__all__ = ["app"]

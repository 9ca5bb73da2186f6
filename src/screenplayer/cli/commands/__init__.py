"""Screenplayer CLI commands."""

from __future__ import annotations

from screenplayer.cli.commands.check import check_command
from screenplayer.cli.commands.parse import parse_command

__all__ = ["check_command", "parse_command"]

"""Output formatters for CLI commands."""

from screenplayer.cli.formatters.base import OutputFormat, OutputFormatter
from screenplayer.cli.formatters.json_formatter import JsonFormatter
from screenplayer.cli.formatters.lines_formatter import LinesFormatter

__all__ = ["JsonFormatter", "LinesFormatter", "OutputFormat", "OutputFormatter"]

"""Turn exceptions raised inside CLI commands into a message and an exit code."""

from __future__ import annotations

import traceback
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from screenplayer.config import get_logger
from screenplayer.exceptions import ScreenplayerError

logger = get_logger(__name__)
console = Console()


def _describe(error: Exception) -> tuple[str, str | None]:
    if isinstance(error, ScreenplayerError):
        return error.message, error.hint
    if isinstance(error, FileNotFoundError):
        return f"File not found: {error}", "Check that the file path is correct"
    return f"Unexpected error: {error}", None


def handle_cli_error(
    error: Exception, verbose: bool = False, exit_code: int = 1
) -> NoReturn:
    """Print ``error`` with its hint, log it and exit.

    With ``verbose``, details of a ScreenplayerError are listed and any other
    error shows its traceback.
    """
    message, hint = _describe(error)
    console.print(f"[red]✗ {escape(message)}[/red]")
    if hint:
        console.print(f"[yellow]→ {escape(hint)}[/yellow]")

    details = getattr(error, "details", None) or {}
    if verbose and details:
        console.print("\n[dim]Details:[/dim]")
        for key, value in details.items():
            console.print(f"  [dim]{key}:[/dim] {escape(str(value))}")
    elif verbose and not isinstance(error, ScreenplayerError | FileNotFoundError):
        console.print(escape(traceback.format_exc()), highlight=False)
    elif not isinstance(error, ScreenplayerError | FileNotFoundError):
        console.print("[dim]Run with --verbose for full error details[/dim]")

    logger.error(
        "Command failed",
        error_type=type(error).__name__,
        message=message,
        details=details,
        exit_code=exit_code,
    )
    raise typer.Exit(exit_code) from error

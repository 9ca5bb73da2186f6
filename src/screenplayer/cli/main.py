"""Main CLI entry point."""

from __future__ import annotations

import os
from typing import Annotated

import typer
from rich.console import Console

from screenplayer import __version__
from screenplayer.cli.commands import check_command, parse_command
from screenplayer.cli.formatters import JsonFormatter
from screenplayer.config import configure_logging, get_logger, reset_settings

logger = get_logger(__name__)
console = Console()

app = typer.Typer(
    name="screenplayer",
    help="Parse sigil-based screenplay markup",
    pretty_exceptions_enable=False,
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command(name="parse")(parse_command)
app.command(name="check")(check_command)


@app.command()
def version(
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show Screenplayer version."""
    if json_output:
        print(JsonFormatter().format({"name": "screenplayer", "version": __version__}))
    else:
        console.print(f"Screenplayer v{__version__}")


@app.callback()
def main_callback(
    debug: Annotated[
        bool,
        typer.Option(
            "--debug", help="Enable debug logging", envvar="SCREENPLAYER_DEBUG"
        ),
    ] = False,
) -> None:
    """Configure global options."""
    if debug:
        os.environ["SCREENPLAYER_LOG_LEVEL"] = "DEBUG"
        os.environ["SCREENPLAYER_DEBUG"] = "true"

        from screenplayer.config import get_settings

        reset_settings()
        configure_logging(get_settings())
        logger.debug("Debug mode enabled")


def main() -> None:
    """Main entry point for CLI."""
    app()


if __name__ == "__main__":
    main()

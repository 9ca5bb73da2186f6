"""Parse command for Screenplayer CLI."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from screenplayer.cli.formatters import JsonFormatter, LinesFormatter, OutputFormat
from screenplayer.cli.utils.error_handler import handle_cli_error
from screenplayer.config import get_logger
from screenplayer.config.settings import get_settings_for_cli
from screenplayer.exceptions import DocumentParseError
from screenplayer.parser import ScreenplayParser

logger = get_logger(__name__)


def parse_command(
    file: Annotated[
        Path,
        typer.Argument(
            help="Screenplay file to parse",
            exists=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ],
    json_output: Annotated[
        bool, typer.Option("--json", help="Output the parsed lines as JSON")
    ] = False,
    plain: Annotated[
        bool, typer.Option("--plain", help="Output tab-separated rows")
    ] = False,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file (YAML, TOML, or JSON)",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show detailed error information"),
    ] = False,
) -> None:
    """Parse a screenplay and print its lines.

    Examples:
        screenplayer parse script.scp
        screenplayer parse script.scp --json
    """
    try:
        settings = get_settings_for_cli(config_file=config)
        document = ScreenplayParser(settings).parse_file(file)
    except DocumentParseError as e:
        if json_output:
            print(JsonFormatter().format_parse_error(e, e.source_file))
            raise typer.Exit(1) from e
        handle_cli_error(e, verbose=verbose)
    except Exception as e:
        handle_cli_error(e, verbose=verbose)

    logger.info("Parsed screenplay", file=str(file), lines=len(document.lines))

    if json_output:
        # Pure JSON without ANSI escape codes
        print(JsonFormatter().format(document))
        return

    format_type = OutputFormat.TEXT if plain else OutputFormat.TABLE
    # The table is rendered at its own width, print it untouched
    print(LinesFormatter().format(list(document.lines), format_type))

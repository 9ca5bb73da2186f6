"""Check command: validate screenplay syntax without printing the lines."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.markup import escape

from screenplayer.cli.formatters import JsonFormatter
from screenplayer.cli.utils.error_handler import handle_cli_error
from screenplayer.config import get_logger
from screenplayer.config.settings import get_settings_for_cli
from screenplayer.parser import Err, Source, parse

logger = get_logger(__name__)
console = Console()


def check_command(
    files: Annotated[
        list[Path],
        typer.Argument(
            help="Screenplay files to check",
            exists=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ],
    json_output: Annotated[
        bool, typer.Option("--json", help="Output results as JSON")
    ] = False,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file (YAML, TOML, or JSON)",
        ),
    ] = None,
) -> None:
    """Check that screenplay files parse.

    Exits with code 1 when any file has a syntax error.
    """
    try:
        settings = get_settings_for_cli(config_file=config)
    except Exception as e:
        handle_cli_error(e)

    formatter = JsonFormatter()
    report: list[dict[str, Any]] = []

    for file in files:
        try:
            content = file.read_text(encoding=settings.source_encoding)
        except (UnicodeDecodeError, OSError) as e:
            logger.warning("Could not read screenplay", file=str(file), error=str(e))
            report.append({"file": str(file), "ok": False, "error": str(e)})
            _report_failure(file, str(e), json_output)
            continue

        result = parse(Source(content))
        if isinstance(result, Err):
            failure = result.error
            report.append(
                {
                    "file": str(file),
                    "ok": False,
                    "line": failure.line,
                    "offset": failure.offset,
                    "error": failure.message,
                }
            )
            _report_failure(
                file, failure.message, json_output, f":{failure.line}:{failure.offset}"
            )
        else:
            count = len(result.value)
            report.append({"file": str(file), "ok": True, "lines": count})
            if not json_output:
                console.print(
                    f"[green]✓[/green] {escape(str(file))} ({count} lines)",
                    highlight=False,
                    soft_wrap=True,
                )

    if json_output:
        print(formatter.format(report))

    if not all(entry["ok"] for entry in report):
        raise typer.Exit(1)


def _report_failure(
    file: Path, message: str, json_output: bool, position: str = ""
) -> None:
    if json_output:
        return
    console.print(
        f"[red]✗[/red] {escape(str(file))}{position} {escape(message)}",
        highlight=False,
        soft_wrap=True,
    )

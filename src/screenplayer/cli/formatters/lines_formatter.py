"""Table formatter for parsed document lines."""

from __future__ import annotations

import io

from rich.console import Console
from rich.table import Table

from screenplayer.cli.formatters.base import OutputFormat, OutputFormatter
from screenplayer.parser import (
    Definition,
    Description,
    HarmonyDialogue,
    Line,
    LineBreak,
    NestedSceneHeading,
    SimpleSceneHeading,
    SoloDialogue,
    Transition,
)


def _heading_summary(heading: SimpleSceneHeading) -> str:
    keyword = heading.tag.value.upper()
    return f"{keyword} - {heading.details}" if heading.details else keyword


def _solo_summary(solo: SoloDialogue) -> str:
    names = " & ".join(solo.character.names)
    if solo.character.annotation:
        names += f" ({solo.character.annotation})"
    parts = [
        f'"{c.content}"' if c.tag == "text" else f"({c.content})" for c in solo.contents
    ]
    return f"{names}: {' '.join(parts)}"


def summarize(line: Line) -> str:
    """One-line human readable summary of a parsed line."""
    node = line.line
    if isinstance(node, Definition):
        value = node.value if isinstance(node.value, str) else "; ".join(node.value)
        return f"{node.name} = {value}"
    if isinstance(node, SimpleSceneHeading):
        return _heading_summary(node)
    if isinstance(node, NestedSceneHeading):
        return " / ".join(_heading_summary(h) for h in node.headings)
    if isinstance(node, SoloDialogue):
        return _solo_summary(node)
    if isinstance(node, HarmonyDialogue):
        return " | ".join(_solo_summary(d) for d in node.dialogues)
    if isinstance(node, Transition):
        return node.name
    if isinstance(node, Description):
        return node.content
    if isinstance(node, LineBreak):
        return ""
    return repr(node)


class LinesFormatter(OutputFormatter[list[Line]]):
    """Render parsed lines as a Rich table."""

    def format(
        self, data: list[Line], format_type: OutputFormat = OutputFormat.TABLE
    ) -> str:
        """Format lines.

        Args:
            data: Parsed lines in document order
            format_type: TABLE for a Rich table, TEXT for plain rows

        Returns:
            Formatted string
        """
        if not data:
            return "No lines to display"

        if format_type == OutputFormat.TEXT:
            return "\n".join(
                f"{index}\t{line.tag.value}\t{summarize(line)}"
                for index, line in enumerate(data)
            )

        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Kind", style="cyan")
        table.add_column("Type", style="green")
        table.add_column("Content", no_wrap=False)

        for index, line in enumerate(data):
            variant = getattr(line.line, "tag", "-")
            table.add_row(
                str(index),
                line.tag.value,
                getattr(variant, "value", variant),
                summarize(line),
            )

        string_io = io.StringIO()
        temp_console = Console(file=string_io, force_terminal=False, width=120)
        temp_console.print(table)
        return string_io.getvalue()

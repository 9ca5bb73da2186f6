"""Top-level loop that turns a whole document into an ordered list of lines."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from screenplayer.parser.constructs import (
    CHARACTER,
    DEFINITION,
    LEFT_SQUARE_BRACKET,
    parse_action,
    parse_definition,
    parse_scene_heading,
    parse_transition,
)
from screenplayer.parser.dialogue import parse_dialogue
from screenplayer.parser.models import Line, LineKind
from screenplayer.parser.result import Err, Ok, Result
from screenplayer.parser.source import Source

ConstructParser = Callable[[Source], Result[tuple[Any, Source]]]

_DISPATCH: dict[str, tuple[LineKind, ConstructParser]] = {
    DEFINITION: (LineKind.DEFINITION, parse_definition),
    LEFT_SQUARE_BRACKET: (LineKind.SCENE_HEADING, parse_scene_heading),
    ">": (LineKind.TRANSITION, parse_transition),
}


def _as_line(
    kind: LineKind, parser: ConstructParser, source: Source
) -> Result[tuple[Line, Source]]:
    return parser(source).map(lambda parsed: (Line(kind, parsed[0]), parsed[1]))


def parse_line(source: Source) -> Result[tuple[Line, Source]]:
    """Pick a construct parser from the first character and wrap its result.

    A line starting with `@` that is not valid dialogue is kept as an action.
    """
    first = source.first
    if first == CHARACTER:
        return _as_line(LineKind.DIALOGUE, parse_dialogue, source).or_else(
            lambda _: _as_line(LineKind.ACTION, parse_action, source)
        )
    if first is not None and first in _DISPATCH:
        kind, parser = _DISPATCH[first]
        return _as_line(kind, parser, source)
    return _as_line(LineKind.ACTION, parse_action, source)


def parse(source: Source | str) -> Result[list[Line]]:
    """Parse a complete document.

    Args:
        source: Cursor at the start of the document, or the raw text

    Returns:
        Ok with every line in document order, or the first unrecoverable error
    """
    if isinstance(source, str):
        source = Source(source)

    lines: list[Line] = []
    cursor = source
    while cursor.chars:
        result = parse_line(cursor)
        if isinstance(result, Err):
            return result
        line, cursor = result.value
        lines.append(line)
    return Ok(lines)

"""Parsers for the single-line screenplay constructs.

Each parser takes a ``Source`` and returns ``Ok((node, advanced_source))`` or
an ``Err`` describing the first problem. None of them raise for malformed
input and none of them recover locally.
"""

from __future__ import annotations

from screenplayer.parser.models import (
    Action,
    Annotation,
    Character,
    Definition,
    Description,
    HeadingKind,
    LineBreak,
    NestedSceneHeading,
    SceneHeading,
    SimpleSceneHeading,
    Transition,
    Value,
)
from screenplayer.parser.result import Err, Ok, Result, error
from screenplayer.parser.source import Source

# Sigils
LEFT_BRACKET = "{"
RIGHT_BRACKET = "}"
LEFT_SQUARE_BRACKET = "["
RIGHT_SQUARE_BRACKET = "]"
LEFT_PARENTHESIS = "("
RIGHT_PARENTHESIS = ")"
ASSIGNMENT = "="
DEFINITION = "$"
CHARACTER = "@"
TRANSITION = ">>"
TRANSITION_END = ":"
LIST_SEPARATOR = ";"
HEADING_SEPARATOR = "/"
DETAILS_SEPARATOR = "-"

_HEADING_KEYWORDS = {
    "EXT": HeadingKind.EXTERIOR,
    "INT": HeadingKind.INTERIOR,
}


def describe(char: str | None) -> str:
    """Render a found character for error messages."""
    if char is None:
        return "undefined"
    if char == "\n":
        return "newline"
    return char


def unexpected(source: Source, expected: str) -> Err:
    """Error for a missing sigil at the cursor."""
    return error(
        source.line,
        source.offset,
        f"expected {expected}, but found {describe(source.first)}",
    )


def unterminated(source: Source, closing: str) -> Err:
    """Error for a literal whose closing token never appears."""
    return error(
        source.line,
        source.end_offset,
        f"expected {closing}, but found undefined",
    )


def parse_value(source: Source) -> Result[tuple[Value, Source]]:
    """Parse a `{...}` literal into a scalar or, with `;`, a list."""
    if source.first != LEFT_BRACKET:
        return unexpected(source, LEFT_BRACKET)

    close = source.chars.find(RIGHT_BRACKET)
    if close == -1:
        return unterminated(source, RIGHT_BRACKET)

    body = source.chars[1:close]
    rest = source.forward(close + 1)
    parts = body.split(LIST_SEPARATOR)
    if len(parts) == 1:
        return Ok((body.strip(), rest))
    return Ok(([part.strip() for part in parts], rest))


def parse_definition(source: Source) -> Result[tuple[Definition, Source]]:
    """Parse `${name}={value}`."""
    if source.first != DEFINITION:
        return unexpected(source, DEFINITION)

    result = parse_value(source.forward(1))
    if isinstance(result, Err):
        return result
    name, rest = result.value
    if isinstance(name, list):
        return error(source.line, source.offset, "variable can't be defined as list")

    rest = rest.trim_start()
    if rest.first != ASSIGNMENT:
        return unexpected(rest, ASSIGNMENT)

    result = parse_value(rest.forward(1).trim_start())
    if isinstance(result, Err):
        return result
    value, rest = result.value
    return Ok((Definition(name=name, value=value), rest))


def _parse_simple_heading(raw: str) -> SimpleSceneHeading:
    keyword, separator, details = raw.partition(DETAILS_SEPARATOR)
    kind = _HEADING_KEYWORDS.get(keyword.strip().upper(), HeadingKind.OTHER)
    return SimpleSceneHeading(
        tag=kind,
        details=details.strip() if separator else None,
    )


def parse_scene_heading(source: Source) -> Result[tuple[SceneHeading, Source]]:
    """Parse `[INT - details]`, or several headings joined by `/`."""
    if source.first != LEFT_SQUARE_BRACKET:
        return unexpected(source, LEFT_SQUARE_BRACKET)

    close = source.chars.find(RIGHT_SQUARE_BRACKET)
    if close == -1:
        return unterminated(source, RIGHT_SQUARE_BRACKET)

    rest = source.forward(close + 1)
    headings = [
        _parse_simple_heading(raw)
        for raw in source.chars[1:close].split(HEADING_SEPARATOR)
    ]
    if len(headings) == 1:
        return Ok((headings[0], rest))
    return Ok((NestedSceneHeading(headings=headings), rest))


def parse_annotation(source: Source) -> Result[tuple[Annotation, Source]]:
    """Parse `(...)`; the interior is returned untrimmed."""
    if source.first != LEFT_PARENTHESIS:
        return unexpected(source, LEFT_PARENTHESIS)

    close = source.chars.find(RIGHT_PARENTHESIS)
    if close == -1:
        return unterminated(source, RIGHT_PARENTHESIS)
    return Ok((source.chars[1:close], source.forward(close + 1)))


def parse_character(source: Source) -> Result[tuple[Character, Source]]:
    """Parse `@{name}` or `@{a; b}`, with an optional `(annotation)` right after."""
    if source.first != CHARACTER:
        return unexpected(source, CHARACTER)

    result = parse_value(source.forward(1))
    if isinstance(result, Err):
        return result
    value, rest = result.value
    names = [value] if isinstance(value, str) else value

    # A missing annotation is not an error
    annotation, rest = (
        parse_annotation(rest).or_else(lambda _: Ok((None, rest))).value
    )
    return Ok((Character(names=names, annotation=annotation), rest))


def parse_transition(source: Source) -> Result[tuple[Transition, Source]]:
    """Parse `>> NAME:`; the name keeps its colon."""
    if not source.chars.startswith(TRANSITION):
        found = source.chars[: len(TRANSITION)].replace("\n", " ").rstrip()
        return error(
            source.line,
            source.offset,
            f"expected {TRANSITION}, but found {found or 'undefined'}",
        )

    line_end = source.chars.find("\n")
    if line_end == -1:
        line_end = len(source.chars)
    colon = source.chars.find(TRANSITION_END, len(TRANSITION), line_end)
    if colon == -1:
        at_end = source.forward(line_end)
        return unexpected(at_end, TRANSITION_END)

    name = source.chars[len(TRANSITION) : colon + 1].strip()
    return Ok((Transition(name=name), source.forward(colon + 1)))


def parse_action(source: Source) -> Result[tuple[Action, Source]]:
    """Parse a bare newline into a linebreak, anything else up to it as text."""
    if not source.chars:
        return unexpected(source, "line")

    line_end = source.chars.find("\n")
    if line_end == -1:
        line_end = len(source.chars)
    if line_end == 0:
        return Ok((LineBreak(), source.forward(1)))
    return Ok((Description(content=source.chars[:line_end]), source.forward(line_end)))

"""Dialogue parsing: spoken contents, solo lines and `&`-joined harmonies."""

from __future__ import annotations

from screenplayer.parser.constructs import describe, parse_annotation, parse_character
from screenplayer.parser.models import (
    Dialogue,
    DialogueContent,
    HarmonyDialogue,
    SoloDialogue,
)
from screenplayer.parser.result import Err, Ok, Result, error
from screenplayer.parser.source import Source

QUOTE = '"'
HARMONY = "&"


def parse_dialogue_contents(
    source: Source,
) -> Result[tuple[list[DialogueContent], Source]]:
    """Collect quoted texts and annotations until the line stops providing them.

    Never reads past a newline. The returned cursor sits on the first
    character that is neither a quote nor an opening parenthesis.
    """
    contents: list[DialogueContent] = []
    cursor = source.trim_start(multiline=False)

    while True:
        first = cursor.first
        if first == QUOTE:
            close = cursor.chars.find(QUOTE, 1)
            if close == -1:
                return error(
                    cursor.line,
                    cursor.end_offset,
                    f"expected {QUOTE}, but found undefined",
                )
            contents.append(DialogueContent.text(cursor.chars[1:close]))
            cursor = cursor.forward(close + 1)
        elif first == "(":
            result = parse_annotation(cursor)
            if isinstance(result, Err):
                return result
            annotation, cursor = result.value
            contents.append(DialogueContent.annotation(annotation))
        else:
            return Ok((contents, cursor))

        if cursor.first == "\n":
            return Ok((contents, cursor))
        cursor = cursor.trim_start(multiline=False)


def parse_solo_dialogue(source: Source) -> Result[tuple[SoloDialogue, Source]]:
    """Parse one character followed by at least one content item."""
    result = parse_character(source)
    if isinstance(result, Err):
        return result
    character, rest = result.value

    contents_result = parse_dialogue_contents(rest)
    if isinstance(contents_result, Err):
        return contents_result
    contents, rest = contents_result.value
    if not contents:
        return error(
            rest.line,
            rest.offset,
            f"expected {QUOTE} or (, but found {describe(rest.first)}",
        )
    return Ok((SoloDialogue(character=character, contents=contents), rest))


def _joiner_ahead(cursor: Source) -> Source | None:
    """Cursor on the `&` that continues a harmony, if one follows.

    The joiner may sit on the same line or start the next one. A blank line
    ends the dialogue, so an action line beginning with `&` stays an action.
    """
    ahead = cursor.trim_start(multiline=False)
    if ahead.first == "\n":
        ahead = ahead.forward(1).trim_start(multiline=False)
    return ahead if ahead.first == HARMONY else None


def parse_dialogue(source: Source) -> Result[tuple[Dialogue, Source]]:
    """Parse a solo dialogue, or a harmony when solos are joined by `&`.

    Whitespace after `&`, newlines included, is skipped. Speaking order
    follows the source.
    """
    previous: list[SoloDialogue] = []
    cursor = source

    while True:
        result = parse_solo_dialogue(cursor)
        if isinstance(result, Err):
            return result
        solo, cursor = result.value

        joiner = _joiner_ahead(cursor)
        if joiner is None:
            break
        previous.append(solo)
        cursor = joiner.forward(1).trim_start()

    if not previous:
        return Ok((solo, cursor))
    return Ok((HarmonyDialogue(dialogues=[*previous, solo]), cursor))

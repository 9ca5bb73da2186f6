"""Screenplay markup parser."""

from __future__ import annotations

from .constructs import (
    parse_action,
    parse_annotation,
    parse_character,
    parse_definition,
    parse_scene_heading,
    parse_transition,
    parse_value,
)
from .dialogue import parse_dialogue, parse_dialogue_contents, parse_solo_dialogue
from .dispatch import parse, parse_line
from .models import (
    Character,
    ContentKind,
    Definition,
    Description,
    DialogueContent,
    HarmonyDialogue,
    HeadingKind,
    Line,
    LineBreak,
    LineKind,
    NestedSceneHeading,
    SimpleSceneHeading,
    SoloDialogue,
    Transition,
)
from .result import Err, Ok, ParseError
from .screenplay_parser import Document, ScreenplayParser
from .source import Source

__all__ = [
    "Character",
    "ContentKind",
    "Definition",
    "Description",
    "DialogueContent",
    "Document",
    "Err",
    "HarmonyDialogue",
    "HeadingKind",
    "Line",
    "LineBreak",
    "LineKind",
    "NestedSceneHeading",
    "Ok",
    "ParseError",
    "ScreenplayParser",
    "SimpleSceneHeading",
    "SoloDialogue",
    "Source",
    "Transition",
    "parse",
    "parse_action",
    "parse_annotation",
    "parse_character",
    "parse_definition",
    "parse_dialogue",
    "parse_dialogue_contents",
    "parse_line",
    "parse_scene_heading",
    "parse_solo_dialogue",
    "parse_transition",
    "parse_value",
]

"""Data models for parsed screenplay documents."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Union

# A `{...}` literal: one trimmed string, or a list when it held `;`
Value = Union[str, list[str]]

Annotation = str


@dataclass(frozen=True)
class Definition:
    """A `$`-prefixed key/value pair."""

    name: str
    value: Value

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "value": self.value}


class HeadingKind(str, Enum):
    """Location type of a scene heading."""

    INTERIOR = "interior"
    EXTERIOR = "exterior"
    OTHER = "other"


@dataclass(frozen=True)
class SimpleSceneHeading:
    """One `KEYWORD - details` heading."""

    tag: HeadingKind
    details: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"tag": self.tag.value}
        if self.details is not None:
            data["details"] = self.details
        return data


@dataclass(frozen=True)
class NestedSceneHeading:
    """Several headings combined with `/`, in source order."""

    headings: list[SimpleSceneHeading]

    tag: ClassVar[str] = "nested"

    def to_dict(self) -> dict[str, Any]:
        return {"tag": self.tag, "headings": [h.to_dict() for h in self.headings]}


SceneHeading = Union[SimpleSceneHeading, NestedSceneHeading]


@dataclass(frozen=True)
class Character:
    """One character, or a group of characters addressed together."""

    names: list[str]
    annotation: Annotation | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"names": list(self.names)}
        if self.annotation is not None:
            data["annotation"] = self.annotation
        return data


class ContentKind(str, Enum):
    TEXT = "text"
    ANNOTATION = "annotation"


@dataclass(frozen=True)
class DialogueContent:
    """A quoted spoken line or a parenthetical direction."""

    tag: ContentKind
    content: str

    @classmethod
    def text(cls, content: str) -> DialogueContent:
        return cls(tag=ContentKind.TEXT, content=content)

    @classmethod
    def annotation(cls, content: str) -> DialogueContent:
        return cls(tag=ContentKind.ANNOTATION, content=content)

    def to_dict(self) -> dict[str, Any]:
        return {"tag": self.tag.value, "content": self.content}


@dataclass(frozen=True)
class SoloDialogue:
    """Dialogue spoken by one character or character group."""

    character: Character
    contents: list[DialogueContent]

    tag: ClassVar[str] = "solo"

    def to_dict(self) -> dict[str, Any]:
        return {
            "tag": self.tag,
            "character": self.character.to_dict(),
            "contents": [c.to_dict() for c in self.contents],
        }


@dataclass(frozen=True)
class HarmonyDialogue:
    """Two or more solo dialogues spoken at the same time, joined by `&`."""

    dialogues: list[SoloDialogue]

    tag: ClassVar[str] = "harmony"

    def to_dict(self) -> dict[str, Any]:
        return {"tag": self.tag, "dialogues": [d.to_dict() for d in self.dialogues]}


Dialogue = Union[SoloDialogue, HarmonyDialogue]


@dataclass(frozen=True)
class Transition:
    """Text between `>>` and the terminating colon."""

    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name}


@dataclass(frozen=True)
class LineBreak:
    """A bare empty line."""

    tag: ClassVar[str] = "linebreak"

    def to_dict(self) -> dict[str, Any]:
        return {"tag": self.tag}


@dataclass(frozen=True)
class Description:
    """A free-text action line, kept verbatim."""

    content: str

    tag: ClassVar[str] = "description"

    def to_dict(self) -> dict[str, Any]:
        return {"tag": self.tag, "content": self.content}


Action = Union[LineBreak, Description]


class LineKind(str, Enum):
    DEFINITION = "definition"
    SCENE_HEADING = "sceneheading"
    DIALOGUE = "dialogue"
    TRANSITION = "transition"
    ACTION = "action"


@dataclass(frozen=True)
class Line:
    """One construct of a document, tagged with its kind."""

    tag: LineKind
    line: Definition | SceneHeading | Dialogue | Transition | Action

    def to_dict(self) -> dict[str, Any]:
        return {"tag": self.tag.value, "line": self.line.to_dict()}

"""High-level screenplay parser that reads files and raises on failure."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from screenplayer.config import ScreenplayerSettings, get_logger, get_settings
from screenplayer.exceptions import (
    DocumentParseError,
    ScreenplayerFileNotFoundError,
)
from screenplayer.parser.dispatch import parse
from screenplayer.parser.models import (
    Definition,
    Dialogue,
    HarmonyDialogue,
    Line,
    LineKind,
    SceneHeading,
    SoloDialogue,
    Value,
)
from screenplayer.parser.result import Err
from screenplayer.parser.source import Source

logger = get_logger(__name__)


@dataclass(frozen=True)
class Document:
    """A parsed screenplay."""

    lines: tuple[Line, ...]
    source_file: str | None = None

    def _of_kind(self, kind: LineKind) -> list:
        return [line.line for line in self.lines if line.tag == kind]

    @property
    def definitions(self) -> dict[str, Value]:
        """Definitions by name; a later definition overrides an earlier one."""
        definitions: list[Definition] = self._of_kind(LineKind.DEFINITION)
        return {d.name: d.value for d in definitions}

    @property
    def scene_headings(self) -> list[SceneHeading]:
        return self._of_kind(LineKind.SCENE_HEADING)

    @property
    def dialogues(self) -> list[Dialogue]:
        return self._of_kind(LineKind.DIALOGUE)

    @property
    def characters(self) -> list[str]:
        """Every speaking character name, in order of first appearance."""
        names: dict[str, None] = {}
        for dialogue in self.dialogues:
            solos: list[SoloDialogue] = (
                dialogue.dialogues
                if isinstance(dialogue, HarmonyDialogue)
                else [dialogue]
            )
            for solo in solos:
                names.update(dict.fromkeys(solo.character.names))
        return list(names)

    def to_dicts(self) -> list[dict]:
        return [line.to_dict() for line in self.lines]


class ScreenplayParser:
    """Parse screenplay markup into a Document."""

    def __init__(self, settings: ScreenplayerSettings | None = None) -> None:
        """Initialize the parser.

        Args:
            settings: Settings to use, the global settings when omitted
        """
        self.settings = settings or get_settings()

    def parse(self, content: str, source_file: str | None = None) -> Document:
        """Parse screenplay text.

        Args:
            content: Raw document text
            source_file: Where the text came from, reported in errors

        Returns:
            Parsed Document

        Raises:
            DocumentParseError: If a construct is malformed
        """
        result = parse(Source(content))
        if isinstance(result, Err):
            failure = result.error
            logger.warning(
                "Screenplay parse failed",
                file=source_file,
                line=failure.line,
                offset=failure.offset,
                reason=failure.message,
            )
            raise DocumentParseError(
                message=failure.message,
                line=failure.line,
                offset=failure.offset,
                source_file=source_file,
            )

        document = Document(lines=tuple(result.value), source_file=source_file)
        logger.debug(
            "Parsed screenplay",
            file=source_file,
            lines=len(document.lines),
        )
        return document

    def parse_file(self, file_path: Path) -> Document:
        """Parse a screenplay file.

        Args:
            file_path: Path to the screenplay file

        Returns:
            Parsed Document

        Raises:
            ScreenplayerFileNotFoundError: If the file does not exist
            DocumentParseError: If a construct is malformed
        """
        if not file_path.is_file():
            raise ScreenplayerFileNotFoundError(
                message=f"Screenplay file not found: {file_path}",
                hint="Check the path and try again.",
                details={"file": str(file_path), "current_dir": str(Path.cwd())},
            )

        logger.debug(f"Parsing screenplay file: {file_path}")
        content = file_path.read_text(encoding=self.settings.source_encoding)
        return self.parse(content, source_file=str(file_path))

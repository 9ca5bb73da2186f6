"""Tests for the ScreenplayParser collaborator and Document accessors."""

import pytest

from screenplayer.config import ScreenplayerSettings
from screenplayer.exceptions import DocumentParseError, ScreenplayerFileNotFoundError
from screenplayer.parser import (
    Document,
    LineKind,
    NestedSceneHeading,
    ScreenplayParser,
)


@pytest.fixture
def parser() -> ScreenplayParser:
    return ScreenplayParser(ScreenplayerSettings(log_level="ERROR"))


class TestScreenplayParser:
    """Test parsing text and files."""

    def test_parse_returns_document(self, parser, screenplay_text):
        """Parsed lines are stored in order."""
        document = parser.parse(screenplay_text)

        assert isinstance(document, Document)
        assert len(document.lines) == 20
        assert document.lines[0].tag == LineKind.DEFINITION
        assert document.source_file is None

    def test_parse_error_raises_with_position(self, parser):
        """A malformed construct raises DocumentParseError."""
        with pytest.raises(DocumentParseError) as exc_info:
            parser.parse("${a}={b}\n${c}")

        error = exc_info.value
        assert error.message == "expected =, but found undefined"
        assert error.line == 1
        assert error.offset == len("${a}={b}\n${c}")
        assert "Hint:" in str(error)

    def test_parse_file(self, parser, fixture_path):
        """Files are read and their path is kept."""
        document = parser.parse_file(fixture_path)

        assert document.source_file == str(fixture_path)
        assert document.lines[-2].line.content == "A new world started."

    def test_parse_file_error_mentions_file(self, parser, tmp_path):
        """Errors raised for files include the file in their details."""
        broken = tmp_path / "broken.scp"
        broken.write_text("[EXT - nowhere\n", encoding="utf-8")

        with pytest.raises(DocumentParseError) as exc_info:
            parser.parse_file(broken)

        assert exc_info.value.source_file == str(broken)
        assert exc_info.value.details["file"] == str(broken)

    def test_missing_file(self, parser, tmp_path):
        """A missing file has its own error."""
        with pytest.raises(ScreenplayerFileNotFoundError):
            parser.parse_file(tmp_path / "absent.scp")

    def test_parse_file_uses_configured_encoding(self, tmp_path):
        """The source encoding comes from the settings."""
        path = tmp_path / "latin.scp"
        path.write_bytes('@{Zoé} "Ça va"'.encode("latin-1"))
        parser = ScreenplayParser(ScreenplayerSettings(source_encoding="latin-1"))

        document = parser.parse_file(path)

        assert document.characters == ["Zoé"]


class TestDocument:
    """Test Document convenience accessors."""

    def test_definitions(self, parser, screenplay_text):
        """Definitions are exposed by name."""
        document = parser.parse(screenplay_text)

        assert document.definitions == {
            "Title": "Document of ScreenPlay",
            "Contact": "https://github.com/screenplayer/FSharp.ScreenPlayer",
            "Characters": ["John", "Henry"],
        }

    def test_later_definition_wins(self, parser):
        """Redefining a name keeps the last value."""
        document = parser.parse("${a}={1}\n${a}={2}")

        assert document.definitions == {"a": "2"}

    def test_scene_headings_and_dialogues(self, parser, screenplay_text):
        """Lines can be filtered by kind."""
        document = parser.parse(screenplay_text)

        assert len(document.scene_headings) == 1
        assert isinstance(document.scene_headings[0], NestedSceneHeading)
        assert len(document.dialogues) == 4

    def test_characters_in_order_of_appearance(self, parser, screenplay_text):
        """Speaking characters are listed once, harmony members included."""
        document = parser.parse(screenplay_text)

        assert document.characters == ["John", "Henry"]

    def test_to_dicts(self, parser):
        """The document serializes line by line."""
        document = parser.parse(">> CUT TO:")

        assert document.to_dicts() == [
            {"tag": "transition", "line": {"name": "CUT TO:"}}
        ]

"""Tests for the Source cursor."""

import pytest

from screenplayer.parser import Source


class TestForward:
    """Test advancing the cursor."""

    def test_forward_drops_prefix_and_moves_offset(self):
        """Forward removes characters and adds their count to the offset."""
        source = Source("hello world", offset=3)
        moved = source.forward(6)

        assert moved.chars == "world"
        assert moved.offset == 9
        assert moved.line == 0

    def test_forward_does_not_mutate_original(self):
        """The original cursor is left untouched."""
        source = Source("abc")
        source.forward(2)

        assert source.chars == "abc"
        assert source.offset == 0

    def test_forward_counts_consumed_newlines(self):
        """Lines advance by the number of newlines consumed."""
        source = Source("a\nb\nc")

        assert source.forward(2).line == 1
        assert source.forward(4).line == 2
        assert source.forward(1).line == 0

    def test_forward_past_end_stops_at_end(self):
        """Moving beyond the end leaves an empty cursor at the end offset."""
        moved = Source("ab").forward(5)

        assert moved.chars == ""
        assert moved.offset == 2

    def test_forward_negative_length_is_rejected(self):
        """A negative length is a programming error."""
        with pytest.raises(ValueError, match="backwards"):
            Source("abc").forward(-1)


class TestTrimStart:
    """Test whitespace skipping."""

    def test_trim_skips_all_whitespace(self):
        """Default trimming crosses newlines and counts them."""
        trimmed = Source(" \t\n  x").trim_start()

        assert trimmed.chars == "x"
        assert trimmed.offset == 5
        assert trimmed.line == 1

    def test_inline_trim_stops_at_newline(self):
        """Inline trimming never consumes a newline."""
        trimmed = Source("  \t\nx").trim_start(multiline=False)

        assert trimmed.chars == "\nx"
        assert trimmed.offset == 3
        assert trimmed.line == 0

    def test_trim_without_whitespace_is_a_no_op(self):
        """Nothing is consumed when there is no leading whitespace."""
        source = Source("x  ", offset=4, line=2)

        assert source.trim_start() == source


class TestProperties:
    """Test derived cursor properties."""

    def test_first_character(self):
        """First returns the next character or None when exhausted."""
        assert Source("abc").first == "a"
        assert Source("").first is None

    def test_end_offset(self):
        """End offset is the absolute position after the last character."""
        assert Source("abc", offset=10).end_offset == 13

"""Immutable cursor over the text that is left to parse."""

from __future__ import annotations

from dataclasses import dataclass

# Whitespace that never ends a screenplay line
INLINE_WHITESPACE = " \t\r\f\v"


@dataclass(frozen=True)
class Source:
    """Remaining input plus its position in the original document.

    ``offset`` is the absolute index of ``chars[0]`` and ``line`` the 0-based
    line it sits on. Every step returns a new ``Source``.
    """

    chars: str
    line: int = 0
    offset: int = 0

    @property
    def first(self) -> str | None:
        """Next character, or None at the end of input."""
        return self.chars[0] if self.chars else None

    @property
    def end_offset(self) -> int:
        """Absolute offset just past the last character."""
        return self.offset + len(self.chars)

    def forward(self, length: int) -> Source:
        """Consume ``length`` characters.

        Args:
            length: Number of characters to drop from the front

        Returns:
            Advanced cursor; ``line`` counts the newlines that were consumed
        """
        if length < 0:
            raise ValueError(f"Cannot move a source backwards by {length}")
        consumed = self.chars[:length]
        return Source(
            chars=self.chars[length:],
            line=self.line + consumed.count("\n"),
            offset=self.offset + len(consumed),
        )

    def trim_start(self, multiline: bool = True) -> Source:
        """Skip leading whitespace.

        Args:
            multiline: Also skip newlines when True, otherwise stop at them

        Returns:
            Cursor positioned at the first non-whitespace character
        """
        if multiline:
            stripped = self.chars.lstrip()
        else:
            stripped = self.chars.lstrip(INLINE_WHITESPACE)
        return self.forward(len(self.chars) - len(stripped))

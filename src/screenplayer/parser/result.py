"""Success/failure values returned by every construct parser."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from screenplayer.exceptions import DocumentParseError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class ParseError:
    """Position-annotated description of a malformed construct."""

    line: int
    offset: int
    message: str


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful parse carrying its value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def map(self, fn: Callable[[T], U]) -> Ok[U]:
        """Transform the carried value."""
        return Ok(fn(self.value))

    def or_else(
        self,
        alternative: Callable[[ParseError], Any],  # noqa: ARG002
    ) -> Ok[T]:
        """Keep this success; ``alternative`` is only tried after a failure."""
        return self


@dataclass(frozen=True)
class Err:
    """Failed parse carrying a ParseError."""

    error: ParseError

    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> Any:
        """Raise the failure as a DocumentParseError.

        Raises:
            DocumentParseError: Always
        """
        raise DocumentParseError(
            message=self.error.message,
            line=self.error.line,
            offset=self.error.offset,
        )

    def map(self, fn: Callable[[Any], Any]) -> Err:  # noqa: ARG002
        return self

    def or_else(self, alternative: Callable[[ParseError], Result[T]]) -> Result[T]:
        """Try ``alternative`` in place of this failure.

        Args:
            alternative: Called with the error, returns the replacement result

        Returns:
            Whatever the alternative produced
        """
        return alternative(self.error)


Result = Union[Ok[T], Err]


def ok(value: T) -> Ok[T]:
    return Ok(value)


def error(line: int, offset: int, message: str) -> Err:
    return Err(ParseError(line=line, offset=offset, message=message))

"""Custom exception hierarchy for Screenplayer with helpful error messages."""

from __future__ import annotations

from typing import Any


class ScreenplayerError(Exception):
    """Base exception with helpful formatting for all Screenplayer errors.

    Provides structured error messages with hints and details to help users
    understand and fix problems.
    """

    def __init__(
        self,
        message: str,
        hint: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize exception with structured error information.

        Args:
            message: Primary error message describing what went wrong
            hint: Optional hint suggesting how to fix the problem
            details: Optional dictionary with additional debugging information
        """
        self.message = message
        self.hint = hint
        self.details = details
        super().__init__(self.format_error())

    def format_error(self) -> str:
        """Format the error message with hint and details.

        Returns:
            Formatted error string with all available information
        """
        output = f"Error: {self.message}"
        if self.hint:
            output += f"\nHint: {self.hint}"
        if self.details:
            details_str = "\n".join(
                f"  {key}: {value}" for key, value in self.details.items()
            )
            output += f"\nDetails:\n{details_str}"
        return output


class ConfigurationError(ScreenplayerError):
    """Configuration errors including invalid settings and missing config files."""

    pass


class DocumentParseError(ScreenplayerError):
    """A screenplay document could not be parsed.

    Raised at the boundary of the parsing core, which itself reports failures
    as values. ``line`` and ``offset`` locate the first malformed construct.
    """

    def __init__(
        self,
        message: str,
        line: int,
        offset: int,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with the failing position.

        Args:
            message: Parser message, e.g. ``expected }, but found undefined``
            line: 0-based line of the failing construct
            offset: Absolute character offset of the failure
            source_file: File the document was read from, if any
        """
        self.line = line
        self.offset = offset
        self.source_file = source_file
        details: dict[str, Any] = {"line": line, "offset": offset}
        if source_file:
            details["file"] = source_file
        super().__init__(
            message=message,
            hint="Check for unclosed brackets, quotes or a missing sigil.",
            details=details,
        )


class ScreenplayerFileNotFoundError(ScreenplayerError):
    """File not found errors with helpful path information."""

    pass


def check_config_keys(config: dict[str, Any]) -> None:
    """Check for common configuration mistakes.

    Args:
        config: Configuration dictionary to validate

    Raises:
        ConfigurationError: With hints about correct configuration keys
    """
    wrong_keys = {
        "level": "log_level",
        "format": "log_format",
        "encoding": "source_encoding",
    }

    for wrong, correct in wrong_keys.items():
        if wrong in config:
            raise ConfigurationError(
                message=f"Invalid configuration key '{wrong}'",
                hint=f"Use '{correct}' instead of '{wrong}'",
                details={
                    "found_keys": list(config.keys()),
                    "invalid_key": wrong,
                    "correct_key": correct,
                },
            )

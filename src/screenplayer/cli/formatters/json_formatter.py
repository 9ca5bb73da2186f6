"""JSON output formatter for CLI."""

from __future__ import annotations

import json
from typing import Any

from screenplayer.cli.formatters.base import OutputFormat, OutputFormatter
from screenplayer.exceptions import DocumentParseError
from screenplayer.parser import Document, ParseError


class JsonFormatter(OutputFormatter[Any]):
    """JSON formatter for parsed documents and generic data."""

    def format(
        self,
        data: Any,
        format_type: OutputFormat = OutputFormat.JSON,  # noqa: ARG002
    ) -> str:
        """Format data as JSON.

        Args:
            data: Document, list of lines, or plain data
            format_type: Output format type (ignored, always JSON)

        Returns:
            JSON string
        """
        if isinstance(data, Document):
            return json.dumps(data.to_dicts(), indent=2, ensure_ascii=False)
        if hasattr(data, "to_dict"):
            return json.dumps(data.to_dict(), indent=2, ensure_ascii=False)
        if isinstance(data, list | tuple):
            items = [
                item.to_dict() if hasattr(item, "to_dict") else item for item in data
            ]
            return json.dumps(items, default=str, indent=2, ensure_ascii=False)
        return json.dumps(data, default=str, indent=2, ensure_ascii=False)

    def format_parse_error(
        self, error: ParseError | DocumentParseError, file: str | None = None
    ) -> str:
        """Format a syntax error with its position.

        Args:
            error: Error returned by the parser or raised by ScreenplayParser
            file: File that was parsed

        Returns:
            JSON string
        """
        response = {
            "success": False,
            "error": error.message,
            "line": error.line,
            "offset": error.offset,
            "file": file,
        }
        return json.dumps(response, indent=2, ensure_ascii=False)

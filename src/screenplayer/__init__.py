"""Screenplayer: a parser for sigil-based screenplay markup.

Documents are made of definitions (`${name}={value}`), scene headings
(`[INT - details]`), dialogue (`@{name} "text" (direction)`), transitions
(`>> CUT TO:`) and free-form action lines.
"""

from .config import ScreenplayerSettings, get_logger, get_settings
from .exceptions import DocumentParseError, ScreenplayerError
from .parser import Document, ScreenplayParser, Source, parse

__version__ = "0.1.0"
__license__ = "MIT"

__all__ = [
    "Document",
    "DocumentParseError",
    "ScreenplayParser",
    "ScreenplayerError",
    "ScreenplayerSettings",
    "Source",
    "__version__",
    "get_logger",
    "get_settings",
    "parse",
]

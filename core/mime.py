# ============================================================================
# MIME TYPES
# ============================================================================
# EPOCH: 1 - RENDERER DISPATCH
# STATUS: Core - Content type constants and lookup
# PURPOSE: Name the content types renderers assign to responses
# CREATED: 19 OCT 2026
# ============================================================================
"""
MIME Types

Content type constants for the built-in renderers, plus a small
symbol -> content type table for custom renderers (e.g. "csv").

This is a lookup table only. Content negotiation (Accept headers,
format suffixes) belongs to the hosting framework.
"""

import logging
from enum import Enum
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class MimeType(str, Enum):
    """Content types used by the built-in renderers."""
    HTML = "text/html"
    TEXT = "text/plain"
    JS = "text/javascript"
    JSON = "application/json"
    XML = "application/xml"
    CSV = "text/csv"

    def __str__(self) -> str:
        return self.value


class MimeTypes:
    """Symbol -> content type table."""

    def __init__(self):
        self._types: Dict[str, str] = {
            "html": MimeType.HTML.value,
            "text": MimeType.TEXT.value,
            "js": MimeType.JS.value,
            "json": MimeType.JSON.value,
            "xml": MimeType.XML.value,
            "csv": MimeType.CSV.value,
        }

    def register(self, symbol: str, content_type: str) -> None:
        """Register (or replace) the content type for a symbol."""
        if symbol in self._types and self._types[symbol] != content_type:
            logger.warning(
                f"Overwriting mime type: {symbol} "
                f"({self._types[symbol]} -> {content_type})"
            )
        self._types[symbol] = content_type

    def lookup(self, symbol: str) -> Optional[str]:
        """Get the content type for a symbol, or None."""
        return self._types.get(symbol)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._types


_mime_types: Optional[MimeTypes] = None


def get_mime_types() -> MimeTypes:
    """Get the shared mime type table."""
    global _mime_types
    if _mime_types is None:
        _mime_types = MimeTypes()
    return _mime_types


__all__ = [
    "MimeType",
    "MimeTypes",
    "get_mime_types",
]

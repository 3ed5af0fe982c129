# ============================================================================
# CORE MODULE
# ============================================================================
# EPOCH: 1 - RENDERER DISPATCH
# STATUS: Core module initialization
# PURPOSE: Configuration, logging and mime type utilities
# CREATED: 19 OCT 2026
# ============================================================================

from core.mime import MimeType, MimeTypes, get_mime_types

__all__ = [
    "MimeType",
    "MimeTypes",
    "get_mime_types",
]

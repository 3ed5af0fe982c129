# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================
# EPOCH: 1 - RENDERER DISPATCH
# STATUS: Core - Default configuration values
# PURPOSE: Centralized defaults for rendering and the HTTP server
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Defaults

Provides defaults for response rendering and for the hosting server.
These can be overridden via environment variables.

Design:
- Immutable dataclasses for defaults
- Environment variable overrides
- Type-safe access
"""

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


@dataclass(frozen=True)
class RenderingDefaults:
    """
    Defaults for response rendering.

    Controls fallback content type and JSON encoding.
    """
    # Used when neither a renderer nor the action set a content type
    default_content_type: str = "text/html"
    charset: str = "utf-8"

    # JSON encoding: compact output, e.g. {"a":1}
    json_separators: Tuple[str, str] = (",", ":")
    json_ensure_ascii: bool = False

    # Register json/js/xml/update into the shared registry on first use
    auto_register_builtins: bool = True

    @classmethod
    def from_env(cls) -> "RenderingDefaults":
        """Create from environment variables."""
        return cls(
            default_content_type=os.getenv("RENDER_DEFAULT_CONTENT_TYPE", "text/html"),
            charset=os.getenv("RENDER_CHARSET", "utf-8"),
            json_ensure_ascii=_env_flag("RENDER_JSON_ENSURE_ASCII", "false"),
            auto_register_builtins=_env_flag("RENDERERS_AUTO_BUILTINS", "true"),
        )


@dataclass(frozen=True)
class ServerDefaults:
    """
    Defaults for the hosting FastAPI server.
    """
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    log_level: str = "INFO"
    log_json: bool = False

    api_prefix: str = "/api/v1"

    @classmethod
    def from_env(cls) -> "ServerDefaults":
        """Create from environment variables."""
        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", 8000)),
            reload=_env_flag("RELOAD", "false"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_json=os.getenv("LOG_FORMAT", "").lower() == "json",
            api_prefix=os.getenv("API_PREFIX", "/api/v1"),
        )


# ============================================================================
# GLOBAL DEFAULTS INSTANCE
# ============================================================================

@dataclass
class Defaults:
    """Container for all default configurations."""
    rendering: RenderingDefaults = field(default_factory=RenderingDefaults)
    server: ServerDefaults = field(default_factory=ServerDefaults)

    @classmethod
    def from_env(cls) -> "Defaults":
        """Create all defaults from environment variables."""
        return cls(
            rendering=RenderingDefaults.from_env(),
            server=ServerDefaults.from_env(),
        )


_defaults: Optional[Defaults] = None


def get_defaults() -> Defaults:
    """Get global defaults instance."""
    global _defaults
    if _defaults is None:
        _defaults = Defaults.from_env()
    return _defaults


def reset_defaults() -> None:
    """Reset defaults (for testing)."""
    global _defaults
    _defaults = None


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "RenderingDefaults",
    "ServerDefaults",
    "Defaults",
    "get_defaults",
    "reset_defaults",
]

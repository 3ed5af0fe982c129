# ============================================================================
# RENDERER REGISTRY
# ============================================================================
# EPOCH: 1 - RENDERER DISPATCH
# STATUS: Core - Renderer registration and lookup
# PURPOSE: Catalog of named renderers shared by all controllers
# CREATED: 19 OCT 2026
# ============================================================================
"""
Renderer Registry

Central catalog of renderers. A renderer is a named handler that turns a
value plus the leftover render options into a response body:

    handler(controller, value, options) -> body

Controllers opt into a subset of the catalog with ``use_renderers`` and
dispatch ``render(json=...)`` style calls against it.

Design:
- Explicit registry object; one shared instance via get_registry()
- Last registration for a name wins (no duplicate error)
- Entries are never removed (clear() exists for tests)
- Writes are serialized by a lock and publish a fresh dict;
  readers never lock
- Registration does not touch controller classes
"""

import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional

from core.config import get_defaults
from core.logging import ComponentType, get_logger

logger = get_logger(__name__, ComponentType.RENDERER)


# Renderer function type: (controller, value, options) -> body
RendererHandler = Callable[[Any, Any, Dict[str, Any]], Any]


# ============================================================================
# ENTRIES
# ============================================================================

@dataclass(frozen=True)
class RendererEntry:
    """A registered renderer: its name and the callable that renders it."""
    name: str
    handler: RendererHandler
    description: str = ""
    registered_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    def __call__(self, controller: Any, value: Any, options: Dict[str, Any]) -> Any:
        return self.handler(controller, value, options)

    def to_dict(self) -> Dict[str, Any]:
        """Metadata view used by the API."""
        return {
            "name": self.name,
            "description": self.description,
            "function": getattr(self.handler, "__name__", repr(self.handler)),
            "module": getattr(self.handler, "__module__", None) or "",
            "registered_at": self.registered_at,
        }


# ============================================================================
# EXCEPTIONS
# ============================================================================

class RendererError(Exception):
    """Base exception for renderer errors."""
    pass


class UnknownRendererError(RendererError):
    """Raised when a renderer name is not in the catalog."""
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown renderer: {name}")


# ============================================================================
# REGISTRY
# ============================================================================

class RendererRegistry:
    """
    Catalog of renderers keyed by name, in registration order.

    Safe to read from request threads while bootstrap code is still
    registering: every write replaces the internal dict wholesale.
    """

    def __init__(self):
        self._entries: Dict[str, RendererEntry] = {}
        self._lock = threading.Lock()

    def register(
        self,
        name: str,
        handler: RendererHandler,
        *,
        description: str = "",
    ) -> RendererEntry:
        """
        Add a renderer, replacing any previous one with the same name.

        A replaced name keeps its original position in the catalog.

        Args:
            name: Renderer name, the keyword passed to render()
            handler: Callable taking (controller, value, options)
            description: Human-readable description

        Returns:
            The new RendererEntry
        """
        if not isinstance(name, str) or not name:
            raise ValueError(f"Renderer name must be a non-empty string, got {name!r}")
        if not callable(handler):
            raise TypeError(f"Renderer handler for {name!r} is not callable")

        entry = RendererEntry(name=name, handler=handler, description=description)

        with self._lock:
            entries = dict(self._entries)
            replaced = name in entries
            entries[name] = entry
            self._entries = entries

        if replaced:
            logger.debug(f"Replaced renderer: {name}")
        else:
            info = entry.to_dict()
            logger.debug(f"Registered renderer: {name} ({info['module']}.{info['function']})")
        return entry

    def renderer(
        self,
        name: str,
        *,
        description: str = "",
    ) -> Callable[[RendererHandler], RendererHandler]:
        """
        Decorator form of register().

        Example:
            @registry.renderer("csv")
            def render_csv(controller, rows, options):
                ...
        """
        def decorator(func: RendererHandler) -> RendererHandler:
            self.register(name, func, description=description)
            return func

        return decorator

    def get(self, name: str) -> Optional[RendererEntry]:
        """Get a renderer entry by name, or None."""
        return self._entries.get(name)

    def get_or_raise(self, name: str) -> RendererEntry:
        """
        Get a renderer entry by name.

        Raises:
            UnknownRendererError if the name is not registered
        """
        entry = self._entries.get(name)
        if entry is None:
            raise UnknownRendererError(name)
        return entry

    def names(self) -> List[str]:
        """Registered names in registration order."""
        return list(self._entries)

    def snapshot(self) -> Mapping[str, RendererEntry]:
        """Read-only view of the catalog as of now."""
        return MappingProxyType(self._entries)

    def list_renderers(self) -> List[Dict[str, Any]]:
        """List all renderers with metadata."""
        return [entry.to_dict() for entry in self._entries.values()]

    def clear(self) -> None:
        """
        Remove all renderers.

        Primarily for testing.
        """
        with self._lock:
            self._entries = {}
        logger.debug("Cleared all renderers")

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"RendererRegistry({self.names()!r})"


# ============================================================================
# SHARED INSTANCE
# ============================================================================

_registry: Optional[RendererRegistry] = None
_registry_lock = threading.Lock()


def get_registry() -> RendererRegistry:
    """
    Get the shared renderer registry.

    Created on first use; the built-in renderers are installed unless
    RENDERERS_AUTO_BUILTINS is disabled.
    """
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                registry = RendererRegistry()
                if get_defaults().rendering.auto_register_builtins:
                    from renderers.builtins import register_builtins
                    register_builtins(registry)
                _registry = registry
    return _registry


def set_registry(registry: RendererRegistry) -> None:
    """Install a registry as the shared instance (startup wiring)."""
    global _registry
    _registry = registry


def reset_registry() -> None:
    """Forget the shared registry (for testing)."""
    global _registry
    _registry = None


def add_renderer(
    name: str,
    handler: Optional[RendererHandler] = None,
    *,
    description: str = "",
    registry: Optional[RendererRegistry] = None,
):
    """
    Add a renderer to the shared registry (or to ``registry``).

    The renderer is invoked by passing its name as an option to
    ``Controller.render``. Custom renderers should name their content
    type through core.mime.

    Usable directly or as a decorator:

        add_renderer("csv", render_csv)

        @add_renderer("csv")
        def render_csv(controller, rows, options):
            filename = options.get("filename", "data")
            controller.content_type = get_mime_types().lookup("csv")
            controller.headers["Content-Disposition"] = (
                f"attachment; filename={filename}.csv"
            )
            controller.response_body = rows_to_csv(rows)
            return controller.response_body
    """
    target = registry if registry is not None else get_registry()
    if handler is None:
        return target.renderer(name, description=description)
    return target.register(name, handler, description=description)


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "RendererHandler",
    "RendererEntry",
    "RendererError",
    "UnknownRendererError",
    "RendererRegistry",
    "get_registry",
    "set_registry",
    "reset_registry",
    "add_renderer",
]

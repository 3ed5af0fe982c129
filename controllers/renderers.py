# ============================================================================
# CONTROLLER RENDERERS
# ============================================================================
# EPOCH: 1 - RENDERER DISPATCH
# STATUS: Core - Per-class renderer opt-in and dispatch
# PURPOSE: render(json=...) style dispatch to registered renderers
# CREATED: 19 OCT 2026
# ============================================================================
"""
Controller Renderers

Mixins that let a controller honor renderer keywords in ``render``:

    class PostsController(Renderers, Controller):
        pass

    PostsController.use_renderers("json", "xml")

    # in an action
    self.render(json=post, callback=self.params.get("callback"))

Each class holds an immutable RendererSet in ``_renderers``. Subclasses
see their parent's set until they call ``use_renderers`` themselves,
after which they own a separate set. ``RenderersAll`` gives every class
a snapshot of the whole catalog at class definition time.

The mixins must come before Controller in the bases so their
``render_to_body`` runs first.
"""

from typing import Any, Dict, Optional

from core.logging import ComponentType, get_logger, log_context
from renderers.registry import RendererRegistry, UnknownRendererError, get_registry
from renderers.renderer_set import EMPTY_RENDERER_SET, RendererSet

logger = get_logger(__name__, ComponentType.CONTROLLER)


class Renderers:
    """Opt-in renderer dispatch for controllers."""

    abstract = True

    _renderers: RendererSet = EMPTY_RENDERER_SET

    # Catalog used by use_renderers; None means the shared registry
    renderer_registry: Optional[RendererRegistry] = None

    @classmethod
    def _renderer_catalog(cls) -> RendererRegistry:
        if cls.renderer_registry is not None:
            return cls.renderer_registry
        return get_registry()

    @classmethod
    def use_renderers(cls, *names: str) -> RendererSet:
        """
        Add renderers to this class's set.

        Names already in the set keep their position; new names are
        appended in the order given.

        Raises:
            UnknownRendererError: a name is not registered; the set is unchanged
        """
        try:
            renderer_set = cls._renderers.derive(cls._renderer_catalog(), names)
        except UnknownRendererError as e:
            logger.warning(f"{cls.__name__}.use_renderers failed: {e}")
            raise

        cls._renderers = renderer_set
        logger.debug(f"{cls.__name__} renderers: {', '.join(renderer_set.names())}")
        return renderer_set

    use_renderer = use_renderers

    @classmethod
    def renderer_names(cls):
        return cls._renderers.names()

    def render_to_body(self, options: Dict[str, Any]) -> Any:
        body = self._handle_render_options(options)
        if body is None:
            return super().render_to_body(options)
        return body

    def _handle_render_options(self, options: Dict[str, Any]) -> Any:
        """
        Run the first renderer whose name is a key in ``options``.

        The renderer's key is removed from ``options``; other keys,
        including other renderer names, are left for the renderer (and for
        the default path if the renderer produces nothing).

        Returns:
            The renderer's result, or None when no renderer produced a body
        """
        for name, entry in self._renderers.items():
            if name not in options:
                continue

            self._process_options(options)
            value = options.pop(name)
            with log_context(renderer=name):
                logger.debug(f"Rendering with {name}")
                result = entry(self, value, options)

            if result is None or result is False:
                return None
            return result
        return None

    def _process_options(self, options: Dict[str, Any]) -> None:
        parent = getattr(super(), "_process_options", None)
        if parent is not None:
            parent(options)


class RenderersAll(Renderers):
    """Renderers with every catalog entry, snapshotted per class definition."""

    abstract = True

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.use_all_renderers()

    @classmethod
    def use_all_renderers(cls) -> RendererSet:
        """Replace this class's set with a snapshot of its whole catalog."""
        cls._renderers = RendererSet.from_registry(cls._renderer_catalog())
        return cls._renderers


__all__ = [
    "Renderers",
    "RenderersAll",
]

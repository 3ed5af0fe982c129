# ============================================================================
# RENDERERS
# ============================================================================
# EPOCH: 1 - RENDERER DISPATCH
# STATUS: Core - Renderer catalog
# PURPOSE: Register and look up named response renderers
# CREATED: 19 OCT 2026
# ============================================================================
"""
Renderers

Usage:
    from renderers import add_renderer

    @add_renderer("csv")
    def render_csv(controller, rows, options):
        controller.content_type = "text/csv"
        controller.response_body = "\\n".join(",".join(r) for r in rows)
        return controller.response_body

    class ReportsController(Renderers, Controller):
        pass

    ReportsController.use_renderers("csv")
"""

from renderers.registry import (
    RendererHandler,
    RendererEntry,
    RendererError,
    UnknownRendererError,
    RendererRegistry,
    get_registry,
    set_registry,
    reset_registry,
    add_renderer,
)
from renderers.renderer_set import RendererSet, EMPTY_RENDERER_SET
from renderers.javascript_generator import JavaScriptGenerator
from renderers.builtins import BUILTIN_RENDERERS, register_builtins

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
    "RendererSet",
    "EMPTY_RENDERER_SET",
    "JavaScriptGenerator",
    "BUILTIN_RENDERERS",
    "register_builtins",
]

# ============================================================================
# CONTROLLERS
# ============================================================================
# EPOCH: 1 - RENDERER DISPATCH
# STATUS: Core - Request handling objects
# PURPOSE: Controller base, renderer mixins and application base
# CREATED: 19 OCT 2026
# ============================================================================
"""
Controllers

Usage:
    from controllers import Controller, Renderers

    class PostsController(Renderers, Controller):
        def show(self):
            self.render(json={"id": self.params["id"]})

    PostsController.use_renderers("json")
"""

from controllers.base import (
    Controller,
    ViewContext,
    ControllerError,
    DoubleRenderError,
    MissingRenderError,
    ActionNotFound,
)
from controllers.renderers import Renderers, RenderersAll
from controllers.application import ApplicationController

__all__ = [
    "Controller",
    "ViewContext",
    "ControllerError",
    "DoubleRenderError",
    "MissingRenderError",
    "ActionNotFound",
    "Renderers",
    "RenderersAll",
    "ApplicationController",
]

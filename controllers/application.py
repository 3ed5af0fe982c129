# ============================================================================
# APPLICATION CONTROLLER
# ============================================================================
# EPOCH: 1 - RENDERER DISPATCH
# STATUS: Core - Default controller base for applications
# PURPOSE: Controller with every renderer registered at definition time
# CREATED: 19 OCT 2026
# ============================================================================
"""
Application Controller

Convenience base: a Controller with RenderersAll. Each subclass gets the
catalog as it stands when the subclass is defined, so register custom
renderers before defining the controllers that use them.
"""

from controllers.base import Controller
from controllers.renderers import RenderersAll


class ApplicationController(RenderersAll, Controller):
    abstract = True


__all__ = ["ApplicationController"]

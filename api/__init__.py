# ============================================================================
# API MODULE
# ============================================================================
# EPOCH: 1 - RENDERER DISPATCH
# STATUS: Core - FastAPI routes
# PURPOSE: HTTP API and controller hosting
# CREATED: 19 OCT 2026
# ============================================================================
"""
API Module

FastAPI routes and the adapter that hosts controllers on them.
"""

from .adapter import action_endpoint, mount_controller, to_response
from .routes import router, set_renderer_registry
from .schemas import RendererResponse, RendererListResponse

__all__ = [
    "router",
    "set_renderer_registry",
    "action_endpoint",
    "mount_controller",
    "to_response",
    "RendererResponse",
    "RendererListResponse",
]

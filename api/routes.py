# ============================================================================
# API ROUTES
# ============================================================================
# EPOCH: 1 - RENDERER DISPATCH
# STATUS: Core - FastAPI route definitions
# PURPOSE: HTTP endpoints for the renderer catalog and service status
# CREATED: 19 OCT 2026
# ============================================================================
"""
API Routes

Catalog inspection endpoints, plus the status controller mounted through
the controller adapter.
"""

from fastapi import APIRouter, Depends, HTTPException

from core.logging import ComponentType, get_logger
from renderers.registry import RendererRegistry
from .adapter import mount_controller
from .schemas import ErrorResponse, RendererListResponse, RendererResponse
from .status_controller import StatusController

logger = get_logger(__name__, ComponentType.API)

router = APIRouter()


# ============================================================================
# DEPENDENCY INJECTION
# ============================================================================
# Set by the main app at startup

_registry = None


def set_renderer_registry(registry: RendererRegistry) -> None:
    """Set the renderer registry for dependency injection.

    StatusController is pointed at the same registry and re-snapshots it,
    so /status renders with the injected catalog.
    """
    global _registry
    _registry = registry
    StatusController.renderer_registry = registry
    StatusController.use_all_renderers()
    logger.info(f"Renderer registry injected: {', '.join(registry.names())}")


def get_renderer_registry() -> RendererRegistry:
    if _registry is None:
        raise HTTPException(500, "Renderer registry not initialized")
    return _registry


# ============================================================================
# RENDERER CATALOG
# ============================================================================

@router.get("/renderers", response_model=RendererListResponse)
async def list_renderers(registry: RendererRegistry = Depends(get_renderer_registry)):
    """List registered renderers in registration order."""
    renderers = [RendererResponse(**info) for info in registry.list_renderers()]
    return RendererListResponse(renderers=renderers, total=len(renderers))


@router.get(
    "/renderers/{name}",
    response_model=RendererResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_renderer(name: str, registry: RendererRegistry = Depends(get_renderer_registry)):
    """Get one renderer by name."""
    entry = registry.get(name)
    if entry is None:
        raise HTTPException(404, f"Renderer not found: {name}")
    return RendererResponse(**entry.to_dict())


# ============================================================================
# STATUS
# ============================================================================

mount_controller(router, "/status", StatusController, "show")

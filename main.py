# ============================================================================
# CONTROLLER RENDERERS - MAIN APPLICATION
# ============================================================================
# EPOCH: 1 - RENDERER DISPATCH
# STATUS: Core - FastAPI application entry point
# PURPOSE: Application factory wiring the renderer registry into the API
# CREATED: 19 OCT 2026
# ============================================================================
"""
Controller Renderers Main Application

FastAPI application that:
1. Owns the renderer registry for the process
2. Hosts controllers through the controller adapter
3. Exposes the renderer catalog over HTTP

Usage:
    uvicorn main:app --host 0.0.0.0 --port 8000
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from __version__ import __version__, BUILD_DATE, CODENAME, EPOCH
from api.routes import router, set_renderer_registry
from core.config import get_defaults
from core.logging import configure_logging, get_logger
from renderers.registry import RendererRegistry, get_registry, set_registry

server_defaults = get_defaults().server

configure_logging(
    level=server_defaults.log_level,
    json_output=server_defaults.log_json,
)
logger = get_logger(__name__)


def create_app(registry: Optional[RendererRegistry] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        registry: Renderer registry to serve; defaults to the shared one.
            A registry passed here becomes the shared registry, so
            controllers defined afterwards opt in against it.
    """
    if registry is not None:
        set_registry(registry)
    else:
        registry = get_registry()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {CODENAME} v{__version__} (Epoch {EPOCH}, Build {BUILD_DATE})")
        logger.info(f"Renderers registered: {', '.join(registry.names()) or 'none'}")
        yield
        logger.info(f"{CODENAME} stopped")

    set_renderer_registry(registry)

    app = FastAPI(
        title=CODENAME,
        description=f"Epoch {EPOCH} controller renderer dispatch",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.renderer_registry = registry

    app.include_router(router, prefix=server_defaults.api_prefix)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "service": CODENAME,
            "version": __version__,
            "epoch": EPOCH,
            "build_date": BUILD_DATE,
            "status": "running",
            "docs": "/docs",
        }

    return app


app = create_app()


# ============================================================================
# MAIN ENTRY POINT
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=server_defaults.host,
        port=server_defaults.port,
        reload=server_defaults.reload,
    )

# ============================================================================
# API SCHEMAS
# ============================================================================
# EPOCH: 1 - RENDERER DISPATCH
# STATUS: Core - Response schemas
# PURPOSE: Pydantic models for the renderer catalog endpoints
# CREATED: 19 OCT 2026
# ============================================================================
"""
API Schemas

Response models for the API.
"""

from datetime import datetime
from typing import List
from pydantic import BaseModel, Field


class RendererResponse(BaseModel):
    """A registered renderer."""
    name: str = Field(..., description="Keyword passed to render()")
    description: str = ""
    function: str = Field(..., description="Handler function name")
    module: str = ""
    registered_at: datetime

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "json",
                    "description": "JSON body; JSONP when a callback option is given",
                    "function": "render_json",
                    "module": "renderers.builtins",
                    "registered_at": "2026-10-19T09:00:00Z",
                }
            ]
        }
    }


class RendererListResponse(BaseModel):
    """All registered renderers, in registration order."""
    renderers: List[RendererResponse]
    total: int


class ErrorResponse(BaseModel):
    """Error response."""
    detail: str

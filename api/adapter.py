# ============================================================================
# CONTROLLER ADAPTER
# ============================================================================
# EPOCH: 1 - RENDERER DISPATCH
# STATUS: Core - FastAPI hosting for controller actions
# PURPOSE: Turn controller actions into FastAPI endpoints and responses
# CREATED: 19 OCT 2026
# ============================================================================
"""
Controller Adapter

Bridges FastAPI routing and controllers:

    router = APIRouter()
    mount_controller(router, "/posts/{id}", PostsController, "show")

Each request gets a fresh controller. Query params, path params and a
JSON object body are merged into ``controller.params`` (in that order of
precedence, lowest first). Actions run in the threadpool.
"""

import uuid
from typing import Any, Dict, Iterable, Type

from fastapi import APIRouter, HTTPException, Request, Response
from starlette.concurrency import run_in_threadpool

from controllers.base import ActionNotFound, Controller
from core.config import get_defaults
from core.logging import ComponentType, get_logger

logger = get_logger(__name__, ComponentType.API)


async def request_params(request: Request) -> Dict[str, Any]:
    """Collect params from the query string, path and JSON body."""
    params: Dict[str, Any] = dict(request.query_params)
    params.update(request.path_params)

    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        body = await request.body()
        if body:
            try:
                payload = await request.json()
            except ValueError:
                raise HTTPException(400, "Malformed JSON body")
            if isinstance(payload, dict):
                params.update(payload)
    return params


def to_response(controller: Controller) -> Response:
    """Build a Starlette response from controller state."""
    body = controller.response_body
    if body is None:
        status = 204 if controller.status == 200 else controller.status
        return Response(status_code=status, headers=controller.headers)

    rendering = get_defaults().rendering
    media_type = controller.content_type or rendering.default_content_type
    if not isinstance(body, (str, bytes)):
        body = str(body)

    # Text types declare a charset; the configured one unless the action set its own
    if media_type.startswith("text/"):
        charset = rendering.charset
        if "charset=" in media_type:
            charset = media_type.split("charset=", 1)[1].split(";", 1)[0].strip()
        else:
            media_type = f"{media_type}; charset={charset}"
        if isinstance(body, str):
            body = body.encode(charset)
    return Response(
        content=body,
        status_code=controller.status,
        media_type=media_type,
        headers=controller.headers,
    )


def action_endpoint(controller_class: Type[Controller], action: str):
    """
    Build an async FastAPI endpoint for ``controller_class#action``.

    Raises:
        ActionNotFound: the action does not exist (checked at mount time)
    """
    if action not in controller_class.action_methods():
        raise ActionNotFound(action, controller_class.__name__)

    async def endpoint(request: Request) -> Response:
        params = await request_params(request)
        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex[:12]

        controller = controller_class(request=request, params=params)
        await run_in_threadpool(controller.process, action, request_id=request_id)

        response = to_response(controller)
        response.headers.setdefault("x-request-id", request_id)
        return response

    endpoint.__name__ = f"{controller_class.__name__}_{action}"
    return endpoint


def mount_controller(
    router: APIRouter,
    path: str,
    controller_class: Type[Controller],
    action: str,
    methods: Iterable[str] = ("GET",),
) -> None:
    """Route ``path`` to ``controller_class#action``."""
    router.add_api_route(
        path,
        action_endpoint(controller_class, action),
        methods=list(methods),
        name=f"{controller_class.__name__}#{action}",
        include_in_schema=True,
    )
    logger.debug(f"Mounted {controller_class.__name__}#{action} at {path}")


__all__ = [
    "request_params",
    "to_response",
    "action_endpoint",
    "mount_controller",
]

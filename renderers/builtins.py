# ============================================================================
# BUILT-IN RENDERERS
# ============================================================================
# EPOCH: 1 - RENDERER DISPATCH
# STATUS: Core - json, js, xml and update renderers
# PURPOSE: Default renderer implementations
# CREATED: 19 OCT 2026
# ============================================================================
"""
Built-in Renderers

    render(json=obj)          application/json (JSONP with callback=...)
    render(js=script)         text/javascript
    render(xml=obj)           application/xml
    render(update=block)      text/javascript, generated by JavaScriptGenerator

json, js and xml keep a content type the action already chose; update
always sets text/javascript.
"""

import json
from typing import Any, Dict

from fastapi.encoders import jsonable_encoder

from core.config import get_defaults
from core.mime import MimeType
from renderers.javascript_generator import JavaScriptGenerator
from renderers.registry import RendererRegistry


def _blank(value: Any) -> bool:
    if value is None or value is False:
        return True
    return isinstance(value, str) and not value.strip()


def dump_json(value: Any) -> str:
    """Encode a value as compact JSON text."""
    rendering = get_defaults().rendering
    return json.dumps(
        jsonable_encoder(value),
        separators=rendering.json_separators,
        ensure_ascii=rendering.json_ensure_ascii,
        allow_nan=False,
    )


def render_json(controller, value: Any, options: Dict[str, Any]) -> str:
    if not isinstance(value, str):
        to_json = getattr(value, "to_json", None)
        value = to_json(options) if callable(to_json) else dump_json(value)

    callback = options.get("callback")
    if not _blank(callback):
        value = f"{callback}({value})"

    if not controller.content_type:
        controller.content_type = MimeType.JSON.value
    controller.response_body = value
    return value


def render_js(controller, value: Any, options: Dict[str, Any]) -> Any:
    if not controller.content_type:
        controller.content_type = MimeType.JS.value
    to_js = getattr(value, "to_js", None)
    controller.response_body = to_js(options) if callable(to_js) else value
    return controller.response_body


def render_xml(controller, value: Any, options: Dict[str, Any]) -> Any:
    if not controller.content_type:
        controller.content_type = MimeType.XML.value
    to_xml = getattr(value, "to_xml", None)
    controller.response_body = to_xml(options) if callable(to_xml) else value
    return controller.response_body


def render_update(controller, block, options: Dict[str, Any]) -> str:
    generator = JavaScriptGenerator(controller.view_context, block)
    controller.content_type = MimeType.JS.value
    controller.response_body = str(generator)
    return controller.response_body


BUILTIN_RENDERERS = (
    ("json", render_json, "JSON body; JSONP when a callback option is given"),
    ("js", render_js, "JavaScript body, using to_js(options) when available"),
    ("xml", render_xml, "XML body, using to_xml(options) when available"),
    ("update", render_update, "Page update script built from a generator block"),
)


def register_builtins(registry: RendererRegistry) -> RendererRegistry:
    """Install json, js, xml and update into ``registry``."""
    for name, handler, description in BUILTIN_RENDERERS:
        registry.register(name, handler, description=description)
    return registry


__all__ = [
    "BUILTIN_RENDERERS",
    "dump_json",
    "render_json",
    "render_js",
    "render_xml",
    "render_update",
    "register_builtins",
]

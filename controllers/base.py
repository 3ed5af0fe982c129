# ============================================================================
# CONTROLLER BASE
# ============================================================================
# EPOCH: 1 - RENDERER DISPATCH
# STATUS: Core - Request handling object and default rendering
# PURPOSE: Per-request controller state, actions and render()
# CREATED: 19 OCT 2026
# ============================================================================
"""
Controller Base

A controller instance handles one request. Actions are public methods on
concrete subclasses; an action produces the response by calling
``render(**options)`` once, which sets ``content_type`` and
``response_body``.

Default rendering understands:
    render(text="...")        literal body
    render(nothing=True)      single-space body

plus the response options applied by ``_process_options``:
    status=201 | "created"    response status
    content_type="..."        content type
    location="/posts/1"       Location header

Mixins (see controllers.renderers) extend ``render_to_body`` with more
option keys.
"""

from http import HTTPStatus
from typing import Any, Dict, FrozenSet, Optional

from core.config import get_defaults
from core.logging import ComponentType, get_logger, log_context

logger = get_logger(__name__, ComponentType.CONTROLLER)


# ============================================================================
# EXCEPTIONS
# ============================================================================

class ControllerError(Exception):
    """Base exception for controller errors."""
    pass


class DoubleRenderError(ControllerError):
    """Raised when an action renders more than once."""
    def __init__(self, controller_name: str):
        self.controller_name = controller_name
        super().__init__(
            f"Render was called multiple times in {controller_name}; "
            f"render may only be called once per action"
        )


class MissingRenderError(ControllerError):
    """Raised when no renderer understands the given options."""
    def __init__(self, options: Dict[str, Any]):
        self.option_keys = sorted(options)
        super().__init__(f"Nothing to render for options: {self.option_keys}")


class ActionNotFound(ControllerError):
    """Raised when an action name is not a public action of the controller."""
    def __init__(self, action: str, controller_name: str):
        self.action = action
        self.controller_name = controller_name
        super().__init__(f"The action '{action}' could not be found for {controller_name}")


# ============================================================================
# VIEW CONTEXT
# ============================================================================

class ViewContext:
    """What view-side helpers (e.g. JavaScriptGenerator blocks) may see."""

    def __init__(self, controller: "Controller"):
        self.controller = controller
        self.assigns = dict(controller.assigns)

    @property
    def params(self) -> Dict[str, Any]:
        return self.controller.params


# ============================================================================
# CONTROLLER
# ============================================================================

def _coerce_status(status: Any) -> int:
    if isinstance(status, str) and not status.isdigit():
        return HTTPStatus[status.upper()].value
    return int(status)


class Controller:
    """
    Base request-handling object.

    Classes with ``abstract = True`` in their own body contribute no
    actions, so helpers defined on them are not routable.
    """

    abstract = True

    def __init__(self, request: Any = None, params: Optional[Dict[str, Any]] = None):
        self.request = request
        self.params: Dict[str, Any] = dict(params or {})
        self.assigns: Dict[str, Any] = {}
        self.action_name: Optional[str] = None

        # Response state
        self.status: int = HTTPStatus.OK.value
        self.content_type: Optional[str] = None
        self.response_body: Any = None
        self.headers: Dict[str, str] = {}

        self._view_context: Optional[ViewContext] = None

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    @classmethod
    def action_methods(cls) -> FrozenSet[str]:
        """Public methods defined on non-abstract classes in the MRO."""
        names = set()
        for klass in cls.__mro__:
            if klass is object or klass.__dict__.get("abstract", False):
                continue
            for name, value in vars(klass).items():
                if name.startswith("_") or isinstance(value, (type, staticmethod, classmethod)):
                    continue
                if callable(value):
                    names.add(name)
        return frozenset(names)

    def process(self, action: str, **context: Any) -> Any:
        """
        Run an action and return the response body.

        Args:
            action: Action method name
            **context: Extra logging context (e.g. request_id)

        Raises:
            ActionNotFound: not a public action of this controller
        """
        controller_name = type(self).__name__
        if action not in self.action_methods():
            raise ActionNotFound(action, controller_name)

        self.action_name = action
        with log_context(controller=controller_name, action=action, **context):
            logger.debug("Processing action")
            getattr(self, action)()
            if not self.performed():
                logger.debug("Action rendered nothing")
        return self.response_body

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def performed(self) -> bool:
        return self.response_body is not None

    def render(self, **options: Any) -> Any:
        """Produce the response body from ``options``; once per action."""
        if self.performed():
            raise DoubleRenderError(type(self).__name__)

        body = self.render_to_body(options)
        if not self.performed():
            self.response_body = body
        return self.response_body

    def render_to_body(self, options: Dict[str, Any]) -> Any:
        self._process_options(options)

        if "text" in options:
            if not self.content_type:
                self.content_type = get_defaults().rendering.default_content_type
            text = options["text"]
            return text if isinstance(text, str) else str(text)

        if options.get("nothing"):
            return " "

        raise MissingRenderError(options)

    def _process_options(self, options: Dict[str, Any]) -> None:
        """Apply response options; leaves ``options`` unchanged."""
        if options.get("status") is not None:
            self.status = _coerce_status(options["status"])
        if options.get("content_type"):
            self.content_type = str(options["content_type"])
        if options.get("location"):
            self.location = str(options["location"])

    # ------------------------------------------------------------------
    # Response helpers
    # ------------------------------------------------------------------

    @property
    def location(self) -> Optional[str]:
        return self.headers.get("Location")

    @location.setter
    def location(self, url: str) -> None:
        self.headers["Location"] = url

    @property
    def view_context(self) -> ViewContext:
        if self._view_context is None:
            self._view_context = ViewContext(self)
        return self._view_context


__all__ = [
    "ControllerError",
    "DoubleRenderError",
    "MissingRenderError",
    "ActionNotFound",
    "ViewContext",
    "Controller",
]

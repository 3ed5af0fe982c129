# ============================================================================
# JAVASCRIPT GENERATOR
# ============================================================================
# EPOCH: 1 - RENDERER DISPATCH
# STATUS: Core - Script builder for the update renderer
# PURPOSE: Build Prototype-style page update scripts
# CREATED: 19 OCT 2026
# ============================================================================
"""
JavaScript Generator

Collects page update statements and emits them as one script. The update
renderer passes a generator to the block given as ``render(update=...)``:

    def action(self):
        self.render(update=lambda page: (
            page.replace_html("flash", "Saved"),
            page.hide("spinner"),
        ))

Produces:

    Element.update("flash", "Saved");
    Element.hide("spinner");

All arguments are JSON encoded, so strings are escaped for JavaScript.
"""

import json
from typing import Any, Callable, List, Optional

INSERTION_POSITIONS = ("top", "bottom", "before", "after")


class JavaScriptGenerator:
    """Records JavaScript statements against the current view context."""

    def __init__(
        self,
        view_context: Any = None,
        block: Optional[Callable[["JavaScriptGenerator"], Any]] = None,
    ):
        self.view_context = view_context
        self.lines: List[str] = []
        if block is not None:
            block(self)

    def __str__(self) -> str:
        return "\n".join(self.lines)

    # ------------------------------------------------------------------
    # Element updates
    # ------------------------------------------------------------------

    def insert_html(self, position: str, element_id: str, content: Any) -> "JavaScriptGenerator":
        """Insert content at top/bottom of, or before/after, an element."""
        position = str(position).lower()
        if position not in INSERTION_POSITIONS:
            raise ValueError(
                f"Invalid insertion position {position!r}, "
                f"expected one of {', '.join(INSERTION_POSITIONS)}"
            )
        return self.call("Element.insert", element_id, {position: self._content(content)})

    def replace_html(self, element_id: str, content: Any) -> "JavaScriptGenerator":
        """Replace the inner HTML of an element."""
        return self.call("Element.update", element_id, self._content(content))

    def replace(self, element_id: str, content: Any) -> "JavaScriptGenerator":
        """Replace an element (outer HTML)."""
        return self.call("Element.replace", element_id, self._content(content))

    def remove(self, *element_ids: str) -> "JavaScriptGenerator":
        return self._loop_on_multiple_args("Element.remove", element_ids)

    def show(self, *element_ids: str) -> "JavaScriptGenerator":
        return self._loop_on_multiple_args("Element.show", element_ids)

    def hide(self, *element_ids: str) -> "JavaScriptGenerator":
        return self._loop_on_multiple_args("Element.hide", element_ids)

    def toggle(self, *element_ids: str) -> "JavaScriptGenerator":
        return self._loop_on_multiple_args("Element.toggle", element_ids)

    # ------------------------------------------------------------------
    # Browser
    # ------------------------------------------------------------------

    def alert(self, message: str) -> "JavaScriptGenerator":
        return self.call("alert", message)

    def redirect_to(self, location: str) -> "JavaScriptGenerator":
        return self.assign("window.location.href", location)

    def reload(self) -> "JavaScriptGenerator":
        return self._record("window.location.reload()")

    # ------------------------------------------------------------------
    # Raw statements
    # ------------------------------------------------------------------

    def call(self, function: str, *arguments: Any) -> "JavaScriptGenerator":
        """Call a JavaScript function with JSON-encoded arguments."""
        args = ", ".join(self._encode(arg) for arg in arguments)
        return self._record(f"{function}({args})")

    def assign(self, variable: str, value: Any) -> "JavaScriptGenerator":
        return self._record(f"{variable} = {self._encode(value)}")

    def append(self, javascript: str) -> "JavaScriptGenerator":
        """Append raw JavaScript as-is."""
        self.lines.append(javascript)
        return self

    __lshift__ = append

    def delay(
        self,
        seconds: float = 1,
        block: Optional[Callable[["JavaScriptGenerator"], Any]] = None,
    ) -> "JavaScriptGenerator":
        """Run the statements recorded by ``block`` after ``seconds``."""
        self.lines.append("setTimeout(function() {\n")
        if block is not None:
            block(self)
        return self._record(f"}}, {int(seconds * 1000)})")

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _record(self, line: str) -> "JavaScriptGenerator":
        line = str(line).rstrip("\n")
        if line.endswith(";"):
            line = line[:-1]
        self.lines.append(f"{line};")
        return self

    def _loop_on_multiple_args(self, method: str, element_ids) -> "JavaScriptGenerator":
        if not element_ids:
            raise ValueError(f"{method} needs at least one element id")
        if len(element_ids) > 1:
            return self._record(f"{self._encode(list(element_ids))}.each({method})")
        return self._record(f"{method}({self._encode(element_ids[0])})")

    def _content(self, content: Any) -> str:
        to_html = getattr(content, "to_html", None)
        if callable(to_html):
            return to_html()
        return content if isinstance(content, str) else str(content)

    @staticmethod
    def _encode(value: Any) -> str:
        return json.dumps(value, default=str)


__all__ = [
    "INSERTION_POSITIONS",
    "JavaScriptGenerator",
]

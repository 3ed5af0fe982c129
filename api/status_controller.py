# ============================================================================
# STATUS CONTROLLER
# ============================================================================
# EPOCH: 1 - RENDERER DISPATCH
# STATUS: Core - Service status action
# PURPOSE: Report service version through the renderer pipeline
# CREATED: 19 OCT 2026
# ============================================================================
"""
Status Controller

GET /api/v1/status                  JSON
GET /api/v1/status?callback=cb      JSONP
GET /api/v1/status?format=xml       XML
"""

from xml.sax.saxutils import escape

from __version__ import __version__, BUILD_DATE, CODENAME, EPOCH
from controllers.application import ApplicationController


class ServiceStatus:
    """Status payload that knows its JSON and XML forms."""

    def __init__(self, renderers):
        self.data = {
            "service": CODENAME,
            "version": __version__,
            "epoch": EPOCH,
            "build_date": BUILD_DATE,
            "status": "running",
            "renderers": list(renderers),
        }

    def to_xml(self, options):
        root = options.get("root", "status")
        parts = [f"<{root}>"]
        for key, value in self.data.items():
            if isinstance(value, list):
                items = "".join(f"<item>{escape(str(v))}</item>" for v in value)
                parts.append(f"<{key}>{items}</{key}>")
            else:
                parts.append(f"<{key}>{escape(str(value))}</{key}>")
        parts.append(f"</{root}>")
        return "".join(parts)


class StatusController(ApplicationController):

    def show(self):
        status = ServiceStatus(self.renderer_names())
        if self.params.get("format") == "xml":
            self.render(xml=status)
        else:
            self.render(json=status.data, callback=self.params.get("callback"))

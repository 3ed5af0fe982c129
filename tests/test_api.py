# ============================================================================
# API + CONTROLLER ADAPTER TESTS
# ============================================================================
# EPOCH: 1 - RENDERER DISPATCH
# STATUS: Tests - HTTP surface
# PURPOSE: Verify catalog endpoints and controller hosting on FastAPI
# CREATED: 19 OCT 2026
# ============================================================================
"""
API + Controller Adapter Tests

Uses FastAPI TestClient against small test apps.

Run with:
    pytest tests/test_api.py -v
"""

import logging

import pytest

from fastapi import APIRouter, FastAPI
from fastapi.testclient import TestClient

from api.adapter import mount_controller, to_response
from api.routes import router, set_renderer_registry
from controllers.base import ActionNotFound, Controller
from controllers.renderers import Renderers
from core.config import reset_defaults
from renderers.builtins import register_builtins
from renderers.registry import RendererRegistry, reset_registry


# ============================================================================
# FIXTURES
# ============================================================================

@pytest.fixture
def registry():
    return register_builtins(RendererRegistry())


def _make_test_app(registry):
    """Create a test FastAPI app with the catalog routes."""
    app = FastAPI()
    app.include_router(router, prefix="/api/v1")
    set_renderer_registry(registry)
    return app


@pytest.fixture
def posts_controller(registry):
    class PostsController(Renderers, Controller):
        renderer_registry = registry

        def show(self):
            self.render(json={"id": self.params["id"]}, callback=self.params.get("callback"))

        def create(self):
            self.render(json={"title": self.params["title"]}, status="created", location="/posts/9")

        def script(self):
            self.render(update=lambda page: page.alert(self.params.get("msg", "hi")))

        def destroy(self):
            pass

    PostsController.use_renderers("json", "update")
    return PostsController


@pytest.fixture
def client(posts_controller):
    posts = APIRouter()
    mount_controller(posts, "/posts/{id}", posts_controller, "show")
    mount_controller(posts, "/posts", posts_controller, "create", methods=["POST"])
    mount_controller(posts, "/script", posts_controller, "script")
    mount_controller(posts, "/posts/{id}", posts_controller, "destroy", methods=["DELETE"])

    app = FastAPI()
    app.include_router(posts)
    return TestClient(app)


# ============================================================================
# CATALOG
# ============================================================================

class TestRendererRoutes:

    def test_list_renderers(self, registry):
        client = TestClient(_make_test_app(registry))

        resp = client.get("/api/v1/renderers")

        assert resp.status_code == 200
        data = resp.json()
        assert data["total"] == 4
        assert [r["name"] for r in data["renderers"]] == ["json", "js", "xml", "update"]
        assert data["renderers"][0]["function"] == "render_json"
        assert data["renderers"][0]["module"] == "renderers.builtins"

    def test_get_renderer(self, registry):
        client = TestClient(_make_test_app(registry))

        resp = client.get("/api/v1/renderers/xml")

        assert resp.status_code == 200
        assert resp.json()["name"] == "xml"

    def test_get_unknown_renderer(self, registry):
        client = TestClient(_make_test_app(registry))

        resp = client.get("/api/v1/renderers/csv")

        assert resp.status_code == 404
        assert "csv" in resp.json()["detail"]

    def test_status_json(self, registry):
        client = TestClient(_make_test_app(registry))

        resp = client.get("/api/v1/status")

        assert resp.status_code == 200
        assert resp.headers["content-type"] == "application/json"
        data = resp.json()
        assert data["status"] == "running"
        assert "json" in data["renderers"]

    def test_status_jsonp(self, registry):
        client = TestClient(_make_test_app(registry))

        resp = client.get("/api/v1/status", params={"callback": "cb"})

        assert resp.text.startswith("cb({")
        assert resp.text.endswith("})")

    def test_status_xml(self, registry):
        client = TestClient(_make_test_app(registry))

        resp = client.get("/api/v1/status", params={"format": "xml"})

        assert resp.headers["content-type"] == "application/xml"
        assert resp.text.startswith("<status><service>")
        assert "<item>json</item>" in resp.text

    def test_status_uses_injected_registry(self, registry):
        def custom_json(controller, value, options):
            controller.content_type = "application/json"
            controller.response_body = '{"custom":true}'
            return controller.response_body

        registry.register("json", custom_json)
        client = TestClient(_make_test_app(registry))

        resp = client.get("/api/v1/status")

        assert resp.json() == {"custom": True}

    def test_injection_is_logged(self, registry, caplog):
        caplog.set_level(logging.INFO, logger="api.routes")

        set_renderer_registry(registry)

        assert "Renderer registry injected: json, js, xml, update" in caplog.text


# ============================================================================
# CONTROLLER HOSTING
# ============================================================================

class TestControllerAdapter:

    def test_path_params_reach_action(self, client):
        resp = client.get("/posts/5")

        assert resp.status_code == 200
        assert resp.json() == {"id": "5"}
        assert resp.headers["content-type"] == "application/json"

    def test_query_callback(self, client):
        resp = client.get("/posts/5", params={"callback": "show"})

        assert resp.text == 'show({"id":"5"})'

    def test_json_body_status_and_location(self, client):
        resp = client.post("/posts", json={"title": "Hello"})

        assert resp.status_code == 201
        assert resp.headers["location"] == "/posts/9"
        assert resp.json() == {"title": "Hello"}

    def test_malformed_json_body_is_bad_request(self, client):
        resp = client.post(
            "/posts",
            content=b"{bad",
            headers={"content-type": "application/json"},
        )

        assert resp.status_code == 400
        assert resp.json()["detail"] == "Malformed JSON body"

    def test_update_script(self, client):
        resp = client.get("/script", params={"msg": "done"})

        assert resp.headers["content-type"].startswith("text/javascript")
        assert resp.text == 'alert("done");'

    def test_no_render_is_no_content(self, client):
        resp = client.delete("/posts/5")

        assert resp.status_code == 204
        assert resp.content == b""

    def test_request_id_echoed(self, client):
        resp = client.get("/posts/5", headers={"x-request-id": "req-42"})

        assert resp.headers["x-request-id"] == "req-42"

    def test_mount_unknown_action(self, posts_controller):
        with pytest.raises(ActionNotFound):
            mount_controller(APIRouter(), "/x", posts_controller, "missing")

    def test_to_response_defaults_content_type(self):
        controller = Controller()
        controller.response_body = "<p>hi</p>"

        response = to_response(controller)

        assert response.status_code == 200
        assert response.body == b"<p>hi</p>"
        assert response.headers["content-type"] == "text/html; charset=utf-8"

    def test_to_response_applies_configured_charset(self, monkeypatch):
        monkeypatch.setenv("RENDER_CHARSET", "latin-1")
        reset_defaults()
        controller = Controller()
        controller.response_body = "café"

        try:
            response = to_response(controller)
        finally:
            reset_defaults()

        assert response.headers["content-type"] == "text/html; charset=latin-1"
        assert response.body == b"caf\xe9"

    def test_to_response_keeps_explicit_charset(self):
        controller = Controller()
        controller.content_type = "text/plain; charset=latin-1"
        controller.response_body = "café"

        response = to_response(controller)

        assert response.headers["content-type"] == "text/plain; charset=latin-1"
        assert response.body == b"caf\xe9"


# ============================================================================
# APPLICATION
# ============================================================================

class TestApplication:

    @pytest.fixture(autouse=True)
    def _reset_shared(self):
        yield
        reset_registry()

    def test_create_app_serves_injected_registry(self, registry):
        from main import create_app

        registry.register("csv", lambda controller, value, options: value)
        client = TestClient(create_app(registry))

        resp = client.get("/api/v1/renderers")
        root = client.get("/")

        assert [r["name"] for r in resp.json()["renderers"]][-1] == "csv"
        assert root.json()["status"] == "running"

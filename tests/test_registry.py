# ============================================================================
# RENDERER REGISTRY TESTS
# ============================================================================
# EPOCH: 1 - RENDERER DISPATCH
# STATUS: Tests - Catalog registration and lookup
# PURPOSE: Verify registration, replacement, lookup and the shared registry
# CREATED: 19 OCT 2026
# ============================================================================
"""
Renderer Registry Tests

Covers:
1. Registration and re-registration (last one wins, size stable)
2. Lookup helpers and errors
3. Decorator and add_renderer forms
4. Shared registry creation with built-ins

Run with:
    pytest tests/test_registry.py -v
"""

import pytest

from core.config import reset_defaults
from renderers.registry import (
    RendererRegistry,
    UnknownRendererError,
    add_renderer,
    get_registry,
    reset_registry,
    set_registry,
)


# ============================================================================
# FIXTURES
# ============================================================================

@pytest.fixture
def registry():
    return RendererRegistry()


@pytest.fixture
def fresh_shared_registry():
    """Forget the shared registry and defaults around a test."""
    reset_defaults()
    reset_registry()
    yield
    reset_defaults()
    reset_registry()


def _handler(tag):
    def handler(controller, value, options):
        return f"{tag}:{value}"
    handler.__name__ = f"render_{tag}"
    return handler


# ============================================================================
# REGISTRATION
# ============================================================================

class TestRegister:

    def test_register_adds_entry(self, registry):
        handler = _handler("csv")
        entry = registry.register("csv", handler, description="CSV export")

        assert "csv" in registry
        assert len(registry) == 1
        assert entry.name == "csv"
        assert entry.handler is handler
        assert entry.description == "CSV export"

    def test_reregistration_replaces_handler(self, registry):
        first = _handler("first")
        second = _handler("second")

        registry.register("json", first)
        registry.register("json", second)

        assert len(registry) == 1
        assert registry.get("json").handler is second
        assert registry.get("json")(None, 1, {}) == "second:1"

    def test_reregistration_keeps_position(self, registry):
        registry.register("json", _handler("a"))
        registry.register("xml", _handler("b"))
        registry.register("json", _handler("c"))

        assert registry.names() == ["json", "xml"]

    def test_names_in_registration_order(self, registry):
        for name in ("xml", "json", "js"):
            registry.register(name, _handler(name))

        assert registry.names() == ["xml", "json", "js"]
        assert list(registry) == ["xml", "json", "js"]

    @pytest.mark.parametrize("name", ["", None, 42])
    def test_invalid_name_rejected(self, registry, name):
        with pytest.raises(ValueError):
            registry.register(name, _handler("x"))

    def test_non_callable_handler_rejected(self, registry):
        with pytest.raises(TypeError):
            registry.register("json", "not callable")

    def test_decorator_registers_and_returns_function(self, registry):
        @registry.renderer("csv", description="rows")
        def render_csv(controller, rows, options):
            return "csv"

        assert registry.get("csv").handler is render_csv
        assert render_csv(None, [], {}) == "csv"


# ============================================================================
# LOOKUP
# ============================================================================

class TestLookup:

    def test_get_unknown_returns_none(self, registry):
        assert registry.get("missing") is None

    def test_get_or_raise_unknown(self, registry):
        with pytest.raises(UnknownRendererError) as exc_info:
            registry.get_or_raise("missing")

        assert exc_info.value.name == "missing"
        assert "missing" in str(exc_info.value)

    def test_snapshot_is_read_only_and_stable(self, registry):
        registry.register("json", _handler("json"))
        snapshot = registry.snapshot()

        registry.register("xml", _handler("xml"))

        assert list(snapshot) == ["json"]
        with pytest.raises(TypeError):
            snapshot["js"] = None

    def test_list_renderers_metadata(self, registry):
        registry.register("csv", _handler("csv"), description="rows")

        [info] = registry.list_renderers()

        assert info["name"] == "csv"
        assert info["description"] == "rows"
        assert info["function"] == "render_csv"
        assert info["registered_at"] is not None

    def test_clear(self, registry):
        registry.register("json", _handler("json"))
        registry.clear()

        assert len(registry) == 0


# ============================================================================
# SHARED REGISTRY
# ============================================================================

class TestSharedRegistry:

    def test_shared_registry_has_builtins(self, fresh_shared_registry):
        registry = get_registry()

        assert registry.names() == ["json", "js", "xml", "update"]
        assert get_registry() is registry

    def test_builtins_can_be_disabled(self, fresh_shared_registry, monkeypatch):
        monkeypatch.setenv("RENDERERS_AUTO_BUILTINS", "false")
        reset_defaults()

        assert len(get_registry()) == 0

    def test_set_registry(self, fresh_shared_registry, registry):
        set_registry(registry)

        assert get_registry() is registry

    def test_add_renderer_direct(self, registry):
        handler = _handler("csv")
        entry = add_renderer("csv", handler, registry=registry)

        assert entry.handler is handler
        assert "csv" in registry

    def test_add_renderer_decorator(self, registry):
        @add_renderer("pdf", registry=registry)
        def render_pdf(controller, value, options):
            return b"%PDF"

        assert registry.get("pdf").handler is render_pdf

    def test_add_renderer_defaults_to_shared(self, fresh_shared_registry):
        add_renderer("csv", _handler("csv"))

        assert "csv" in get_registry()

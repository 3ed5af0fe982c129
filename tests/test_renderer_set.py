# ============================================================================
# RENDERER SET TESTS
# ============================================================================
# EPOCH: 1 - RENDERER DISPATCH
# STATUS: Tests - Immutable renderer selection
# PURPOSE: Verify ordering, immutability and derivation of renderer sets
# CREATED: 19 OCT 2026
# ============================================================================
"""
Renderer Set Tests

Run with:
    pytest tests/test_renderer_set.py -v
"""

import pytest

from renderers.builtins import register_builtins
from renderers.registry import RendererRegistry, UnknownRendererError
from renderers.renderer_set import EMPTY_RENDERER_SET, RendererSet


@pytest.fixture
def registry():
    return register_builtins(RendererRegistry())


class TestRendererSet:

    def test_empty_set(self):
        assert len(EMPTY_RENDERER_SET) == 0
        assert EMPTY_RENDERER_SET.names() == ()

    def test_derive_keeps_order_given(self, registry):
        renderer_set = EMPTY_RENDERER_SET.derive(registry, ["xml", "json"])

        assert renderer_set.names() == ("xml", "json")
        assert renderer_set["json"] is registry.get("json")

    def test_derive_returns_new_set(self, registry):
        base = EMPTY_RENDERER_SET.derive(registry, ["json"])
        derived = base.derive(registry, ["xml"])

        assert base.names() == ("json",)
        assert derived.names() == ("json", "xml")

    def test_derive_existing_name_keeps_position(self, registry):
        base = EMPTY_RENDERER_SET.derive(registry, ["json", "xml"])
        derived = base.derive(registry, ["js", "json"])

        assert derived.names() == ("json", "xml", "js")

    def test_derive_unknown_name_raises(self, registry):
        base = EMPTY_RENDERER_SET.derive(registry, ["json"])

        with pytest.raises(UnknownRendererError):
            base.derive(registry, ["xml", "csv"])

        assert base.names() == ("json",)

    def test_derive_snapshots_entries(self, registry):
        renderer_set = EMPTY_RENDERER_SET.derive(registry, ["json"])
        original = renderer_set["json"]

        registry.register("json", lambda controller, value, options: "new")

        assert renderer_set["json"] is original

    def test_immutable(self, registry):
        renderer_set = RendererSet.from_registry(registry)

        with pytest.raises(AttributeError):
            renderer_set._entries = {}
        with pytest.raises(TypeError):
            renderer_set["csv"] = None

    def test_from_registry_is_full_snapshot(self, registry):
        renderer_set = RendererSet.from_registry(registry)
        registry.register("csv", lambda controller, value, options: value)

        assert renderer_set.names() == ("json", "js", "xml", "update")
        assert "csv" not in renderer_set

# ============================================================================
# RENDERER SET
# ============================================================================
# EPOCH: 1 - RENDERER DISPATCH
# STATUS: Core - Immutable per-controller renderer selection
# PURPOSE: Ordered, frozen subset of the renderer catalog
# CREATED: 19 OCT 2026
# ============================================================================
"""
Renderer Set

The renderers a controller class honors, in the order it opted into them.

A RendererSet never changes after construction. Opting into more
renderers derives a new set from the current one, so a set can be shared
by reference between a parent controller and subclasses that have not
opted in themselves.
"""

from collections.abc import Mapping
from typing import Iterable, Iterator, Tuple

from renderers.registry import RendererEntry, RendererRegistry


class RendererSet(Mapping):
    """Immutable ordered mapping of renderer name -> RendererEntry."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[RendererEntry] = ()):
        table = {}
        for entry in entries:
            table[entry.name] = entry
        object.__setattr__(self, "_entries", table)

    def __setattr__(self, name, value):
        raise AttributeError("RendererSet is immutable")

    def __getitem__(self, name: str) -> RendererEntry:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"RendererSet({list(self._entries)!r})"

    def names(self) -> Tuple[str, ...]:
        return tuple(self._entries)

    def with_entries(self, entries: Iterable[RendererEntry]) -> "RendererSet":
        """
        New set with ``entries`` merged in.

        Existing names keep their position; new names go to the end.
        """
        merged = dict(self._entries)
        for entry in entries:
            merged[entry.name] = entry
        return RendererSet(merged.values())

    def derive(self, registry: RendererRegistry, names: Iterable[str]) -> "RendererSet":
        """
        New set extended with the named renderers from ``registry``.

        All names are resolved before anything is built, so an unknown
        name leaves no partial result behind.

        Raises:
            UnknownRendererError: a name is not registered
        """
        entries = [registry.get_or_raise(name) for name in names]
        return self.with_entries(entries)

    @classmethod
    def from_registry(cls, registry: RendererRegistry) -> "RendererSet":
        """Snapshot of the whole catalog."""
        return cls(registry.snapshot().values())


EMPTY_RENDERER_SET = RendererSet()


__all__ = [
    "RendererSet",
    "EMPTY_RENDERER_SET",
]

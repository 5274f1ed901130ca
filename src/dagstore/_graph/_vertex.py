"""Vertex records and the read-only views handed out to callers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class VertexRecord:
    """Mutable per-vertex storage owned by a single graph.

    Adjacency lists hold vertex ids, never records, so every traversal
    goes back through the owning graph's mapping.

    Attributes:
        id: The vertex key. Never reassigned.
        value: Caller payload. Not inspected.
        parents: Ids of vertices with an edge into this one, in insertion order.
        children: Ids of vertices this one has an edge into, in insertion order.

    """

    id: str
    value: Any = None
    parents: list[str] = field(default_factory=list)
    children: list[str] = field(default_factory=list)

    def remove_parent(self, parent_id: str) -> None:
        """Drop every occurrence of *parent_id* from the parent list."""
        _remove_all(self.parents, parent_id)

    def remove_child(self, child_id: str) -> None:
        """Drop every occurrence of *child_id* from the child list."""
        _remove_all(self.children, child_id)

    def clone(self) -> VertexRecord:
        """Return an independent record sharing only the payload reference."""
        return VertexRecord(
            id=self.id,
            value=self.value,
            parents=list(self.parents),
            children=list(self.children),
        )

    def view(self) -> Vertex:
        return Vertex(
            id=self.id,
            value=self.value,
            parents=tuple(self.parents),
            children=tuple(self.children),
        )


@dataclass(frozen=True, slots=True)
class Vertex:
    """Snapshot of a vertex at the time it was requested.

    Later mutations of the graph are not reflected here. The payload is
    the same object the caller stored, not a copy.

    Attributes:
        id: The vertex key.
        value: The caller payload.
        parents: Parent ids in adjacency order.
        children: Child ids in adjacency order.

    """

    id: str
    value: Any = None
    parents: tuple[str, ...] = ()
    children: tuple[str, ...] = ()

    @property
    def is_root(self) -> bool:
        """Check if the vertex has no parents."""
        return len(self.parents) == 0

    @property
    def is_leaf(self) -> bool:
        """Check if the vertex has no children."""
        return len(self.children) == 0


def _remove_all(ids: list[str], target: str) -> None:
    # walk backwards so deletions don't shift entries still to be visited
    for i in range(len(ids) - 1, -1, -1):
        if ids[i] == target:
            del ids[i]

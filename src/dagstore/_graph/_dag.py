"""Mutable directed acyclic graph keyed by string ids."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic, TypeVar

from dagstore._errors import CycleError, EdgeExistsError, VertexExistsError, VertexNotExistsError

from . import _algorithms
from ._vertex import Vertex, VertexRecord

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)

V = TypeVar("V")


class DAG(Generic[V]):
    """A directed acyclic graph of uniquely keyed vertices.

    The graph owns one mapping from vertex id to record. Adjacency lists
    store ids only, so records never reference each other and a copy is a
    set of fresh records. Every mutation keeps both ends of an edge in
    step: ``b`` is in ``a``'s children exactly when ``a`` is in ``b``'s
    parents. Adjacency lists keep insertion order.

    The graph does no locking. Callers sharing one instance across threads
    must synchronize all access themselves, reads included.

    Example:
        >>> dag = DAG[int]()
        >>> dag.add_vertex("a", 1)
        >>> dag.add_vertex("b", 2)
        >>> dag.add_edge("a", "b")
        >>> [v.id for v in dag.topological_sort_stable()]
        ['a', 'b']

    """

    __slots__ = ("_vertices",)

    def __init__(self) -> None:
        self._vertices: dict[str, VertexRecord] = {}

    # ---- mutation --------------------------------------------------------

    def add_vertex(self, vertex_id: str, value: V | None = None) -> None:
        """Insert a vertex with no edges.

        Args:
            vertex_id: Unique key for the new vertex.
            value: Payload stored as-is.

        Raises:
            VertexExistsError: If *vertex_id* is already present.

        """
        if vertex_id in self._vertices:
            raise VertexExistsError(vertex_id)
        self._vertices[vertex_id] = VertexRecord(id=vertex_id, value=value)
        logger.debug("Added vertex %s", vertex_id)

    def remove_vertex(self, vertex_id: str) -> None:
        """Remove a vertex and every edge touching it.

        Does nothing if the vertex is absent.
        """
        record = self._vertices.get(vertex_id)
        if record is None:
            return
        for parent_id in record.parents:
            self._vertices[parent_id].remove_child(vertex_id)
        for child_id in record.children:
            self._vertices[child_id].remove_parent(vertex_id)
        del self._vertices[vertex_id]
        logger.debug("Removed vertex %s", vertex_id)

    def add_edge(self, from_id: str, to_id: str) -> None:
        """Insert the directed edge ``from_id -> to_id``.

        Args:
            from_id: Parent end of the edge.
            to_id: Child end of the edge.

        Raises:
            CycleError: If the edge is a self-loop or *to_id* already
                reaches *from_id*.
            VertexNotExistsError: If either endpoint is absent.
            EdgeExistsError: If the edge is already present.

        """
        if from_id == to_id:
            raise CycleError(from_id, to_id)
        source = self._record(from_id)
        target = self._record(to_id)
        if to_id in source.children:
            raise EdgeExistsError(from_id, to_id)
        if from_id in _algorithms.descendants(self._vertices, to_id):
            raise CycleError(from_id, to_id)

        source.children.append(to_id)
        target.parents.append(from_id)
        logger.debug("Added edge %s -> %s", from_id, to_id)

    def remove_edge(self, from_id: str, to_id: str) -> None:
        """Remove the directed edge ``from_id -> to_id`` if present.

        Raises:
            VertexNotExistsError: If either endpoint is absent.

        """
        source = self._record(from_id)
        target = self._record(to_id)
        target.remove_parent(from_id)
        source.remove_child(to_id)
        logger.debug("Removed edge %s -> %s", from_id, to_id)

    # ---- queries ---------------------------------------------------------

    def edge_exists(self, from_id: str, to_id: str) -> bool:
        """Check whether ``from_id -> to_id`` is an edge.

        Raises:
            VertexNotExistsError: If either endpoint is absent.

        """
        source = self._record(from_id)
        target = self._record(to_id)
        if not target.parents:
            return False
        return to_id in source.children

    def get_vertex(self, vertex_id: str) -> Vertex | None:
        """Get a snapshot of a vertex, or None if it is absent."""
        record = self._vertices.get(vertex_id)
        if record is None:
            return None
        return record.view()

    def parents(self, vertex_id: str) -> tuple[str, ...]:
        """Direct parents of a vertex, in the order their edges were added."""
        return tuple(self._record(vertex_id).parents)

    def children(self, vertex_id: str) -> tuple[str, ...]:
        """Direct children of a vertex, in the order their edges were added."""
        return tuple(self._record(vertex_id).children)

    def descendants(self, vertex_id: str) -> frozenset[str]:
        """Get all vertices reachable from *vertex_id* along child edges.

        Args:
            vertex_id: The vertex to search from.

        Returns:
            Set of reachable vertex ids, not including *vertex_id*.

        Raises:
            VertexNotExistsError: If *vertex_id* is absent.

        """
        self._record(vertex_id)
        return _algorithms.descendants(self._vertices, vertex_id)

    def ancestors(self, vertex_id: str) -> frozenset[str]:
        """Get all vertices that can reach *vertex_id*.

        Raises:
            VertexNotExistsError: If *vertex_id* is absent.

        """
        self._record(vertex_id)
        return _algorithms.ancestors(self._vertices, vertex_id)

    def has_path(self, from_id: str, to_id: str) -> bool:
        """Check whether a directed path leads from *from_id* to *to_id*.

        Raises:
            VertexNotExistsError: If either vertex is absent.

        """
        self._record(to_id)
        return to_id in self.descendants(from_id)

    def roots(self) -> tuple[str, ...]:
        """Vertices without parents, in insertion order."""
        return tuple(vid for vid, record in self._vertices.items() if not record.parents)

    def leaves(self) -> tuple[str, ...]:
        """Vertices without children, in insertion order."""
        return tuple(vid for vid, record in self._vertices.items() if not record.children)

    def vertices(self) -> Iterator[Vertex]:
        for record in self._vertices.values():
            yield record.view()

    def edges(self) -> Iterator[tuple[str, str]]:
        for vertex_id, record in self._vertices.items():
            for child_id in record.children:
                yield vertex_id, child_id

    @property
    def edge_count(self) -> int:
        return sum(len(record.children) for record in self._vertices.values())

    # ---- copy & sort -----------------------------------------------------

    def copy(self) -> DAG[V]:
        """Return a shallow copy.

        Records are new, payloads are shared. Adjacency lists are duplicated
        from this graph's lists, which already satisfy every invariant, so
        the copy keeps their order and compares equal to the original.
        """
        clone: DAG[V] = DAG()
        clone._vertices = {vid: record.clone() for vid, record in self._vertices.items()}
        logger.debug("Copied graph with %d vertices", len(clone._vertices))
        return clone

    def topological_sort(self) -> list[Vertex]:
        """Return the vertices in a topological order.

        Ties between vertices that become free at the same time are broken
        by the order the vertices were added to the graph, not by id. Use
        `topological_sort_stable` when the order must depend only on the
        graph's ids and edges.

        Returns:
            Vertex snapshots, parents before children. Empty for an empty graph.

        """
        order = _algorithms.topological_sort(self.copy()._vertices)
        return [self._vertices[vid].view() for vid in order]

    def topological_sort_stable(self) -> list[Vertex]:
        """Return the vertices in topological order, smallest id first on ties.

        Ids compare as plain strings, so ``"v-10"`` sorts before ``"v-2"``.

        Returns:
            Vertex snapshots, parents before children. Empty for an empty graph.

        """
        order = _algorithms.topological_sort_stable(self.copy()._vertices)
        return [self._vertices[vid].view() for vid in order]

    # ---- internals -------------------------------------------------------

    def _record(self, vertex_id: str) -> VertexRecord:
        try:
            return self._vertices[vertex_id]
        except KeyError:
            raise VertexNotExistsError(vertex_id) from None

    # ---- dunder ----------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        """Compare ids and ordered adjacency lists. Payloads are ignored."""
        if not isinstance(other, DAG):
            return NotImplemented
        if self._vertices.keys() != other._vertices.keys():
            return False
        for vertex_id, record in self._vertices.items():
            other_record = other._vertices[vertex_id]
            if record.parents != other_record.parents or record.children != other_record.children:
                return False
        return True

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        """Return the number of vertices in the graph."""
        return len(self._vertices)

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._vertices

    def __iter__(self) -> Iterator[str]:
        return iter(self._vertices)

    def __repr__(self) -> str:
        return f"DAG(vertices={len(self._vertices)}, edges={self.edge_count})"

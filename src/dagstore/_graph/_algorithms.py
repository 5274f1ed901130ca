"""Graph algorithms over a mapping of vertex records.

The sort functions consume the mapping they are given: vertices are
detached and deleted as they are emitted. Callers pass a scratch copy.
"""

import heapq
import logging
from collections.abc import Callable, Iterable, Mapping, MutableMapping

from dagstore._errors import CycleError

from ._vertex import VertexRecord

logger = logging.getLogger(__name__)


def descendants(records: Mapping[str, VertexRecord], start: str) -> frozenset[str]:
    """Get every vertex reachable from *start* by following child edges.

    Depth-first, each vertex visited at most once. *start* itself is only
    included if it can reach itself, which a valid DAG never allows.

    Args:
        records: Mapping from vertex id to record.
        start: Id to search from. Must be present in *records*.

    Returns:
        Set of reachable vertex ids.

    """
    return _reach(start, lambda vid: records[vid].children)


def ancestors(records: Mapping[str, VertexRecord], start: str) -> frozenset[str]:
    """Get every vertex that can reach *start* (reverse search over parents).

    Args:
        records: Mapping from vertex id to record.
        start: Id to search from. Must be present in *records*.

    Returns:
        Set of vertex ids with a directed path to *start*.

    """
    return _reach(start, lambda vid: records[vid].parents)


def _reach(start: str, neighbours: Callable[[str], Iterable[str]]) -> frozenset[str]:
    visited: set[str] = set()
    stack = list(neighbours(start))
    while stack:
        current = stack.pop()
        if current not in visited:
            visited.add(current)
            stack.extend(neighbours(current))
    return frozenset(visited)


def _detach(scratch: MutableMapping[str, VertexRecord], vertex_id: str) -> None:
    record = scratch.pop(vertex_id)
    for child_id in record.children:
        child = scratch.get(child_id)
        if child is not None:
            child.remove_parent(vertex_id)


def topological_sort(scratch: MutableMapping[str, VertexRecord]) -> list[str]:
    """Sort by repeated passes over the remaining vertices.

    Each pass walks the remaining vertices in mapping order. A vertex with
    no remaining parents at the moment it is visited is emitted and
    detached, which can free later vertices within the same pass. Ties are
    therefore broken by mapping order, not by id.

    Args:
        scratch: Vertex records to sort. Emptied on return.

    Returns:
        Vertex ids in topological order.

    Raises:
        CycleError: If a full pass emits nothing.

    """
    order: list[str] = []
    passes = 0
    while scratch:
        passes += 1
        emitted = len(order)
        for vertex_id in list(scratch):
            if scratch[vertex_id].parents:
                continue
            _detach(scratch, vertex_id)
            order.append(vertex_id)
        if len(order) == emitted:
            raise CycleError
    logger.debug("Topological sort emitted %d vertices in %d passes", len(order), passes)
    return order


def topological_sort_stable(scratch: MutableMapping[str, VertexRecord]) -> list[str]:
    """Sort deterministically, always emitting the smallest available id.

    Vertices with no remaining parents wait in a min-heap keyed by id.
    After each pop the emitted vertex is detached, and any child left
    without parents joins the heap before the next pop.

    Args:
        scratch: Vertex records to sort. Emptied on return.

    Returns:
        Vertex ids in topological order with lexicographic tie-breaking.

    Raises:
        CycleError: If vertices remain but none is free of parents.

    Example:
        With edges v-4 -> v-2 -> v-1 and an unconnected v-3 the order is
        v-3, v-4, v-2, v-1.

    """
    total = len(scratch)
    ready = [vid for vid, record in scratch.items() if not record.parents]
    heapq.heapify(ready)
    order: list[str] = []

    while ready:
        vertex_id = heapq.heappop(ready)
        order.append(vertex_id)
        children = scratch[vertex_id].children
        _detach(scratch, vertex_id)
        for child_id in children:
            child = scratch.get(child_id)
            if child is not None and not child.parents:
                heapq.heappush(ready, child_id)

    if len(order) != total:
        raise CycleError
    logger.debug("Stable topological sort emitted %d vertices", len(order))
    return order

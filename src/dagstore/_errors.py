"""Exceptions raised by graph operations."""


class DagError(Exception):
    """Base class for all graph errors."""


class VertexExistsError(DagError):
    """A vertex with the same id is already in the graph."""

    def __init__(self, vertex_id: str) -> None:
        self.vertex_id = vertex_id
        super().__init__(f"Vertex '{vertex_id}' already exists")


class VertexNotExistsError(DagError, KeyError):
    """A referenced vertex id is not in the graph."""

    def __init__(self, vertex_id: str) -> None:
        self.vertex_id = vertex_id
        super().__init__(f"Vertex '{vertex_id}' does not exist")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class EdgeExistsError(DagError):
    """The directed edge is already in the graph."""

    def __init__(self, from_id: str, to_id: str) -> None:
        self.from_id = from_id
        self.to_id = to_id
        super().__init__(f"Edge '{from_id}' -> '{to_id}' already exists")


class CycleError(DagError):
    """Adding an edge would create a cycle, or a cycle was found while sorting.

    Attributes:
        from_id: Source of the rejected edge, or None when raised by a sort.
        to_id: Target of the rejected edge, or None when raised by a sort.

    """

    def __init__(self, from_id: str | None = None, to_id: str | None = None) -> None:
        self.from_id = from_id
        self.to_id = to_id
        if from_id is None or to_id is None:
            msg = "Cycle detected in graph"
        elif from_id == to_id:
            msg = f"Self-loop on '{from_id}' is not allowed"
        else:
            msg = f"Edge '{from_id}' -> '{to_id}' would create a cycle"
        super().__init__(msg)

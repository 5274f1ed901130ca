"""In-memory directed acyclic graph with cycle prevention and topological sorts."""

__all__ = [
    "DAG",
    "CycleError",
    "DagError",
    "EdgeExistsError",
    "TreeStyle",
    "Vertex",
    "VertexExistsError",
    "VertexNotExistsError",
    "build_rich_tree",
    "configure_logging",
    "format_tree",
    "print_tree",
]

from ._errors import CycleError, DagError, EdgeExistsError, VertexExistsError, VertexNotExistsError
from ._graph import DAG, Vertex
from ._logging import configure_logging
from ._render import TreeStyle, build_rich_tree, format_tree, print_tree

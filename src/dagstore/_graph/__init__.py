"""Graph module providing the mutable DAG store.

This module contains:
- DAG[V]: A mutable directed acyclic graph generic over the payload type
- Vertex: Read-only snapshot of a vertex
- descendants/ancestors and the two topological sorts over vertex records
"""

from ._algorithms import ancestors, descendants, topological_sort, topological_sort_stable
from ._dag import DAG
from ._vertex import Vertex, VertexRecord

__all__ = [
    "DAG",
    "Vertex",
    "VertexRecord",
    "ancestors",
    "descendants",
    "topological_sort",
    "topological_sort_stable",
]

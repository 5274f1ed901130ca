"""Tests for DAG.topological_sort and DAG.topological_sort_stable."""

import random

import pytest

from dagstore import DAG, Vertex


def build(ids: list[str], edges: list[tuple[str, str]]) -> DAG[int]:
    dag: DAG[int] = DAG()
    for i, vid in enumerate(ids):
        dag.add_vertex(vid, i + 1)
    for src, dst in edges:
        dag.add_edge(src, dst)
    return dag


def ids(vertices: list[Vertex]) -> list[str]:
    return [v.id for v in vertices]


def assert_topological(dag: DAG, order: list[str]) -> None:
    assert sorted(order) == sorted(dag)
    position = {vid: i for i, vid in enumerate(order)}
    for src, dst in dag.edges():
        assert position[src] < position[dst]


@pytest.fixture
def random_dag() -> DAG[int]:
    rng = random.Random(1234)
    names = [f"n{i:02d}" for i in range(40)]
    rng.shuffle(names)
    dag = build(names, [])
    for _ in range(120):
        src, dst = rng.sample(names, 2)
        # only forward edges in the shuffled order, so none can close a cycle
        if names.index(src) > names.index(dst):
            src, dst = dst, src
        if not dag.edge_exists(src, dst):
            dag.add_edge(src, dst)
    return dag


class TestTopologicalSort:
    def test_single_valid_order(self) -> None:
        dag = build(
            ["v-1", "v-2", "v-3", "v-4"],
            [("v-1", "v-2"), ("v-1", "v-3"), ("v-1", "v-4"), ("v-2", "v-3"), ("v-3", "v-4")],
        )
        assert ids(dag.topological_sort()) == ["v-1", "v-2", "v-3", "v-4"]

    def test_empty_graph(self) -> None:
        assert DAG().topological_sort() == []

    def test_does_not_mutate_graph(self) -> None:
        dag = build(["a", "b", "c"], [("a", "b"), ("b", "c")])
        before = dag.copy()
        dag.topological_sort()
        assert dag == before
        assert len(dag) == 3

    def test_returns_full_snapshots(self) -> None:
        dag = build(["a", "b"], [("a", "b")])
        result = dag.topological_sort()
        assert result == [
            Vertex(id="a", value=1, parents=(), children=("b",)),
            Vertex(id="b", value=2, parents=("a",), children=()),
        ]

    def test_respects_edges(self, random_dag: DAG[int]) -> None:
        assert_topological(random_dag, ids(random_dag.topological_sort()))

    def test_ties_follow_insertion_order(self) -> None:
        dag = build(["z", "y", "x"], [])
        assert ids(dag.topological_sort()) == ["z", "y", "x"]


class TestTopologicalSortStable:
    def test_lexicographic_tie_breaking(self) -> None:
        dag = build(
            ["v-1", "v-2", "v-3", "v-4", "v-5", "v-6"],
            [("v-4", "v-2"), ("v-2", "v-1")],
        )
        assert ids(dag.topological_sort_stable()) == ["v-3", "v-4", "v-2", "v-1", "v-5", "v-6"]

    def test_empty_graph(self) -> None:
        assert DAG().topological_sort_stable() == []

    def test_does_not_mutate_graph(self) -> None:
        dag = build(["a", "b", "c"], [("a", "c"), ("b", "c")])
        before = dag.copy()
        dag.topological_sort_stable()
        assert dag == before

    def test_repeatable(self, random_dag: DAG[int]) -> None:
        first = ids(random_dag.topological_sort_stable())
        assert ids(random_dag.topological_sort_stable()) == first
        assert len(first) == len(random_dag)

    def test_independent_of_insertion_order(self) -> None:
        edges = [("b", "d"), ("a", "d"), ("c", "e")]
        forward = build(["a", "b", "c", "d", "e"], edges)
        backward = build(["e", "d", "c", "b", "a"], list(reversed(edges)))
        assert ids(forward.topological_sort_stable()) == ids(backward.topological_sort_stable())
        assert ids(forward.topological_sort_stable()) == ["a", "b", "c", "d", "e"]

    def test_respects_edges(self, random_dag: DAG[int]) -> None:
        assert_topological(random_dag, ids(random_dag.topological_sort_stable()))

    def test_smallest_available_vertex_always_chosen(self, random_dag: DAG[int]) -> None:
        order = ids(random_dag.topological_sort_stable())
        emitted: set[str] = set()
        for vid in order:
            available = [
                candidate
                for candidate in random_dag
                if candidate not in emitted and set(random_dag.parents(candidate)) <= emitted
            ]
            assert vid == min(available)
            emitted.add(vid)

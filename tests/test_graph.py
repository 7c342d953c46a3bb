import logging
import random

import pytest

from genericgraph import (
    DuplicateLabelError,
    EdgeNotFoundError,
    GenericGraph,
    LabelNotFoundError,
    VertexIndexError,
)


def test_construct_and_deconstruct(path_graph):
    vertices, edges = path_graph.to_lists()
    assert vertices == ["a", "b", "c"]
    assert edges == [(0, 1, "x"), (1, 2, "y")]


def test_from_lists_matches_constructor():
    graph = GenericGraph.from_lists(["a", "b"], [(0, 1, "x")])
    assert graph == GenericGraph(["a", "b"], [(0, 1, "x")])


def test_empty_graph():
    graph = GenericGraph()
    assert graph.get_vertex_count() == 0
    assert graph.to_lists() == ([], [])
    assert str(graph) == ""


def test_edges_are_mirrored(path_graph):
    assert path_graph.get_adjacent(0) == [(1, "x")]
    assert path_graph.get_adjacent(1) == [(0, "x"), (2, "y")]
    assert path_graph.get_adjacent(2) == [(1, "y")]


def test_self_loop_stored_once():
    graph = GenericGraph(["a"], [(0, 0, "loop")])
    assert graph.get_adjacent(0) == [(0, "loop")]
    assert graph.to_lists() == (["a"], [(0, 0, "loop")])


def test_deconstruct_canonicalizes_and_sorts():
    graph = GenericGraph(["a", "b", "c"], [(2, 1, "y"), (1, 0, "x"), (2, 0, "z")])
    _, edges = graph.to_lists()
    assert edges == [(0, 1, "x"), (0, 2, "z"), (1, 2, "y")]


def test_parallel_edges_survive_deconstruction(molecule):
    _, edges = molecule.to_lists()
    assert edges == [(0, 1, 1), (0, 3, 1), (1, 2, 2), (1, 2, 1), (2, 2, 0)]


def test_parallel_edges_with_equal_payload_survive():
    graph = GenericGraph(["a", "b"], [(0, 1, "x"), (1, 0, "x")])
    assert graph.to_lists()[1] == [(0, 1, "x"), (0, 1, "x")]
    assert GenericGraph.from_lists(*graph.to_lists()) == graph


def test_round_trip_molecule(molecule):
    assert GenericGraph.from_lists(*molecule.to_lists()) == molecule


def test_duplicate_label_rejected():
    with pytest.raises(DuplicateLabelError):
        GenericGraph(["a", "b", "a"], [])


def test_edge_out_of_range_rejected():
    with pytest.raises(VertexIndexError):
        GenericGraph(["a", "b"], [(0, 2, "x")])
    with pytest.raises(VertexIndexError):
        GenericGraph(["a", "b"], [(-1, 0, "x")])


def test_vertex_lookups(path_graph):
    assert path_graph.get_vertices() == ["a", "b", "c"]
    assert path_graph.get_vertex_count() == 3
    assert len(path_graph) == 3
    assert path_graph.get_vertex_by_id(2) == "c"
    assert path_graph.get_vertex_id("b") == 1
    assert "a" in path_graph
    assert "z" not in path_graph
    assert path_graph.reverse_index == {"a": 0, "b": 1, "c": 2}


def test_vertex_lookup_errors(path_graph):
    with pytest.raises(VertexIndexError):
        path_graph.get_vertex_by_id(3)
    with pytest.raises(LabelNotFoundError):
        path_graph.get_vertex_id("z")


def test_neighbors_by_label(path_graph):
    assert path_graph.get_neighbors("b") == [("a", "x"), ("c", "y")]
    assert path_graph.get_neighbors_safe("b") == [("a", "x"), ("c", "y")]


def test_neighbors_by_unknown_label(path_graph):
    with pytest.raises(LabelNotFoundError):
        path_graph.get_neighbors("z")
    with pytest.raises(KeyError):
        path_graph.get_neighbors("z")
    assert path_graph.get_neighbors_safe("z") is None


def test_neighbors_by_index(path_graph):
    assert path_graph.get_adjacent_safe(1) == [(0, "x"), (2, "y")]
    assert path_graph.get_adjacent_safe(3) is None
    assert path_graph.get_adjacent_safe(-1) is None
    with pytest.raises(VertexIndexError):
        path_graph.get_adjacent(3)
    with pytest.raises(IndexError):
        path_graph.get_adjacent(-1)


def test_safe_wrappers(path_graph):
    assert path_graph.safe_indices(1) == [0, 2]
    assert path_graph.safe_adjacent(2) == [(1, "y")]
    assert path_graph.safe_indices(10) == []
    assert path_graph.safe_adjacent(10) == []


def test_get_edge(molecule):
    assert molecule.get_edge(0, 1) == 1
    assert molecule.get_edge(2, 1) == 2
    assert molecule.get_edge(2, 2) == 0


def test_get_edge_errors(path_graph):
    with pytest.raises(EdgeNotFoundError):
        path_graph.get_edge(0, 2)
    with pytest.raises(VertexIndexError):
        path_graph.get_edge(5, 0)


def test_is_connected(path_graph):
    assert path_graph.is_connected(0, 1)
    assert path_graph.is_connected(1, 0)
    assert not path_graph.is_connected(0, 2)
    assert not path_graph.is_connected(99, 0)
    assert not path_graph.is_connected(-1, 0)


def test_stores_are_read_only(path_graph):
    path_graph.reverse_index["z"] = 7
    assert "z" not in path_graph
    path_graph.get_vertices().append("z")
    assert path_graph.get_vertex_count() == 3
    assert isinstance(path_graph.adjacency, tuple)


def test_equality_ignores_adjacency_order():
    first = GenericGraph(["a", "b"], [(0, 1, "x"), (0, 1, "y")])
    second = GenericGraph(["a", "b"], [(0, 1, "y"), (1, 0, "x")])
    assert first == second
    assert first != GenericGraph(["a", "b"], [(0, 1, "x")])
    assert first != GenericGraph(["b", "a"], [(0, 1, "x"), (0, 1, "y")])


def test_display(path_graph):
    assert str(path_graph) == "'a'\t'x'\t'b'\n'b'\t'y'\t'c'\n"
    assert repr(path_graph) == "GenericGraph(vertices=3, edges=2)"


def test_display_skips_loops():
    graph = GenericGraph(["a", "b"], [(0, 0, "l"), (1, 0, "x")])
    assert str(graph) == "'a'\t'x'\t'b'\n"


def test_construction_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="genericgraph"):
        GenericGraph(["a", "b", "c"], [(0, 1, "x"), (1, 2, "y")])
    assert "Built graph with 3 vertices and 2 edges" in caplog.text


@pytest.mark.parametrize("seed", range(5))
def test_random_round_trip(seed):
    rng = random.Random(seed)
    nVertex = rng.randint(1, 12)
    vertices = [f"v{i}" for i in range(nVertex)]
    edges = [
        (rng.randrange(nVertex), rng.randrange(nVertex), rng.randint(0, 3))
        for _ in range(rng.randint(0, 25))
    ]
    graph = GenericGraph(vertices, edges)

    new_vertices, new_edges = graph.to_lists()
    assert new_vertices == vertices
    expected = sorted((min(a, b), max(a, b), e) for a, b, e in edges)
    assert sorted(new_edges) == expected
    assert GenericGraph.from_lists(new_vertices, new_edges) == graph


def test_neighbors_of_unhashable_label(path_graph):
    assert path_graph.get_neighbors_safe(["a"]) is None
    assert ["a"] not in path_graph

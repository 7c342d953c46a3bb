"""
Structural operations on generic graphs.

This module provides operations that change the vertex or edge set:

- Extracting induced subgraphs
- Adding and removing vertices
- Adding and removing edges
- Disjoint union of two graphs

None of them modifies its input; each returns a new graph. Operations that
remove vertices renumber the survivors, so canonical indices obtained from the
input graph must not be used on the result.
"""

import logging
from typing import Hashable, Iterable, Tuple

from ..core.graph import GenericGraph
from ..core.utils import (
    EdgeTriple,
    build_renumbering,
    check_index,
    complement_indices,
    offset_edges,
    remap_edges,
)

logger = logging.getLogger(__name__)


def subgraph(graph: GenericGraph, keep_indices: Iterable[int]) -> GenericGraph:
    """
    Get the subgraph induced by the given vertices.

    Note that indexation will be CHANGED: kept vertices are renumbered from 0
    in their original relative order.

    Args:
        graph: Source graph
        keep_indices: Canonical indices of the vertices to keep; indices outside
            the graph are ignored

    Returns:
        Induced subgraph
    """
    vertices, edges = graph.to_lists()
    aIndex_new = build_renumbering(len(vertices), keep_indices)

    new_vertices = [label for label, new_id in zip(vertices, aIndex_new) if new_id >= 0]
    new_edges = remap_edges(edges, aIndex_new)

    logger.debug(f"Extracted subgraph with {len(new_vertices)} of {len(vertices)} vertices")
    return GenericGraph.from_lists(new_vertices, new_edges)


def add_vertices(graph: GenericGraph, labels: Iterable[Hashable]) -> GenericGraph:
    """
    Append isolated vertices to the graph.

    Existing vertices keep their indices; new ones follow in the given order.

    Raises:
        DuplicateLabelError: If a new label is already used or repeated
    """
    vertices, edges = graph.to_lists()
    new_labels = list(labels)
    logger.debug(f"Adding {len(new_labels)} vertices to graph with {len(vertices)} vertices")
    return GenericGraph.from_lists(vertices + new_labels, edges)


def remove_vertices(graph: GenericGraph, indices: Iterable[int]) -> GenericGraph:
    """
    Remove vertices and every edge touching them.

    Note that indexation will be CHANGED, exactly as in :func:`subgraph`.

    Args:
        graph: Source graph
        indices: Canonical indices of the vertices to drop; indices outside the
            graph are ignored

    Returns:
        Graph without the given vertices
    """
    keep_indices = complement_indices(graph.get_vertex_count(), indices)
    return subgraph(graph, keep_indices)


def remove_edges(graph: GenericGraph, pairs: Iterable[Tuple[int, int]]) -> GenericGraph:
    """
    Remove every edge between the given vertex pairs.

    Pairs are unordered: ``(a, b)`` also removes edges stored as ``(b, a)``.
    All parallel edges between a pair are removed. Isolated vertices are kept
    and indexation is NOT affected.

    Args:
        graph: Source graph
        pairs: Endpoint pairs to disconnect

    Returns:
        Graph without the given edges
    """
    pair_set = {(min(a, b), max(a, b)) for a, b in pairs}
    vertices, edges = graph.to_lists()
    new_edges = [edge for edge in edges if (edge[0], edge[1]) not in pair_set]

    logger.debug(f"Removed {len(edges) - len(new_edges)} edges")
    return GenericGraph.from_lists(vertices, new_edges)


def add_edges(graph: GenericGraph, edges: Iterable[EdgeTriple]) -> GenericGraph:
    """
    Add edges to the graph without rebuilding it.

    Each ``(a, b, payload)`` is appended to the adjacency lists of ``a`` and
    ``b``; a self-loop is appended once, as it would be on construction.
    Indexation is NOT affected.

    Raises:
        VertexIndexError: If an endpoint is out of range; the graph is not
            extended at all in that case
    """
    nVertex = graph.get_vertex_count()
    aEdge_new = [
        (check_index(at, nVertex), check_index(other, nVertex), payload)
        for at, other, payload in edges
    ]

    aAdjacency = [list(neighbors) for neighbors in graph.adjacency]
    for at, other, payload in aEdge_new:
        aAdjacency[at].append((other, payload))
        if at != other:
            aAdjacency[other].append((at, payload))

    logger.debug(f"Added {len(aEdge_new)} edges")
    return GenericGraph._from_stores(
        graph.index,
        graph.reverse_index,
        tuple(tuple(neighbors) for neighbors in aAdjacency),
    )


def sum_graphs(graph_a: GenericGraph, graph_b: GenericGraph) -> GenericGraph:
    """
    Get the disjoint union of two graphs.

    Vertices of ``graph_b`` follow those of ``graph_a``; their indices are
    shifted by the vertex count of ``graph_a``.

    Raises:
        DuplicateLabelError: If the graphs share a label
    """
    vertices_a, edges_a = graph_a.to_lists()
    vertices_b, edges_b = graph_b.to_lists()

    new_edges = edges_a + offset_edges(edges_b, len(vertices_a))
    logger.debug(f"Summing graphs with {len(vertices_a)} and {len(vertices_b)} vertices")
    return GenericGraph.from_lists(vertices_a + vertices_b, new_edges)


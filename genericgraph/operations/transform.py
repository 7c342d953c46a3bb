"""
Payload and label transforms for generic graphs.

These operations keep the structure of a graph and only retag what is stored
in it. They reuse the existing adjacency instead of rebuilding the graph.
"""

import logging
from collections import Counter
from typing import Any, Callable, Dict, Hashable, List, Sequence, Tuple

from ..core.exceptions import DuplicateLabelError, GraphError
from ..core.graph import GenericGraph

logger = logging.getLogger(__name__)


def map_edges(graph: GenericGraph, func: Callable[[int, Any], Tuple[int, Any]]) -> GenericGraph:
    """
    Apply ``func(neighbor_index, payload)`` to every adjacency entry.

    ``func`` returns ``(neighbor_index, new_payload)``. The neighbor index must
    come back unchanged, so only payloads are affected.

    Raises:
        GraphError: If ``func`` changes a neighbor index
    """
    aAdjacency = []
    for vertex_id, neighbors in enumerate(graph.adjacency):
        new_neighbors = []
        for other, payload in neighbors:
            new_other, new_payload = func(other, payload)
            if new_other != other:
                raise GraphError(
                    f"Edge transform moved neighbor {other} of vertex {vertex_id} to {new_other}"
                )
            new_neighbors.append((other, new_payload))
        aAdjacency.append(tuple(new_neighbors))

    return GenericGraph._from_stores(graph.index, graph.reverse_index, tuple(aAdjacency))


def map_payloads(graph: GenericGraph, func: Callable[[Any], Any]) -> GenericGraph:
    """Apply ``func`` to every edge payload."""
    return map_edges(graph, lambda other, payload: (other, func(payload)))


def map_adjacency(graph: GenericGraph,
                  func: Callable[[List[Tuple[int, Any]]], Sequence[Tuple[int, Any]]]) -> GenericGraph:
    """
    Apply ``func`` to each whole adjacency list.

    ``func`` may reorder entries and rewrite payloads, but each resulting list
    must hold the same neighbor indices as before.

    Raises:
        GraphError: If ``func`` adds, drops or changes neighbors
    """
    aAdjacency = []
    for vertex_id, neighbors in enumerate(graph.adjacency):
        new_neighbors = tuple(func(list(neighbors)))
        if Counter(other for other, _ in new_neighbors) != Counter(other for other, _ in neighbors):
            raise GraphError(f"Adjacency transform changed the neighbors of vertex {vertex_id}")
        aAdjacency.append(new_neighbors)

    return GenericGraph._from_stores(graph.index, graph.reverse_index, tuple(aAdjacency))


def map_vertices(graph: GenericGraph, func: Callable[[Hashable], Hashable]) -> GenericGraph:
    """
    Relabel every vertex with ``func``.

    Indices and edges are kept; the reverse index is rebuilt.

    Raises:
        DuplicateLabelError: If ``func`` maps two labels to the same value
    """
    index = tuple(func(label) for label in graph.index)
    reverse_index: Dict[Hashable, int] = {}
    for vertex_id, label in enumerate(index):
        if label in reverse_index:
            raise DuplicateLabelError(label)
        reverse_index[label] = vertex_id

    logger.debug(f"Relabelled {len(index)} vertices")
    return GenericGraph._from_stores(index, reverse_index, graph.adjacency)

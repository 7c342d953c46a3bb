"""
Core graph data structure.

This module provides the fundamental immutable graph representation without
structural operations. A :class:`GenericGraph` keeps three stores:

- ``index``: vertex labels, position = canonical index
- ``reverse_index``: label -> canonical index
- ``adjacency``: canonical index -> tuple of ``(neighbor_index, payload)``

Non-loop edges are mirrored in both endpoint lists, self-loops appear once in
their vertex's list. Every structural change goes through
:meth:`GenericGraph.from_lists`, which rebuilds all three stores together.
"""

import logging
from typing import Any, Dict, Hashable, Iterable, List, Optional, Sequence, Tuple

from .exceptions import (
    DuplicateLabelError,
    EdgeNotFoundError,
    LabelNotFoundError,
)
from .utils import EdgeTriple, check_index, in_range, sort_edges

logger = logging.getLogger(__name__)

Adjacency = Tuple[Tuple[int, Any], ...]


class GenericGraph:
    """
    Undirected multigraph with arbitrary vertex labels and edge payloads.

    Loops and multiple edges between two vertices are allowed. Labels must be
    hashable and unique; payloads only need equality. Instances are never
    modified after construction: every operation in
    :mod:`genericgraph.operations` returns a new graph.

    Canonical indices are dense (``0 .. n-1``) and are only valid for the
    graph they came from. Operations that change the vertex set renumber, so
    indices held across such a call must be resolved again through labels.
    """

    def __init__(self, vertices: Iterable[Hashable] = (), edges: Iterable[EdgeTriple] = ()):
        """
        Build a graph from a vertex list and an edge list.

        Args:
            vertices: Vertex labels in canonical order
            edges: ``(src_index, dst_index, payload)`` triples

        Raises:
            DuplicateLabelError: If a label occurs twice
            VertexIndexError: If an edge endpoint is outside ``[0, len(vertices))``
        """
        index = tuple(vertices)
        reverse_index: Dict[Hashable, int] = {}
        for i, label in enumerate(index):
            if label in reverse_index:
                raise DuplicateLabelError(label)
            reverse_index[label] = i

        nVertex = len(index)
        aAdjacency: List[List[Tuple[int, Any]]] = [[] for _ in range(nVertex)]
        nEdge = 0
        for at, other, payload in edges:
            at = check_index(at, nVertex)
            other = check_index(other, nVertex)
            aAdjacency[at].append((other, payload))
            if at != other:
                aAdjacency[other].append((at, payload))
            nEdge += 1

        self._index = index
        self._reverse_index = reverse_index
        self._adjacency: Tuple[Adjacency, ...] = tuple(tuple(a) for a in aAdjacency)

        logger.debug(f"Built graph with {nVertex} vertices and {nEdge} edges")

    @classmethod
    def from_lists(cls, vertices: Iterable[Hashable], edges: Iterable[EdgeTriple]) -> "GenericGraph":
        """Build a graph from the canonical ``(vertices, edges)`` pair."""
        return cls(vertices, edges)

    @classmethod
    def _from_stores(cls, index: Tuple[Hashable, ...], reverse_index: Dict[Hashable, int],
                     adjacency: Tuple[Adjacency, ...]) -> "GenericGraph":
        """
        Wrap already consistent stores without rebuilding them.

        Used by operations that keep the vertex set and only extend or retag
        adjacency. The caller is responsible for the mirroring invariant.
        """
        graph = cls.__new__(cls)
        graph._index = index
        graph._reverse_index = reverse_index
        graph._adjacency = adjacency
        return graph

    def to_lists(self) -> Tuple[List[Hashable], List[EdgeTriple]]:
        """
        Deconstruct the graph into the canonical ``(vertices, edges)`` pair.

        Each undirected edge is reported once as ``(min, max, payload)``, taken
        from the adjacency list of its lower endpoint. Edges are sorted by
        endpoints; parallel edges keep their adjacency order, so distinct
        parallel edges (even with equal payloads) all survive.

        Returns:
            Tuple of (list of labels, list of edge triples)
        """
        edges = [
            (at, other, payload)
            for at, neighbors in enumerate(self._adjacency)
            for other, payload in neighbors
            if at <= other
        ]
        return list(self._index), sort_edges(edges)

    # ========================================================================
    # STORES
    # ========================================================================

    @property
    def index(self) -> Tuple[Hashable, ...]:
        """Vertex labels in canonical order."""
        return self._index

    @property
    def reverse_index(self) -> Dict[Hashable, int]:
        """Copy of the label -> canonical index map."""
        return dict(self._reverse_index)

    @property
    def adjacency(self) -> Tuple[Adjacency, ...]:
        """Adjacency lists in canonical order."""
        return self._adjacency

    # ========================================================================
    # VERTEX LOOKUPS
    # ========================================================================

    def get_vertices(self) -> List[Hashable]:
        """Get all vertex labels in canonical order."""
        return list(self._index)

    def get_vertex_count(self) -> int:
        """Get the number of vertices."""
        return len(self._index)

    def get_vertex_by_id(self, vertex_id: int) -> Hashable:
        """
        Get the label stored at a canonical index.

        Raises:
            VertexIndexError: If ``vertex_id`` is out of range
        """
        vertex_id = check_index(vertex_id, len(self._index))
        return self._index[vertex_id]

    def get_vertex_id(self, label: Hashable) -> int:
        """
        Get the canonical index of a label.

        Raises:
            LabelNotFoundError: If no vertex carries ``label``
        """
        try:
            return self._reverse_index[label]
        except KeyError:
            raise LabelNotFoundError(label) from None

    # ========================================================================
    # NEIGHBORHOOD LOOKUPS
    # ========================================================================

    def get_neighbors(self, label: Hashable) -> List[Tuple[Hashable, Any]]:
        """
        Get the neighbors of a vertex addressed by label.

        Args:
            label: Vertex label

        Returns:
            List of ``(neighbor_label, payload)`` pairs

        Raises:
            LabelNotFoundError: If no vertex carries ``label``
        """
        vertex_id = self.get_vertex_id(label)
        return [(self._index[other], payload) for other, payload in self._adjacency[vertex_id]]

    def get_neighbors_safe(self, label: Hashable) -> Optional[List[Tuple[Hashable, Any]]]:
        """Same as :meth:`get_neighbors`, but ``None`` for an unknown label."""
        if label not in self:
            return None
        return self.get_neighbors(label)

    def get_adjacent(self, vertex_id: int) -> List[Tuple[int, Any]]:
        """
        Get the adjacency list of a vertex addressed by canonical index.

        Raises:
            VertexIndexError: If ``vertex_id`` is out of range
        """
        vertex_id = check_index(vertex_id, len(self._index))
        return list(self._adjacency[vertex_id])

    def get_adjacent_safe(self, vertex_id: int) -> Optional[List[Tuple[int, Any]]]:
        """Same as :meth:`get_adjacent`, but ``None`` for an invalid index."""
        if not in_range(vertex_id, len(self._index)):
            return None
        return list(self._adjacency[vertex_id])

    def safe_adjacent(self, vertex_id: int) -> List[Tuple[int, Any]]:
        """Adjacency list of ``vertex_id``, empty if the index is invalid."""
        return self.get_adjacent_safe(vertex_id) or []

    def safe_indices(self, vertex_id: int) -> List[int]:
        """Neighbor indices of ``vertex_id``, empty if the index is invalid."""
        return [other for other, _ in self.safe_adjacent(vertex_id)]

    def get_edge(self, from_id: int, to_id: int) -> Any:
        """
        Get the payload of the first edge from ``from_id`` to ``to_id``.

        Args:
            from_id: Canonical index of the first endpoint
            to_id: Canonical index of the second endpoint

        Returns:
            Edge payload

        Raises:
            VertexIndexError: If ``from_id`` is out of range
            EdgeNotFoundError: If the vertices are not adjacent
        """
        for other, payload in self.get_adjacent(from_id):
            if other == to_id:
                return payload
        raise EdgeNotFoundError(from_id, to_id)

    def is_connected(self, from_id: int, to_id: int) -> bool:
        """Check whether an edge joins ``from_id`` and ``to_id``. Never raises."""
        return to_id in self.safe_indices(from_id)

    # ========================================================================
    # COMPARISON & DISPLAY
    # ========================================================================

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, label) -> bool:
        try:
            return label in self._reverse_index
        except TypeError:
            # unhashable labels can never be present
            return False

    def __eq__(self, other) -> bool:
        """Structural equality, ignoring the order inside adjacency lists."""
        if not isinstance(other, GenericGraph):
            return NotImplemented
        if self._index != other._index:
            return False
        return all(
            _same_entries(mine, theirs)
            for mine, theirs in zip(self._adjacency, other._adjacency)
        )

    __hash__ = None

    def __str__(self) -> str:
        """Tab separated ``from  payload  to`` lines, one per non-loop edge."""
        _, edges = self.to_lists()
        return "".join(
            f"{self._index[at]!r}\t{payload!r}\t{self._index[other]!r}\n"
            for at, other, payload in edges
            if at < other
        )

    def __repr__(self) -> str:
        _, edges = self.to_lists()
        return f"{type(self).__name__}(vertices={len(self._index)}, edges={len(edges)})"


def _same_entries(left: Sequence[Tuple[int, Any]], right: Sequence[Tuple[int, Any]]) -> bool:
    """Multiset comparison of two adjacency lists; payloads need only ``==``."""
    if len(left) != len(right):
        return False
    remaining = list(right)
    for entry in left:
        try:
            remaining.remove(entry)
        except ValueError:
            return False
    return True

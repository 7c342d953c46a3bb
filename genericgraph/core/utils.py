"""
Utility functions for genericgraph.

This module provides the index bookkeeping shared by the structural
operations: dense renumbering maps after vertex removal, index offsets for
graph union and the canonical ordering of edge triples.
"""

import logging
import operator
from typing import Any, Iterable, List, Sequence, Tuple

import numpy as np

from .exceptions import VertexIndexError

logger = logging.getLogger(__name__)

EdgeTriple = Tuple[int, int, Any]


def in_range(vertex_id, nVertex: int) -> bool:
    """Check that ``vertex_id`` is an integer index into ``[0, nVertex)``."""
    try:
        vertex_id = operator.index(vertex_id)
    except TypeError:
        return False
    return 0 <= vertex_id < nVertex


def check_index(vertex_id, nVertex: int) -> int:
    """
    Validate a canonical index.

    Returns:
        The index as a plain ``int``

    Raises:
        VertexIndexError: If the index is out of range or not an integer
    """
    if not in_range(vertex_id, nVertex):
        raise VertexIndexError(vertex_id, nVertex)
    return operator.index(vertex_id)


def build_renumbering(nVertex: int, keep_indices: Iterable[int]) -> np.ndarray:
    """
    Build an old-index -> new-index map for keeping a subset of vertices.

    Kept vertices are renumbered densely from 0 in their original relative
    order. Indices outside ``[0, nVertex)`` are ignored.

    Args:
        nVertex: Number of vertices in the source graph
        keep_indices: Canonical indices of the vertices to keep

    Returns:
        Integer array of length ``nVertex``; dropped vertices map to -1
    """
    aIndex_valid = np.fromiter(
        (operator.index(i) for i in keep_indices if in_range(i, nVertex)), dtype=np.int64
    )
    aFlag_keep = np.zeros(nVertex, dtype=bool)
    aFlag_keep[aIndex_valid] = True

    aIndex_new = np.cumsum(aFlag_keep, dtype=np.int64) - 1
    aIndex_new[~aFlag_keep] = -1
    return aIndex_new


def complement_indices(nVertex: int, drop_indices: Iterable[int]) -> List[int]:
    """
    Get the canonical indices that are not in ``drop_indices``.

    Args:
        nVertex: Number of vertices in the source graph
        drop_indices: Canonical indices to exclude

    Returns:
        Ascending list of the remaining indices
    """
    aFlag_keep = np.ones(nVertex, dtype=bool)
    aIndex_drop = np.fromiter(
        (operator.index(i) for i in drop_indices if in_range(i, nVertex)), dtype=np.int64
    )
    aFlag_keep[aIndex_drop] = False
    return np.flatnonzero(aFlag_keep).tolist()


def remap_edges(edges: Sequence[EdgeTriple], aIndex_new: np.ndarray) -> List[EdgeTriple]:
    """
    Translate edge endpoints through a renumbering map.

    Edges touching a dropped vertex (mapped to -1) are discarded.

    Args:
        edges: Edge triples in old indices
        aIndex_new: Map produced by :func:`build_renumbering`

    Returns:
        Edge triples in new indices, input order preserved
    """
    remapped = []
    for at, other, payload in edges:
        new_at = int(aIndex_new[at])
        new_other = int(aIndex_new[other])
        if new_at < 0 or new_other < 0:
            continue
        remapped.append((new_at, new_other, payload))
    return remapped


def offset_edges(edges: Sequence[EdgeTriple], offset: int) -> List[EdgeTriple]:
    """
    Shift both endpoints of every edge by ``offset``.

    Args:
        edges: Edge triples
        offset: Amount added to each endpoint

    Returns:
        Shifted edge triples
    """
    return [(at + offset, other + offset, payload) for at, other, payload in edges]


def sort_edges(edges: Sequence[EdgeTriple]) -> List[EdgeTriple]:
    """
    Sort edge triples by ``(at, other)`` ascending.

    The sort is stable, so parallel edges keep their relative order. Payloads
    never take part in the comparison.

    Args:
        edges: Edge triples

    Returns:
        Sorted list of edge triples
    """
    if not edges:
        return []
    aAt = np.fromiter((at for at, _, _ in edges), dtype=np.int64, count=len(edges))
    aOther = np.fromiter((other for _, other, _ in edges), dtype=np.int64, count=len(edges))
    # lexsort keys are given last-significant first
    aOrder = np.lexsort((aOther, aAt))
    return [edges[i] for i in aOrder]

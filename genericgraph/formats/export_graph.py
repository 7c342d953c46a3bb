"""
Export generic graphs to JSON.

A graph is written as its canonical pair, a JSON array of two arrays:

    [[label, ...], [[at, other, payload], ...]]

Labels and payloads must be JSON serializable. JSON has no tuple type: tuple
labels are read back as tuples, but tuple payloads are read back as lists,
so a graph with tuple payloads does not compare equal to its decoded copy.
"""

import json
import logging
from typing import Optional

from ..core.graph import GenericGraph

logger = logging.getLogger(__name__)


def graph_to_document(graph: GenericGraph) -> list:
    """
    Convert a graph to a JSON compatible document.

    Args:
        graph: Graph to convert

    Returns:
        ``[vertices, edges]`` with every edge as a three element list
    """
    vertices, edges = graph.to_lists()
    return [vertices, [[at, other, payload] for at, other, payload in edges]]


def export_graph_to_json(graph: GenericGraph, sFilename_out: Optional[str] = None,
                         indent: Optional[int] = None) -> str:
    """
    Serialize a graph to JSON, optionally writing it to a file.

    Args:
        graph: Graph to serialize
        sFilename_out: Output file path; nothing is written when omitted
        indent: Indentation passed to :func:`json.dumps`

    Returns:
        The JSON text
    """
    sJson = json.dumps(graph_to_document(graph), indent=indent)

    if sFilename_out is not None:
        with open(sFilename_out, "w") as f:
            f.write(sJson)
        logger.info(f"Exported graph with {graph.get_vertex_count()} vertices to {sFilename_out}")

    return sJson

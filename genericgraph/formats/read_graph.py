"""
Read generic graphs from JSON.

Documents use the layout written by
:func:`genericgraph.formats.export_graph.export_graph_to_json`. Decoding goes
through :meth:`GenericGraph.from_lists`, so label uniqueness and index bounds
are checked exactly as on construction.
"""

import json
import logging

from ..core.exceptions import GraphFormatError
from ..core.graph import GenericGraph

logger = logging.getLogger(__name__)


def _to_label(value):
    # JSON arrays come back as lists, which cannot be dict keys
    if isinstance(value, list):
        return tuple(_to_label(item) for item in value)
    return value


def graph_from_document(document) -> GenericGraph:
    """
    Build a graph from a decoded JSON document.

    Args:
        document: ``[vertices, edges]`` as produced by ``graph_to_document``

    Returns:
        The decoded graph

    Raises:
        GraphFormatError: If the document does not have the expected layout
    """
    if not isinstance(document, list) or len(document) != 2:
        raise GraphFormatError("Graph document must be a two element array [vertices, edges]")

    vertices, edges = document
    if not isinstance(vertices, list):
        raise GraphFormatError("'vertices' must be an array")
    if not isinstance(edges, list):
        raise GraphFormatError("'edges' must be an array")

    aEdge = []
    for edge in edges:
        if not isinstance(edge, list) or len(edge) != 3:
            raise GraphFormatError(f"Edge entries must be [at, other, payload], got {edge!r}")
        at, other, payload = edge
        if type(at) is not int or type(other) is not int:
            raise GraphFormatError(f"Edge endpoints must be integers, got {edge!r}")
        aEdge.append((at, other, payload))

    aVertex = []
    for vertex in vertices:
        label = _to_label(vertex)
        try:
            hash(label)
        except TypeError:
            raise GraphFormatError(f"Vertex labels must be hashable, got {vertex!r}") from None
        aVertex.append(label)

    return GenericGraph.from_lists(aVertex, aEdge)


def read_graph_from_json(sJson: str) -> GenericGraph:
    """
    Decode a graph from JSON text.

    Raises:
        GraphFormatError: If the text is not valid JSON or has the wrong layout
    """
    try:
        document = json.loads(sJson)
    except json.JSONDecodeError as e:
        raise GraphFormatError(f"Invalid graph JSON: {e}") from e
    return graph_from_document(document)


def read_graph_from_file(sFilename_in: str) -> GenericGraph:
    """Read a graph from a JSON file."""
    with open(sFilename_in) as f:
        graph = read_graph_from_json(f.read())
    logger.info(f"Read graph with {graph.get_vertex_count()} vertices from {sFilename_in}")
    return graph

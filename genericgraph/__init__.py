"""
genericgraph - Immutable generic graph library

A Python library providing an undirected multigraph whose vertices carry
arbitrary unique labels and whose edges carry arbitrary payloads. Loops and
parallel edges are allowed. Graphs are immutable: every operation returns a
new graph.

Main Classes:
    GenericGraph: Graph representation with label <-> index lookup

Main Functions:
    subgraph, add_vertices, remove_vertices, add_edges, remove_edges,
    sum_graphs: structural operations
    map_edges, map_payloads, map_adjacency, map_vertices: transforms
    export_graph_to_json, read_graph_from_json: JSON round trip

Example:
    >>> from genericgraph import GenericGraph, subgraph
    >>> graph = GenericGraph(["a", "b", "c"], [(0, 1, "x"), (1, 2, "y")])
    >>> subgraph(graph, {0, 1}).to_lists()
    (['a', 'b'], [(0, 1, 'x')])
"""

__version__ = "0.1.0"
__author__ = "genericgraph developers"

from genericgraph.core.exceptions import (
    DuplicateLabelError,
    EdgeNotFoundError,
    GraphError,
    GraphFormatError,
    LabelNotFoundError,
    VertexIndexError,
)
from genericgraph.core.graph import GenericGraph
from genericgraph.operations.structure import (
    add_edges,
    add_vertices,
    remove_edges,
    remove_vertices,
    subgraph,
    sum_graphs,
)
from genericgraph.operations.transform import map_adjacency, map_edges, map_payloads, map_vertices
from genericgraph.formats.export_graph import export_graph_to_json
from genericgraph.formats.read_graph import read_graph_from_file, read_graph_from_json

__all__ = [
    'GenericGraph',
    'GraphError',
    'DuplicateLabelError',
    'VertexIndexError',
    'LabelNotFoundError',
    'EdgeNotFoundError',
    'GraphFormatError',
    'subgraph',
    'add_vertices',
    'remove_vertices',
    'add_edges',
    'remove_edges',
    'sum_graphs',
    'map_edges',
    'map_payloads',
    'map_adjacency',
    'map_vertices',
    'export_graph_to_json',
    'read_graph_from_json',
    'read_graph_from_file',
]

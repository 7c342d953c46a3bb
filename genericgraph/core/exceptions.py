"""
Exceptions raised by genericgraph.

Contract violations (bad index, unknown label, duplicate label) raise one of
these. Callers that cannot guarantee a precondition should use the ``*_safe``
lookups on :class:`~genericgraph.core.graph.GenericGraph` instead.
"""


class GraphError(Exception):
    """Base class for all graph errors."""


class DuplicateLabelError(GraphError, ValueError):
    """A vertex label occurs more than once."""

    def __init__(self, label):
        super().__init__(f"Duplicate vertex label: {label!r}")
        self.label = label


class VertexIndexError(GraphError, IndexError):
    """A canonical vertex index is outside ``[0, vertex_count)``."""

    def __init__(self, index, vertex_count: int):
        super().__init__(f"Vertex index {index!r} out of range for graph with {vertex_count} vertices")
        self.index = index
        self.vertex_count = vertex_count


class LabelNotFoundError(GraphError, KeyError):
    """No vertex carries the requested label."""

    def __init__(self, label):
        super().__init__(label)
        self.label = label

    def __str__(self):
        return f"Vertex label not found: {self.label!r}"


class EdgeNotFoundError(GraphError, LookupError):
    """No edge joins the requested pair of vertices."""

    def __init__(self, from_index: int, to_index: int):
        super().__init__(f"No edge from vertex {from_index} to vertex {to_index}")
        self.from_index = from_index
        self.to_index = to_index


class GraphFormatError(GraphError, ValueError):
    """A serialized graph document is malformed."""

"""
Core graph data structures.

This module contains the fundamental graph representation, its error types and
the index bookkeeping helpers, without structural operations.
"""

from .exceptions import GraphError
from .graph import GenericGraph

__all__ = ['GenericGraph', 'GraphError']

"""
Serialization of generic graphs.
"""

__all__ = ['export_graph', 'read_graph']

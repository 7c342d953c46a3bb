"""
Graph operation modules.

This module contains functions that derive new graphs from existing ones:
structural edits (subgraphs, vertex and edge changes, unions) and payload or
label transforms.
"""

__all__ = ['structure', 'transform']

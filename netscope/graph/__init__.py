"""
Graph module for netscope.

This module provides the adjacency-set graph store and edge-list
ingestion used by the analysis layer.
"""

from netscope.graph.store import Graph, load_graph

__all__ = [
    "Graph",
    "load_graph",
]

"""
Analysis module for netscope.

This module provides BFS distances and degree, closeness and
betweenness centrality over a Graph.
"""

from netscope.analysis.centrality import (
    analyze,
    betweenness_centrality,
    bfs,
    closeness_centrality,
    degree_centrality,
)

__all__ = [
    "analyze",
    "betweenness_centrality",
    "bfs",
    "closeness_centrality",
    "degree_centrality",
]

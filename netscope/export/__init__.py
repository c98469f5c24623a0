"""
Export module for netscope.

This module provides DOT, plain-text and edge-list serializers for
graphs and trees.
"""

from netscope.export.dot import (
    DEFAULT_GRAPH_NAME,
    DEFAULT_TREE_NAME,
    DOT_SUFFIX,
    graph_to_dot,
    graph_to_edge_list,
    graph_to_text,
    tree_to_dot,
    write_text,
)

__all__ = [
    "DEFAULT_GRAPH_NAME",
    "DEFAULT_TREE_NAME",
    "DOT_SUFFIX",
    "graph_to_dot",
    "graph_to_edge_list",
    "graph_to_text",
    "tree_to_dot",
    "write_text",
]

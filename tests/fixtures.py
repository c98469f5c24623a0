"""
Test fixtures for netscope.

This module provides sample edge lists and parent/child lines
for testing the graph engine.
"""

# Scenario graph: A-B, A-C, B-C, B-D, C-E, D-E
SMALL_SOCIAL = [
    "# small social network",
    "A,B",
    "A,C",
    "B,C",
    "B,D",
    "C,E",
    "D,E",
]

PATH_ABC = ["A,B", "B,C"]

# Two nodes, no edge between them
DISCONNECTED_XY = ["X", "Y"]

SINGLE_NODE = ["solo"]

# Mixed separators, comments, blank lines and extra tokens
MESSY_EDGE_LIST = [
    "",
    "   ",
    "# header comment",
    "  # indented comment",
    "A, B",
    "B C",
    "C,,D",
    "D\tE  extra tokens ignored",
    "  F  ",
]

STAR = ["hub,a", "hub,b", "hub,c", "hub,d"]

# Diamond: two equal-length shortest paths from s to t
DIAMOND = ["s,a", "s,b", "a,t", "b,t"]

TWO_COMPONENTS = ["A,B", "B,C", "X,Y"]

DIRECTED_CHAIN = ["a,b", "b,c", "c,d"]

TREE_LINES = [
    "# Tree 1",
    "Root,A",
    "Root,B",
    "A,C",
    "A,D",
    "B,E",
]

# Every node is somebody's child
CYCLIC_TREE_LINES = ["A,B", "B,A"]

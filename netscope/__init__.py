"""
netscope Engine

Core engine for loading small networks from edge lists, computing
shortest-path distances and centrality measures, and exporting graphs
and parent/child trees to Graphviz DOT.
"""

from netscope.graph import Graph
from netscope.models import UNREACHABLE, CentralityReport, Measure
from netscope.tree import Tree, TreeNode

__all__ = ["Graph", "Tree", "TreeNode", "UNREACHABLE", "CentralityReport", "Measure"]
__version__ = "0.1.0"

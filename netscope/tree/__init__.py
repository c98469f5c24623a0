"""
Tree module for netscope.

This module provides the parent/child tree and its preorder traversal.
"""

from netscope.tree.model import Tree, TreeNode, load_tree

__all__ = [
    "Tree",
    "TreeNode",
    "load_tree",
]

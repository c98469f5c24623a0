"""
Parent/child Tree for netscope

A minimal rooted tree built from "parent,child" lines, with a preorder
traversal. Nodes are created on first mention; the root is the first
mentioned node that never appears as a child.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, Optional

from netscope.parsing import iter_records, read_lines

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class TreeNode:
    """
    A single tree node.

    Attributes:
        value: The label carried by the node
        children: Child nodes in insertion order

    Nodes compare by identity so that two nodes with the same label stay
    distinct.
    """

    value: str
    children: list["TreeNode"] = field(default_factory=list)

    def add_child(self, child: "TreeNode") -> None:
        """Append a child node."""
        self.children.append(child)


class Tree:
    """
    A rooted tree of TreeNodes.

    Usage:
        tree = Tree.from_parent_child_lines(["Root,A", "Root,B", "A,C"])
        list(tree.preorder())   # ["Root", "A", "C", "B"]
    """

    def __init__(self, root: Optional[TreeNode] = None) -> None:
        self._root = root

    @property
    def root(self) -> Optional[TreeNode]:
        """The root node, or None for an empty tree."""
        return self._root

    def set_root(self, root: TreeNode) -> None:
        """Replace the root node."""
        self._root = root

    @property
    def is_empty(self) -> bool:
        return self._root is None

    def walk(self) -> Iterator[TreeNode]:
        """
        Iterate over nodes in preorder.

        Each node is yielded once, even when the input linked a node under
        several parents or looped back to an ancestor.

        Yields:
            TreeNodes, root first, children in insertion order
        """
        if self._root is None:
            return
        visited: set[int] = set()
        stack = [self._root]
        while stack:
            node = stack.pop()
            if id(node) in visited:
                continue
            visited.add(id(node))
            yield node
            stack.extend(reversed(node.children))

    def preorder(self) -> Iterator[str]:
        """Iterate over node values in preorder."""
        for node in self.walk():
            yield node.value

    @classmethod
    def from_parent_child_lines(cls, lines: Iterable[str]) -> "Tree":
        """
        Build a tree from "parent,child" lines.

        Lines with fewer than two tokens are ignored. If every node appears
        as a child somewhere, the tree is empty.

        Args:
            lines: Raw text lines

        Returns:
            The populated Tree (possibly empty)

        Example:
            >>> tree = Tree.from_parent_child_lines(["CEO,CTO", "CTO,Dev1"])
            >>> list(tree.preorder())
            ['CEO', 'CTO', 'Dev1']
        """
        nodes: dict[str, TreeNode] = {}
        children: set[str] = set()

        for tokens in iter_records(lines):
            if len(tokens) < 2:
                continue
            parent, child = tokens[0], tokens[1]
            if parent not in nodes:
                nodes[parent] = TreeNode(parent)
            if child not in nodes:
                nodes[child] = TreeNode(child)
            nodes[parent].add_child(nodes[child])
            children.add(child)

        root_key = next((key for key in nodes if key not in children), None)
        logger.debug("Built tree with %d nodes, root=%s", len(nodes), root_key)

        if root_key is None:
            return cls()
        return cls(nodes[root_key])


def load_tree(path: Path | str) -> Tree:
    """
    Build a tree from a parent/child file.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the path is a directory
    """
    return Tree.from_parent_child_lines(read_lines(path))

"""
Graph Store for netscope

This module owns the adjacency data of a network: a mapping from every
known node identifier to the set of its out-neighbors.

Design Decisions:
    - Plain dict of sets; insertion order of the dict gives stable node order
    - Undirected edges are mirrored into both neighbor sets at insertion time
    - Nodes are always ensured (add_node) before an edge touches them
    - No deletion; a graph is built, then analyzed without further mutation

Graph Properties:
    - May be directed or undirected (fixed at construction)
    - May contain self-loops and isolated nodes
    - Node IDs are case-sensitive strings
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator

import networkx as nx

from netscope.parsing import iter_records, read_lines

logger = logging.getLogger(__name__)


class Graph:
    """
    An adjacency-set graph of string-identified nodes.

    Usage:
        graph = Graph()
        graph.add_edge("A", "B")
        graph.degree("A")          # 1
        list(graph.edges())        # [("A", "B")]
    """

    def __init__(self, directed: bool = False) -> None:
        """Initialize an empty graph."""
        self._directed = directed
        self._adj: dict[str, set[str]] = {}

    @property
    def directed(self) -> bool:
        """Whether edges are one-way."""
        return self._directed

    @property
    def node_count(self) -> int:
        """Return the number of nodes in the graph."""
        return len(self._adj)

    @property
    def edge_count(self) -> int:
        """Return the number of distinct edges in the graph."""
        return sum(1 for _ in self.edges())

    def __len__(self) -> int:
        return len(self._adj)

    def __contains__(self, node: object) -> bool:
        return node in self._adj

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return f"Graph({kind}, nodes={self.node_count}, edges={self.edge_count})"

    def add_node(self, node: str) -> None:
        """
        Ensure a node exists.

        Idempotent: an existing node keeps its neighbors.

        Args:
            node: The node identifier
        """
        if node not in self._adj:
            self._adj[node] = set()

    def add_edge(self, a: str, b: str) -> None:
        """
        Add an edge from a to b.

        Both endpoints are added first. For undirected graphs the edge is
        also recorded from b to a. Self-loops are stored as given.

        Args:
            a: Source endpoint
            b: Target endpoint
        """
        self.add_node(a)
        self.add_node(b)
        self._adj[a].add(b)
        if not self._directed:
            self._adj[b].add(a)

    def nodes(self) -> list[str]:
        """
        Return all node identifiers.

        The order is the order in which nodes were first added, so output
        built from it is reproducible within a run.
        """
        return list(self._adj)

    def neighbors(self, node: str) -> set[str]:
        """
        Return the out-neighbors of a node.

        Args:
            node: The node identifier

        Returns:
            The neighbor set, or an empty set for an unknown node
        """
        return self._adj.get(node, set())

    def edges(self) -> Iterator[tuple[str, str]]:
        """
        Iterate over each distinct edge once.

        Directed graphs yield every stored (u, v) pair. Undirected graphs
        yield each unordered pair once, in the orientation first met.

        Yields:
            (u, v) endpoint tuples
        """
        seen: set[tuple[str, str]] = set()
        for u, neighbors in self._adj.items():
            for v in neighbors:
                if self._directed:
                    yield (u, v)
                    continue
                key = (u, v) if u <= v else (v, u)
                if key not in seen:
                    seen.add(key)
                    yield (u, v)

    def degree(self, node: str) -> int:
        """
        Return the number of neighbors of a node.

        Args:
            node: The node identifier

        Returns:
            Size of the neighbor set, 0 for an unknown node
        """
        neighbors = self._adj.get(node)
        if neighbors is None:
            return 0
        return len(neighbors)

    def to_networkx(self) -> nx.Graph:
        """
        Convert to a NetworkX graph.

        Returns:
            A DiGraph for directed graphs, a Graph otherwise, with the same
            nodes (in the same order) and edges
        """
        graph = nx.DiGraph() if self._directed else nx.Graph()
        graph.add_nodes_from(self._adj)
        graph.add_edges_from(self.edges())
        return graph

    @classmethod
    def from_edge_list(cls, lines: Iterable[str], directed: bool = False) -> "Graph":
        """
        Build a graph from edge-list lines.

        Each non-comment line holds either two or more tokens (an edge
        between the first two; the rest are ignored) or one token (an
        isolated node). Malformed lines are never rejected.

        Args:
            lines: Raw text lines
            directed: Whether the resulting graph is directed

        Returns:
            The populated Graph

        Example:
            >>> graph = Graph.from_edge_list(["# demo", "A,B", "C"])
            >>> graph.nodes()
            ['A', 'B', 'C']
        """
        graph = cls(directed=directed)
        edges = 0

        for tokens in iter_records(lines):
            if len(tokens) >= 2:
                graph.add_edge(tokens[0], tokens[1])
                edges += 1
            else:
                graph.add_node(tokens[0])

        logger.debug(
            "Ingested edge list: %d edge lines, %d nodes (directed=%s)",
            edges,
            graph.node_count,
            directed,
        )
        return graph


def load_graph(path: Path | str, directed: bool = False) -> Graph:
    """
    Build a graph from an edge-list file.

    Args:
        path: Path to a UTF-8 edge-list file
        directed: Whether the resulting graph is directed

    Returns:
        The populated Graph

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the path is a directory
    """
    lines = read_lines(path)
    logger.debug("Loading graph from %s", path)
    return Graph.from_edge_list(lines, directed=directed)

"""
Graph Analysis for netscope

Shortest paths and centrality measures over an unweighted Graph.

Measures:
    degree:      degree(v) / (N - 1)
    closeness:   (N - 1) / sum of finite BFS distances from v
    betweenness: Brandes' dependency accumulation, halved for undirected graphs

Design Decisions:
    - Every routine is a pure function of the graph it receives
    - Unknown nodes and empty graphs produce zeros, never exceptions
    - Closeness ignores unreachable nodes instead of penalizing them, so a
      disconnected graph reports partial closeness per component
    - Brandes state is kept in lists addressed by a node -> index map

Complexity:
    bfs is O(N + E); closeness and betweenness are O(N * (N + E)).
"""

import logging
from collections import deque

from netscope.graph import Graph
from netscope.models import UNREACHABLE, CentralityReport, Distance

logger = logging.getLogger(__name__)


def bfs(graph: Graph, source: str) -> dict[str, Distance]:
    """
    Compute hop distances from a source node.

    Args:
        graph: The graph to traverse
        source: The starting node

    Returns:
        A mapping from every known node to its minimum hop count, or to
        UNREACHABLE when no path exists. If the source is unknown, every
        node is UNREACHABLE.

    Example:
        >>> g = Graph.from_edge_list(["A,B", "B,C"])
        >>> bfs(g, "A")
        {'A': 0, 'B': 1, 'C': 2}
    """
    dist: dict[str, Distance] = {node: UNREACHABLE for node in graph.nodes()}
    if source not in dist:
        return dist

    dist[source] = 0
    queue = deque([source])

    while queue:
        u = queue.popleft()
        next_distance = dist[u] + 1
        for v in graph.neighbors(u):
            if dist[v] is UNREACHABLE:
                dist[v] = next_distance
                queue.append(v)

    return dist


def degree_centrality(graph: Graph) -> dict[str, float]:
    """
    Compute normalized degree centrality.

    Every node scores 0.0 when the graph has fewer than two nodes.
    """
    n = graph.node_count
    if n <= 1:
        return {node: 0.0 for node in graph.nodes()}
    return {node: graph.degree(node) / (n - 1) for node in graph.nodes()}


def closeness_centrality(graph: Graph) -> dict[str, float]:
    """
    Compute closeness centrality from BFS distances.

    For each node v, S is the sum of distances to every node reachable
    from v. The score is (N - 1) / S, or 0.0 when S is zero (v reaches
    nothing). Unreachable nodes do not contribute to S.

    Args:
        graph: The graph to analyze

    Returns:
        Closeness score per node
    """
    n = graph.node_count
    scores: dict[str, float] = {}

    for node in graph.nodes():
        total = sum(d for d in bfs(graph, node).values() if d is not UNREACHABLE)
        scores[node] = (n - 1) / total if total > 0 else 0.0

    logger.debug("Closeness centrality computed for %d nodes", n)
    return scores


def betweenness_centrality(graph: Graph) -> dict[str, float]:
    """
    Compute betweenness centrality with Brandes' algorithm.

    For each source s, a BFS counts shortest paths (sigma) and records
    shortest-path predecessors; dependencies are then accumulated in
    reverse BFS order. Undirected graphs count every path from both ends,
    so their totals are halved.

    Args:
        graph: The graph to analyze

    Returns:
        Unnormalized betweenness per node (always >= 0)

    Example:
        >>> g = Graph.from_edge_list(["A,B", "B,C"])
        >>> betweenness_centrality(g)
        {'A': 0.0, 'B': 1.0, 'C': 0.0}
    """
    nodes = graph.nodes()
    n = len(nodes)
    index = {node: i for i, node in enumerate(nodes)}
    adjacency = [[index[w] for w in graph.neighbors(node)] for node in nodes]
    scores = [0.0] * n

    for s in range(n):
        stack: list[int] = []
        pred: list[list[int]] = [[] for _ in range(n)]
        sigma = [0.0] * n
        dist = [-1] * n
        sigma[s] = 1.0
        dist[s] = 0

        queue = deque([s])
        while queue:
            v = queue.popleft()
            stack.append(v)
            for w in adjacency[v]:
                # first visit
                if dist[w] < 0:
                    dist[w] = dist[v] + 1
                    queue.append(w)
                # shortest path to w via v
                if dist[w] == dist[v] + 1:
                    sigma[w] += sigma[v]
                    pred[w].append(v)

        delta = [0.0] * n
        while stack:
            w = stack.pop()
            for v in pred[w]:
                delta[v] += (sigma[v] / sigma[w]) * (1 + delta[w])
            if w != s:
                scores[w] += delta[w]

    if not graph.directed:
        scores = [score / 2.0 for score in scores]

    logger.debug("Betweenness centrality computed for %d nodes", n)
    return {node: scores[i] for node, i in index.items()}


def analyze(graph: Graph) -> CentralityReport:
    """
    Run every centrality measure on a graph.

    Args:
        graph: The graph to analyze

    Returns:
        A CentralityReport holding degree, closeness and betweenness scores
    """
    return CentralityReport(
        degree=degree_centrality(graph),
        closeness=closeness_centrality(graph),
        betweenness=betweenness_centrality(graph),
    )

"""
Tests for the analysis module.

Tests BFS distances and the three centrality measures, cross-checked
against NetworkX where the definitions agree.
"""

import networkx as nx
import pytest
from netscope.analysis import (
    analyze,
    betweenness_centrality,
    bfs,
    closeness_centrality,
    degree_centrality,
)
from netscope.graph import Graph
from netscope.models import UNREACHABLE, Measure, is_reachable
from tests.fixtures import (
    SMALL_SOCIAL,
    PATH_ABC,
    DISCONNECTED_XY,
    SINGLE_NODE,
    STAR,
    DIAMOND,
    TWO_COMPONENTS,
    DIRECTED_CHAIN,
)


@pytest.fixture
def social():
    """The small social network used across scenarios."""
    return Graph.from_edge_list(SMALL_SOCIAL)


class TestBFS:
    """Tests for single-source BFS distances."""

    def test_scenario_distances(self, social):
        """Test hop distances from A on the social network."""
        assert bfs(social, "A") == {"A": 0, "B": 1, "C": 1, "D": 2, "E": 2}

    def test_unreachable_marked_with_sentinel(self):
        """Test that nodes without a path get the UNREACHABLE sentinel."""
        graph = Graph.from_edge_list(DISCONNECTED_XY)

        dist = bfs(graph, "X")

        assert dist["X"] == 0
        assert dist["Y"] is UNREACHABLE
        assert not is_reachable(dist["Y"])

    def test_sentinel_is_not_a_number(self):
        """Test that the sentinel refuses arithmetic."""
        with pytest.raises(TypeError):
            UNREACHABLE + 1

    def test_unknown_source(self, social):
        """Test that an unknown source leaves every node unreachable."""
        dist = bfs(social, "Z")

        assert set(dist) == set(social.nodes())
        assert all(d is UNREACHABLE for d in dist.values())

    def test_empty_graph(self):
        """Test BFS on a graph with no nodes."""
        assert bfs(Graph(), "A") == {}

    def test_directed_respects_orientation(self):
        """Test that directed BFS only follows edge direction."""
        graph = Graph.from_edge_list(DIRECTED_CHAIN, directed=True)

        assert bfs(graph, "a") == {"a": 0, "b": 1, "c": 2, "d": 3}
        assert bfs(graph, "c")["a"] is UNREACHABLE

    def test_undirected_distances_symmetric(self):
        """Test that undirected distances are the same in both directions."""
        graph = Graph.from_edge_list(SMALL_SOCIAL + TWO_COMPONENTS)
        tables = {node: bfs(graph, node) for node in graph.nodes()}

        for a in graph.nodes():
            for b in graph.nodes():
                assert tables[a][b] == tables[b][a]

    def test_matches_networkx(self, social):
        """Test distances against NetworkX shortest path lengths."""
        expected = nx.single_source_shortest_path_length(social.to_networkx(), "E")

        assert bfs(social, "E") == dict(expected)


class TestDegreeCentrality:
    """Tests for normalized degree centrality."""

    def test_star(self):
        """Test that the hub of a star scores 1.0."""
        scores = degree_centrality(Graph.from_edge_list(STAR))

        assert scores["hub"] == 1.0
        assert scores["a"] == 0.25

    def test_single_node_is_zero(self):
        """Test the N <= 1 guard."""
        scores = degree_centrality(Graph.from_edge_list(SINGLE_NODE))

        assert scores == {"solo": 0.0}

    def test_sum_over_undirected_simple_graph(self, social):
        """Test that scores sum to 2E / (N - 1)."""
        scores = degree_centrality(social)
        expected = 2 * social.edge_count / (social.node_count - 1)

        assert sum(scores.values()) == pytest.approx(expected)

    def test_matches_networkx(self, social):
        """Test against NetworkX degree centrality."""
        expected = nx.degree_centrality(social.to_networkx())

        assert degree_centrality(social) == pytest.approx(expected)


class TestClosenessCentrality:
    """Tests for closeness over reachable nodes."""

    def test_path_graph(self):
        """Test closeness on A-B-C."""
        scores = closeness_centrality(Graph.from_edge_list(PATH_ABC))

        assert scores["A"] == pytest.approx(2 / 3)
        assert scores["B"] == pytest.approx(1.0)
        assert scores["C"] == pytest.approx(2 / 3)

    def test_disconnected_pair_is_zero(self):
        """Test that a node reaching nothing scores 0.0."""
        scores = closeness_centrality(Graph.from_edge_list(DISCONNECTED_XY))

        assert scores["X"] == 0.0
        assert scores["Y"] == 0.0

    def test_unreachable_nodes_are_ignored(self):
        """Test that only finite distances enter the sum."""
        scores = closeness_centrality(Graph.from_edge_list(TWO_COMPONENTS))

        # N = 5 for every node, sums come from each node's own component
        assert scores["A"] == pytest.approx(4 / 3)
        assert scores["B"] == pytest.approx(4 / 2)
        assert scores["X"] == pytest.approx(4.0)

    def test_directed_sink_is_zero(self):
        """Test that a node with no out-edges scores 0.0."""
        scores = closeness_centrality(Graph.from_edge_list(DIRECTED_CHAIN, directed=True))

        assert scores["a"] == pytest.approx(0.5)
        assert scores["d"] == 0.0

    def test_single_node_is_zero(self):
        """Test closeness of a lone node."""
        assert closeness_centrality(Graph.from_edge_list(SINGLE_NODE)) == {"solo": 0.0}


class TestBetweennessCentrality:
    """Tests for Brandes betweenness centrality."""

    def test_path_graph(self):
        """Test that the middle of A-B-C carries all the betweenness."""
        scores = betweenness_centrality(Graph.from_edge_list(PATH_ABC))

        assert scores["B"] > scores["A"]
        assert scores["B"] > scores["C"]
        assert scores["A"] == 0.0
        assert scores["C"] == 0.0
        assert scores["B"] == pytest.approx(1.0)

    def test_single_node_is_zero(self):
        """Test betweenness of a lone node."""
        assert betweenness_centrality(Graph.from_edge_list(SINGLE_NODE)) == {"solo": 0.0}

    def test_empty_graph(self):
        """Test betweenness on an empty graph."""
        assert betweenness_centrality(Graph()) == {}

    def test_star_hub(self):
        """Test that the hub lies on every leaf-to-leaf path."""
        scores = betweenness_centrality(Graph.from_edge_list(STAR))

        assert scores["hub"] == pytest.approx(6.0)
        assert scores["a"] == 0.0

    def test_equal_length_paths_split_credit(self):
        """Test that sigma sums over every predecessor."""
        scores = betweenness_centrality(Graph.from_edge_list(DIAMOND))

        for node in ("s", "a", "b", "t"):
            assert scores[node] == pytest.approx(0.5)

    def test_directed_is_not_halved(self):
        """Test betweenness on a directed chain."""
        scores = betweenness_centrality(Graph.from_edge_list(DIRECTED_CHAIN, directed=True))

        assert scores == pytest.approx({"a": 0.0, "b": 2.0, "c": 2.0, "d": 0.0})

    def test_self_loop_does_not_count(self):
        """Test that a self-loop adds no shortest paths."""
        scores = betweenness_centrality(Graph.from_edge_list(PATH_ABC + ["B,B"]))

        assert scores["B"] == pytest.approx(1.0)

    def test_non_negative(self, social):
        """Test that every score is non-negative."""
        scores = betweenness_centrality(social)

        assert all(score >= 0.0 for score in scores.values())

    def test_sum_invariant_under_relabeling(self, social):
        """Test that renaming nodes keeps the total betweenness."""
        relabeled = Graph()
        for u, v in social.edges():
            relabeled.add_edge(f"node-{u.lower()}", f"node-{v.lower()}")

        original = sum(betweenness_centrality(social).values())
        renamed = sum(betweenness_centrality(relabeled).values())

        assert renamed == pytest.approx(original)

    @pytest.mark.parametrize("directed", [False, True])
    def test_matches_networkx(self, directed):
        """Test against unnormalized NetworkX betweenness."""
        graph = Graph.from_edge_list(SMALL_SOCIAL + TWO_COMPONENTS + DIAMOND, directed=directed)
        expected = nx.betweenness_centrality(graph.to_networkx(), normalized=False)

        assert betweenness_centrality(graph) == pytest.approx(expected)


class TestAnalyze:
    """Tests for the combined CentralityReport."""

    def test_report_covers_all_measures(self, social):
        """Test that the report holds every measure for every node."""
        report = analyze(social)

        assert report.node_count == 5
        for measure in Measure:
            assert set(report.scores(measure)) == set(social.nodes())

    def test_ranked_descending(self):
        """Test that ranked() orders by descending score."""
        report = analyze(Graph.from_edge_list(STAR))

        ranked = report.ranked(Measure.BETWEENNESS)

        assert ranked[0] == ("hub", pytest.approx(6.0))
        scores = [score for _, score in ranked]
        assert scores == sorted(scores, reverse=True)

    def test_ranked_ties_keep_insertion_order(self):
        """Test that equal scores keep node insertion order."""
        report = analyze(Graph.from_edge_list(STAR))

        leaves = [node for node, _ in report.ranked(Measure.DEGREE)][1:]

        assert leaves == ["a", "b", "c", "d"]

"""Tests for single-pair shortest path algorithms."""

import math

import pytest

from adjgraph import InvalidNodeError, Node, lightest_path, shortest_path


class TestShortestPath:
    """Tests for the fewest-hop shortest path."""

    def test_path_to_self(self, dag):
        """Test that a node's path to itself is just the node."""
        path, weights = dag.shortest_path(0, 0)
        assert path == [Node(id=0, name="a", in_degree=0, out_degree=2)]
        assert weights == []

    def test_direct_edge(self, dag):
        """Test a single-edge path."""
        path, weights = dag.shortest_path(0, 1)
        assert path == [
            Node(id=0, name="a", in_degree=0, out_degree=2),
            Node(id=1, name="b", in_degree=1, out_degree=2),
        ]
        assert weights == [0.1]

    def test_multi_edge_path(self, dag):
        """Test the path with the fewest edges is chosen."""
        path, weights = dag.shortest_path(0, 5)
        assert path == [
            Node(id=0, name="a", in_degree=0, out_degree=2),
            Node(id=2, name="c", in_degree=1, out_degree=1),
            Node(id=5, name="f", in_degree=2, out_degree=0),
        ]
        assert weights == [0.2, 0.6]

    def test_no_path(self, dag):
        """Test an unreachable target gives empty results."""
        path, weights = dag.shortest_path(5, 0)
        assert path == []
        assert weights == []

    def test_invalid_ids(self, dag):
        """Test both endpoints are validated."""
        with pytest.raises(InvalidNodeError):
            dag.shortest_path(0, 6)
        with pytest.raises(InvalidNodeError):
            dag.shortest_path(6, 0)

    def test_hop_count_beats_weight(self, factory):
        """Test that fewest hops wins over a lighter, longer path."""
        g = factory(True, 10)
        for name in "abc":
            g.add_node(name)
        g.add_edge_with_weight(0, 2, 10.0)
        g.add_edge_with_weight(0, 1, 1.0)
        g.add_edge_with_weight(1, 2, 1.0)

        path, weights = shortest_path(g, 0, 2)
        assert [n.id for n in path] == [0, 2]
        assert weights == [10.0]


class TestShortestPathWeight:
    """Tests for the total weight of the fewest-hop path."""

    def test_self(self, dag):
        assert dag.shortest_path_weight(0, 0) == 0

    def test_direct_edge(self, dag):
        assert dag.shortest_path_weight(0, 1) == pytest.approx(0.1)

    def test_multi_edge(self, dag):
        assert dag.shortest_path_weight(0, 5) == pytest.approx(0.8)

    def test_no_path_is_infinite(self, dag):
        assert dag.shortest_path_weight(5, 0) == math.inf


class TestLightestPath:
    """Tests for the minimum-weight (Dijkstra) path."""

    def test_prefers_lighter_longer_path(self, factory):
        """Test that total weight decides, not hop count."""
        g = factory(True, 10)
        for name in "abc":
            g.add_node(name)
        g.add_edge_with_weight(0, 2, 10.0)
        g.add_edge_with_weight(0, 1, 1.0)
        g.add_edge_with_weight(1, 2, 1.0)

        path, weights = g.lightest_path(0, 2)
        assert [n.id for n in path] == [0, 1, 2]
        assert weights == [1.0, 1.0]
        assert g.lightest_path_weight(0, 2) == 2.0

    def test_matches_floyd_warshall(self, dag):
        """Test lightest path weights agree with the all-pairs table."""
        dist = dag.shortest_path_weights()
        for i in range(len(dag)):
            for j in range(len(dag)):
                assert dag.lightest_path_weight(i, j) == pytest.approx(dist[i, j])

    def test_self_and_unreachable(self, dag):
        """Test the degenerate cases."""
        path, weights = dag.lightest_path(3, 3)
        assert [n.id for n in path] == [3]
        assert weights == []
        assert lightest_path(dag, 5, 0) == ([], [])
        assert dag.lightest_path_weight(5, 0) == math.inf

    def test_negative_weights_rejected(self, factory):
        """Test that Dijkstra refuses negative weights."""
        g = factory(True, 10)
        g.add_node("a")
        g.add_node("b")
        g.add_edge_with_weight(0, 1, -1.0)
        with pytest.raises(ValueError, match="non-negative"):
            g.lightest_path(0, 1)

    def test_invalid_ids(self, dag):
        with pytest.raises(InvalidNodeError):
            dag.lightest_path(0, 9)

"""Tests for graph traversal algorithms."""

import pytest

from adjgraph import InvalidNodeError, Node, Queue, Stack, visit, visit_bfs, visit_dfs


def _node(node_id, name, in_degree, out_degree):
    return Node(id=node_id, name=name, in_degree=in_degree, out_degree=out_degree)


# Nodes of the cyclic reference graph (tree plus c->a)
A = _node(0, "a", 1, 2)
B = _node(1, "b", 1, 2)
C = _node(2, "c", 1, 1)
D = _node(3, "d", 1, 0)
E = _node(4, "e", 1, 1)
F = _node(5, "f", 1, 0)


class Recorder:
    """Visitor that records its calls and stops at a chosen node."""

    def __init__(self, stop_at=None):
        self.stop_at = stop_at
        self.nodes = []
        self.paths = []
        self.weights = []

    def __call__(self, node, path, weights):
        self.nodes.append(node)
        self.paths.append(path)
        self.weights.append(weights)
        return node.id == self.stop_at


@pytest.fixture
def multi_root(cyclic):
    """Cyclic graph plus an unreachable extra node."""
    cyclic.add_node("extra")
    return cyclic


class TestVisitBFS:
    """Tests for breadth-first visits."""

    def test_bfs_empty_graph_fails(self, factory):
        """Test BFS from a nonexistent start node."""
        g = factory(True, 10)
        with pytest.raises(InvalidNodeError):
            g.visit_bfs(0, Recorder())

    def test_bfs_visits_descendants(self, multi_root):
        """Test BFS order, discovery paths and weights."""
        rec = Recorder()
        assert multi_root.visit_bfs(0, rec) is False

        assert rec.nodes == [A, B, C, D, E, F]
        assert rec.paths == [
            [A],
            [A, B],
            [A, C],
            [A, B, D],
            [A, B, E],
            [A, B, E, F],
        ]
        assert rec.weights == [
            [],
            [0.1],
            [0.2],
            [0.1, 0.3],
            [0.1, 0.4],
            [0.1, 0.4, 0.5],
        ]

    def test_bfs_stops_when_instructed(self, multi_root):
        """Test early termination."""
        rec = Recorder(stop_at=2)
        assert multi_root.visit_bfs(0, rec) is True
        assert rec.nodes == [A, B, C]
        assert rec.paths == [[A], [A, B], [A, C]]
        assert rec.weights == [[], [0.1], [0.2]]

    def test_bfs_dag_scenario(self, dag):
        """Test BFS on the DAG stopping at c."""
        rec = Recorder(stop_at=2)
        assert dag.visit_bfs(0, rec) is True
        assert [n.name for n in rec.nodes] == ["a", "b", "c"]
        assert rec.weights == [[], [0.1], [0.2]]

    def test_bfs_visits_each_node_once(self, dag):
        """Test that a node reachable along two paths is visited once."""
        rec = Recorder()
        dag.visit_bfs(0, rec)
        ids = [n.id for n in rec.nodes]
        assert sorted(ids) == [0, 1, 2, 3, 4, 5]
        assert len(ids) == len(set(ids))
        # f is first discovered through c (fewest hops, lower sibling)
        assert [n.id for n in rec.paths[ids.index(5)]] == [0, 2, 5]

    def test_bfs_undirected(self, factory):
        """Test BFS follows undirected edges in both directions."""
        g = factory(False, 10)
        for name in "uvw":
            g.add_node(name)
        g.add_edge(1, 0)
        g.add_edge(1, 2)
        rec = Recorder()
        g.visit_bfs(0, rec)
        assert [n.name for n in rec.nodes] == ["u", "v", "w"]

    def test_bfs_function_form(self, multi_root):
        """Test the module-level function matches the method."""
        rec = Recorder()
        assert visit_bfs(multi_root, 0, rec) is False
        assert [n.id for n in rec.nodes] == [0, 1, 2, 3, 4, 5]


class TestVisitDFS:
    """Tests for depth-first visits."""

    def test_dfs_empty_graph_fails(self, factory):
        """Test DFS from a nonexistent start node."""
        g = factory(True, 10)
        with pytest.raises(InvalidNodeError):
            g.visit_dfs(0, Recorder())

    def test_dfs_visits_descendants(self, multi_root):
        """Test DFS order, discovery paths and weights."""
        rec = Recorder()
        assert multi_root.visit_dfs(0, rec) is False

        assert rec.nodes == [A, C, B, E, F, D]
        assert rec.paths == [
            [A],
            [A, C],
            [A, B],
            [A, B, E],
            [A, B, E, F],
            [A, B, D],
        ]
        assert rec.weights == [
            [],
            [0.2],
            [0.1],
            [0.1, 0.4],
            [0.1, 0.4, 0.5],
            [0.1, 0.3],
        ]

    def test_dfs_stops_when_instructed(self, multi_root):
        """Test early termination."""
        rec = Recorder(stop_at=1)
        assert multi_root.visit_dfs(0, rec) is True
        assert rec.nodes == [A, C, B]
        assert rec.paths == [[A], [A, C], [A, B]]
        assert rec.weights == [[], [0.2], [0.1]]

    def test_dfs_function_form(self, multi_root):
        """Test the module-level function matches the method."""
        rec = Recorder()
        assert visit_dfs(multi_root, 0, rec) is False
        assert [n.id for n in rec.nodes] == [0, 2, 1, 4, 5, 3]


class TestVisit:
    """Tests for the generic frontier-driven loop."""

    def test_empty_frontier(self, tree):
        """Test that an empty frontier visits nothing."""
        rec = Recorder()
        assert visit(tree, Queue(), rec) is False
        assert rec.nodes == []

    def test_multiple_seeds(self, tree):
        """Test that a frontier may be seeded with several start nodes."""
        frontier = Stack()
        d, e = tree.node(3), tree.node(4)
        frontier.push((d, [d], []), (e, [e], []))
        rec = Recorder()
        visit(tree, frontier, rec)
        assert [n.name for n in rec.nodes] == ["e", "f", "d"]

    def test_duplicate_seed_visited_once(self, tree):
        """Test that duplicate frontier entries are dropped when popped."""
        frontier = Queue()
        a = tree.node(0)
        frontier.push((a, [a], []), (a, [a], []))
        rec = Recorder()
        visit(tree, frontier, rec)
        assert [n.id for n in rec.nodes].count(0) == 1

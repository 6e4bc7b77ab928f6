"""
Graph traversal: breadth-first and depth-first visits.

Both searches run the same :func:`visit` loop; only the frontier differs.
A FIFO :class:`~adjgraph.containers.Queue` yields BFS and a LIFO
:class:`~adjgraph.containers.Stack` yields DFS. Children are pushed in
ascending ID order, so a DFS pops the highest-numbered sibling first.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS) and 22.3 (DFS).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, List, Set, Tuple

from ..containers import Frontier, Queue, Stack
from .node import Node, NodeID

if TYPE_CHECKING:
    from .core import AdjacencyGraph

# Called with (node, path from the start node, edge weights along the path).
# Returning True stops the traversal.
NodeVisitor = Callable[[Node, List[Node], List[float]], bool]

VisitEntry = Tuple[Node, List[Node], List[float]]


def visit(graph: "AdjacencyGraph", frontier: Frontier, visitor: NodeVisitor) -> bool:
    """
    Visit nodes reachable from the entries already on a frontier.

    Each node is visited at most once, with the path along which it was
    first popped. Duplicate frontier entries for a node that has since been
    visited are dropped when popped.

    Args:
        graph: Graph to traverse.
        frontier: Frontier seeded with one or more ``(node, path, weights)``
            entries.
        visitor: Callback invoked once per visited node.

    Returns:
        True if the visitor stopped the traversal, False if the frontier
        was exhausted.

    Complexity: O(V * V) on an adjacency matrix, since each visited node
    scans a full row.
    """
    visited: Set[NodeID] = set()

    while frontier:
        node, path, weights = frontier.pop()
        if node.id in visited:
            continue
        visited.add(node.id)

        if visitor(node, path, weights):
            return True

        children, child_weights = graph.children_with_weights(node.id)
        for child, weight in zip(children, child_weights):
            if child.id not in visited:
                frontier.push((child, path + [child], weights + [weight]))

    return False


def _seed(graph: "AdjacencyGraph", frontier: Frontier, start: NodeID) -> Frontier:
    node = graph.node(start)
    entry: VisitEntry = (node, [node], [])
    frontier.push(entry)
    return frontier


def visit_bfs(graph: "AdjacencyGraph", start: NodeID, visitor: NodeVisitor) -> bool:
    """
    Visit all descendants of ``start`` in breadth-first order.

    The path reported for each node has the fewest possible edges.

    Args:
        graph: Graph to traverse.
        start: ID of the node to start from.
        visitor: Callback; return True to stop.

    Returns:
        The result of the final visitor call (False if none returned True).

    Raises:
        InvalidNodeError: If ``start`` is not a node of the graph.

    Example:
        >>> g = dense_adjacency_graph(directed=True, max_nodes=3)
        >>> a, b = g.add_node("a"), g.add_node("b")
        >>> g.add_edge(a, b)
        >>> seen = []
        >>> visit_bfs(g, a, lambda node, path, weights: seen.append(node.name))
        False
        >>> seen
        ['a', 'b']
    """
    return visit(graph, _seed(graph, Queue(), start), visitor)


def visit_dfs(graph: "AdjacencyGraph", start: NodeID, visitor: NodeVisitor) -> bool:
    """
    Visit all descendants of ``start`` in depth-first order.

    Args:
        graph: Graph to traverse.
        start: ID of the node to start from.
        visitor: Callback; return True to stop.

    Returns:
        The result of the final visitor call (False if none returned True).

    Raises:
        InvalidNodeError: If ``start`` is not a node of the graph.
    """
    return visit(graph, _seed(graph, Stack(), start), visitor)

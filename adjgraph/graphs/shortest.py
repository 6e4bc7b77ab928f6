"""
Single-pair shortest paths.

Two notions of "shortest" live here and they can disagree on graphs with
unequal edge weights:

- :func:`shortest_path` returns the path with the fewest edges (BFS
  discovery path), together with the weights along it.
- :func:`lightest_path` returns the path of minimum total weight
  (Dijkstra), matching the distances of
  :func:`~adjgraph.graphs.allpairs.floyd_warshall` for non-negative weights.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS) and 24.3 (Dijkstra).
"""

from __future__ import annotations

import heapq
import math
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

from .node import Node, NodeID
from .traversal import visit_bfs

if TYPE_CHECKING:
    from .core import AdjacencyGraph

Path = Tuple[List[Node], List[float]]


def shortest_path(graph: "AdjacencyGraph", source: NodeID, target: NodeID) -> Path:
    """
    Return the fewest-hop path from ``source`` to ``target``.

    Args:
        graph: Graph to search.
        source: Start node ID.
        target: End node ID.

    Returns:
        Tuple of:
        - nodes: Nodes along the path, both ends included; empty if
          ``target`` is unreachable
        - weights: Edge weights along the path (one fewer than nodes)

    Raises:
        InvalidNodeError: If either ID is not a node of the graph.

    Complexity: O(V^2) on an adjacency matrix.
    """
    source_node = graph.node(source)
    graph.node(target)
    if source == target:
        return [source_node], []

    found: Path = ([], [])

    def stop_at_target(node: Node, path: List[Node], weights: List[float]) -> bool:
        nonlocal found
        if node.id == target:
            found = (path, weights)
            return True
        return False

    visit_bfs(graph, source, stop_at_target)
    return found


def shortest_path_weight(graph: "AdjacencyGraph", source: NodeID, target: NodeID) -> float:
    """
    Return the total weight along :func:`shortest_path`.

    Returns 0 when ``source == target`` and ``inf`` when there is no path.
    """
    path, weights = shortest_path(graph, source, target)
    if not path:
        return math.inf
    return sum(weights, 0.0)


def lightest_path(graph: "AdjacencyGraph", source: NodeID, target: NodeID) -> Path:
    """
    Return the minimum-weight path from ``source`` to ``target`` (Dijkstra).

    Ties between equally light paths are broken by node ID.

    Args:
        graph: Graph with non-negative edge weights.
        source: Start node ID.
        target: End node ID.

    Returns:
        Tuple of (nodes, weights) as for :func:`shortest_path`; both empty
        when ``target`` is unreachable.

    Raises:
        InvalidNodeError: If either ID is not a node of the graph.
        ValueError: If the graph contains negative edge weights.

    Complexity: O(V^2 + E log V) on an adjacency matrix.
    """
    source_node = graph.node(source)
    graph.node(target)

    for u, v, weight in graph.edges():
        if weight < 0:
            raise ValueError(
                f"Dijkstra requires non-negative weights. "
                f"Found negative weight {weight} on edge ({u}, {v})"
            )

    if source == target:
        return [source_node], []

    dist: Dict[NodeID, float] = {source: 0.0}
    parent: Dict[NodeID, Optional[Tuple[NodeID, float]]] = {source: None}
    visited: set = set()
    pq: List[Tuple[float, NodeID]] = [(0.0, source)]

    while pq:
        d, u = heapq.heappop(pq)
        if u in visited:
            continue
        visited.add(u)
        if u == target:
            break

        children, weights = graph.children_with_weights(u)
        for child, weight in zip(children, weights):
            if child.id in visited:
                continue
            new_dist = d + weight
            if new_dist < dist.get(child.id, math.inf):
                dist[child.id] = new_dist
                parent[child.id] = (u, weight)
                heapq.heappush(pq, (new_dist, child.id))

    if target not in visited:
        return [], []

    ids: List[NodeID] = [target]
    path_weights: List[float] = []
    step = parent[target]
    while step is not None:
        prev, weight = step
        ids.append(prev)
        path_weights.append(weight)
        step = parent[prev]

    ids.reverse()
    path_weights.reverse()
    return [graph.node(i) for i in ids], path_weights


def lightest_path_weight(graph: "AdjacencyGraph", source: NodeID, target: NodeID) -> float:
    """
    Return the total weight along :func:`lightest_path`.

    Returns 0 when ``source == target`` and ``inf`` when there is no path.
    """
    path, weights = lightest_path(graph, source, target)
    if not path:
        return math.inf
    return sum(weights, 0.0)

"""
All-pairs shortest path weights: Floyd-Warshall.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 25.2 (Floyd-Warshall).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from ..logging import get_logger

if TYPE_CHECKING:
    from .core import AdjacencyGraph

logger = get_logger(__name__)


def floyd_warshall(graph: "AdjacencyGraph") -> np.ndarray:
    """
    Floyd-Warshall algorithm for all-pairs minimum path weights.

    Handles negative edge weights but not negative cycles (distances may
    be incorrect if negative cycles exist). Self-loops never shorten the
    distance from a node to itself, which is always 0.

    Args:
        graph: Graph to analyse.

    Returns:
        Array ``dist`` of shape (n, n) where ``dist[i, j]`` is the minimum
        total weight of a path from node ``i`` to node ``j``, or ``inf`` if
        there is no such path.

    Complexity: O(n^3) time, O(n^2) memory, where n is number of nodes.

    Example:
        >>> g = dense_adjacency_graph(directed=True, max_nodes=3)
        >>> a, b, c = (g.add_node(x) for x in "abc")
        >>> g.add_edge_with_weight(a, b, 1.0)
        >>> g.add_edge_with_weight(b, c, 2.0)
        >>> floyd_warshall(g)[a, c]
        3.0
    """
    n = len(graph)
    weights = graph.store.to_numpy(n)

    dist = np.where(weights != 0, weights, np.inf)
    np.fill_diagonal(dist, 0.0)

    for k in range(n):
        # dist[i, k] and dist[k, j] are fixed during round k
        np.minimum(dist, dist[:, k, None] + dist[None, k, :], out=dist)

    logger.debug("floyd_warshall: relaxed %d nodes", n)
    return dist

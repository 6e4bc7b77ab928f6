"""
Transitive closure and transitive reduction.

Both are derived from the all-pairs distance table of
:func:`~adjgraph.graphs.allpairs.floyd_warshall` and return new graphs;
the input graph is never modified.

References:
    - Aho, Garey, Ullman. "The transitive reduction of a directed graph",
      SIAM Journal on Computing 1(2), 1972.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from ..errors import CyclicGraphError
from ..logging import get_logger
from .allpairs import floyd_warshall

if TYPE_CHECKING:
    from .core import AdjacencyGraph

logger = get_logger(__name__)


def transitive_closure(graph: "AdjacencyGraph") -> "AdjacencyGraph":
    """
    Add an edge for every pair of distinct nodes joined by a path.

    Existing edges keep their weight. Each added edge ``(i, j)`` is weighted
    by the minimum path weight from ``i`` to ``j`` in the original graph.
    A pair whose minimum path weight is exactly 0 (possible only with
    negative weights) cannot be stored and is skipped with a warning.

    Args:
        graph: Graph to close.

    Returns:
        A new graph with the same nodes and the augmented edge set.

    Complexity: O(n^3) for the distance table plus O(n^2) edge writes.
    """
    n = len(graph)
    result = graph.copy()
    dist = floyd_warshall(graph)
    adjacency = graph.store.to_numpy(n)

    missing = (adjacency == 0) & np.isfinite(dist)
    np.fill_diagonal(missing, False)

    added = 0
    for i, j in np.argwhere(missing):
        i, j = int(i), int(j)
        weight = float(dist[i, j])
        if weight == 0:
            logger.warning(
                "transitive_closure: skipping (%d, %d); a zero path weight cannot be stored",
                i,
                j,
            )
            continue
        result.add_edge_with_weight(i, j, weight)
        added += 1

    logger.debug("transitive_closure: added %d edges to %d nodes", added, n)
    return result


def transitive_reduction(graph: "AdjacencyGraph") -> "AdjacencyGraph":
    """
    Remove every edge that is implied by a longer path.

    For every node ``i``, every node ``j`` reachable from ``i`` and every
    node ``k`` reachable from ``j`` (``j != i``, ``k != j``), the edge
    ``(i, k)`` is dropped. On a DAG this leaves the unique minimal edge set
    with the same reachability relation.

    Args:
        graph: Acyclic graph to reduce.

    Returns:
        A new graph with the same nodes and the reduced edge set.

    Raises:
        CyclicGraphError: If the graph contains cycles (including any
            undirected graph with edges); the reduction is not defined there.

    Complexity: O(n^3).
    """
    if graph.has_cycles():
        raise CyclicGraphError("Transitive reduction is only defined for acyclic graphs")

    n = len(graph)
    result = graph.copy()
    dist = floyd_warshall(result)

    reachable = np.isfinite(dist)
    np.fill_diagonal(reachable, False)

    removed = 0
    for i in range(n):
        for j in np.flatnonzero(reachable[i]):
            for k in np.flatnonzero(reachable[j]):
                if result.has_edge(i, int(k)):
                    result.remove_edge(i, int(k))
                    removed += 1

    logger.debug("transitive_reduction: removed %d edges from %d nodes", removed, n)
    return result

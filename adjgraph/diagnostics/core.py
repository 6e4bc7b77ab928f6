"""Consistency checks for graphs and their degree caches."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Tuple

import numpy as np

if TYPE_CHECKING:
    from ..graphs.core import AdjacencyGraph

# (node id, field name, cached value, value counted from the store)
DegreeMismatch = Tuple[int, str, int, int]


def check_degree_cache(graph: "AdjacencyGraph") -> List[DegreeMismatch]:
    """
    Compare every node's cached degrees with the adjacency store.

    ``out_degree`` must equal the number of nonzero entries in the node's
    row and ``in_degree`` the number in its column. In undirected graphs a
    self-loop counts twice towards both degrees.

    Parameters
    ----------
    graph:
        Graph to inspect.

    Returns
    -------
    list of (node_id, field, cached, actual)
        One tuple per disagreement; empty when the cache is consistent.
    """
    nodes = graph.nodes()
    n = len(nodes)
    matrix = graph.store.to_numpy(n)
    out_counts = np.count_nonzero(matrix, axis=1)
    in_counts = np.count_nonzero(matrix, axis=0)
    if not graph.is_directed():
        loops = (np.diagonal(matrix) != 0).astype(int)
        out_counts = out_counts + loops
        in_counts = in_counts + loops

    mismatches: List[DegreeMismatch] = []
    for node in nodes:
        if node.out_degree != out_counts[node.id]:
            mismatches.append((node.id, "out_degree", node.out_degree, int(out_counts[node.id])))
        if node.in_degree != in_counts[node.id]:
            mismatches.append((node.id, "in_degree", node.in_degree, int(in_counts[node.id])))
    return mismatches


def assert_degree_cache(graph: "AdjacencyGraph") -> None:
    """
    Raise if any cached degree disagrees with the adjacency store.

    Parameters
    ----------
    graph:
        Graph to inspect.

    Raises
    ------
    ValueError
        Describing the first mismatch found.
    """
    mismatches = check_degree_cache(graph)
    if mismatches:
        node_id, field, cached, actual = mismatches[0]
        raise ValueError(
            f"Degree cache out of sync for node {node_id}: {field} is {cached} "
            f"but the adjacency store holds {actual} "
            f"({len(mismatches)} mismatch(es) in total)"
        )

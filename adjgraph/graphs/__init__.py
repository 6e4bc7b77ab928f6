"""
Graph engine over adjacency matrices.

This package provides:
- AdjacencyGraph over dense, sparse or tensor adjacency stores
- Traversal (BFS, DFS) through a shared frontier-driven visit loop
- Single-pair paths (fewest hops via BFS, minimum weight via Dijkstra)
- All-pairs minimum path weights (Floyd-Warshall)
- Topological sort (Kahn)
- Transitive closure and reduction

Node IDs are dense integers assigned by add_node; neighbors are always
returned in ascending ID order.
"""

from .allpairs import floyd_warshall
from .closure import transitive_closure, transitive_reduction
from .core import (
    AdjacencyGraph,
    dense_adjacency_graph,
    sparse_adjacency_graph,
    tensor_adjacency_graph,
)
from .node import Node, NodeID
from .ordering import SortStatus, TopologicalSortResult, topological_sort
from .shortest import (
    lightest_path,
    lightest_path_weight,
    shortest_path,
    shortest_path_weight,
)
from .traversal import NodeVisitor, visit, visit_bfs, visit_dfs

__all__ = [
    "AdjacencyGraph",
    "dense_adjacency_graph",
    "sparse_adjacency_graph",
    "tensor_adjacency_graph",
    "Node",
    "NodeID",
    "NodeVisitor",
    "visit",
    "visit_bfs",
    "visit_dfs",
    "shortest_path",
    "shortest_path_weight",
    "lightest_path",
    "lightest_path_weight",
    "floyd_warshall",
    "topological_sort",
    "SortStatus",
    "TopologicalSortResult",
    "transitive_closure",
    "transitive_reduction",
]

# Example usage:
# from adjgraph.graphs import dense_adjacency_graph
#
# g = dense_adjacency_graph(directed=True, max_nodes=3)
# a, b, c = g.add_node('a'), g.add_node('b'), g.add_node('c')
# g.add_edge_with_weight(a, b, 1.0)
# g.add_edge_with_weight(b, c, 2.0)
# g.shortest_path_weights()[a, c]  # 3.0

"""
Adjacency-matrix graph.

Provides AdjacencyGraph, a directed or undirected weighted graph whose edges
live in a fixed-capacity square :class:`~adjgraph.storage.AdjacencyStore`.
A zero matrix entry means "no edge". Node degrees are cached on the node
records and updated by every edge mutation.

Any method taking a node ID raises :class:`~adjgraph.errors.InvalidNodeError`
unless the ID was previously returned by :meth:`AdjacencyGraph.add_node`.
"""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Iterator, List, Optional, Tuple

import numpy as np

from ..core.device import Device
from ..diagnostics import assert_degree_cache, is_debug_enabled
from ..errors import GraphCapacityError, InvalidNodeError, ZeroWeightError
from ..logging import get_logger
from ..storage import AdjacencyStore, DenseAdjacency, SparseAdjacency, TensorAdjacency
from . import allpairs, closure, ordering, shortest, traversal
from .node import Node, NodeID
from .ordering import TopologicalSortResult
from .traversal import NodeVisitor

logger = get_logger(__name__)


class AdjacencyGraph:
    """
    Weighted graph stored as an adjacency matrix.

    Attributes:
        directed: If True, edges are one-way; otherwise every edge is
            mirrored and counts towards both endpoints' degrees.
        store: The adjacency store; its row count is the node capacity.

    Complexity:
        - add_node: O(1)
        - add_edge / remove_edge / has_edge: O(1) (store access)
        - children / parents: O(V)
        - roots / leaves: O(V)
    """

    def __init__(self, directed: bool, store: AdjacencyStore) -> None:
        """
        Initialize an empty graph over an adjacency store.

        Args:
            directed: If True, graph is directed; otherwise undirected.
            store: Empty square store; its size bounds the number of nodes.

        Raises:
            ValueError: If the store is not square or already holds edges.
        """
        if store.rows != store.cols:
            raise ValueError(f"Adjacency store must be square, got {store.rows}x{store.cols}")
        if store.count_nonzero() != 0:
            raise ValueError("Adjacency store must be empty")
        self.directed = bool(directed)
        self.store = store
        self._nodes: List[Node] = []

    # Construction

    @property
    def capacity(self) -> int:
        return self.store.rows

    def add_node(self, name: str = "") -> NodeID:
        """
        Add a node with zero degrees.

        Args:
            name: Optional label.

        Returns:
            The new node's ID, equal to the number of nodes before the call.

        Raises:
            GraphCapacityError: If the store has no room for another node.
        """
        if len(self._nodes) >= self.store.rows:
            raise GraphCapacityError(self.store.rows)
        node_id = len(self._nodes)
        self._nodes.append(Node(id=node_id, name=name))
        return node_id

    def copy(self) -> "AdjacencyGraph":
        """Return a fully independent copy (new node list, new store)."""
        result = AdjacencyGraph.__new__(AdjacencyGraph)
        result.directed = self.directed
        result.store = self.store.copy()
        result._nodes = list(self._nodes)
        return result

    # Edge mutation

    def _check_node(self, node_id: NodeID) -> None:
        if isinstance(node_id, bool) or not isinstance(node_id, (int, np.integer)):
            raise InvalidNodeError(node_id, len(self._nodes))
        if not 0 <= node_id < len(self._nodes):
            raise InvalidNodeError(node_id, len(self._nodes))

    def _bump(self, node_id: NodeID, d_in: int, d_out: int) -> None:
        node = self._nodes[node_id]
        self._nodes[node_id] = replace(
            node,
            in_degree=node.in_degree + d_in,
            out_degree=node.out_degree + d_out,
        )

    def _after_mutation(self) -> None:
        if is_debug_enabled():
            assert_degree_cache(self)

    def add_edge(self, source: NodeID, target: NodeID) -> None:
        """Add an edge of weight 1 (see :meth:`add_edge_with_weight`)."""
        self.add_edge_with_weight(source, target, 1.0)

    def add_edge_with_weight(self, source: NodeID, target: NodeID, weight: float) -> None:
        """
        Add a weighted edge from ``source`` to ``target``.

        For undirected graphs the edge is mirrored, so an undirected
        self-loop raises both degrees of its node by 2. Re-adding an existing
        edge overwrites its weight and leaves degrees unchanged.

        Args:
            source: Source node ID.
            target: Target node ID.
            weight: Nonzero, finite edge weight.

        Raises:
            InvalidNodeError: If either ID is invalid.
            ZeroWeightError: If the weight is 0, NaN or infinite.
        """
        self._check_node(source)
        self._check_node(target)
        weight = float(weight)
        if weight == 0 or not math.isfinite(weight):
            raise ZeroWeightError(weight)

        is_new = self.store.get(source, target) == 0
        self.store.set(source, target, weight)
        if not self.directed:
            self.store.set(target, source, weight)

        if is_new:
            self._bump(source, 0, 1)
            self._bump(target, 1, 0)
            if not self.directed:
                self._bump(target, 0, 1)
                self._bump(source, 1, 0)

        self._after_mutation()

    def remove_edge(self, source: NodeID, target: NodeID) -> None:
        """
        Remove the edge from ``source`` to ``target``; no-op if absent.

        Raises:
            InvalidNodeError: If either ID is invalid.
        """
        self._check_node(source)
        self._check_node(target)
        if self.store.get(source, target) == 0:
            return

        self.store.set(source, target, 0.0)
        self._bump(source, 0, -1)
        self._bump(target, -1, 0)

        if not self.directed:
            self.store.set(target, source, 0.0)
            self._bump(target, 0, -1)
            self._bump(source, -1, 0)

        self._after_mutation()

    # Queries

    def node(self, node_id: NodeID) -> Node:
        """Return the node with the given ID."""
        self._check_node(node_id)
        return self._nodes[node_id]

    def nodes(self) -> List[Node]:
        """Return all nodes in ID order."""
        return list(self._nodes)

    def edges(self) -> Iterator[Tuple[NodeID, NodeID, float]]:
        """
        Iterate over nonzero adjacency entries as ``(source, target, weight)``.

        Entries come in row-major order. Undirected edges appear once per
        direction.
        """
        n = len(self._nodes)
        matrix = self.store.to_numpy(n)
        for source, target in np.argwhere(matrix != 0):
            yield int(source), int(target), float(matrix[source, target])

    def edge_weight(self, source: NodeID, target: NodeID) -> float:
        """Return the weight of an edge, or 0 if there is none."""
        self._check_node(source)
        self._check_node(target)
        return self.store.get(source, target)

    def has_edge(self, source: NodeID, target: NodeID) -> bool:
        return self.edge_weight(source, target) != 0

    def has_edges(self) -> bool:
        return self.store.count_nonzero() > 0

    def has_nodes(self) -> bool:
        return len(self._nodes) > 0

    def children_with_weights(self, of: NodeID) -> Tuple[List[Node], List[float]]:
        """Return the targets of edges leaving ``of`` and their weights, in ID order."""
        self._check_node(of)
        children: List[Node] = []
        weights: List[float] = []
        for child in range(len(self._nodes)):
            weight = self.store.get(of, child)
            if weight != 0:
                children.append(self._nodes[child])
                weights.append(weight)
        return children, weights

    def children(self, of: NodeID) -> List[Node]:
        return self.children_with_weights(of)[0]

    def parents_with_weights(self, of: NodeID) -> Tuple[List[Node], List[float]]:
        """Return the sources of edges entering ``of`` and their weights, in ID order."""
        self._check_node(of)
        parents: List[Node] = []
        weights: List[float] = []
        for parent in range(len(self._nodes)):
            weight = self.store.get(parent, of)
            if weight != 0:
                parents.append(self._nodes[parent])
                weights.append(weight)
        return parents, weights

    def parents(self, of: NodeID) -> List[Node]:
        return self.parents_with_weights(of)[0]

    def leaves(self) -> List[Node]:
        """Return all nodes with out-degree zero."""
        return [node for node in self._nodes if node.out_degree == 0]

    def roots(self) -> List[Node]:
        """Return all nodes with in-degree zero."""
        return [node for node in self._nodes if node.in_degree == 0]

    def size(self) -> Tuple[int, int]:
        """Return ``(nodes, edges)``; undirected edges count once per direction."""
        return len(self._nodes), self.store.count_nonzero()

    def is_directed(self) -> bool:
        return self.directed

    def has_cycles(self) -> bool:
        return not self.topological_sort().ok

    def is_dag(self) -> bool:
        """True for directed graphs without cycles; undirected graphs never qualify."""
        return self.is_directed() and not self.has_cycles()

    def is_tree(self) -> bool:
        """True for DAGs in which no node has more than one parent."""
        if not self.is_dag():
            return False
        return all(node.in_degree <= 1 for node in self._nodes)

    def has_path(self, source: NodeID, target: NodeID) -> bool:
        path, _ = self.shortest_path(source, target)
        return len(path) > 0

    # Traversal

    def visit_bfs(self, start: NodeID, visitor: NodeVisitor) -> bool:
        """Breadth-first visit; see :func:`adjgraph.graphs.traversal.visit_bfs`."""
        return traversal.visit_bfs(self, start, visitor)

    def visit_dfs(self, start: NodeID, visitor: NodeVisitor) -> bool:
        """Depth-first visit; see :func:`adjgraph.graphs.traversal.visit_dfs`."""
        return traversal.visit_dfs(self, start, visitor)

    # Paths, ordering and closure

    def shortest_path(self, source: NodeID, target: NodeID) -> Tuple[List[Node], List[float]]:
        """Fewest-hop path and its weights; see :func:`adjgraph.graphs.shortest.shortest_path`."""
        return shortest.shortest_path(self, source, target)

    def shortest_path_weight(self, source: NodeID, target: NodeID) -> float:
        return shortest.shortest_path_weight(self, source, target)

    def lightest_path(self, source: NodeID, target: NodeID) -> Tuple[List[Node], List[float]]:
        """Minimum-weight path; see :func:`adjgraph.graphs.shortest.lightest_path`."""
        return shortest.lightest_path(self, source, target)

    def lightest_path_weight(self, source: NodeID, target: NodeID) -> float:
        return shortest.lightest_path_weight(self, source, target)

    def shortest_path_weights(self) -> np.ndarray:
        """All-pairs minimum path weights; see :func:`adjgraph.graphs.allpairs.floyd_warshall`."""
        return allpairs.floyd_warshall(self)

    def topological_sort(self) -> TopologicalSortResult:
        return ordering.topological_sort(self)

    def transitive_closure(self) -> "AdjacencyGraph":
        return closure.transitive_closure(self)

    def transitive_reduction(self) -> "AdjacencyGraph":
        return closure.transitive_reduction(self)

    # Dunder helpers

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        nodes, edges = self.size()
        return (
            f"AdjacencyGraph(directed={self.directed}, nodes={nodes}, edges={edges}, "
            f"capacity={self.capacity}, store={type(self.store).__name__})"
        )


def dense_adjacency_graph(directed: bool, max_nodes: int) -> AdjacencyGraph:
    """Create a graph over a dense (numpy) adjacency matrix."""
    return AdjacencyGraph(directed, DenseAdjacency(max_nodes, max_nodes))


def sparse_adjacency_graph(directed: bool, max_nodes: int) -> AdjacencyGraph:
    """Create a graph over a sparse (scipy DOK) adjacency matrix."""
    return AdjacencyGraph(directed, SparseAdjacency(max_nodes, max_nodes))


def tensor_adjacency_graph(
    directed: bool, max_nodes: int, device: Optional[Device] = None
) -> AdjacencyGraph:
    """Create a graph over a torch adjacency matrix placed on ``device`` (CPU by default)."""
    return AdjacencyGraph(directed, TensorAdjacency(max_nodes, max_nodes, device=device))

"""Pytest configuration and shared fixtures for adjgraph tests.

This module provides:
- A parametrized graph factory covering every adjacency backing
- The reference graphs used throughout the suite (tree, DAG, cyclic)
- Isolation of the global debug flag between tests
"""

from typing import Callable

import pytest

from adjgraph import (
    AdjacencyGraph,
    dense_adjacency_graph,
    set_debug_enabled,
    is_debug_enabled,
    sparse_adjacency_graph,
    tensor_adjacency_graph,
)

GraphFactory = Callable[[bool, int], AdjacencyGraph]

FACTORIES = {
    "dense": dense_adjacency_graph,
    "sparse": sparse_adjacency_graph,
    "tensor": tensor_adjacency_graph,
}


@pytest.fixture(params=sorted(FACTORIES), scope="function")
def factory(request) -> GraphFactory:
    """Provide a graph constructor for each adjacency backing.

    Returns:
        A callable ``(directed, max_nodes) -> AdjacencyGraph``.
    """
    return FACTORIES[request.param]


def build_tree(factory: GraphFactory) -> AdjacencyGraph:
    """a->b, a->c, b->d, b->e, e->f."""
    g = factory(True, 10)
    a, b, c, d, e, f = (g.add_node(name) for name in "abcdef")
    g.add_edge_with_weight(a, b, 0.1)
    g.add_edge_with_weight(a, c, 0.2)
    g.add_edge_with_weight(b, d, 0.3)
    g.add_edge_with_weight(b, e, 0.4)
    g.add_edge_with_weight(e, f, 0.5)
    return g


def build_dag(factory: GraphFactory) -> AdjacencyGraph:
    """The tree plus c->f, giving f two parents."""
    g = build_tree(factory)
    g.add_edge_with_weight(2, 5, 0.6)
    return g


def build_cyclic(factory: GraphFactory) -> AdjacencyGraph:
    """The tree plus c->a, closing the cycle a->c->a."""
    g = build_tree(factory)
    g.add_edge_with_weight(2, 0, 0.6)
    return g


@pytest.fixture
def tree(factory) -> AdjacencyGraph:
    return build_tree(factory)


@pytest.fixture
def dag(factory) -> AdjacencyGraph:
    return build_dag(factory)


@pytest.fixture
def cyclic(factory) -> AdjacencyGraph:
    return build_cyclic(factory)


@pytest.fixture(autouse=True)
def restore_debug_mode():
    """Restore the global debug flag after each test."""
    original = is_debug_enabled()
    yield
    set_debug_enabled(original)

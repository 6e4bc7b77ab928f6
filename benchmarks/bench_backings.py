"""Benchmark graph algorithms across adjacency backings."""

import time
from typing import Callable, Dict

import numpy as np

from adjgraph import (
    AdjacencyGraph,
    dense_adjacency_graph,
    sparse_adjacency_graph,
    tensor_adjacency_graph,
)

BACKINGS: Dict[str, Callable[[bool, int], AdjacencyGraph]] = {
    "dense": dense_adjacency_graph,
    "sparse": sparse_adjacency_graph,
    "tensor": tensor_adjacency_graph,
}


def random_dag(backing: str, n_nodes: int, density: float = 0.1, seed: int = 0) -> AdjacencyGraph:
    """Build a random DAG whose edges all point from lower to higher IDs."""
    rng = np.random.default_rng(seed)
    g = BACKINGS[backing](True, n_nodes)
    for i in range(n_nodes):
        g.add_node(f"n{i}")
    for u in range(n_nodes):
        for v in range(u + 1, n_nodes):
            if rng.random() < density:
                g.add_edge_with_weight(u, v, float(rng.integers(1, 10)))
    return g


def benchmark_backing(backing: str, n_nodes: int, repeats: int = 3) -> Dict[str, float]:
    """Time the main algorithms on one backing.

    Args:
        backing: One of 'dense', 'sparse', 'tensor'.
        n_nodes: Number of nodes in the random DAG.
        repeats: Timed repetitions per algorithm.

    Returns:
        Dictionary with mean seconds per call for each algorithm.
    """
    g = random_dag(backing, n_nodes)
    algorithms = {
        "visit_bfs": lambda: g.visit_bfs(0, lambda node, path, weights: False),
        "shortest_path_weights": g.shortest_path_weights,
        "topological_sort": g.topological_sort,
        "transitive_closure": g.transitive_closure,
    }

    results: Dict[str, float] = {"n_nodes": n_nodes}
    for name, fn in algorithms.items():
        fn()  # warmup
        start = time.perf_counter()
        for _ in range(repeats):
            fn()
        results[f"{name}_sec"] = (time.perf_counter() - start) / repeats
    return results


if __name__ == "__main__":
    print("Benchmarking adjacency backings...")
    for n_nodes in [32, 64, 128]:
        for backing in BACKINGS:
            res = benchmark_backing(backing, n_nodes)
            timings = ", ".join(
                f"{key[:-4]}={value * 1e3:.2f}ms" for key, value in res.items() if key.endswith("_sec")
            )
            print(f"  {backing:>6} n={n_nodes:4d}: {timings}")

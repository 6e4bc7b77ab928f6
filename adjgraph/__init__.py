"""adjgraph - a weighted graph engine over dense, sparse and tensor adjacency matrices."""

__version__ = "0.1.0"

# Frontiers
from .containers import Frontier, Queue, Stack

# Devices for tensor-backed stores
from .core import Device, default_device, device

# Diagnostics and debug mode
from .diagnostics import (
    assert_degree_cache,
    check_degree_cache,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

# Errors
from .errors import (
    CyclicGraphError,
    GraphCapacityError,
    GraphContractError,
    InvalidNodeError,
    ZeroWeightError,
)

# Graph engine
from .graphs import (
    AdjacencyGraph,
    Node,
    NodeID,
    NodeVisitor,
    SortStatus,
    TopologicalSortResult,
    dense_adjacency_graph,
    floyd_warshall,
    lightest_path,
    lightest_path_weight,
    shortest_path,
    shortest_path_weight,
    sparse_adjacency_graph,
    tensor_adjacency_graph,
    topological_sort,
    transitive_closure,
    transitive_reduction,
    visit,
    visit_bfs,
    visit_dfs,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

# Adjacency stores
from .storage import AdjacencyStore, DenseAdjacency, SparseAdjacency, TensorAdjacency

__all__ = [
    "__version__",
    # Frontiers
    "Frontier",
    "Queue",
    "Stack",
    # Devices
    "Device",
    "device",
    "default_device",
    # Diagnostics
    "check_degree_cache",
    "assert_degree_cache",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Errors
    "GraphContractError",
    "InvalidNodeError",
    "GraphCapacityError",
    "ZeroWeightError",
    "CyclicGraphError",
    # Graph engine
    "AdjacencyGraph",
    "Node",
    "NodeID",
    "NodeVisitor",
    "dense_adjacency_graph",
    "sparse_adjacency_graph",
    "tensor_adjacency_graph",
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
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
    # Stores
    "AdjacencyStore",
    "DenseAdjacency",
    "SparseAdjacency",
    "TensorAdjacency",
]

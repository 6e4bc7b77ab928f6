"""Exception taxonomy for adjgraph.

Contract violations (bad node IDs, exhausted capacity, unrepresentable
weights) derive from :class:`GraphContractError` and are raised before any
mutation is committed. They signal a programming error in the caller.

:class:`CyclicGraphError` is the only data-dependent failure; topological
sorting reports it through its result object rather than raising.
"""

from __future__ import annotations


class GraphContractError(Exception):
    """Base class for fail-fast contract violations."""


class InvalidNodeError(GraphContractError, IndexError):
    """A node ID outside ``[0, node_count)`` was passed to the graph."""

    def __init__(self, node_id: int, node_count: int) -> None:
        self.node_id = node_id
        self.node_count = node_count
        super().__init__(
            f"Invalid graph node ID {node_id!r}; valid IDs are [0, {node_count})"
        )


class GraphCapacityError(GraphContractError, OverflowError):
    """The graph cannot store any additional nodes."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        super().__init__(
            f"The graph cannot store any additional nodes (capacity {capacity})"
        )


class ZeroWeightError(GraphContractError, ValueError):
    """An edge weight the adjacency store cannot hold.

    Zero marks an absent edge, and non-finite weights (NaN, +/-inf) cannot
    take part in path sums without poisoning the distance table.
    """

    def __init__(self, weight: float) -> None:
        self.weight = weight
        super().__init__(
            f"Edge weight {weight!r} is not storable; weights must be finite "
            f"and nonzero (zero marks an absent edge)"
        )


class CyclicGraphError(ValueError):
    """The graph contains cycles."""

    def __init__(self, message: str = "Graph contains cycles") -> None:
        super().__init__(message)


__all__ = [
    "GraphContractError",
    "InvalidNodeError",
    "GraphCapacityError",
    "ZeroWeightError",
    "CyclicGraphError",
]

"""
Topological ordering (Kahn's algorithm).

References:
    - Kahn, A. B. "Topological sorting of large networks",
      Communications of the ACM 5(11), 1962.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, List

from ..containers import Queue
from ..errors import CyclicGraphError
from ..logging import get_logger
from .node import Node

if TYPE_CHECKING:
    from .core import AdjacencyGraph

logger = get_logger(__name__)


class SortStatus(Enum):
    """Outcome of a topological sort."""

    OK = "ok"
    CYCLIC = "cyclic"


@dataclass
class TopologicalSortResult:
    """
    Result container for :func:`topological_sort`.

    Attributes:
        order: Nodes such that every node follows all of its ancestors;
            empty when the graph is cyclic.
        status: Enumeration describing the outcome.
        message: Human-readable string explaining the status.
    """

    order: List[Node] = field(default_factory=list)
    status: SortStatus = SortStatus.OK
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status is SortStatus.OK

    def raise_for_status(self) -> List[Node]:
        """Return the order, or raise :class:`CyclicGraphError` if there is none."""
        if self.status is SortStatus.CYCLIC:
            raise CyclicGraphError(self.message)
        return self.order


def topological_sort(graph: "AdjacencyGraph") -> TopologicalSortResult:
    """
    Order the nodes of a graph so that every edge points forward.

    Works on a copy of the graph: roots are queued, and each dequeued node
    has its outgoing edges removed, queueing any child whose last incoming
    edge that was. Among equally ready nodes the earlier-queued one comes
    first; initial roots are queued in ID order. Edges left over once the
    queue drains mean the graph has a cycle.

    Undirected graphs with at least one edge are always reported as cyclic,
    since every edge is stored in both directions.

    Args:
        graph: Graph to order. It is not modified.

    Returns:
        A :class:`TopologicalSortResult`. The order holds the original
        graph's nodes (with its degree counts).

    Complexity: O(V^2) on an adjacency matrix.
    """
    work = graph.copy()
    queue = Queue()
    queue.push(*work.roots())
    order: List[Node] = []

    while queue:
        node = queue.pop()
        order.append(graph.node(node.id))
        for child in work.children(node.id):
            if child.in_degree == 1:
                queue.push(child)
            work.remove_edge(node.id, child.id)

    if work.has_edges():
        _, remaining = work.size()
        logger.debug(
            "topological_sort: %d adjacency entries remain after %d nodes, graph is cyclic",
            remaining,
            len(order),
        )
        return TopologicalSortResult(
            order=[], status=SortStatus.CYCLIC, message="Graph contains cycles"
        )

    return TopologicalSortResult(order=order, status=SortStatus.OK, message="ok")

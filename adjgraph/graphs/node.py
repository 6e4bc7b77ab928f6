"""Vertex records."""

from dataclasses import dataclass

NodeID = int


@dataclass(frozen=True)
class Node:
    """
    A vertex and its cached degree counters.

    Nodes are values: the owning graph swaps in an updated record whenever an
    edge mutation changes a degree, so a Node held by a caller is a snapshot
    taken at the time it was returned.

    Attributes:
        id: Dense zero-based identifier, assigned in allocation order.
        name: Optional label.
        in_degree: Number of nonzero entries in the node's matrix column
            (an undirected self-loop counts twice).
        out_degree: Number of nonzero entries in the node's matrix row
            (an undirected self-loop counts twice).
    """

    id: NodeID
    name: str = ""
    in_degree: int = 0
    out_degree: int = 0

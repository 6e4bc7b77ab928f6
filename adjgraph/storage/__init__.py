"""
Adjacency store backends.

- DenseAdjacency: numpy array, O(n^2) memory, O(1) access
- SparseAdjacency: scipy DOK matrix, O(edges) memory
- TensorAdjacency: torch tensor placed on a Device
"""

from .base import AdjacencyStore
from .dense import DenseAdjacency
from .sparse import SparseAdjacency
from .tensor import TensorAdjacency

__all__ = [
    "AdjacencyStore",
    "DenseAdjacency",
    "SparseAdjacency",
    "TensorAdjacency",
]

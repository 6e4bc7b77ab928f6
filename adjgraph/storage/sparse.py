"""Sparse adjacency store backed by a scipy DOK matrix."""

from __future__ import annotations

from typing import Optional

import numpy as np
import scipy.sparse as sp

from .base import AdjacencyStore


class SparseAdjacency(AdjacencyStore):
    """
    Adjacency matrix stored in DOK (Dictionary Of Keys) sparse format.

    Only nonzero entries are kept, so memory is O(edges) and element access
    is O(1) on average. Writing a zero removes the key.
    """

    def __init__(self, rows: int, cols: Optional[int] = None) -> None:
        cols = rows if cols is None else cols
        super().__init__(rows, cols)
        self._data = sp.dok_matrix((self.rows, self.cols), dtype=np.float64)

    @classmethod
    def from_array(cls, array: np.ndarray) -> "SparseAdjacency":
        """Build a store holding the nonzero entries of a 2-D array."""
        array = np.asarray(array, dtype=np.float64)
        if array.ndim != 2:
            raise ValueError(f"Expected a 2-D array, got shape {array.shape}")
        store = cls(array.shape[0], array.shape[1])
        for row, col in zip(*np.nonzero(array)):
            store._data[int(row), int(col)] = array[row, col]
        return store

    def _get_item(self, row: int, col: int) -> float:
        return float(self._data[row, col])

    def _set_item(self, row: int, col: int, weight: float) -> None:
        self._data[row, col] = weight

    def count_nonzero(self) -> int:
        return int(self._data.count_nonzero())

    def copy(self) -> "SparseAdjacency":
        result = SparseAdjacency(self.rows, self.cols)
        result._data = self._data.copy()
        return result

    def _export(self, rows: int, cols: int) -> np.ndarray:
        # CSR slicing touches only stored entries, never the full capacity
        block = self._data.tocsr()[:rows, :cols]
        return np.asarray(block.toarray(), dtype=np.float64)

"""Dense adjacency store backed by a numpy array."""

from __future__ import annotations

from typing import Optional

import numpy as np

from .base import AdjacencyStore


class DenseAdjacency(AdjacencyStore):
    """
    Adjacency matrix stored as a preallocated ``rows x cols`` float64 array.

    Memory is O(rows * cols); element access is O(1).
    """

    def __init__(self, rows: int, cols: Optional[int] = None) -> None:
        cols = rows if cols is None else cols
        super().__init__(rows, cols)
        self._data = np.zeros((self.rows, self.cols), dtype=np.float64)

    @classmethod
    def from_array(cls, array: np.ndarray) -> "DenseAdjacency":
        """Build a store holding a copy of a 2-D array."""
        array = np.asarray(array, dtype=np.float64)
        if array.ndim != 2:
            raise ValueError(f"Expected a 2-D array, got shape {array.shape}")
        store = cls(array.shape[0], array.shape[1])
        store._data[...] = array
        return store

    def _get_item(self, row: int, col: int) -> float:
        return float(self._data[row, col])

    def _set_item(self, row: int, col: int, weight: float) -> None:
        self._data[row, col] = weight

    def count_nonzero(self) -> int:
        return int(np.count_nonzero(self._data))

    def copy(self) -> "DenseAdjacency":
        return DenseAdjacency.from_array(self._data)

    def _export(self, rows: int, cols: int) -> np.ndarray:
        return self._data[:rows, :cols].copy()

"""
Weighted adjacency store interface.

An adjacency store is a fixed-size square matrix whose entry ``(i, j)`` holds
the weight of the edge from ``i`` to ``j``. A zero entry means there is no
edge. Graph algorithms only talk to this interface, so dense, sparse and
tensor backings are interchangeable.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np


class AdjacencyStore(ABC):
    """
    Abstract weighted adjacency matrix.

    Subclasses implement element access through ``_get_item``/``_set_item``;
    the public accessors validate coordinates first so that negative or
    out-of-range indices never wrap around.

    Attributes:
        rows: Number of rows (the node capacity of a graph).
        cols: Number of columns.
    """

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 0 or cols < 0:
            raise ValueError(f"Store dimensions must be non-negative, got {rows}x{cols}")
        self.rows = int(rows)
        self.cols = int(cols)

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    def _check_index(self, row: int, col: int) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(
                f"Index ({row}, {col}) out of range for a {self.rows}x{self.cols} store"
            )

    def get(self, row: int, col: int) -> float:
        """Return the weight stored at ``(row, col)``."""
        self._check_index(row, col)
        return self._get_item(row, col)

    def set(self, row: int, col: int, weight: float) -> None:
        """Store ``weight`` at ``(row, col)``; a weight of 0 clears the entry."""
        self._check_index(row, col)
        self._set_item(row, col, float(weight))

    @abstractmethod
    def _get_item(self, row: int, col: int) -> float:
        ...

    @abstractmethod
    def _set_item(self, row: int, col: int, weight: float) -> None:
        ...

    @abstractmethod
    def count_nonzero(self) -> int:
        """Return the number of nonzero entries."""

    @abstractmethod
    def copy(self) -> "AdjacencyStore":
        """Return a fully independent copy of the store."""

    def to_numpy(self, size: Optional[int] = None) -> np.ndarray:
        """
        Return the matrix as a dense float64 numpy array (always a copy).

        Args:
            size: If given, export only the leading ``size x size`` block.
                Graphs pass their node count so that memory scales with the
                nodes in use rather than with the capacity.
        """
        if size is None:
            return self._export(self.rows, self.cols)
        if not 0 <= size <= min(self.rows, self.cols):
            raise ValueError(
                f"Export size {size} out of range for a {self.rows}x{self.cols} store"
            )
        return self._export(size, size)

    @abstractmethod
    def _export(self, rows: int, cols: int) -> np.ndarray:
        ...

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(rows={self.rows}, cols={self.cols}, "
            f"nonzero={self.count_nonzero()})"
        )

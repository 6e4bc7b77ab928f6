"""Adjacency store backed by a PyTorch tensor."""

from __future__ import annotations

from typing import Optional

import numpy as np
import torch

from ..core.device import Device, default_device
from .base import AdjacencyStore


class TensorAdjacency(AdjacencyStore):
    """
    Dense adjacency matrix held in a torch tensor on a :class:`Device`.

    Behaves exactly like :class:`~adjgraph.storage.dense.DenseAdjacency`; the
    matrix simply lives wherever the device puts it, which lets callers hand
    :attr:`tensor` straight to torch code.
    """

    def __init__(
        self,
        rows: int,
        cols: Optional[int] = None,
        device: Optional[Device] = None,
    ) -> None:
        cols = rows if cols is None else cols
        super().__init__(rows, cols)
        self.device = device if device is not None else default_device()
        self._data = torch.zeros(
            (self.rows, self.cols),
            dtype=self.device.dtype,
            device=self.device.as_torch_device(),
        )

    @property
    def tensor(self) -> torch.Tensor:
        """The underlying tensor (not a copy)."""
        return self._data

    def _get_item(self, row: int, col: int) -> float:
        return float(self._data[row, col].item())

    def _set_item(self, row: int, col: int, weight: float) -> None:
        self._data[row, col] = weight

    def count_nonzero(self) -> int:
        return int(torch.count_nonzero(self._data).item())

    def copy(self) -> "TensorAdjacency":
        result = TensorAdjacency(self.rows, self.cols, device=self.device)
        result._data = self._data.clone()
        return result

    def _export(self, rows: int, cols: int) -> np.ndarray:
        return self._data[:rows, :cols].detach().cpu().numpy().astype(np.float64, copy=True)

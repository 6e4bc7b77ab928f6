"""
Ordered frontiers for graph traversal.

A frontier holds pending work. :class:`Stack` pops in LIFO order and drives
depth-first search; :class:`Queue` pops in FIFO order and drives
breadth-first search.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Deque, List, Optional


class Frontier(ABC):
    """Container of pending items with a fixed pop order."""

    @abstractmethod
    def push(self, *items: Any) -> None:
        """Add one or more items to the container."""

    @abstractmethod
    def pop(self) -> Optional[Any]:
        """Remove and return the next item, or None if the container is empty."""

    @abstractmethod
    def size(self) -> int:
        """Return the number of items in the container."""

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return self.size() > 0


class Stack(Frontier):
    """LIFO frontier backed by a list."""

    def __init__(self) -> None:
        self._items: List[Any] = []

    def push(self, *items: Any) -> None:
        self._items.extend(items)

    def pop(self) -> Optional[Any]:
        if not self._items:
            return None
        return self._items.pop()

    def size(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack(size={len(self._items)})"


class Queue(Frontier):
    """FIFO frontier backed by a deque."""

    def __init__(self) -> None:
        self._items: Deque[Any] = deque()

    def push(self, *items: Any) -> None:
        self._items.extend(items)

    def pop(self) -> Optional[Any]:
        if not self._items:
            return None
        return self._items.popleft()

    def size(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Queue(size={len(self._items)})"


__all__ = ["Frontier", "Stack", "Queue"]

"""A first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from typing import Any


class Queue:
    """A FIFO queue. Dequeuing from an empty queue yields None."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        """Append a value to the back of the queue."""
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front value, or None if the queue is empty."""
        if not self._items:
            return None
        return self._items.popleft()

    def is_empty(self) -> bool:
        """Return True when the queue holds no values."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)
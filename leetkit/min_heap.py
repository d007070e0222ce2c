"""A minimum binary heap of data items ordered by integer score."""

from __future__ import annotations

import threading
from typing import Any


class InvalidIndexError(IndexError):
    """Raised when a heap position does not exist."""


def _parent(index: int) -> int:
    if index <= 0:
        raise InvalidIndexError("invalid index")
    return (index - 1) // 2


class MinBinaryHeap:
    """A binary heap whose root always holds the item with the smallest score."""

    def __init__(self) -> None:
        self._scores: list[int] = []
        self._data: list[Any] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def add(self, data: Any, score: int) -> int:
        """Insert data with the given score and return its position in the heap."""
        with self._lock:
            self._data.append(data)
            self._scores.append(score)
            return self._sift_up(len(self._data) - 1)

    def extract_min(self) -> tuple[Any, int]:
        """Remove the root and return its (data, score)."""
        with self._lock:
            if not self._data:
                raise InvalidIndexError("heap is empty")
            data, score = self._data[0], self._scores[0]
            last_data = self._data.pop()
            last_score = self._scores.pop()
            if self._data:
                self._data[0] = last_data
                self._scores[0] = last_score
                self._sift_down(0)
            return data, score

    def update_score(self, index: int, score: int) -> int:
        """Change the score at a position and return the item's new position."""
        with self._lock:
            if not 0 <= index < len(self._data):
                raise InvalidIndexError(f"invalid index: {index}")
            self._scores[index] = score
            if index > 0 and self._scores[_parent(index)] >= score:
                return self._sift_up(index)
            return self._sift_down(index)

    def _swap(self, a: int, b: int) -> None:
        self._data[a], self._data[b] = self._data[b], self._data[a]
        self._scores[a], self._scores[b] = self._scores[b], self._scores[a]

    def _sift_up(self, index: int) -> int:
        while index > 0:
            parent = _parent(index)
            if self._scores[index] >= self._scores[parent]:
                break
            self._swap(index, parent)
            index = parent
        return index

    def _sift_down(self, index: int) -> int:
        total = len(self._data)
        while True:
            left = 2 * index + 1
            if left >= total:
                return index
            child = left
            right = left + 1
            if right < total and self._scores[right] < self._scores[left]:
                child = right
            if self._scores[child] >= self._scores[index]:
                return index
            self._swap(index, child)
            index = child
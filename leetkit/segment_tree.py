"""A segment tree over leaf segments combined with a user-supplied function."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Sequence

UpdateFunc = Callable[[Any, Any], Any]


def _parent_index(index: int) -> int:
    return index // 2


@dataclass
class SegmentNode:
    """A node of a segment tree: a value and the segment it covers."""

    value: Any = None
    range_start: int = 0
    range_end: int = 0
    index: int = field(default=0, repr=False)

    def is_root(self) -> bool:
        """Return True when the node is the tree's root."""
        return _parent_index(self.index) == 0


class SegmentTree:
    """Segment tree stored as a flat list: inner nodes first, then the leaves.

    For n leaves the list has 2*n slots; slot 0 is unused, slots 1..n-1 hold
    inner nodes and slots n..2n-1 hold the leaves.
    """

    def __init__(self, nodes: Sequence[SegmentNode], update_func: UpdateFunc) -> None:
        self._update_func = update_func
        self._leaf_count = len(nodes)
        self._lock = threading.Lock()
        self._data: list[Any] = []
        self._range_start: dict[int, int] = {}
        self._range_end: dict[int, int] = {}
        self._build(nodes)

    def _build(self, nodes: Sequence[SegmentNode]) -> None:
        count = len(nodes)
        if count == 0:
            return
        self._data = [None] * count + [node.value for node in nodes]
        for offset, node in enumerate(nodes):
            self._range_start[count + offset] = node.range_start
            self._range_end[count + offset] = node.range_end

        for right in range(2 * count - 1, 1, -2):
            left = right - 1
            root = _parent_index(left)
            self._data[root] = self._update_func(self._data[left], self._data[right])
            self._range_start[root] = min(
                self._range_start[left], self._range_start[right]
            )
            self._range_end[root] = max(self._range_end[left], self._range_end[right])

    @property
    def leaf_count(self) -> int:
        """Number of leaves."""
        return self._leaf_count

    @property
    def data(self) -> list[Any]:
        """A copy of the flat node-value list."""
        with self._lock:
            return list(self._data)

    @property
    def range_start(self) -> dict[int, int]:
        """Segment start of every node, keyed by slot."""
        return dict(self._range_start)

    @property
    def range_end(self) -> dict[int, int]:
        """Segment end of every node, keyed by slot."""
        return dict(self._range_end)

    def leaf(self, index: int) -> SegmentNode:
        """Return the leaf at the given position among the leaves."""
        if not 0 <= index < self._leaf_count:
            raise IndexError(f"index {index} out of range: {self._leaf_count}")
        slot = self._leaf_count + index
        return SegmentNode(
            value=self._data[slot],
            range_start=self._range_start[slot],
            range_end=self._range_end[slot],
            index=slot,
        )

    def update(self, node: SegmentNode) -> None:
        """Store a node's value and recompute the values of its ancestors."""
        with self._lock:
            index = node.index
            self._data[index] = node.value
            left, right = self._pair(index)
            parent = _parent_index(left)
            while parent > 0:
                self._data[parent] = self._update_func(
                    self._data[left], self._data[right]
                )
                left, right = self._pair(parent)
                parent = _parent_index(parent)

    @staticmethod
    def _pair(index: int) -> tuple[int, int]:
        if index % 2 == 1:
            return index - 1, index
        return index, index + 1

    def find_parent(self, node: SegmentNode) -> Optional[SegmentNode]:
        """Return the parent of a node, or None for the root."""
        if node.is_root():
            return None
        slot = _parent_index(node.index)
        with self._lock:
            return SegmentNode(
                value=self._data[slot],
                range_start=self._range_start[slot],
                range_end=self._range_end[slot],
                index=slot,
            )
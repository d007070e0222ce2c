"""A last-in, first-out stack."""

from __future__ import annotations

from typing import Any


class StackEmptyError(IndexError):
    """Raised when popping from an empty stack."""

    def __init__(self) -> None:
        super().__init__("stack empty")


class Stack:
    """A simple LIFO stack backed by a list."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, item: Any) -> None:
        """Put an item on top of the stack."""
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item; raise StackEmptyError when empty."""
        if not self._items:
            raise StackEmptyError()
        return self._items.pop()

    def is_empty(self) -> bool:
        """Return True when the stack holds no items."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)
"""Singly linked lists and in-place group reversal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator["ListNode"]:
        node: ListNode | None = self
        while node is not None:
            yield node
            node = node.next


def from_values(values: Iterable[int]) -> ListNode | None:
    """Build a linked list from values and return its head."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: ListNode | None) -> list[int]:
    """Return the values of a linked list in order."""
    return [] if head is None else [node.val for node in head]


def reverse_k_group(head: ListNode | None, k: int) -> ListNode | None:
    """Reverse the list in groups of k nodes; a short final group stays as it is."""
    if k < 1:
        raise ValueError(f"group size must be positive, got {k}")
    if k == 1:
        return head

    anchor = ListNode(0, head)
    prev = anchor
    while True:
        group: list[ListNode] = []
        node = prev.next
        while node is not None and len(group) < k:
            group.append(node)
            node = node.next
        if len(group) < k:
            break
        for earlier, later in zip(group, group[1:]):
            later.next = earlier
        group[0].next = node
        prev.next = group[-1]
        prev = group[0]
    return anchor.next


def swap_pairs(head: ListNode | None) -> ListNode | None:
    """Swap every two adjacent nodes; an odd last node stays in place."""
    return reverse_k_group(head, 2)
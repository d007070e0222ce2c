"""Checks on integer binary trees: sameness, symmetry and search-tree order."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass
class TreeNode:
    """A binary tree node holding an integer."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def _signature(root: TreeNode | None) -> Iterator[int]:
    """Yield a pre-order signature of the tree.

    A missing child whose sibling exists is written as a 0 placeholder;
    a node with no children adds nothing after its own value.
    """
    if root is None:
        return
    stack: list[TreeNode | None] = [root]
    while stack:
        node = stack.pop()
        if node is None:
            yield 0
            continue
        yield node.val
        if node.left is None and node.right is None:
            continue
        stack.append(node.right)
        stack.append(node.left)


def is_same_tree(p: TreeNode | None, q: TreeNode | None) -> bool:
    """Return True when both trees give the same pre-order signature."""
    return list(_signature(p)) == list(_signature(q))


def is_symmetric(root: TreeNode | None) -> bool:
    """Return True when the tree is a mirror image of itself."""
    if root is None:
        return True
    pairs: list[tuple[TreeNode | None, TreeNode | None]] = [(root.left, root.right)]
    while pairs:
        a, b = pairs.pop()
        if a is None and b is None:
            continue
        if a is None or b is None or a.val != b.val:
            return False
        pairs.append((a.left, b.right))
        pairs.append((a.right, b.left))
    return True


def is_valid_bst(root: TreeNode | None) -> bool:
    """Return True when an in-order walk gives strictly increasing values."""
    stack: list[TreeNode] = []
    previous: int | None = None
    node = root
    while node is not None or stack:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        if previous is not None and node.val <= previous:
            return False
        previous = node.val
        node = node.right
    return True
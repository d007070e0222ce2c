"""Binary tree nodes and iterative traversals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class BinaryTreeNode:
    """A binary tree node holding an arbitrary value."""

    value: Any = None
    left: Optional["BinaryTreeNode"] = None
    right: Optional["BinaryTreeNode"] = None


def pre_order(root: BinaryTreeNode | None) -> list[Any]:
    """Return node values in pre-order (node, left, right)."""
    result: list[Any] = []
    stack: list[BinaryTreeNode] = []
    node = root
    while node is not None or stack:
        while node is not None:
            result.append(node.value)
            stack.append(node)
            node = node.left
        node = stack.pop().right
    return result


def in_order(root: BinaryTreeNode | None) -> list[Any]:
    """Return node values in in-order (left, node, right)."""
    result: list[Any] = []
    stack: list[BinaryTreeNode] = []
    node = root
    while node is not None or stack:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.value)
        node = node.right
    return result


def post_order(root: BinaryTreeNode | None) -> list[Any]:
    """Return node values in post-order (left, right, node)."""
    result: list[Any] = []
    stack: list[BinaryTreeNode] = []
    visited: BinaryTreeNode | None = None
    node = root
    while node is not None or stack:
        while node is not None:
            stack.append(node)
            node = node.left
        top = stack.pop()
        is_leaf = top.left is None and top.right is None
        if (
            is_leaf
            or (top.right is None and visited is top.left)
            or visited is top.right
        ):
            result.append(top.value)
            visited = top
        else:
            stack.append(top)
            node = top.right
    return result
import pytest

from leetkit.tree import BinaryTreeNode, in_order, post_order, pre_order


@pytest.fixture
def full_tree():
    return BinaryTreeNode(
        1,
        BinaryTreeNode(2, BinaryTreeNode(4), BinaryTreeNode(5)),
        BinaryTreeNode(3, BinaryTreeNode(6), BinaryTreeNode(7)),
    )


def test_pre_order(full_tree):
    assert pre_order(full_tree) == [1, 2, 4, 5, 3, 6, 7]


def test_in_order(full_tree):
    assert in_order(full_tree) == [4, 2, 5, 1, 6, 3, 7]


def test_post_order(full_tree):
    assert post_order(full_tree) == [4, 5, 2, 6, 7, 3, 1]


@pytest.mark.parametrize("traversal", [pre_order, in_order, post_order])
def test_empty_tree(traversal):
    assert traversal(None) == []


def test_left_chain_orders():
    root = BinaryTreeNode("a", BinaryTreeNode("b", BinaryTreeNode("c")))
    assert pre_order(root) == ["a", "b", "c"]
    assert in_order(root) == list(reversed(pre_order(root)))
    assert post_order(root) == in_order(root)


def test_right_chain_orders():
    root = BinaryTreeNode("a", None, BinaryTreeNode("b", None, BinaryTreeNode("c")))
    assert pre_order(root) == ["a", "b", "c"]
    assert in_order(root) == pre_order(root)
    assert post_order(root) == list(reversed(pre_order(root)))


def test_bst_in_order_is_sorted():
    root = BinaryTreeNode(
        8,
        BinaryTreeNode(3, BinaryTreeNode(1), BinaryTreeNode(6, BinaryTreeNode(4))),
        BinaryTreeNode(10, None, BinaryTreeNode(14, BinaryTreeNode(13))),
    )
    values = in_order(root)
    assert values == sorted(values)
    assert sorted(pre_order(root)) == values
    assert sorted(post_order(root)) == values
    assert pre_order(root)[0] == 8
    assert post_order(root)[-1] == 8
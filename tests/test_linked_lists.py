import pytest

from leetkit.linked_lists import (
    ListNode,
    from_values,
    reverse_k_group,
    swap_pairs,
    to_values,
)


@pytest.mark.parametrize("values", [[], [1], [1, 2], [1, 2, 3], [5, 4, 3, 2, 1, 0]])
def test_round_trip(values):
    assert to_values(from_values(values)) == values


def test_from_empty_is_none():
    assert from_values([]) is None


def test_swap_pairs_empty():
    assert swap_pairs(None) is None


def test_swap_pairs_single_node_unchanged():
    head = ListNode(1)
    assert swap_pairs(head) is head
    assert head.next is None


@pytest.mark.parametrize("values", [[1, 2], [1, 2, 3], [1, 2, 3, 4], [1, 2, 3, 4, 5]])
def test_swap_pairs_twice_is_identity(values):
    assert to_values(swap_pairs(swap_pairs(from_values(values)))) == values


@pytest.mark.parametrize("values", [[1, 2, 3, 4], [1, 2, 3, 4, 5]])
def test_swap_pairs_swaps_each_pair(values):
    result = to_values(swap_pairs(from_values(values)))
    for index in range(0, len(values) - 1, 2):
        assert result[index] == values[index + 1]
        assert result[index + 1] == values[index]
    if len(values) % 2:
        assert result[-1] == values[-1]


def test_reverse_k_group_worked_example():
    assert to_values(reverse_k_group(from_values([1, 2, 3, 4, 5]), 2)) == [2, 1, 4, 3, 5]


def test_reverse_k_group_one_is_identity():
    head = from_values([1, 2, 3, 4, 5])
    assert reverse_k_group(head, 1) is head
    assert to_values(head) == [1, 2, 3, 4, 5]


def test_reverse_k_group_whole_list():
    values = [1, 2, 3, 4, 5]
    assert to_values(reverse_k_group(from_values(values), len(values))) == values[::-1]


def test_reverse_k_group_short_tail_kept():
    values = [1, 2, 3, 4, 5]
    result = to_values(reverse_k_group(from_values(values), 3))
    assert result[:3] == values[:3][::-1]
    assert result[3:] == values[3:]


def test_reverse_k_group_fewer_nodes_than_k():
    values = [1, 2, 3]
    assert to_values(reverse_k_group(from_values(values), 5)) == values


def test_reverse_k_group_empty():
    assert reverse_k_group(None, 3) is None


def test_reverse_k_group_rejects_non_positive():
    with pytest.raises(ValueError):
        reverse_k_group(from_values([1, 2]), 0)
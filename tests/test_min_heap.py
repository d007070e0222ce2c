import pytest

from leetkit.min_heap import InvalidIndexError, MinBinaryHeap


def _drain(heap):
    out = []
    while heap:
        out.append(heap.extract_min())
    return out


def test_add_to_empty_heap_returns_root_position():
    heap = MinBinaryHeap()
    assert heap.add("a", 5) == 0
    assert len(heap) == 1


def test_smaller_score_rises_to_root():
    heap = MinBinaryHeap()
    heap.add("a", 5)
    heap.add("b", 7)
    assert heap.add("c", 1) == 0
    assert heap.extract_min() == ("c", 1)


def test_extract_returns_scores_in_ascending_order():
    scores = [89, 34, 32, 2, 433, 44, 22, 99, 4324, 43, 23, 23, 43333, 6, 1]
    heap = MinBinaryHeap()
    for score in scores:
        heap.add(f"item{score}", score)
    drained = _drain(heap)
    assert [s for _, s in drained] == sorted(scores)
    assert all(d == f"item{s}" for d, s in drained)
    assert len(heap) == 0


def test_extract_from_empty_heap_raises():
    heap = MinBinaryHeap()
    with pytest.raises(InvalidIndexError):
        heap.extract_min()


def test_extract_single_item_empties_heap():
    heap = MinBinaryHeap()
    heap.add("only", 3)
    assert heap.extract_min() == ("only", 3)
    assert not heap


def test_update_score_lowering_moves_item_to_root():
    heap = MinBinaryHeap()
    for score in [1, 2, 3, 4, 5, 6, 7]:
        heap.add(str(score), score)
    assert heap.update_score(5, -99) == 0
    assert heap.extract_min() == ("6", -99)
    assert [s for _, s in _drain(heap)] == [1, 2, 3, 4, 5, 7]


def test_update_score_raising_keeps_heap_order():
    heap = MinBinaryHeap()
    for score in [1, 2, 3, 4, 5, 6, 7]:
        heap.add(str(score), score)
    new_index = heap.update_score(0, 100)
    assert new_index > 0
    drained = _drain(heap)
    assert [s for _, s in drained] == [2, 3, 4, 5, 6, 7, 100]
    assert drained[-1][0] == "1"


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_update_score_rejects_bad_index(index):
    heap = MinBinaryHeap()
    for score in [1, 2, 3]:
        heap.add(score, score)
    with pytest.raises(InvalidIndexError):
        heap.update_score(index, 0)


def test_equal_scores_are_all_returned():
    heap = MinBinaryHeap()
    for name in ["x", "y", "z"]:
        heap.add(name, 4)
    drained = _drain(heap)
    assert sorted(d for d, _ in drained) == ["x", "y", "z"]
    assert {s for _, s in drained} == {4}
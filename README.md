# leetkit

Solutions to classic algorithm problems, together with the small data
structures they are built on. Pure Python, with no runtime dependencies.
Requires Python 3.10 or later.

## Install

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Data structures

- `leetkit.stack`: `Stack`, a LIFO stack with `push`, `pop` and `is_empty`.
  Popping an empty stack raises `StackEmptyError` (an `IndexError`).
- `leetkit.fifo`: `Queue`, a FIFO queue with `enqueue`, `dequeue` and
  `is_empty`. `dequeue` on an empty queue returns `None`.
- `leetkit.disjoint_set`: `DisjointSet`, union-find over integer indices
  with union by height. `join_set` adds an index to another's set (creating
  sets as needed), `union` merges two existing sets, `find_set` returns a
  set id, and `set_ids`, `members` and `sets` report the current sets.
  `find_set` and `union` raise `SetNotExistsError` for an unknown index;
  `union` raises `AlreadyInOneSetError` when both indices already share a set.
- `leetkit.kmp`: `build_kmp(pattern, length=None)` returns a `KMPTable`
  whose `next` property holds the partial-match table. A table may be built
  for a prefix and finished later with `continue_build`; extending a table
  that already covers the whole pattern raises `KMPBuildError`.
- `leetkit.min_heap`: `MinBinaryHeap`, a min-heap of data ordered by integer
  score. `add` returns the new item's position, `extract_min` returns
  `(data, score)`, and `update_score` moves an item after its score changes.
  An empty heap or a bad position raises `InvalidIndexError`.
- `leetkit.segment_tree`: `SegmentTree` and `SegmentNode`. The tree combines
  two children with a function you supply. `leaf(i)` returns a leaf node,
  `update(node)` stores its value and recomputes its ancestors, and
  `find_parent(node)` returns the parent (or `None` for the root). The flat
  node list and segment bounds are readable through `data`, `range_start`
  and `range_end`.
- `leetkit.tree`: `BinaryTreeNode` and the iterative traversals
  `pre_order`, `in_order` and `post_order`.
- `leetkit.sorting`: `quick_sort`, which sorts a list in place and returns it.

## Problem solutions

- `leetkit.binary_trees`: `TreeNode`, `is_same_tree`, `is_symmetric`,
  `is_valid_bst`.
- `leetkit.linked_lists`: `ListNode`, `from_values`, `to_values`,
  `swap_pairs`, `reverse_k_group` (a short final group is left as it is).
- `leetkit.arrays`: `three_sum`, `four_sum`, `max_area`,
  `max_sum_after_partitioning`.
- `leetkit.strings`: `zigzag_convert`, `is_match` (`.` and `*` patterns),
  `letter_combinations` (phone keypad, digits 2-9), `score_of_parentheses`,
  `num_decodings` (with `*` wildcards, modulo 1,000,000,007).
- `leetkit.numbers`: `reverse_integer` (0 when the result leaves the signed
  32-bit range), `int_to_roman`, `roman_to_int`.
- `leetkit.graphs`: `garden_no_adj`, `find_judge`, and
  `solve_surrounded_regions`, which rewrites a board of `"O"`/`"X"` cells in
  place.

Malformed input, such as unbalanced parentheses, an unknown Roman numeral or
an out-of-range node number, raises `ValueError`.

## Examples

```python
from leetkit.tree import BinaryTreeNode, pre_order, in_order
from leetkit.numbers import int_to_roman
from leetkit.arrays import max_sum_after_partitioning

root = BinaryTreeNode(1, BinaryTreeNode(2), BinaryTreeNode(3))
pre_order(root)    # [1, 2, 3]
in_order(root)     # [2, 1, 3]

int_to_roman(1994)                                       # "MCMXCIV"
max_sum_after_partitioning([1, 15, 7, 9, 2, 5, 10], 3)   # 84
```

```python
from leetkit.disjoint_set import DisjointSet

ds = DisjointSet()
ds.join_set(2, 3)
ds.join_set(4, 3)
ds.find_set(4)     # 3
```

```python
from leetkit.kmp import build_kmp

table = build_kmp("abababca", 5)
table.next             # [-1, 0, 0, 1, 2]
table.continue_build()
table.next             # [-1, 0, 0, 1, 2, 3, 4, 0]
```

```python
from leetkit.segment_tree import SegmentNode, SegmentTree

tree = SegmentTree(
    [SegmentNode(value, start, start + 1) for start, value in enumerate([1, 2, 3, 4])],
    lambda left, right: left + right,
)
tree.data          # [None, 10, 3, 7, 1, 2, 3, 4]

leaf = tree.leaf(3)
leaf.value = 10
tree.update(leaf)
tree.data          # [None, 16, 3, 13, 1, 2, 3, 10]
```

```python
from leetkit.min_heap import MinBinaryHeap

heap = MinBinaryHeap()
heap.add("a", 5)
heap.add("b", 2)
heap.extract_min()   # ("b", 2)
```

## What it does not do

leetkit is a library only: it has no command-line tool, and nothing in it
reads input files or keeps data between runs. Every function works on the
Python values you pass in.
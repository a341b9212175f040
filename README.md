# algotasks

A collection of classic algorithm and data-structure tasks. Each task is a
small library module, and most also have a command-line tool that reads a
task file in a plain text format.

Pure Python, no runtime dependencies, Python 3.10 or later.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

| Module | What it does |
| --- | --- |
| `algotasks.aatree` | `AATree`: an AA tree of integers with `insert`, `erase`, `in` and `balance()` (the root's level, 0 when empty); duplicates are ignored |
| `algotasks.battle` | `Card`, `Outcome`, `deal` and `play`: the card game "war" between two players, stopped after `max_steps` moves (default 1,000,000) |
| `algotasks.crossings` | `count_crossings` and `count_inversions`: crossing pairs of segments joining two parallel lines |
| `algotasks.partitions` | `num_of_solutions(n, mod)`: number of partitions of `n`, modulo `mod` |
| `algotasks.hashset` | `HashSet`: fixed-capacity open-addressing set with linear probing and lazy deletion; `render()` shows the slots |
| `algotasks.kahan` | `fast_two_sum`, `accurate_sum`, `format_result`: compensated floating-point summation |
| `algotasks.radix` | `load_words`, `lsd_sort`, `first_letters`: stable LSD sort over the last `k` positions of fixed-length words |
| `algotasks.mst` | `DisjointSet`, `Edge`, `parse_graph`, `minimum_spanning_tree_weight`: Kruskal's algorithm |
| `algotasks.avltree` | `AVLTree`: balanced multiset with `insert`, `find`, `erase`, `height`, `clear`, ordered and `reversed` iteration |
| `algotasks.btree` | `BTreeNode`, `parse_node`, `is_btree`, `check_text`: checks whether node descriptions form a valid B-tree of minimum degree `t` |
| `algotasks.minmax` | `MinMaxStack` and `MinMaxQueue`: a queue answering "max minus min" queries, built from two min/max stacks |
| `algotasks.priority` | `ProbingMap` and `IndexedHeap`: bounded min-heap with decrease-key, positions kept in an open-addressing map |
| `algotasks.quickselect` | `generate_sequence` and `kth_range`: a sorted range of order statistics via quickselect |
| `algotasks.order_statistics` | `smallest_range`: the same range over a generated sequence, keeping only the `end` smallest terms |

## Library use

```python
from algotasks.aatree import AATree
from algotasks.partitions import num_of_solutions

tree = AATree()
for value in (5, 3, 8):
    tree.insert(value)

print(3 in tree)        # True
print(tree.balance())   # level of the root
tree.erase(3)
print(3 in tree)        # False

print(num_of_solutions(5, 1000))  # 7
```

```python
from algotasks.minmax import MinMaxQueue

queue = MinMaxQueue()
queue.push(1)
queue.push(5)
print(queue.diff_max_min())  # 4
queue.pop()
print(queue.diff_max_min())  # 0
```

Empty structures raise `IndexError` (for example `MinMaxQueue.pop`,
`IndexedHeap.extract_min`); malformed input raises `ValueError`.

## Command-line tools

```
algotasks-aatree INPUT OUTPUT
algotasks-battle INPUT
algotasks-crossings INPUT
algotasks-partitions
algotasks-hashset INPUT OUTPUT
algotasks-kahan INPUT
algotasks-radix INPUT OUTPUT
algotasks-mst INPUT
algotasks-btree INPUT
algotasks-minmax INPUT OUTPUT
algotasks-priority INPUT OUTPUT
algotasks-quickselect INPUT OUTPUT
algotasks-order-statistics INPUT OUTPUT
```

- `algotasks-partitions` reads `n` and the modulus from standard input and
  prints the result.
- `algotasks-battle`, `algotasks-crossings`, `algotasks-kahan`, `algotasks-mst`
  and `algotasks-btree` print their answer (`draw`/`first`/`second`/`unknown`,
  a count, a sum in scientific notation, a weight, `yes`/`no`).
- `algotasks-aatree`, `algotasks-hashset`, `algotasks-minmax`,
  `algotasks-priority`, `algotasks-radix` and `algotasks-order-statistics`
  write their answers to `OUTPUT`.
- `algotasks-quickselect` prints its answer to standard output and only
  creates `OUTPUT` as an empty file.

Each command returns 1 and writes a message to standard error when a file
cannot be read or written; `radix`, `btree`, `priority`, `quickselect` and
`order-statistics` do the same for malformed input.

## Limits

- `HashSet` and `ProbingMap` have a fixed number of slots; an insertion into a
  full table is silently dropped.
- `IndexedHeap` holds at most `size` items (100,000 by default) and raises
  `IndexError` when full.
- `algotasks.avltree` has no command-line tool; it is used by
  `algotasks.btree`.
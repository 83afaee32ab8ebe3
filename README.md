# cpalgos

Classic competitive-programming algorithms and data structures in plain
Python, using only the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `cpalgos.bigint` | `BigInt`: a signed arbitrary-precision integer in base 10^9 limbs; `//` and `%` truncate toward zero, `to_int()` raises `OverflowError` outside the signed 64-bit range |
| `cpalgos.fixed_decimal` | `FixedDecimal`: a non-negative 105-digit decimal number whose arithmetic wraps modulo 10^105, with `<<`/`>>` digit shifts and `suffix(width)` |
| `cpalgos.sorting` | `heap_sort`, `merge_sort_iterative`, `merge_sort_recursive`, `quick_sort`, `randomized_quick_sort`, `three_way_quick_sort`, `radix_sort`, `shell_sort` (each returns a new sorted list), and the in-place `partition_three_way` |
| `cpalgos.heap` | `MinHeap` with `push`, `top`, `pop` and `len()` |
| `cpalgos.dsu` | `DisjointSet` with path compression |
| `cpalgos.shortest_paths` | `bellman_ford`, `solve_difference_constraints`, `spfa_longest`, `congruence_reachable_count` |
| `cpalgos.connectivity` | `articulation_points`, `bridges`, `edge_biconnected_components`, `vertex_biconnected_components`, `strongly_connected_components` |
| `cpalgos.traversal` | `dfs_order`, `farthest_node`, `tree_diameter` |
| `cpalgos.lca` | `BinaryLiftingLCA`, `HeavyLightDecomposition`, offline `tarjan_lca` |
| `cpalgos.spanning_tree` | `minimum_spanning_tree` (Kruskal) and `strict_second_mst_weight` |
| `cpalgos.avl`, `cpalgos.treap`, `cpalgos.fhq_treap`, `cpalgos.scapegoat`, `cpalgos.splay`, `cpalgos.skiplist` | ordered multisets: `AVLTree`, `Treap`, `FHQTreap`, `ScapegoatTree`, `SplayTree`, `SkipList` |
| `cpalgos.aho_corasick` | `AhoCorasick.count_occurrences` |
| `cpalgos.kmp` | `failure_table` and `find_all` |
| `cpalgos.trie` | `PrefixCounter` |
| `cpalgos.digit_dp` | `count_windy`, `count_windy_recursive`, `count_windy_between` |
| `cpalgos.knapsack` | `knapsack_01` with item selection, `dependent_knapsack` over a parent forest |
| `cpalgos.batch_scheduling` | `min_batch_cost` with a convex-hull-optimised DP |
| `cpalgos.segment_tree` | `RangeAddSumTree` (range add, range sum), `AlternatingRunTree` (bit flips, longest alternating run) |
| `cpalgos.small_to_large` | `distinct_colors_in_subtrees` |
| `cpalgos.modular` | `mod_pow`, `mod_inverse`, `inverses` |

Graphs are adjacency lists indexed from 0, except where a function says
otherwise (`bellman_ford` numbers its nodes 1..n).

## Ordered multisets

All six tree-like containers share one interface:

- `insert(key)` adds one occurrence of `key`;
- `remove(key)` removes one occurrence and returns whether there was one;
- `rank(key)` is one plus the number of stored keys smaller than `key`;
- `kth(k)` is the k-th smallest key counting from 1, raising `IndexError`
  when out of range;
- `predecessor(key)` / `successor(key)` return the nearest smaller / larger
  key, or `None`;
- `len()` and iteration give the stored keys in order, with repetition.

`Treap`, `FHQTreap` and `SkipList` accept an optional `seed` for their random
number generator; `ScapegoatTree` accepts `alpha` in [0.5, 1), default 0.7.

```python
from cpalgos.avl import AVLTree

tree = AVLTree()
for key in (5, 1, 5, 9):
    tree.insert(key)
tree.rank(5)          # 2
tree.kth(3)           # 5
tree.predecessor(5)   # 1
tree.successor(5)     # 9
list(tree)            # [1, 5, 5, 9]
```

## More examples

```python
from cpalgos.bigint import BigInt

a = BigInt("123456789012345678901234567890")
b = BigInt(-987654321)
print(a * b)
print(a // BigInt(7), a % BigInt(7))
```

```python
from cpalgos.connectivity import bridges, strongly_connected_components

bridges([[1], [0, 2], [1]])                      # [(0, 1), (1, 2)]
strongly_connected_components([[1], [2], [0]])   # one component of three nodes
```

```python
from cpalgos.lca import BinaryLiftingLCA

tree = [[1, 2], [0, 3], [0], [1]]
BinaryLiftingLCA(tree, 0).lca(3, 2)   # 0
```

```python
from cpalgos.kmp import find_all
from cpalgos.aho_corasick import AhoCorasick

find_all("abababa", "aba")                                 # [0, 2, 4]
AhoCorasick(["a", "ab", "bab"]).count_occurrences("ababab")  # [3, 3, 2]
```

## Errors

Failures are raised as exceptions: a negative cycle raises
`shortest_paths.NegativeCycleError`, a positive cycle met by `spfa_longest`
raises `shortest_paths.PositiveCycleError`, division or modulo by zero in
`BigInt` and `FixedDecimal` raises `ZeroDivisionError`, and invalid arguments
raise `ValueError` or `IndexError`.

## What it does not do

This is a library only. It has no command-line programs and reads nothing
from standard input; each algorithm is called as a Python function or class
with Python data.
# algokit

A collection of classic algorithms and data structures for contests,
interview practice and everyday scripting. Everything is pure Python
and needs nothing outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## What is inside

| Area | Modules |
| --- | --- |
| Number theory | `xgcd`, `primes`, `combinatorics`, `modint`, `binary`, `arith` |
| Arrays | `prefix_2d`, `max_queue`, `sorted_list`, `transition_matrix` |
| Range queries | `segment_tree`, `lazy_segment_tree`, `general_segment_tree`, `subsegment_tree`, `merge_sort_tree`, `fenwick`, `sparse_table`, `sqrt_decomposition`, `mo` |
| Graphs and trees | `dsu`, `bridges`, `scc`, `eulerian_path`, `lca`, `reroot`, `centroid`, `permutation`, `bit_trie`, `two_sat` |
| Hard problems | `hamiltonian`, `max_clique` |
| Geometry | `segments`, `polyominoes` |
| Strings | `z_function`, `rabin_karp`, `rolling_hash`, `trie`, `string_helpers` |

Range structures use 0-indexed, inclusive bounds and raise `IndexError`
for ranges outside the data. `Prefix2D.query` is the exception: its
bounds are 1-indexed.

## Examples

Extended Euclid, modular inverses and the Chinese remainder theorem:

```python
from algokit.xgcd import crt, mod_inv, xgcd

g, x, y = xgcd(240, 46)            # (2, -9, 47): 240*x + 46*y == g
inv = mod_inv(3, 7)                # 5; ValueError when no inverse exists
crt([(2, 3), (3, 5), (2, 7)])      # 23
```

Disjoint sets:

```python
from algokit.dsu import DSU

dsu = DSU(5)
dsu.merge(0, 1)
dsu.merge(3, 4)
dsu.find(1) == dsu.find(0)         # True
dsu.components                     # 3
```

A sorted multiset with rank queries:

```python
from algokit.sorted_list import SortedList

sl = SortedList()
for v in (5, 1, 3, 3):
    sl.add(v)
sl[0], len(sl)                     # (1, 4)
sl.index(3)                        # 1
```

Range minimum with point updates:

```python
from algokit.segment_tree import MinSegmentTree

tree = MinSegmentTree([5, 2, 8, 6])
tree.range_query(1, 3)             # 2
tree.point_update(1, 9)
tree.range_query(1, 3)             # 6
```

The Z-function of a string:

```python
from algokit.z_function import z_function

z_function("aaaaa")                # [0, 4, 3, 2, 1]
```

## Command line

`algokit-interactive` plays the solver's side of an interactive
binary-search problem over standard input and output. It reads the number
of test cases, then for each case the array length and the expected
weights of positions 1..n. It asks questions of the form
`? k i1 i2 ... ik` for the actual total weight of a run of positions,
reads each answer back from standard input, and reports the first
position whose prefix is heavier than expected as `! index`, or `! -1`
when there is none.

```
algokit-interactive
```

The same search is available as a function,
`algokit.interactive.find_heavy_prefix(weights, ask)`, which takes the
question as a callable and returns the position or `None`.
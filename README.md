# kyopro

A collection of algorithms and data structures for competitive programming,
written in plain Python with no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Contents

| Module | What it provides |
| --- | --- |
| `kyopro.search` | `midpoint`, `binary_search_int`, `binary_search_float`, `two_pointers`, and `find_max_less_eq` / `find_max_less` / `find_min_greater_eq` / `find_min_greater` for sorted sequences |
| `kyopro.cumsum` | `CumSum`: one-dimensional prefix sums |
| `kyopro.cumsum2d` | `CumSum2D`: rectangle sums and horizontal, vertical and diagonal line sums on a grid |
| `kyopro.lis` | `longest_increasing_subsequence` and `lis_indices` |
| `kyopro.segment_tree` | `SegmentTree` (point update, range query) and `SparseTable` |
| `kyopro.lazy_segment_tree` | `LazySegmentTree`: range update or add, range query, and boundary searches |
| `kyopro.smart_string` | `SmartString`: a `str` with regex search and replace, subsequence test and split |
| `kyopro.union_find` | `UnionFind`: disjoint sets with union by size and path compression |
| `kyopro.shortest_path` | BFS, Dijkstra and shortest-path reconstruction |
| `kyopro.signed_shortest_path` | Bellman-Ford with negative-cycle detection, and Warshall-Floyd |
| `kyopro.topological_sort` | Kahn's algorithm |
| `kyopro.longest_path` | Longest path in a DAG, weighted or unweighted |
| `kyopro.directed_loops` | Cycle detection in directed graphs, and walking along a functional graph |
| `kyopro.undirected_loops` | Cycle detection in undirected graphs |
| `kyopro.euler_tour` | `EulerTour`: subtree sums, path sums, depth and LCA on a weighted tree |

Graph functions take 1-indexed adjacency lists in which index 0 is unused.
Unreachable distances are reported as `math.inf`.

## Examples

Range add with range sum:

```python
from kyopro.lazy_segment_tree import LazySegmentTree

tree = LazySegmentTree(
    [0] * 8,
    oper=lambda x, y: x + y,
    eval_op=lambda x, m: x + m,
    lazy_op=lambda m1, m2: m1 + m2,
    lazy_power_op=lambda m, n: m * n,
    unit_x=0,
    unit_m=0,
)
tree.update(2, 5, 3)
print(tree.query(0, 8))  # 9
```

Neighbours in a sorted list:

```python
from kyopro.search import find_max_less_eq, find_min_greater

values = [1, 3, 5, 7]
print(find_max_less_eq(values, 4))  # 3
print(find_min_greater(values, 7))  # None
```

Shortest paths:

```python
from kyopro.shortest_path import shortest_path_dijkstra, find_shortest_path

adj = [[], [(2, 4), (3, 1)], [], [(2, 1)]]
dist = shortest_path_dijkstra(adj, 1)
print(dist[2])                               # 2
print(find_shortest_path(1, 2, adj, dist))   # [1, 3, 2]
```

Lowest common ancestor and path sums on a tree:

```python
from kyopro.euler_tour import EulerTour

tour = EulerTour([(1, 2, 1), (2, 3, 2), (3, 4, 3), (2, 5, 4), (1, 6, 5)])
tour.build(1)
print(tour.lca(3, 5))         # 2
print(tour.path_query(5, 4))  # 9
```

Splitting a string:

```python
from kyopro.smart_string import SmartString

print(SmartString("a,b,c,").split_on(","))  # ['a', 'b', 'c', '']
```

## What it does not do

This is a library only: there is no command-line program, and nothing reads
problem input or writes answers for you. It has no type for arithmetic modulo
a prime and no substring hashing.
import math
from functools import reduce

import pytest

from kyopro.segment_tree import SegmentTree, SparseTable

VALUES = [9, 9, 8, 7, 8, 2, 0, 2, 3, 1]


def _sum_tree(values):
    return SegmentTree(values, lambda x, y: x + y, 0)


def test_sum_queries_match_slices():
    tree = _sum_tree(VALUES)
    n = len(VALUES)
    for a in range(n + 1):
        for b in range(a, n + 1):
            assert tree.query(a, b) == sum(VALUES[a:b])


def test_min_queries_match_slices():
    tree = SegmentTree(VALUES, min, math.inf)
    n = len(VALUES)
    for a in range(n):
        for b in range(a + 1, n + 1):
            assert tree.query(a, b) == min(VALUES[a:b])


def test_empty_range_gives_unit():
    tree = SegmentTree(VALUES, min, math.inf)
    assert tree.query(3, 3) == math.inf


def test_update_and_get():
    values = list(VALUES)
    tree = _sum_tree(values)
    tree.update(4, 100)
    values[4] = 100
    assert tree.get(4) == 100
    assert tree.query(0, len(values)) == sum(values)
    assert tree.query(5, len(values)) == sum(values[5:])


def test_add():
    values = list(VALUES)
    tree = _sum_tree(values)
    tree.add(6, 5)
    values[6] += 5
    assert tree.get(6) == values[6]
    assert tree.query(2, 8) == sum(values[2:8])


def test_non_commutative_order_is_preserved():
    letters = ["a", "b", "c", "d", "e"]
    tree = SegmentTree(letters, lambda x, y: x + y, "")
    assert tree.query(1, 4) == "".join(letters[1:4])
    assert tree.query(0, 5) == "".join(letters)
    tree.update(2, "z")
    assert tree.query(0, 5) == "abzde"


def test_empty_tree_query_is_unit():
    tree = _sum_tree([])
    assert tree.query(0, 1) == 0
    assert len(tree) == 0


@pytest.mark.parametrize("index", [-1, len(VALUES)])
def test_get_out_of_range(index):
    tree = _sum_tree(VALUES)
    with pytest.raises(IndexError):
        tree.get(index)
    with pytest.raises(IndexError):
        tree.update(index, 1)


def test_sparse_table_min_matches_slices():
    table = SparseTable(VALUES, min)
    n = len(VALUES)
    for l in range(n):
        for r in range(l + 1, n + 1):
            assert table.query(l, r) == min(VALUES[l:r])


def test_sparse_table_gcd_matches_reduce():
    values = [12, 18, 24, 36, 9, 27, 81]
    table = SparseTable(values, math.gcd)
    for l in range(len(values)):
        for r in range(l + 1, len(values) + 1):
            assert table.query(l, r) == reduce(math.gcd, values[l:r])


def test_sparse_table_single_element():
    table = SparseTable([42], max)
    assert table.query(0, 1) == 42


def test_sparse_table_rejects_empty():
    with pytest.raises(ValueError):
        SparseTable([], min)


@pytest.mark.parametrize("l, r", [(3, 3), (4, 2), (-1, 2), (0, len(VALUES) + 1)])
def test_sparse_table_rejects_bad_range(l, r):
    table = SparseTable(VALUES, min)
    with pytest.raises(ValueError):
        table.query(l, r)
import pytest

from kyopro.cumsum import CumSum

VALUES = [3, -1, 4, 1, -5, 9, 2, 6]


def test_query_matches_slice_sums():
    cs = CumSum(VALUES)
    for l in range(len(VALUES) + 1):
        for r in range(l, len(VALUES) + 1):
            assert cs.query(l, r) == sum(VALUES[l:r])


def test_empty_range_is_zero():
    cs = CumSum(VALUES)
    assert cs.query(4, 4) == 0


def test_getitem_is_prefix():
    cs = CumSum(VALUES)
    for i in range(len(VALUES) + 1):
        assert cs[i] == cs.query(0, i)


def test_iteration_yields_prefix_sums():
    cs = CumSum(VALUES)
    prefix = list(cs)
    assert prefix[0] == 0
    assert len(prefix) == len(VALUES) + 1
    for i, v in enumerate(VALUES):
        assert prefix[i + 1] - prefix[i] == v


def test_empty_input():
    cs = CumSum([])
    assert list(cs) == [0]
    assert cs.query(0, 0) == 0


def test_str_joins_prefix_sums():
    cs = CumSum([1, 2])
    assert str(cs) == " ".join(str(p) for p in cs)


@pytest.mark.parametrize("l, r", [(2, 1), (-1, 2), (0, len(VALUES) + 1)])
def test_invalid_ranges_raise(l, r):
    cs = CumSum(VALUES)
    with pytest.raises(IndexError):
        cs.query(l, r)
"""Segment tree with lazy propagation for range updates and range queries."""

from __future__ import annotations

from typing import Callable, Generic, Iterable, List, TypeVar

X = TypeVar("X")
M = TypeVar("M")


class LazySegmentTree(Generic[X, M]):
    """Range-update / range-query segment tree over a monoid ``X`` acted on by ``M``.

    ``oper`` combines two values of ``X`` and has identity ``unit_x``.
    ``lazy_op`` composes two pending actions (the earlier one first) and has
    identity ``unit_m``. ``eval_op(x, m)`` applies an action to a value, and
    ``lazy_power_op(m, n)`` gives the action ``m`` applied to a node that
    covers ``n`` elements (``m * n`` for range add over sums, ``m`` for
    min/max).

    Building is O(N); updates and queries are O(log N).
    """

    def __init__(
        self,
        values: Iterable[X],
        oper: Callable[[X, X], X],
        eval_op: Callable[[X, M], X],
        lazy_op: Callable[[M, M], M],
        lazy_power_op: Callable[[M, int], M],
        unit_x: X,
        unit_m: M,
    ) -> None:
        items = list(values)
        size = 1
        while size < len(items):
            size *= 2

        self._oper = oper
        self._eval_op = eval_op
        self._lazy_op = lazy_op
        self._lazy_power_op = lazy_power_op
        self._unit_x = unit_x
        self._unit_m = unit_m
        self._size = size

        data: List[X] = [unit_x] * (2 * size)
        data[size - 1 : size - 1 + len(items)] = items
        for k in range(size - 2, -1, -1):
            data[k] = oper(data[2 * k + 1], data[2 * k + 2])
        self._data = data
        self._lazy: List[M] = [unit_m] * (2 * size)

    def update(self, a: int, b: int, m: M) -> None:
        """Apply action ``m`` to every element of ``[a, b)``."""
        self._update(a, b, m, 0, 0, self._size)

    def query(self, a: int, b: int) -> X:
        """Return ``oper`` folded over the elements of ``[a, b)``."""
        return self._query(a, b, 0, 0, self._size)

    def find_leftest_leq(self, a: int, b: int, x: X) -> int:
        """Smallest index in ``[a, b)`` whose value is ``<= x``, or -1.

        ``oper`` must be min.
        """
        return self._find(a, b, lambda v: v <= x, False, 0, 0, self._size)

    def find_rightest_leq(self, a: int, b: int, x: X) -> int:
        """Largest index in ``[a, b)`` whose value is ``<= x``, or -1.

        ``oper`` must be min.
        """
        return self._find(a, b, lambda v: v <= x, True, 0, 0, self._size)

    def find_leftest_geq(self, a: int, b: int, x: X) -> int:
        """Smallest index in ``[a, b)`` whose value is ``>= x``, or -1.

        ``oper`` must be max.
        """
        return self._find(a, b, lambda v: v >= x, False, 0, 0, self._size)

    def find_rightest_geq(self, a: int, b: int, x: X) -> int:
        """Largest index in ``[a, b)`` whose value is ``>= x``, or -1.

        ``oper`` must be max.
        """
        return self._find(a, b, lambda v: v >= x, True, 0, 0, self._size)

    def find_leftest_sum_geq(self, a: int, b: int, x: X) -> int:
        """Smallest ``i`` in ``[a, b)`` with ``sum([a, i]) >= x``, or -1.

        ``oper`` must be addition and every element non-negative.
        """
        return self._find_sum(a, b, x, 0, 0, self._size)

    def _eval(self, k: int, length: int) -> None:
        m = self._lazy[k]
        if m == self._unit_m:
            return
        if k < self._size - 1:
            left, right = 2 * k + 1, 2 * k + 2
            self._lazy[left] = self._lazy_op(self._lazy[left], m)
            self._lazy[right] = self._lazy_op(self._lazy[right], m)
        self._data[k] = self._eval_op(self._data[k], self._lazy_power_op(m, length))
        self._lazy[k] = self._unit_m

    def _update(self, a: int, b: int, m: M, k: int, l: int, r: int) -> None:
        self._eval(k, r - l)
        if a <= l and r <= b:
            self._lazy[k] = self._lazy_op(self._lazy[k], m)
            self._eval(k, r - l)
        elif a < r and l < b:
            mid = (l + r) // 2
            self._update(a, b, m, 2 * k + 1, l, mid)
            self._update(a, b, m, 2 * k + 2, mid, r)
            self._data[k] = self._oper(self._data[2 * k + 1], self._data[2 * k + 2])

    def _query(self, a: int, b: int, k: int, l: int, r: int) -> X:
        self._eval(k, r - l)
        if r <= a or b <= l:
            return self._unit_x
        if a <= l and r <= b:
            return self._data[k]
        mid = (l + r) // 2
        left = self._query(a, b, 2 * k + 1, l, mid)
        right = self._query(a, b, 2 * k + 2, mid, r)
        return self._oper(left, right)

    def _find(
        self,
        a: int,
        b: int,
        accept: Callable[[X], bool],
        from_right: bool,
        k: int,
        l: int,
        r: int,
    ) -> int:
        self._eval(k, r - l)
        if not accept(self._data[k]) or r <= a or b <= l:
            return -1
        if k >= self._size - 1:
            return k - self._size + 1
        mid = (l + r) // 2
        children = [(2 * k + 1, l, mid), (2 * k + 2, mid, r)]
        if from_right:
            children.reverse()
        for child, cl, cr in children:
            found = self._find(a, b, accept, from_right, child, cl, cr)
            if found != -1:
                return found
        return -1

    def _find_sum(self, a: int, b: int, x: X, k: int, l: int, r: int) -> int:
        self._eval(k, r - l)
        if not self._data[k] >= x or r <= a or b <= l:
            return -1
        if k >= self._size - 1:
            return k - self._size + 1
        mid = (l + r) // 2
        found = self._find_sum(a, b, x, 2 * k + 1, l, mid)
        if found != -1:
            return found
        left_sum = self._query(a, b, 2 * k + 1, l, mid)
        return self._find_sum(a, b, x - left_sum, 2 * k + 2, mid, r)
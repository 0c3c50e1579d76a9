"""Point-update segment tree and idempotent sparse table."""

from __future__ import annotations

from typing import Callable, Generic, Iterable, List, TypeVar

X = TypeVar("X")


class SegmentTree(Generic[X]):
    """Segment tree over a monoid with point updates.

    ``oper`` must be associative with identity ``unit``; it need not be
    commutative, since queries fold from left to right.
    Building is O(N); updates and queries are O(log N).
    """

    def __init__(self, values: Iterable[X], oper: Callable[[X, X], X], unit: X) -> None:
        items = list(values)
        size = 1
        while size < len(items):
            size *= 2
        self._oper = oper
        self._unit = unit
        self._size = size
        self._n = len(items)
        # 1-based heap layout: node k has children 2k and 2k + 1, leaves start at size.
        data: List[X] = [unit] * (2 * size)
        data[size : size + len(items)] = items
        for k in range(size - 1, 0, -1):
            data[k] = oper(data[2 * k], data[2 * k + 1])
        self._data = data

    def __len__(self) -> int:
        return self._n

    def _check_index(self, i: int) -> None:
        if not 0 <= i < self._n:
            raise IndexError(f"index {i} out of range for {self._n} elements")

    def get(self, i: int) -> X:
        """Return element ``i``."""
        self._check_index(i)
        return self._data[self._size + i]

    def update(self, i: int, value: X) -> None:
        """Set element ``i`` to ``value``."""
        self._check_index(i)
        k = self._size + i
        data = self._data
        data[k] = value
        k //= 2
        while k >= 1:
            data[k] = self._oper(data[2 * k], data[2 * k + 1])
            k //= 2

    def add(self, i: int, value: X) -> None:
        """Add ``value`` to element ``i``."""
        self.update(i, self.get(i) + value)

    def query(self, a: int, b: int) -> X:
        """Return ``oper`` folded over the elements of ``[a, b)``."""
        a = max(a, 0)
        b = min(b, self._size)
        left = self._unit
        right = self._unit
        if a >= b:
            return left
        lo = a + self._size
        hi = b + self._size
        data = self._data
        oper = self._oper
        while lo < hi:
            if lo & 1:
                left = oper(left, data[lo])
                lo += 1
            if hi & 1:
                hi -= 1
                right = oper(data[hi], right)
            lo //= 2
            hi //= 2
        return oper(left, right)


class SparseTable(Generic[X]):
    """Range queries in O(1) for associative, idempotent operations.

    Suitable for min, max, gcd and the like. Preprocessing is O(N log N).
    """

    def __init__(self, seq: Iterable[X], fx: Callable[[X, X], X]) -> None:
        items = list(seq)
        if not items:
            raise ValueError("sequence must not be empty")
        n = len(items)
        self._fx = fx
        self._n = n
        log_table = [0] * (n + 1)
        for i in range(2, n + 1):
            log_table[i] = log_table[i >> 1] + 1
        self._log = log_table

        table: List[List[X]] = [items]
        for level in range(1, log_table[n] + 1):
            prev = table[-1]
            half = 1 << (level - 1)
            width = 1 << level
            table.append([fx(prev[i], prev[i + half]) for i in range(n - width + 1)])
        self._table = table

    def query(self, l: int, r: int) -> X:
        """Return ``fx`` folded over ``[l, r)``; requires ``0 <= l < r <= N``."""
        if not 0 <= l < r <= self._n:
            raise ValueError(f"invalid range [{l}, {r}) for {self._n} elements")
        level = self._log[r - l]
        row = self._table[level]
        return self._fx(row[l], row[r - (1 << level)])
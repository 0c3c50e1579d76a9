"""Prefix sums on a 2-D grid: rectangle sums and straight-line sums."""

from __future__ import annotations

from itertools import accumulate
from typing import Iterable, List, Sequence, Tuple

Point = Tuple[int, int]


def _prefix(values: Iterable) -> list:
    return [0, *accumulate(values)]


def _clipped(prefix: list, a: int, b: int):
    """Sum of the entries between positions ``a`` and ``b`` (inclusive), clipped."""
    lo = max(min(a, b), 0)
    hi = min(max(a, b), len(prefix) - 2)
    if lo > hi:
        return 0
    return prefix[hi + 1] - prefix[lo]


class CumSum2D:
    """Rectangle sums and horizontal/vertical/diagonal line sums of a grid."""

    def __init__(self, grid: Sequence[Sequence]) -> None:
        rows: List[list] = [list(row) for row in grid]
        if not rows or not rows[0]:
            raise ValueError("grid must be non-empty")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("grid rows must all have the same length")
        height = len(rows)
        self._height = height
        self._width = width

        # _area[h][w]: sum of the rectangle with corners (0, 0) and (h - 1, w - 1)
        self._area = [[0] * (width + 1)]
        for row in rows:
            above = self._area[-1]
            line = [0]
            for w, running in enumerate(accumulate(row)):
                line.append(above[w + 1] + running)
            self._area.append(line)

        self._right = [_prefix(row) for row in rows]
        self._down = [_prefix(column) for column in zip(*rows)]
        # cells (h + d, d)
        self._right_down_h = [
            _prefix(rows[h + d][d] for d in range(min(width, height - h)))
            for h in range(height)
        ]
        # cells (d, w + d)
        self._right_down_w = [
            _prefix(rows[d][w + d] for d in range(min(height, width - w)))
            for w in range(width)
        ]
        # cells (d, w - d)
        self._left_down_w = [
            _prefix(rows[d][w - d] for d in range(min(w + 1, height)))
            for w in range(width)
        ]
        # cells (h + d, W - 1 - d)
        self._left_down_h = [
            _prefix(rows[h + d][width - 1 - d] for d in range(min(width, height - h)))
            for h in range(height)
        ]

    def query_line(self, p1: Point, p2: Point):
        """Sum of the cells on the segment from ``p1`` to ``p2``, both included.

        The segment must be horizontal, vertical or diagonal; parts of it that
        fall outside the grid contribute nothing.
        """
        h1, w1 = p1
        h2, w2 = p2
        dh, dw = h2 - h1, w2 - w1
        if dh == 0:
            return self._query_right(h1, w1, w2)
        if dw == 0:
            return self._query_down(w1, h1, h2)
        if dh + dw == 0:
            return self._query_left_down(h1, w1, h2, w2)
        if dh == dw:
            return self._query_right_down(h1, w1, h2, w2)
        raise ValueError("points must lie on a horizontal, vertical or diagonal line")

    def query_area(self, p1: Point, p2: Point):
        """Sum of the rectangle with top-left ``p1`` and bottom-right ``p2``."""
        a, b = p1
        c, d = p2
        if not (a <= c and b <= d):
            raise ValueError("p1 must be the top-left corner and p2 the bottom-right")
        if a < 0 or b < 0 or c >= self._height or d >= self._width:
            raise IndexError("rectangle lies outside the grid")
        area = self._area
        return area[c + 1][d + 1] - area[a][d + 1] - area[c + 1][b] + area[a][b]

    def _query_right(self, h: int, w1: int, w2: int):
        if not 0 <= h < self._height:
            return 0
        return _clipped(self._right[h], w1, w2)

    def _query_down(self, w: int, h1: int, h2: int):
        if not 0 <= w < self._width:
            return 0
        return _clipped(self._down[w], h1, h2)

    def _query_right_down(self, h1: int, w1: int, h2: int, w2: int):
        k = h1 - w1
        if k >= 0:
            if k >= self._height:
                return 0
            return _clipped(self._right_down_h[k], w1, w2)
        k = -k
        if k >= self._width:
            return 0
        return _clipped(self._right_down_w[k], h1, h2)

    def _query_left_down(self, h1: int, w1: int, h2: int, w2: int):
        k = h1 + w1
        last = self._width - 1
        if k <= last:
            if k < 0:
                return 0
            return _clipped(self._left_down_w[k], h1, h2)
        k -= last
        if k >= self._height:
            return 0
        return _clipped(self._left_down_h[k], last - w1, last - w2)
"""Binary search, two-pointer scanning and ordered lookups in sorted sequences."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from typing import Callable, Iterator, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")


def _trunc_half(x: int) -> int:
    """Halve ``x``, rounding toward zero."""
    return x // 2 if x >= 0 else -((-x) // 2)


def midpoint(ok: int, ng: int) -> int:
    """Return the midpoint of ``ok`` and ``ng`` without forming ``ok + ng``.

    Both halves are rounded toward zero and the two remainders are combined,
    so the result always lies strictly between ``ok`` and ``ng`` when they
    differ by at least two.
    """
    half_ok = _trunc_half(ok)
    half_ng = _trunc_half(ng)
    remainder = (ok - 2 * half_ok) + (ng - 2 * half_ng)
    return half_ok + half_ng + _trunc_half(remainder)


def binary_search_int(ok: int, ng: int, is_ok: Callable[[int], bool]) -> int:
    """Return the boundary value satisfying ``is_ok`` closest to ``ng``.

    ``ok`` must satisfy the condition and ``ng`` must not; the search narrows
    the interval until the two are adjacent.
    """
    if ok == ng:
        raise ValueError("ok and ng must differ")
    while abs(ok - ng) > 1:
        mid = midpoint(ok, ng)
        if is_ok(mid):
            ok = mid
        else:
            ng = mid
    return ok


def binary_search_float(
    ok: float,
    ng: float,
    is_ok: Callable[[float], bool],
    iterations: int = 100,
) -> float:
    """Bisect a real interval ``iterations`` times and return the ``ok`` side."""
    for _ in range(iterations):
        mid = (ok + ng) / 2
        if is_ok(mid):
            ok = mid
        else:
            ng = mid
    return ok


def two_pointers(n: int, can_extend: Callable[[int, int], bool]) -> Iterator[Tuple[int, int]]:
    """Scan half-open intervals ``[l, r)`` of ``range(n)`` with two pointers.

    For each ``l`` the right end ``r`` is advanced while ``r < n`` and
    ``can_extend(l, r)`` holds (that is, while element ``r`` may be added).
    The maximal ``(l, r)`` for each ``l`` is yielded.
    """
    r = 0
    for l in range(n):
        while r < n and can_extend(l, r):
            r += 1
        yield l, r
        if l == r:
            r += 1


def find_max_less_eq(values: Sequence[T], val: T) -> Optional[T]:
    """Return the largest element ``<= val`` of sorted ``values``, or None."""
    pos = bisect_right(values, val)
    return values[pos - 1] if pos > 0 else None


def find_max_less(values: Sequence[T], val: T) -> Optional[T]:
    """Return the largest element ``< val`` of sorted ``values``, or None."""
    pos = bisect_left(values, val)
    return values[pos - 1] if pos > 0 else None


def find_min_greater_eq(values: Sequence[T], val: T) -> Optional[T]:
    """Return the smallest element ``>= val`` of sorted ``values``, or None."""
    pos = bisect_left(values, val)
    return values[pos] if pos < len(values) else None


def find_min_greater(values: Sequence[T], val: T) -> Optional[T]:
    """Return the smallest element ``> val`` of sorted ``values``, or None."""
    pos = bisect_right(values, val)
    return values[pos] if pos < len(values) else None
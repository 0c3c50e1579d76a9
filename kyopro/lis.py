"""Longest strictly increasing subsequence with restoration."""

from __future__ import annotations

from bisect import bisect_left
from typing import List, Sequence, TypeVar

T = TypeVar("T")


def _lis_chain(values: Sequence[T]) -> List[int]:
    """Indices of one longest strictly increasing subsequence, in order."""
    tail_values: List[T] = []
    tail_indices: List[int] = []
    previous = [-1] * len(values)

    for i, v in enumerate(values):
        pos = bisect_left(tail_values, v)
        previous[i] = tail_indices[pos - 1] if pos > 0 else -1
        if pos == len(tail_values):
            tail_values.append(v)
            tail_indices.append(i)
        else:
            tail_values[pos] = v
            tail_indices[pos] = i

    chain: List[int] = []
    i = tail_indices[-1] if tail_indices else -1
    while i != -1:
        chain.append(i)
        i = previous[i]
    chain.reverse()
    return chain


def longest_increasing_subsequence(values: Sequence[T]) -> List[T]:
    """Return one longest strictly increasing subsequence of ``values``.

    Runs in O(N log N). An empty input gives an empty list.
    """
    return [values[i] for i in _lis_chain(values)]


def lis_indices(values: Sequence[T]) -> List[int]:
    """Return positions in ``values`` of a longest strictly increasing subsequence.

    The subsequence found by ``longest_increasing_subsequence`` is matched
    against ``values`` greedily, taking the earliest position of each element.
    """
    indices: List[int] = []
    pos = 0
    for v in longest_increasing_subsequence(values):
        while values[pos] != v:
            pos += 1
        indices.append(pos)
    return indices
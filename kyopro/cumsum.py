"""One-dimensional prefix sums with O(1) range-sum queries."""

from __future__ import annotations

from itertools import accumulate
from typing import Iterable, Iterator


class CumSum:
    """Prefix sums of a sequence; ``self[i]`` is the sum of the first ``i`` items."""

    def __init__(self, values: Iterable) -> None:
        self._prefix = [0, *accumulate(values)]

    def query(self, l: int, r: int):
        """Sum of the elements in ``[l, r)``."""
        if not 0 <= l <= r < len(self._prefix):
            raise IndexError(f"invalid range [{l}, {r}) for {len(self._prefix) - 1} elements")
        return self._prefix[r] - self._prefix[l]

    def __getitem__(self, index: int):
        return self.query(0, index)

    def __iter__(self) -> Iterator:
        return iter(self._prefix)

    def __len__(self) -> int:
        return len(self._prefix)

    def __str__(self) -> str:
        return " ".join(map(str, self._prefix))
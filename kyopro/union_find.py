"""Disjoint-set union with union by size and path compression."""

from __future__ import annotations

from typing import Dict, List


class UnionFind:
    """Disjoint sets over the nodes ``1 .. n``."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self._n = n
        self._parent = list(range(n + 1))
        self._tree_size = [1] * (n + 1)

    def __len__(self) -> int:
        return self._n

    def _check(self, node: int) -> None:
        if not 1 <= node <= self._n:
            raise IndexError(f"node {node} out of range 1..{self._n}")

    def root(self, node: int) -> int:
        """Return the representative of the set holding ``node``."""
        self._check(node)
        parent = self._parent
        path: List[int] = []
        while parent[node] != node:
            path.append(node)
            node = parent[node]
        for inner in path:
            parent[inner] = node
        return node

    def is_same_group(self, node_1: int, node_2: int) -> bool:
        """Whether the two nodes are in the same set."""
        return self.root(node_1) == self.root(node_2)

    def unite(self, node_1: int, node_2: int) -> None:
        """Merge the sets of the two nodes, attaching the smaller to the larger."""
        if self.is_same_group(node_1, node_2):
            return
        union_from, union_to = node_1, node_2
        if self.size(node_1) > self.size(node_2):
            union_from, union_to = node_2, node_1
        root_from = self.root(union_from)
        root_to = self.root(union_to)
        self._parent[root_from] = root_to
        self._tree_size[root_to] += self._tree_size[root_from]

    def size(self, node: int) -> int:
        """Number of nodes in the set holding ``node``."""
        return self._tree_size[self.root(node)]

    def groups(self) -> Dict[int, List[int]]:
        """Map each representative, in increasing order, to its members."""
        found: Dict[int, List[int]] = {}
        for node in range(1, self._n + 1):
            found.setdefault(self.root(node), []).append(node)
        return dict(sorted(found.items()))
"""Tree queries on an Euler tour: subtree sums, path sums, depth and LCA."""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

from kyopro.segment_tree import SegmentTree, SparseTable

Edge = Tuple[int, int, int]


def _add(x, y):
    return x + y


class EulerTour:
    """Weighted tree on the nodes ``1 .. len(edges) + 1`` queried by its Euler tour.

    ``edges`` lists ``(node_1, node_2, weight)``. Call ``build`` with a root
    before querying; changing a node weight with ``set_node_weight`` requires
    building again, while ``update_node_weight`` and ``update_edge_weight``
    keep the built structure current.
    """

    def __init__(self, edges: Sequence[Edge]) -> None:
        self._edges: List[Edge] = [(u, v, w) for u, v, w in edges]
        self._n = len(self._edges) + 1
        n = self._n
        self._node_weight = [0] * (n + 1)
        self._adj: List[List[Tuple[int, int]]] = [[] for _ in range(n + 1)]
        for u, v, weight in self._edges:
            if not (1 <= u <= n and 1 <= v <= n):
                raise ValueError(f"edge ({u}, {v}) has a node outside 1..{n}")
            self._adj[u].append((v, weight))
            self._adj[v].append((u, weight))
        self._built = False
        self._root = None
        self._in_time: List[int] = []
        self._out_time: List[int] = []

    def __len__(self) -> int:
        return self._n

    def _check_node(self, node: int) -> None:
        if not 1 <= node <= self._n:
            raise IndexError(f"node {node} out of range 1..{self._n}")

    def _times(self, node: int) -> Tuple[int, int]:
        self._check_node(node)
        if not self._built:
            raise RuntimeError("build() must be called before querying")
        return self._in_time[node], self._out_time[node]

    def set_node_weight(self, node: int, weight: int) -> None:
        """Set the weight of ``node``; the tour must be built again afterwards."""
        self._check_node(node)
        self._node_weight[node] = weight
        self._built = False

    def node_weight(self, node: int) -> int:
        """Current weight of ``node``."""
        self._check_node(node)
        return self._node_weight[node]

    def edge_weight(self, edge_index: int) -> int:
        """Current weight of edge ``edge_index``."""
        return self._edges[edge_index][2]

    def build(self, root: int) -> None:
        """Walk the tree from ``root`` and prepare the query structures.

        Does nothing if the tour is already built. O(N log N).
        """
        self._check_node(root)
        if self._built:
            return
        self._built = True
        self._root = root

        n = self._n
        max_time = 2 * (n - 1) + 2
        subtree_node = [0] * max_time
        subtree_edge = [0] * max_time
        path_node = [0] * max_time
        path_edge = [0] * max_time
        lca_keys: list = [(math.inf, -1)] * max_time
        in_time = [-1] * (n + 1)
        out_time = [-1] * (n + 1)
        weights = self._node_weight
        t = -1
        stack: list = []

        def enter(node: int, parent: int, depth: int, weight: int) -> None:
            nonlocal t
            t += 1
            in_time[node] = t
            subtree_node[t] = weights[node]
            subtree_edge[t] = weight
            path_node[t] = weights[node]
            path_edge[t] = weight
            lca_keys[t] = (depth, node)
            stack.append((node, parent, depth, weight, iter(self._adj[node])))

        enter(root, -1, 0, 0)
        while stack:
            node, parent, depth, weight, children = stack[-1]
            for child, child_weight in children:
                if child != parent:
                    enter(child, node, depth + 1, child_weight)
                    break
            else:
                stack.pop()
                out_time[node] = t
                t += 1
                # Inverse entries make the prefix sums cancel once the node is left.
                path_node[t] = -weights[node]
                path_edge[t] = -weight
                lca_keys[t] = (depth - 1, parent) if depth > 0 else (math.inf, -1)

        self._in_time = in_time
        self._out_time = out_time
        self._subtree_node = SegmentTree(subtree_node, _add, 0)
        self._subtree_edge = SegmentTree(subtree_edge, _add, 0)
        self._path_node = SegmentTree(path_node, _add, 0)
        self._path_edge = SegmentTree(path_edge, _add, 0)
        self._lca = SparseTable(lca_keys, min)

    def subtree_size(self, node: int) -> int:
        """Number of nodes in the subtree rooted at ``node``."""
        in_t, out_t = self._times(node)
        return (out_t - in_t) // 2 + 1

    def subtree_query(self, node: int) -> int:
        """Sum of node weights and edge weights inside the subtree of ``node``."""
        in_t, out_t = self._times(node)
        return self._subtree_node.query(in_t, out_t + 1) + self._subtree_edge.query(
            in_t + 1, out_t + 1
        )

    def root_path_query(self, node: int) -> int:
        """Sum of node and edge weights on the path from the root to ``node``."""
        _, out_t = self._times(node)
        return self._path_node.query(0, out_t + 1) + self._path_edge.query(1, out_t + 1)

    def depth(self, node: int) -> int:
        """Number of edges between the root and ``node``."""
        in_t, _ = self._times(node)
        return self._lca.query(in_t, in_t + 1)[0]

    def lca(self, node_1: int, node_2: int) -> int:
        """Lowest common ancestor of the two nodes."""
        in_1, out_1 = self._times(node_1)
        in_2, out_2 = self._times(node_2)
        return self._lca.query(min(in_1, in_2), max(out_1, out_2) + 1)[1]

    def path_query(self, node_1: int, node_2: int) -> int:
        """Sum of node and edge weights on the path between the two nodes."""
        total = self.root_path_query(node_1) + self.root_path_query(node_2)
        ancestor = self.lca(node_1, node_2)
        total -= 2 * self.root_path_query(ancestor)
        in_t, _ = self._times(ancestor)
        return total + self._subtree_node.query(in_t, in_t + 1)

    def update_node_weight(self, node: int, weight: int) -> None:
        """Change the weight of ``node`` in the built tour, O(log N)."""
        in_t, out_t = self._times(node)
        self._node_weight[node] = weight
        self._subtree_node.update(in_t, weight)
        self._path_node.update(in_t, weight)
        self._path_node.update(out_t + 1, -weight)

    def update_edge_weight(self, edge_index: int, weight: int) -> None:
        """Change the weight of edge ``edge_index`` in the built tour, O(log N)."""
        node_1, node_2, _ = self._edges[edge_index]
        in_1, out_1 = self._times(node_1)
        in_2, out_2 = self._times(node_2)
        self._edges[edge_index] = (node_1, node_2, weight)
        # The edge's weight sits at the child's entry and just after its exit.
        in_t = max(in_1, in_2)
        out_t = min(out_1, out_2)
        self._subtree_edge.update(in_t, weight)
        self._path_edge.update(in_t, weight)
        self._path_edge.update(out_t + 1, -weight)
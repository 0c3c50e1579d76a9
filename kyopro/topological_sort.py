"""Topological sorting of a directed graph by Kahn's algorithm."""

from __future__ import annotations

from collections import deque
from itertools import islice
from typing import List, NamedTuple, Sequence


class TopologicalOrder(NamedTuple):
    """Whether the graph is a DAG, and the nodes in the order they were emitted."""

    is_dag: bool
    order: List[int]


def topological_sort(adj_list: Sequence[Sequence[int]]) -> TopologicalOrder:
    """Topologically sort a 1-indexed adjacency list in O(N + E).

    ``adj_list[u]`` lists the targets of edges leaving ``u`` for nodes
    ``1 .. len(adj_list) - 1``; ``adj_list[0]`` is unused. Nodes with no
    incoming edges are taken in increasing order, then breadth-first. If the
    graph has a cycle, ``is_dag`` is False and ``order`` holds only the nodes
    that could be placed.
    """
    n = len(adj_list) - 1
    in_degree = [0] * (n + 1)
    edge_count = 0
    for targets in islice(adj_list, 1, None):
        for to in targets:
            in_degree[to] += 1
            edge_count += 1

    queue = deque(node for node in range(1, n + 1) if in_degree[node] == 0)
    order: List[int] = []
    removed = 0

    while queue:
        node = queue.popleft()
        order.append(node)
        for to in adj_list[node]:
            removed += 1
            in_degree[to] -= 1
            if in_degree[to] == 0:
                queue.append(to)

    return TopologicalOrder(removed == edge_count, order)
"""Longest paths in directed acyclic graphs."""

from __future__ import annotations

from typing import Sequence, Tuple

from kyopro.topological_sort import topological_sort


def longest_path(adj_list: Sequence[Sequence[Tuple[int, int]]]) -> int:
    """Largest total weight of a path in a DAG, in O(N + E).

    ``adj_list[u]`` holds ``(v, weight)`` pairs for nodes
    ``1 .. len(adj_list) - 1``. A path may start at any node, so the result
    is never below zero. Raises ``ValueError`` if the graph has a cycle.
    """
    order = topological_sort([[to for to, _ in targets] for targets in adj_list])
    if not order.is_dag:
        raise ValueError("graph is not a DAG")
    best = [0] * len(adj_list)
    for frm in order.order:
        for to, weight in adj_list[frm]:
            if best[to] < best[frm] + weight:
                best[to] = best[frm] + weight
    return max(best, default=0)


def longest_path_unweighted(adj_list: Sequence[Sequence[int]]) -> int:
    """Number of edges on a longest path of an unweighted DAG."""
    return longest_path([[(to, 1) for to in targets] for targets in adj_list])
"""Single-source shortest paths (BFS, Dijkstra) and path restoration.

Graphs are adjacency lists indexed by node number. Unweighted graphs list
the target nodes, ``adj_list[u] = [v, ...]``. Weighted graphs list
``(v, weight)`` pairs. Unreachable distances are ``INF``.
"""

from __future__ import annotations

import heapq
import math
from collections import deque
from typing import List, Sequence, Tuple

INF = math.inf


def shortest_path_bfs(adj_list: Sequence[Sequence[int]], start: int) -> list:
    """Distances from ``start`` in an unweighted graph, in O(N + E)."""
    distances: list = [INF] * len(adj_list)
    distances[start] = 0
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for to in adj_list[node]:
            if distances[to] == INF:
                distances[to] = distances[node] + 1
                queue.append(to)
    return distances


def shortest_path_dijkstra(adj_list: Sequence[Sequence[Tuple[int, int]]], start: int) -> list:
    """Distances from ``start`` by Dijkstra's algorithm, O(E + N log N).

    Every edge weight must be non-negative.
    """
    distances: list = [INF] * len(adj_list)
    distances[start] = 0
    heap = [(0, start)]
    while heap:
        weight, node = heapq.heappop(heap)
        if distances[node] < weight:
            # A shorter distance was already settled; skipping keeps it O(E log N).
            continue
        for to, edge_weight in adj_list[node]:
            candidate = weight + edge_weight
            if distances[to] > candidate:
                distances[to] = candidate
                heapq.heappush(heap, (candidate, to))
    return distances


def find_shortest_path(
    start: int,
    end: int,
    adj_list: Sequence[Sequence[Tuple[int, int]]],
    distances: Sequence,
) -> List[int]:
    """Restore one shortest path from ``start`` to ``end`` as a list of nodes.

    ``distances`` holds the shortest distances from ``start`` for the weighted
    graph ``adj_list``. Raises ``ValueError`` if ``end`` is unreachable or the
    distances do not describe shortest paths from ``start``.
    """
    if distances[end] == INF:
        raise ValueError(f"node {end} is not reachable from {start}")

    reverse: List[List[Tuple[int, int]]] = [[] for _ in adj_list]
    for frm, targets in enumerate(adj_list):
        for to, weight in targets:
            reverse[to].append((frm, weight))

    path = [end]
    visited = {end}
    node = end
    while node != start:
        for frm, weight in reverse[node]:
            if frm in visited or distances[frm] == INF:
                continue
            if distances[node] == distances[frm] + weight:
                path.append(frm)
                visited.add(frm)
                node = frm
                break
        else:
            raise ValueError("distances do not describe shortest paths from start")

    path.reverse()
    return path


def find_shortest_path_unweighted(
    start: int,
    end: int,
    adj_list: Sequence[Sequence[int]],
    distances: Sequence,
) -> List[int]:
    """Restore one shortest path in an unweighted graph; see ``find_shortest_path``."""
    weighted = [[(to, 1) for to in targets] for targets in adj_list]
    return find_shortest_path(start, end, weighted, distances)
"""Shortest paths that allow negative edge weights.

Graphs are 1-indexed adjacency lists: ``adj_list[u]`` holds ``(v, weight)``
pairs for nodes ``u = 1 .. len(adj_list) - 1``; ``adj_list[0]`` is unused.
Unreachable distances are ``INF``.
"""

from __future__ import annotations

import math
from itertools import islice
from typing import List, NamedTuple, Sequence, Tuple

INF = math.inf

AdjList = Sequence[Sequence[Tuple[int, int]]]


class ShortestPaths(NamedTuple):
    """Single-source result: whether a negative cycle was found, and distances."""

    has_negative_cycle: bool
    distances: list


class AllShortestPaths(NamedTuple):
    """All-pairs result: whether a negative cycle exists, and the distance matrix."""

    has_negative_cycle: bool
    distances: List[list]


def _edges(adj_list: AdjList) -> List[Tuple[int, int, int]]:
    return [
        (u, v, weight)
        for u, targets in islice(enumerate(adj_list), 1, None)
        for v, weight in targets
    ]


def shortest_path_bellman_ford(adj_list: AdjList, start: int) -> ShortestPaths:
    """Single-source shortest paths by Bellman-Ford, O(E * N).

    When a negative cycle is reported, use ``detect_negative_inf_nodes`` to
    find which nodes have a distance of minus infinity.
    """
    n = len(adj_list) - 1
    distances = [INF] * (n + 1)
    distances[start] = 0
    edges = _edges(adj_list)
    negative_loop = False

    for round_no in range(1, n + 1):
        for u, v, weight in edges:
            if distances[u] == INF:
                continue
            if distances[v] > distances[u] + weight:
                distances[v] = distances[u] + weight
                if round_no == n:
                    # Without a negative cycle nothing changes in round N.
                    negative_loop = True
                    break

    return ShortestPaths(negative_loop, distances)


def detect_negative_inf_nodes(adj_list: AdjList, start: int, distances: Sequence) -> List[bool]:
    """Mark the nodes whose shortest distance from ``start`` is minus infinity.

    ``distances`` is the list returned by ``shortest_path_bellman_ford``; it is
    not modified.
    """
    n = len(adj_list) - 1
    dist = list(distances)
    negative_inf = [False] * (n + 1)
    edges = _edges(adj_list)

    for _ in range(n):
        for u, v, weight in edges:
            if dist[u] == INF:
                continue
            if dist[v] > dist[u] + weight:
                dist[v] = dist[u] + weight
                negative_inf[v] = True
            if negative_inf[u]:
                negative_inf[v] = True

    return negative_inf


def all_shortest_paths_warshall_floyd(adj_list: AdjList) -> AllShortestPaths:
    """All-pairs shortest paths by Warshall-Floyd, O(N^3).

    Row and column 0 of the matrix stay ``INF``. A node whose distance to
    itself is negative lies on, or reaches, a negative cycle.
    """
    size = len(adj_list)
    nodes = range(1, size)
    dist = [[INF] * size for _ in range(size)]

    for node in nodes:
        dist[node][node] = 0
        for to, weight in adj_list[node]:
            dist[node][to] = weight

    for k in nodes:
        row_k = dist[k]
        for i in nodes:
            row_i = dist[i]
            via = row_i[k]
            if via == INF:
                continue
            for j in nodes:
                if row_k[j] == INF:
                    continue
                candidate = via + row_k[j]
                if candidate < row_i[j]:
                    row_i[j] = candidate

    negative_loop = any(dist[node][node] < 0 for node in nodes)
    return AllShortestPaths(negative_loop, dist)
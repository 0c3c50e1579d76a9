"""Cycle detection in undirected graphs."""

from __future__ import annotations

from typing import Dict, List, NamedTuple, Sequence, Tuple

from kyopro.shortest_path import find_shortest_path_unweighted, shortest_path_bfs
from kyopro.union_find import UnionFind


class Loop(NamedTuple):
    """A cycle: the node it starts from and the edge indices walked in order."""

    start: int
    edges: List[int]


def find_loop_undirected(n: int, edges: Sequence[Tuple[int, int]]) -> List[Loop]:
    """Find one cycle per connected component of an undirected graph.

    Nodes are ``1 .. n``; ``edges`` lists ``(u, v)`` pairs. Self-loops and
    parallel edges are handled. Each cycle's edges are indices into ``edges``.
    """
    uf = UnionFind(n)
    root_has_loop = [False] * (n + 1)
    adj: List[List[int]] = [[] for _ in range(n + 1)]
    edge_of: Dict[Tuple[int, int], int] = {}
    loops: List[Loop] = []

    def unite(index: int) -> None:
        u, v = edges[index]
        uf.unite(u, v)
        adj[u].append(v)
        adj[v].append(u)
        edge_of[u, v] = index
        edge_of[v, u] = index

    for index, (u, v) in enumerate(edges):
        root_u = uf.root(u)
        root_v = uf.root(v)

        if root_has_loop[root_u] or root_has_loop[root_v]:
            unite(index)
            root_has_loop[root_u] = root_has_loop[root_v] = True
            continue

        if root_u == root_v:
            distances = shortest_path_bfs(adj, u)
            path = find_shortest_path_unweighted(u, v, adj, distances)
            loop_edges = [edge_of[a, b] for a, b in zip(path, path[1:])]
            loop_edges.append(index)
            root_has_loop[root_u] = True
            loops.append(Loop(u, loop_edges))

        unite(index)

    return loops
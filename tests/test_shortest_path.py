import pytest

from kyopro.shortest_path import (
    INF,
    find_shortest_path,
    find_shortest_path_unweighted,
    shortest_path_bfs,
    shortest_path_dijkstra,
)
from kyopro.signed_shortest_path import shortest_path_bellman_ford


def _unweighted_graph():
    # 1-indexed; node 0 unused, node 6 unreachable from 1
    adj = [[] for _ in range(7)]
    adj[1] = [2, 4]
    adj[2] = [3]
    adj[3] = [5]
    adj[4] = [5]
    adj[5] = [1]
    adj[6] = [1]
    return adj


def _weighted_graph():
    adj = [[] for _ in range(6)]
    adj[1] = [(2, 7), (3, 2)]
    adj[2] = [(4, 1)]
    adj[3] = [(2, 3), (4, 8)]
    adj[4] = [(5, 2)]
    return adj


def test_bfs_start_and_unreachable():
    dist = shortest_path_bfs(_unweighted_graph(), 1)
    assert dist[1] == 0
    assert dist[6] == INF
    assert dist[0] == INF


def test_bfs_edge_relaxation_invariant():
    adj = _unweighted_graph()
    dist = shortest_path_bfs(adj, 1)
    for u, targets in enumerate(adj):
        if dist[u] == INF:
            continue
        for v in targets:
            assert dist[v] <= dist[u] + 1


def test_bfs_line_graph():
    adj = [[1], [2], [3], []]
    assert shortest_path_bfs(adj, 0) == [0, 1, 2, 3]


def test_dijkstra_matches_bellman_ford():
    adj = _weighted_graph()
    dijkstra = shortest_path_dijkstra(adj, 1)
    bellman = shortest_path_bellman_ford(adj, 1)
    assert not bellman.has_negative_cycle
    assert dijkstra == bellman.distances


def test_dijkstra_unit_weights_match_bfs():
    adj = _unweighted_graph()
    weighted = [[(v, 1) for v in targets] for targets in adj]
    assert shortest_path_dijkstra(weighted, 1) == shortest_path_bfs(adj, 1)


def test_dijkstra_pinned_value():
    dist = shortest_path_dijkstra(_weighted_graph(), 1)
    assert dist[4] == 6


def test_find_shortest_path_is_valid_and_shortest():
    adj = _weighted_graph()
    dist = shortest_path_dijkstra(adj, 1)
    path = find_shortest_path(1, 5, adj, dist)
    assert path[0] == 1
    assert path[-1] == 5
    total = 0
    for u, v in zip(path, path[1:]):
        weights = [w for to, w in adj[u] if to == v]
        assert weights
        total += min(weights)
    assert total == dist[5]


def test_find_shortest_path_to_self():
    adj = _weighted_graph()
    dist = shortest_path_dijkstra(adj, 1)
    assert find_shortest_path(1, 1, adj, dist) == [1]


def test_find_shortest_path_unreachable_raises():
    adj = _weighted_graph()
    dist = shortest_path_dijkstra(adj, 2)
    with pytest.raises(ValueError):
        find_shortest_path(2, 1, adj, dist)


def test_find_shortest_path_bad_distances_raise():
    adj = [[(1, 1)], []]
    with pytest.raises(ValueError):
        find_shortest_path(0, 1, adj, [0, 5])


def test_find_shortest_path_unweighted_line():
    adj = [[], [2], [3], [4], []]
    dist = shortest_path_bfs(adj, 1)
    assert find_shortest_path_unweighted(1, 4, adj, dist) == [1, 2, 3, 4]


def test_find_shortest_path_unweighted_length_matches_distance():
    adj = _unweighted_graph()
    dist = shortest_path_bfs(adj, 1)
    path = find_shortest_path_unweighted(1, 5, adj, dist)
    assert len(path) - 1 == dist[5]
    for u, v in zip(path, path[1:]):
        assert v in adj[u]
import pytest

from kyopro.directed_loops import find_loop_directed, move_on_loop, move_on_loop_prep


def _assert_is_cycle(edges, loop):
    for a, b in zip(loop, loop[1:]):
        assert edges[a][1] == edges[b][0]
    assert edges[loop[-1]][1] == edges[loop[0]][0]


def test_no_loop():
    edges = [(1, 2), (2, 3), (3, 4)]
    assert find_loop_directed(4, edges) == []


def test_single_loop():
    edges = [(1, 2), (2, 3), (3, 4), (3, 1)]
    loops = find_loop_directed(4, edges)
    assert len(loops) == 1
    assert loops[0] == [0, 1, 3]


def test_two_loops_in_three_components():
    edges = [
        (1, 2), (2, 3), (3, 1),
        (4, 5), (5, 6), (6, 7), (7, 4),
        (8, 9),
    ]
    loops = find_loop_directed(9, edges)
    assert len(loops) == 2
    assert len(loops[0]) == 3
    assert len(loops[1]) == 4
    for loop in loops:
        _assert_is_cycle(edges, loop)


def test_self_loop():
    edges = [(1, 2), (2, 2)]
    loops = find_loop_directed(2, edges)
    assert len(loops) == 1
    assert len(loops[0]) == 1


def test_loop_starting_mid_search():
    edges = [(1, 2), (2, 3), (3, 2)]
    loops = find_loop_directed(3, edges)
    assert len(loops) == 1
    assert len(loops[0]) == 2
    assert loops[0][0] == 1
    assert loops[0][1] == 2


def _functional_graph():
    edges = [(1, 2), (2, 3), (3, 4), (4, 2)]
    adj = [[] for _ in range(5)]
    for u, v in edges:
        adj[u].append(v)
    return adj, edges


def test_move_on_loop_prep_splits_walk():
    adj, edges = _functional_graph()
    loop = find_loop_directed(4, edges)[0]
    assert loop == [1, 2, 3]
    walk = move_on_loop_prep(1, adj, edges, loop)
    assert walk.out_loop == [1]
    assert walk.in_loop == [2, 3, 4]


def test_move_on_loop_prep_start_on_loop():
    adj, edges = _functional_graph()
    loop = find_loop_directed(4, edges)[0]
    out_loop, in_loop = move_on_loop_prep(3, adj, edges, loop)
    assert out_loop == []
    assert in_loop == [3, 4, 2]


def test_move_on_loop_matches_direct_walk():
    adj, edges = _functional_graph()
    loop = find_loop_directed(4, edges)[0]
    out_loop, in_loop = move_on_loop_prep(1, adj, edges, loop)
    node = 1
    for count in range(20):
        assert move_on_loop(out_loop, in_loop, count) == node
        node = adj[node][0]


def test_move_on_loop_large_count():
    assert move_on_loop([1], [2, 3, 4], 10**18 + 1) == move_on_loop([1], [2, 3, 4], (10**18) % 3 + 1)


def test_move_on_loop_prep_rejects_branching_node():
    adj = [[], [2, 3], [1], [1]]
    edges = [(1, 2), (2, 1), (1, 3), (3, 1)]
    with pytest.raises(ValueError):
        move_on_loop_prep(1, adj, edges, [0, 1])
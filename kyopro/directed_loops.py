"""Cycle detection in directed graphs and walking a functional graph."""

from __future__ import annotations

from typing import List, NamedTuple, Sequence, Tuple


class LoopWalk(NamedTuple):
    """Nodes visited from a start node: before reaching the loop, then on it."""

    out_loop: List[int]
    in_loop: List[int]


def find_loop_directed(n: int, edges: Sequence[Tuple[int, int]]) -> List[List[int]]:
    """Find cycles in a directed graph with nodes ``1 .. n``.

    Each cycle is returned as the list of indices into ``edges`` that walk
    around it in order. At most one cycle is reported per depth-first search
    started from a node; self-loops are found too.
    """
    adj: List[List[Tuple[int, int]]] = [[] for _ in range(n + 1)]
    for index, (u, v) in enumerate(edges):
        adj[u].append((v, index))

    visited = [False] * (n + 1)
    finished = [False] * (n + 1)

    def dfs(root: int, loop_edges: List[int]) -> int:
        # Returns -1: no loop, 0: loop closed, k >= 1: loop being unwound, starts at k.
        visited[root] = True
        stack: List[list] = [[root, 0, None]]
        ret = -1
        while stack:
            frame = stack[-1]
            node = frame[0]
            child_edge = frame[2]
            if child_edge is not None:
                frame[2] = None
                if ret != -1:
                    if ret >= 1:
                        loop_edges.append(child_edge)
                    if ret == node:
                        ret = 0
                    finished[node] = True
                    stack.pop()
                    continue

            descended = False
            closed = False
            neighbours = adj[node]
            while frame[1] < len(neighbours):
                next_node, edge_index = neighbours[frame[1]]
                frame[1] += 1
                if finished[next_node]:
                    continue
                if visited[next_node]:
                    loop_edges.append(edge_index)
                    ret = 0 if next_node == node else next_node
                    closed = True
                    break
                frame[2] = edge_index
                visited[next_node] = True
                stack.append([next_node, 0, None])
                descended = True
                break

            if descended:
                continue
            if not closed:
                ret = -1
            finished[node] = True
            stack.pop()
        return ret

    loops: List[List[int]] = []
    for node in range(1, n + 1):
        loop_edges: List[int] = []
        if dfs(node, loop_edges) != -1:
            loop_edges.reverse()
            loops.append(loop_edges)
    return loops


def move_on_loop_prep(
    start: int,
    adj_list: Sequence[Sequence[int]],
    edges: Sequence[Tuple[int, int]],
    loop_edge_indices: Sequence[int],
) -> LoopWalk:
    """Record the walk from ``start`` into its loop and once around the loop.

    The component of ``start`` must be a functional graph: every node reached
    has exactly one outgoing edge. ``loop_edge_indices`` is a cycle as given
    by ``find_loop_directed``.
    """
    loop_nodes = {edges[e][0] for e in loop_edge_indices}
    loop_size = len(loop_edge_indices)
    out_loop: List[int] = []
    in_loop: List[int] = []
    node = start
    while True:
        if node in loop_nodes:
            if len(in_loop) == loop_size:
                break
            in_loop.append(node)
        else:
            out_loop.append(node)
        targets = adj_list[node]
        if len(targets) != 1:
            raise ValueError(f"node {node} must have exactly one outgoing edge")
        node = targets[0]
    return LoopWalk(out_loop, in_loop)


def move_on_loop(out_loop: Sequence[int], in_loop: Sequence[int], move_count: int) -> int:
    """Return the node reached after ``move_count`` moves, in O(1)."""
    if move_count < len(out_loop):
        return out_loop[move_count]
    if not in_loop:
        raise ValueError("the walk never enters a loop")
    return in_loop[(move_count - len(out_loop)) % len(in_loop)]
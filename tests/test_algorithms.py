import math

import pytest

from graphalgo.algorithms import DFSResult, bfs, dfs, dijkstra, kruskal, prim
from graphalgo.graph import Graph


def _build(n, edges):
    g = Graph(n)
    for edge in edges:
        g.add_edge(*edge)
    return g


DFS_EDGES = [
    (0, 1), (0, 5), (2, 1), (7, 1), (0, 7), (2, 6), (5, 4),
    (5, 8), (6, 7), (6, 8), (7, 8), (3, 4), (3, 2), (3, 6),
]

MST_EDGES = [
    (0, 1, 9), (0, 3, 1), (1, 2, 3), (1, 4, 4), (1, 5, 3), (2, 3, 5),
    (2, 5, 12), (2, 4, 1), (3, 6, 8), (4, 8, 6), (5, 7, 2), (5, 6, 5),
    (6, 7, 2), (7, 8, 1), (7, 5, 2),
]

MST_EXPECTED = [(1, 5), (1, 2), (2, 3), (2, 4), (3, 0), (5, 7), (6, 7), (7, 8)]

DIJKSTRA_EDGES = [(0, 1, 10), (0, 2, 5), (1, 2, 4), (2, 3, 1), (1, 3, 2)]


def _edge_set(g):
    return {
        frozenset((u, v))
        for u in range(g.num_vertices)
        for v, _ in g.neighbors(u)
    }


def _total_weight(g):
    return sum(w for u in range(g.num_vertices) for v, w in g.neighbors(u) if u < v)


def test_bfs_distances_tree():
    g = _build(7, [(0, 1), (0, 2), (1, 3), (1, 4), (2, 5), (2, 6)])
    tree, distance = bfs(g, 0)
    assert distance == [0, 1, 1, 2, 2, 2, 2]
    assert tree.num_edges == 12


def test_bfs_distances_with_cycle():
    g = _build(8, [(0, 1), (0, 2), (1, 3), (1, 4), (2, 5), (2, 6), (5, 6), (3, 7)])
    tree, distance = bfs(g, 0)
    assert distance == [0, 1, 1, 2, 2, 2, 2, 3]
    assert not tree.has_edge(5, 6)


def test_bfs_unreachable_vertices_are_infinite():
    g = _build(4, [(0, 1)])
    tree, distance = bfs(g, 0)
    assert distance[2] == math.inf and distance[3] == math.inf
    assert tree.has_edge(0, 1)
    assert tree.num_edges == 2


def test_bfs_rejects_unknown_vertex():
    g = _build(9, DFS_EDGES)
    with pytest.raises(ValueError, match="there is no such vtx in the graph"):
        bfs(g, 12)


def test_dfs_times_connected():
    result = dfs(_build(9, DFS_EDGES), 0)
    assert isinstance(result, DFSResult)
    assert result.discovery == [1, 7, 6, 5, 10, 11, 4, 2, 3]
    assert result.finish == [18, 8, 9, 14, 13, 12, 15, 17, 16]


def test_dfs_times_unconnected():
    g = _build(9, [(0, 1), (0, 5), (0, 6), (2, 5), (3, 4), (3, 7), (4, 7), (4, 8), (5, 6)])
    result = dfs(g, 0)
    assert result.discovery == [1, 8, 4, 11, 13, 3, 2, 12, 14]
    assert result.finish == [10, 9, 5, 18, 16, 6, 7, 17, 15]
    assert not result.tree.has_edge(0, 3)


def test_dfs_tree_is_spanning_for_connected_graph():
    result = dfs(_build(9, DFS_EDGES), 0)
    assert result.tree.num_edges == 2 * 8
    _, distance = bfs(result.tree, 0)
    assert all(d != math.inf for d in distance)


def test_dfs_rejects_unknown_vertex():
    with pytest.raises(ValueError, match="there is no such vtx in the graph"):
        dfs(_build(9, DFS_EDGES), 12)


def test_dijkstra_distances_and_tree():
    tree, distance = dijkstra(_build(4, DIJKSTRA_EDGES), 0)
    assert distance == [0, 8, 5, 6]
    assert tree.has_edge(0, 2)
    assert tree.has_edge(3, 2)
    assert tree.has_edge(1, 3)
    assert not tree.has_edge(0, 1)
    assert not tree.has_edge(0, 3)
    assert not tree.has_edge(2, 1)


def test_dijkstra_rejects_negative_weight():
    edges = DIJKSTRA_EDGES[:-1] + [(1, 3, -2)]
    with pytest.raises(ValueError, match="must not be negative number"):
        dijkstra(_build(4, edges), 0)


def test_dijkstra_checks_vertex_before_weights():
    edges = DIJKSTRA_EDGES[:-1] + [(1, 3, -2)]
    with pytest.raises(ValueError, match="there is no such vtx in the graph"):
        dijkstra(_build(4, edges), 5)


def test_dijkstra_unreachable_is_infinite():
    tree, distance = dijkstra(_build(3, [(0, 1, 4)]), 0)
    assert distance[2] == math.inf
    assert tree.num_edges == 2


@pytest.mark.parametrize("algorithm", [kruskal, lambda g: prim(g, 0)])
def test_mst_edges(algorithm):
    tree = algorithm(_build(9, MST_EDGES))
    for u, v in MST_EXPECTED:
        assert tree.has_edge(u, v)
    assert tree.num_edges == 2 * len(MST_EXPECTED)


@pytest.mark.parametrize("start", range(9))
def test_prim_matches_kruskal_from_any_start(start):
    g = _build(9, MST_EDGES)
    assert _edge_set(prim(g, start)) == _edge_set(kruskal(g))


def test_prim_random_start_gives_same_weight():
    g = _build(9, MST_EDGES)
    assert _total_weight(prim(g)) == _total_weight(kruskal(g))


@pytest.mark.parametrize("algorithm", [kruskal, prim])
def test_mst_requires_connected_graph(algorithm):
    with pytest.raises(ValueError, match="The Graph must be connected"):
        algorithm(_build(4, [(0, 1), (2, 3)]))


def test_prim_rejects_bad_start():
    with pytest.raises(ValueError, match="there is no such vtx in the graph"):
        prim(_build(9, MST_EDGES), 9)
"""Traversal, shortest-path and spanning-tree algorithms on ``Graph``."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from itertools import chain
from operator import itemgetter

from .graph import Graph
from .min_heap import MinHeap
from .union_find import UnionFind
from .vertex_queue import VertexQueue


@dataclass
class DFSResult:
    """Outcome of a depth-first search.

    ``tree`` holds the forest edges, ``discovery`` and ``finish`` the
    timestamps at which each vertex was first reached and completed.
    """

    tree: Graph
    discovery: list[int]
    finish: list[int]


def _check_source(graph: Graph, src: int) -> None:
    if not 0 <= src < graph.num_vertices:
        raise ValueError("there is no such vtx in the graph")


def _tree_from_parents(size: int, parents: list[int | None], root: int) -> Graph:
    tree = Graph(size)
    for vertex, parent in enumerate(parents):
        if vertex != root and parent is not None:
            tree.add_edge(parent, vertex)
    return tree


def _require_connected(graph: Graph) -> None:
    _, distances = bfs(graph, 0)
    if any(d == math.inf for d in distances):
        raise ValueError("The Graph must be connected")


def bfs(graph: Graph, src: int) -> tuple[Graph, list[float]]:
    """Breadth-first search from ``src``.

    Returns the BFS tree and the hop distance of every vertex
    (``math.inf`` for vertices that cannot be reached).
    """
    _check_source(graph, src)
    size = graph.num_vertices
    distance: list[float] = [math.inf] * size
    parent: list[int | None] = [None] * size
    distance[src] = 0
    queue = VertexQueue()
    queue.enqueue(src)
    while not queue.is_empty():
        vertex = queue.dequeue()
        for neighbour, _ in graph.neighbors(vertex):
            if distance[neighbour] == math.inf:
                distance[neighbour] = distance[vertex] + 1
                parent[neighbour] = vertex
                queue.enqueue(neighbour)
    return _tree_from_parents(size, parent, src), distance


def dfs(graph: Graph, src: int) -> DFSResult:
    """Depth-first search starting at ``src``, then at every unvisited vertex."""
    _check_source(graph, src)
    size = graph.num_vertices
    discovery: list[float] = [math.inf] * size
    finish: list[float] = [math.inf] * size
    parent: list[int | None] = [None] * size
    clock = 0

    def visit(root: int) -> None:
        nonlocal clock
        clock += 1
        discovery[root] = clock
        stack = [(root, graph.neighbors(root))]
        while stack:
            vertex, pending = stack[-1]
            for neighbour, _ in pending:
                if discovery[neighbour] == math.inf:
                    parent[neighbour] = vertex
                    clock += 1
                    discovery[neighbour] = clock
                    stack.append((neighbour, graph.neighbors(neighbour)))
                    break
            else:
                stack.pop()
                clock += 1
                finish[vertex] = clock

    for root in chain([src], range(size)):
        if discovery[root] == math.inf:
            visit(root)

    return DFSResult(
        tree=_tree_from_parents(size, parent, src),
        discovery=[int(t) for t in discovery],
        finish=[int(t) for t in finish],
    )


def dijkstra(graph: Graph, src: int) -> tuple[Graph, list[float]]:
    """Shortest paths from ``src`` over non-negative edge weights.

    Returns the shortest-path tree and the distance of every vertex
    (``math.inf`` for vertices that cannot be reached).
    """
    _check_source(graph, src)
    size = graph.num_vertices
    if any(
        weight < 0 for vertex in range(size) for _, weight in graph.neighbors(vertex)
    ):
        raise ValueError("the weight of every edge must not be negative number")

    tree = Graph(size)
    heap = MinHeap(size)
    distance: list[float] = [math.inf] * size
    parent: list[int | None] = [None] * size
    distance[src] = 0
    heap.update_priority(src, 0)
    while not heap.is_empty():
        vertex = heap.extract_min()
        origin = parent[vertex]
        if vertex != src and origin is not None:
            tree.add_edge(origin, vertex, distance[vertex] - distance[origin])
        for neighbour, weight in graph.neighbors(vertex):
            candidate = distance[vertex] + weight
            if distance[neighbour] > candidate:
                heap.update_priority(neighbour, candidate)
                parent[neighbour] = vertex
                distance[neighbour] = candidate
    return tree, distance


def kruskal(graph: Graph) -> Graph:
    """Minimum spanning tree by Kruskal's algorithm; the graph must be connected."""
    _require_connected(graph)
    size = graph.num_vertices
    edges = sorted(
        (
            (u, v, weight)
            for u in range(size)
            for v, weight in graph.neighbors(u)
            if u < v
        ),
        key=itemgetter(2),
    )
    tree = Graph(size)
    sets = UnionFind(size)
    for u, v, weight in edges:
        if sets.find(u) != sets.find(v):
            sets.union(u, v)
            tree.add_edge(u, v, weight)
    return tree


def prim(graph: Graph, start: int | None = None) -> Graph:
    """Minimum spanning tree by Prim's algorithm; the graph must be connected.

    The tree is grown from ``start``, or from a random vertex if it is None.
    """
    _require_connected(graph)
    size = graph.num_vertices
    if start is None:
        start = random.randrange(size)
    _check_source(graph, start)

    weight: list[float] = [math.inf] * size
    nearest: list[int | None] = [None] * size
    for neighbour, w in graph.neighbors(start):
        weight[neighbour] = w
        nearest[neighbour] = start

    tree = Graph(size)
    sets = UnionFind(size)
    for _ in range(size - 1):
        chosen = min(range(size), key=weight.__getitem__)
        tree.add_edge(nearest[chosen], chosen, weight[chosen])
        sets.union(start, chosen)
        weight[chosen] = math.inf
        for neighbour, w in graph.neighbors(chosen):
            if sets.find(neighbour) != sets.find(start) and weight[neighbour] > w:
                weight[neighbour] = w
                nearest[neighbour] = chosen
    return tree
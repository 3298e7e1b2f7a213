"""Command that exercises every structure and algorithm and prints the results."""

from __future__ import annotations

from collections.abc import Sequence

from .algorithms import bfs, dfs, dijkstra, kruskal, prim
from .graph import Graph
from .min_heap import MinHeap
from .union_find import UnionFind
from .vertex_queue import VertexQueue


def _build(size: int, edges: Sequence[tuple]) -> Graph:
    graph = Graph(size)
    for edge in edges:
        graph.add_edge(*edge)
    return graph


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration and print its output."""
    print()
    print("Queue")
    queue = VertexQueue()
    for vertex in (12, 8, 2005):
        queue.enqueue(vertex)
    x = queue.dequeue()
    y = queue.peek()
    y2 = queue.dequeue()
    print(f"x is: {x} y is: {y}y2 is: {y2}")

    print()
    print("Graph")
    print(_build(10, [
        (0, 1, 10), (0, 4, 20), (1, 2, 30), (1, 3, 40), (2, 3, 60),
        (3, 4, 70), (1, 4, 50), (2, 5, 40), (3, 6, 30), (2, 6, 7),
        (5, 7, 20), (5, 8, 40), (0, 8, 50), (7, 9, 50), (3, 9, 10),
    ]))

    print()
    print("UNION FIND:")
    sets = UnionFind(10)
    sets.union(2, 3)
    sets.union(2, 4)
    print(
        f"f2: {sets.find(2)} f3: {sets.find(3)} f4:{sets.find(4)} f5: {sets.find(5)}"
    )

    print()
    print("Min Heap:")
    heap = MinHeap(5)
    for vertex, priority in enumerate((12, 8, 2005, 28, 17)):
        heap.update_priority(vertex, priority)
    order = [heap.extract_min() for _ in range(5)]
    print("the order is: " + " ".join(map(str, order)))

    print("MST Algorithms")
    mst_input = _build(9, [
        (0, 1, 9), (0, 3, 1), (1, 2, 3), (1, 4, 4), (1, 5, 3),
        (2, 3, 5), (2, 5, 12), (2, 4, 1), (3, 6, 8), (4, 8, 6),
        (5, 7, 2), (5, 6, 5), (6, 7, 2), (7, 8, 1), (7, 5, 2),
    ])
    kruskal_tree = kruskal(mst_input)
    prim_tree = prim(mst_input)
    print()
    print("KRUSKAL:")
    print()
    print(kruskal_tree)
    print()
    print("PRIM:")
    print()
    print(prim_tree)

    print()
    print("dijkstra")
    shortest, _ = dijkstra(
        _build(4, [(0, 1, 10), (0, 2, 5), (1, 2, 4), (2, 3, 1), (1, 3, 2)]), 0
    )
    print(shortest)

    print()
    print("BFS")
    bfs_tree, _ = bfs(_build(9, [
        (0, 1), (0, 5), (2, 1), (7, 1), (0, 7), (2, 1),
        (2, 6), (5, 4), (5, 8), (6, 7), (6, 8), (7, 8),
    ]), 0)
    print(bfs_tree)

    print()
    print("DFS")
    print()
    result = dfs(_build(9, [
        (0, 1), (0, 5), (2, 1), (7, 1), (0, 7), (2, 6), (5, 4),
        (5, 8), (6, 7), (6, 8), (7, 8), (3, 4), (3, 2), (3, 6),
    ]), 0)
    print(result.tree)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
# graphalgo

A small graph toolkit with no dependencies. It handles undirected weighted
graphs whose vertices are the integers `0 .. n-1`. It provides breadth-first
and depth-first search, Dijkstra's shortest paths, and minimum spanning trees
by Kruskal's and Prim's algorithms.

## Installation

```
pip install .
```

To run the test suite, install the test extra:

```
pip install ".[test]"
pytest
```

## Building a graph

```python
from graphalgo.graph import Graph

g = Graph(4)
g.add_edge(0, 1, 10)
g.add_edge(0, 2, 5)
g.add_edge(1, 2, 4)
g.add_edge(2, 3, 1)
g.add_edge(1, 3, 2)

print(g.num_vertices, g.num_edges)   # 4 10
print(g.has_edge(0, 1))              # True
print(list(g.neighbors(2)))          # [(3, 1), (1, 4), (0, 5)]
print(g)
```

How `Graph` behaves:

- `Graph(n)` raises `ValueError` if `n` is not positive.
- `add_edge(src, dest, weight=1)` stores the edge in both directions. If the
  edge already exists, the call updates its weight.
- `num_vertices` and `num_edges` are properties. `num_edges` counts adjacency
  entries, so each undirected edge counts twice.
- `neighbors(vertex)` yields `(neighbour, weight)` pairs, with the most
  recently added neighbour first.
- `remove_edge(v1, v2)` deletes the edge in both directions. It raises
  `ValueError` if the edge is missing.
- `add_edge`, `remove_edge`, `has_edge` and `neighbors` raise `IndexError`
  for a vertex that is not in the graph.
- `str(g)` lists every vertex's adjacency, one line per vertex, for example
  `vtx 0 -> (2 , 5) -> (1 , 10) -> NULL`.

## Algorithms

```python
from graphalgo.algorithms import bfs, dfs, dijkstra, kruskal, prim

tree, distances = bfs(g, 0)
result = dfs(g, 0)          # DFSResult(tree, discovery, finish)
paths, costs = dijkstra(g, 0)
mst = kruskal(g)
mst = prim(g, start=0)
```

- `bfs(graph, src)` returns the breadth-first tree and the hop distance of
  every vertex.
- `dfs(graph, src)` returns a `DFSResult`. It holds the depth-first forest as
  `tree`, and the `discovery` and `finish` timestamps as lists of integers.
  The search starts at `src`. It then restarts from every vertex not yet
  visited, in increasing order.
- `dijkstra(graph, src)` returns the shortest-path tree and the distance of
  every vertex. It raises `ValueError` if any edge has a negative weight.
- `kruskal(graph)` returns a minimum spanning tree.
- `prim(graph, start=None)` returns a minimum spanning tree grown from
  `start`. If `start` is not given, it grows the tree from a random vertex.

Every function that takes `src` or `start` raises `ValueError` if that
vertex is not in the graph. `kruskal` and `prim` raise `ValueError` if the
graph is not connected. `bfs` and `dijkstra` give `math.inf` as the distance
of any vertex that cannot be reached.

## Helper structures

- `graphalgo.vertex_queue.VertexQueue` is a FIFO queue of vertices. It has
  `enqueue`, `dequeue`, `peek`, `is_empty` and `len()`. `dequeue` and `peek`
  raise `IndexError` when the queue is empty.
- `graphalgo.min_heap.MinHeap(size)` is a fixed-size table of priorities,
  indexed by vertex. It has `update_priority`, `extract_min` and `is_empty`.
  `extract_min` scans the whole table, and on a tie it returns the lowest
  vertex number.
- `graphalgo.union_find.UnionFind(size)` is a disjoint-set structure with
  `find` and `union`.

## Demo

The demo applies every structure and algorithm to small sample graphs and
prints the results:

```
graphalgo-demo
```

## Limitations

The package only handles graphs that you build in code. It does not read or
write graphs from files, and it has no directed-graph type. The demo command
takes no options.
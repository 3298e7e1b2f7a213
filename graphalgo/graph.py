"""Undirected weighted graph stored as adjacency lists."""

from __future__ import annotations

from collections.abc import Iterator


class Graph:
    """An undirected weighted graph with vertices numbered 0..n-1.

    Each vertex's neighbours are kept so that iteration yields the most
    recently added neighbour first. ``num_edges`` counts adjacency entries,
    so an ordinary edge between two distinct vertices counts twice.
    """

    def __init__(self, num_vertices: int) -> None:
        if num_vertices <= 0:
            raise ValueError("num of vertex must be positive number")
        self._num_vertices = num_vertices
        self._num_edges = 0
        self._adjacency: list[dict[int, float]] = [{} for _ in range(num_vertices)]

    @property
    def num_vertices(self) -> int:
        """Number of vertices in the graph."""
        return self._num_vertices

    @property
    def num_edges(self) -> int:
        """Number of adjacency entries (twice the number of undirected edges)."""
        return self._num_edges

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < self._num_vertices:
            raise IndexError("the graph doesn't contain this vertex")

    def _link(self, src: int, dest: int, weight: float) -> None:
        neighbours = self._adjacency[src]
        if dest not in neighbours:
            self._num_edges += 1
        neighbours[dest] = weight

    def _unlink(self, src: int, dest: int) -> None:
        try:
            del self._adjacency[src][dest]
        except KeyError:
            raise ValueError("the graph doesn't contain this edge") from None
        self._num_edges -= 1

    def add_edge(self, src: int, dest: int, weight: float = 1) -> None:
        """Add an undirected edge, or update its weight if it already exists."""
        self._check_vertex(src)
        self._check_vertex(dest)
        self._link(src, dest, weight)
        self._link(dest, src, weight)

    def remove_edge(self, v1: int, v2: int) -> None:
        """Remove the undirected edge between ``v1`` and ``v2``."""
        self._check_vertex(v1)
        self._check_vertex(v2)
        self._unlink(v1, v2)
        self._unlink(v2, v1)

    def has_edge(self, v1: int, v2: int) -> bool:
        """Return whether an edge joins ``v1`` and ``v2``."""
        self._check_vertex(v1)
        self._check_vertex(v2)
        return v2 in self._adjacency[v1]

    def neighbors(self, vertex: int) -> Iterator[tuple[int, float]]:
        """Yield ``(neighbour, weight)`` pairs, most recently added first."""
        self._check_vertex(vertex)
        yield from reversed(list(self._adjacency[vertex].items()))

    def __str__(self) -> str:
        lines = []
        for vertex in range(self._num_vertices):
            parts = [f"vtx {vertex} -> "]
            parts.extend(
                f"({neighbour} , {weight:g}) -> "
                for neighbour, weight in self.neighbors(vertex)
            )
            parts.append("NULL")
            lines.append("".join(parts))
        return "\n".join(lines)
"""Priority store indexed by vertex, with linear-scan extraction."""

from __future__ import annotations

import math


class MinHeap:
    """Priorities for vertices 0..size-1.

    A vertex is present when its priority is below infinity; extracting it
    resets its priority to infinity. Ties go to the lowest vertex number.
    """

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("size must be positive number")
        self._priorities: list[float] = [math.inf] * size

    def extract_min(self) -> int:
        """Remove and return the vertex with the smallest priority."""
        if self.is_empty():
            raise ValueError("the heap is empty")
        vertex = min(range(len(self._priorities)), key=self._priorities.__getitem__)
        self._priorities[vertex] = math.inf
        return vertex

    def is_empty(self) -> bool:
        """Return whether no vertex has a finite priority."""
        return all(p >= math.inf for p in self._priorities)

    def update_priority(self, vertex: int, priority: float) -> None:
        """Set the priority of a vertex, inserting it if absent."""
        if not 0 <= vertex < len(self._priorities):
            raise ValueError("there is no such vtx in the graph")
        self._priorities[vertex] = priority
"""Disjoint-set structure over the integers 0..size-1."""

from __future__ import annotations


class UnionFind:
    """Disjoint sets where each element points towards its set's root."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("num of vertex must be positive number")
        self._parent = list(range(size))

    def _check(self, item: int) -> None:
        if not 0 <= item < len(self._parent):
            raise ValueError("there is no such number in the union")

    def find(self, item: int) -> int:
        """Return the root of the set containing ``item``."""
        self._check(item)
        while item != self._parent[item]:
            item = self._parent[item]
        return item

    def union(self, first: int, second: int) -> None:
        """Merge the set of ``second`` into the set of ``first``."""
        self._check(first)
        self._check(second)
        self._parent[self.find(second)] = self.find(first)
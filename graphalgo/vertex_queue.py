"""First-in first-out queue of vertex numbers."""

from __future__ import annotations

from collections import deque


class VertexQueue:
    """A FIFO queue of vertices."""

    def __init__(self) -> None:
        self._items: deque[int] = deque()

    def enqueue(self, vertex: int) -> None:
        """Append a vertex to the back of the queue."""
        self._items.append(vertex)

    def dequeue(self) -> int:
        """Remove and return the vertex at the front of the queue."""
        if not self._items:
            raise IndexError("you cant pop from empty queue")
        return self._items.popleft()

    def peek(self) -> int:
        """Return the vertex at the front without removing it."""
        if not self._items:
            raise IndexError("you cant pop from empty queue")
        return self._items[0]

    def is_empty(self) -> bool:
        """Return whether the queue holds no vertices."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)
"""An unbounded first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any


class LinkedQueue:
    """A queue of arbitrary items."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, data: Any) -> None:
        """Add ``data`` at the rear."""
        self._items.append(data)

    def dequeue(self) -> Any:
        """Remove and return the item at the front."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the front of the queue to the rear."""
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"
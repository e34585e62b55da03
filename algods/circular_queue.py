"""A fixed-capacity circular queue."""

from __future__ import annotations

from typing import Any


class CircularQueue:
    """A ring buffer queue holding up to ``capacity`` items.

    One extra slot separates the rear from the front, so ``front == rear``
    means empty.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._slots: list[Any] = [None] * (capacity + 1)
        self._front = 0
        self._rear = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def front(self) -> int:
        return self._front

    @property
    def rear(self) -> int:
        return self._rear

    def enqueue(self, data: Any) -> None:
        """Add ``data`` at the rear."""
        if self.is_full():
            raise IndexError("enqueue to a full queue")
        position = self._rear
        self._rear = 0 if self._rear == self._capacity else self._rear + 1
        self._slots[position] = data

    def dequeue(self) -> Any:
        """Remove and return the item at the front."""
        if self.is_empty():
            raise IndexError("dequeue from an empty queue")
        position = self._front
        self._front = 0 if self._front == self._capacity else self._front + 1
        value = self._slots[position]
        self._slots[position] = None
        return value

    def is_empty(self) -> bool:
        return self._front == self._rear

    def is_full(self) -> bool:
        if self._front < self._rear:
            return self._rear - self._front == self._capacity
        return self._rear + 1 == self._front

    def __len__(self) -> int:
        if self._front <= self._rear:
            return self._rear - self._front
        return self._rear + (self._capacity - self._front) + 1

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(capacity={self._capacity}, "
            f"front={self._front}, rear={self._rear})"
        )
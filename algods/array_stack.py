"""A stack with a capacity that grows and shrinks as it fills and empties."""

from __future__ import annotations

from typing import Any


class ArrayStack:
    """A stack that tracks a capacity.

    When full, a push raises the capacity by 30% (at least by one). A pop
    that leaves the stack holding exactly 70% of its capacity (at least one)
    shrinks the capacity to that size.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, data: Any) -> None:
        """Place ``data`` on top, growing the capacity if the stack is full."""
        if self.is_full():
            new_capacity = self._capacity + (self._capacity * 3) // 10
            if new_capacity == self._capacity:
                new_capacity = self._capacity + 1
            self._capacity = new_capacity
        self._items.append(data)

    def pop(self) -> Any:
        """Remove and return the top item, shrinking the capacity when due."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        value = self._items.pop()
        new_capacity = max((self._capacity * 7) // 10, 1)
        if len(self._items) == new_capacity:
            self._capacity = new_capacity
        return value

    def top(self) -> Any:
        """Return the top item without removing it."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, items={self._items!r})"
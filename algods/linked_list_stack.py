"""A last-in, first-out stack."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class LinkedListStack:
    """An unbounded stack of arbitrary items."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, data: Any) -> None:
        """Place ``data`` on top of the stack."""
        self._items.append(data)

    def pop(self) -> Any:
        """Remove and return the item on top of the stack."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def top(self) -> Any:
        """Return the item on top of the stack without removing it."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the bottom of the stack to the top."""
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"
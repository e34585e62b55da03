"""Disjoint sets represented as trees of parent links."""

from __future__ import annotations

from typing import Any


class DisjointSet:
    """One element of a disjoint-set forest."""

    __slots__ = ("data", "parent")

    def __init__(self, data: Any = None) -> None:
        self.data = data
        self.parent: DisjointSet | None = None

    def find(self) -> DisjointSet:
        """Return the root that represents this element's set."""
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def union(self, other: DisjointSet) -> None:
        """Merge ``other``'s set into this one by hanging its root here."""
        root = other.find()
        if root is self.find():
            return
        root.parent = self

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.data!r})"
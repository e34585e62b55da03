"""A general tree stored as left-child, right-sibling links."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class LCRSNode:
    """A tree node linked to its first child and its next sibling."""

    data: Any
    left_child: LCRSNode | None = None
    right_sibling: LCRSNode | None = None

    def _siblings(self) -> Iterator[LCRSNode]:
        node: LCRSNode | None = self
        while node is not None:
            yield node
            node = node.right_sibling

    def add_child(self, child: LCRSNode) -> None:
        """Attach ``child`` after this node's last child."""
        if self.left_child is None:
            self.left_child = child
            return
        *_, last = self.left_child._siblings()
        last.right_sibling = child

    def children(self) -> Iterator[LCRSNode]:
        """Yield this node's children in order."""
        if self.left_child is not None:
            yield from self.left_child._siblings()

    def format_tree(self, depth: int = 0) -> str:
        """Render this node, its descendants and its following siblings.

        Each level is indented by three spaces and child nodes are marked
        with ``+--``.
        """
        lines: list[str] = []
        self._format_into(lines, depth)
        return "".join(lines)

    def _format_into(self, lines: list[str], depth: int) -> None:
        for node in self._siblings():
            marker = "+--" if depth > 0 else ""
            lines.append(f"{'   ' * max(depth - 1, 0)}{marker}{node.data}\n")
            if node.left_child is not None:
                node.left_child._format_into(lines, depth + 1)

    def nodes_at_level(self, level: int) -> list[Any]:
        """Return the data of every node ``level`` steps below this one.

        Siblings following this node count as being on its level.
        """
        return list(self._collect(0, level))

    def _collect(self, current_depth: int, target: int) -> Iterator[Any]:
        for node in self._siblings():
            if current_depth == target:
                yield node.data
            if node.left_child is not None and current_depth < target:
                yield from node.left_child._collect(current_depth + 1, target)
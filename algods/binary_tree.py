"""A simple binary tree with depth-first traversals."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class BinaryTreeNode:
    """A node with up to two children."""

    data: Any
    left: BinaryTreeNode | None = None
    right: BinaryTreeNode | None = None

    def preorder(self) -> Iterator[Any]:
        """Yield the root, then the left subtree, then the right subtree."""
        yield self.data
        if self.left is not None:
            yield from self.left.preorder()
        if self.right is not None:
            yield from self.right.preorder()

    def inorder(self) -> Iterator[Any]:
        """Yield the left subtree, then the root, then the right subtree."""
        if self.left is not None:
            yield from self.left.inorder()
        yield self.data
        if self.right is not None:
            yield from self.right.inorder()

    def postorder(self) -> Iterator[Any]:
        """Yield the left subtree, then the right subtree, then the root."""
        if self.left is not None:
            yield from self.left.postorder()
        if self.right is not None:
            yield from self.right.postorder()
        yield self.data


def format_traversal(values: Iterable[Any]) -> str:
    """Render traversal output with a space before each value."""
    return "".join(f" {value}" for value in values)
"""A general tree in first-child / next-sibling form."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any


class TreeNode:
    """A node of an ordered tree with any number of children."""

    def __init__(self, value: Any) -> None:
        self.value = value
        self.parent: TreeNode | None = None
        self.first_child: TreeNode | None = None
        self.next_sibling: TreeNode | None = None

    def insert_child(self, child: TreeNode) -> None:
        """Add ``child`` as the new first child."""
        child.parent = self
        child.next_sibling = self.first_child
        self.first_child = child

    def insert_sibling(self, sibling: TreeNode) -> None:
        """Place ``sibling`` right after this node, under the same parent."""
        sibling.parent = self.parent
        sibling.next_sibling = self.next_sibling
        self.next_sibling = sibling

    def children(self) -> Iterator[TreeNode]:
        """Yield the children from first to last."""
        child = self.first_child
        while child is not None:
            yield child
            child = child.next_sibling

    def serialize(self) -> str:
        """Pre-order rendering: ``(value child child ...)`` without separators."""
        return f"({self.value}" + "".join(child.serialize() for child in self.children()) + ")"

    def height(self) -> int:
        """Number of edges on the longest path down to a leaf."""
        return max((child.height() + 1 for child in self.children()), default=0)

    def size(self) -> int:
        """Number of nodes in this subtree, counted breadth first."""
        count = 0
        pending: deque[TreeNode] = deque([self])
        while pending:
            node = pending.popleft()
            count += 1
            pending.extend(node.children())
        return count
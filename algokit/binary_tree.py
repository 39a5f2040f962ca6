"""A plain binary tree with parent links."""

from __future__ import annotations

from typing import Any


class BinaryTreeNode:
    """A binary tree node holding a value and links to parent and children."""

    def __init__(self, value: Any) -> None:
        self.value = value
        self.parent: BinaryTreeNode | None = None
        self.left: BinaryTreeNode | None = None
        self.right: BinaryTreeNode | None = None

    def insert_left(self, child: BinaryTreeNode) -> None:
        """Make ``child`` the left child, detaching any previous one."""
        if self.left is not None and self.left is not child:
            self.left.parent = None
        self.left = child
        child.parent = self

    def insert_right(self, child: BinaryTreeNode) -> None:
        """Make ``child`` the right child, detaching any previous one."""
        if self.right is not None and self.right is not child:
            self.right.parent = None
        self.right = child
        child.parent = self
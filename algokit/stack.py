"""A LIFO stack built on a singly linked list."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from algokit.singly_linked_list import SinglyLinkedList


class Stack:
    """Last-in, first-out stack; iteration runs from top to bottom."""

    def __init__(self) -> None:
        self._items = SinglyLinkedList()

    def is_empty(self) -> bool:
        return self._items.head is None

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self._items.push_front(value)

    def top(self) -> Any:
        """Return the top value; raises IndexError when empty."""
        if self._items.head is None:
            raise IndexError("top of an empty stack")
        return self._items.head.value

    def pop(self) -> Any:
        """Remove and return the top value; raises IndexError when empty."""
        node = self._items.head
        if node is None:
            raise IndexError("pop from an empty stack")
        self._items.remove(node)
        return node.value

    def format(self) -> str:
        """Render the values from top to bottom, each followed by one space."""
        return "".join(f"{value} " for value in self)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)
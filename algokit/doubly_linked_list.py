"""A doubly linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class DoublyNode:
    """One cell of a doubly linked list."""

    value: Any
    next: DoublyNode | None = None
    prev: DoublyNode | None = None


class DoublyLinkedList:
    """A doubly linked list that grows at the head."""

    def __init__(self, values: Iterable[Any] | None = None) -> None:
        self.head: DoublyNode | None = None
        self._tail: DoublyNode | None = None
        self._size = 0
        for value in reversed(list(values or ())):
            self.push_front(value)

    def _nodes(self) -> Iterator[DoublyNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, value: Any) -> DoublyNode:
        """Insert ``value`` at the head and return its node."""
        node = DoublyNode(value, self.head, None)
        if self.head is not None:
            self.head.prev = node
        else:
            self._tail = node
        self.head = node
        self._size += 1
        return node

    def remove(self, node: DoublyNode) -> None:
        """Unlink ``node``; raises ValueError if it is not in this list."""
        if node is None or not any(item is node for item in self._nodes()):
            raise ValueError("node is not in this list")
        if node.prev is None:
            self.head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.next = node.prev = None
        self._size -= 1

    def search(self, value: Any) -> DoublyNode | None:
        """Return the first node holding ``value``, or None."""
        return next((node for node in self._nodes() if node.value == value), None)

    def copy(self) -> DoublyLinkedList:
        """Return an independent list with the same values in the same order."""
        return DoublyLinkedList(self)

    def format(self) -> str:
        """Render the values separated by spaces, each followed by one space."""
        return "".join(f"{value} " for value in self)

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size
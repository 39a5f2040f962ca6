"""A FIFO queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any


class Queue:
    """First-in, first-out queue; iteration runs from front to back."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def is_empty(self) -> bool:
        return not self._items

    def enqueue(self, value: Any) -> None:
        """Append ``value`` at the back of the queue."""
        self._items.append(value)

    def first(self) -> Any:
        """Return the front value; raises IndexError when empty."""
        if not self._items:
            raise IndexError("first of an empty queue")
        return self._items[0]

    def dequeue(self) -> Any:
        """Remove and return the front value; raises IndexError when empty."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def format(self) -> str:
        """Render the values from front to back, each followed by one space."""
        return "".join(f"{value} " for value in self)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)
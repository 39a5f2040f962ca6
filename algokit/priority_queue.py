"""A priority queue kept as a list ordered by ascending weight."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class _Entry:
    value: Any
    weight: float


class PriorityQueue:
    """Values ordered by weight; the lightest value comes out first.

    A new value goes after every queued value lighter than it. When the
    front value already weighs the same, the new value still goes after it,
    but ahead of the other values of equal weight.
    """

    def __init__(self) -> None:
        self._entries: list[_Entry] = []

    def enqueue(self, value: Any, weight: float) -> None:
        """Insert ``value`` with the given ``weight``."""
        entries = self._entries
        entry = _Entry(value, weight)
        if not entries or weight < entries[0].weight:
            entries.insert(0, entry)
            return
        position = next(
            (index for index, queued in enumerate(entries[1:], 1) if not queued.weight < weight),
            len(entries),
        )
        entries.insert(position, entry)

    def dequeue(self) -> Any:
        """Remove and return the front value; raises IndexError when empty."""
        if not self._entries:
            raise IndexError("dequeue from an empty priority queue")
        return self._entries.pop(0).value

    def min(self) -> Any:
        """Return the front value; raises IndexError when empty."""
        if not self._entries:
            raise IndexError("min of an empty priority queue")
        return self._entries[0].value

    def decrease_priority(self, value: Any, weight: float) -> None:
        """Set the weight of ``value`` and move it forward if it became lighter
        than the value before it. The front value is updated in place."""
        entries = self._entries
        if not entries:
            return
        if entries[0].value == value:
            entries[0].weight = weight
            return
        for previous, entry in zip(entries, entries[1:]):
            if entry.value != value:
                continue
            entry.weight = weight
            if previous.weight > weight:
                entries.remove(entry)
                self.enqueue(entry.value, weight)
                return

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[Any, float]]:
        """Yield ``(value, weight)`` pairs from front to back."""
        return ((entry.value, entry.weight) for entry in self._entries)
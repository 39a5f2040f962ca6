"""A singly linked list and a small interactive program that edits one."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, TextIO


@dataclass(eq=False)
class Node:
    """One cell of a singly linked list."""

    value: Any
    next: Node | None = None


class SinglyLinkedList:
    """A singly linked list whose head is the most recently pushed value."""

    def __init__(self, values: Iterable[Any] | None = None) -> None:
        self.head: Node | None = None
        self._size = 0
        for value in reversed(list(values or ())):
            self.push_front(value)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, value: Any) -> Node:
        """Insert ``value`` at the head and return its node."""
        node = Node(value, self.head)
        self.head = node
        self._size += 1
        return node

    def remove(self, node: Node) -> None:
        """Unlink ``node``; raises ValueError if it is not in this list."""
        if node is None:
            raise ValueError("node is not in this list")
        if self.head is node:
            self.head = node.next
        else:
            previous = self.head
            while previous is not None and previous.next is not node:
                previous = previous.next
            if previous is None:
                raise ValueError("node is not in this list")
            previous.next = node.next
        node.next = None
        self._size -= 1

    def search(self, value: Any) -> Node | None:
        """Return the first node holding ``value``, or None."""
        return next((node for node in self._nodes() if node.value == value), None)

    def copy(self) -> SinglyLinkedList:
        """Return an independent list with the same values in the same order."""
        return SinglyLinkedList(self)

    def clear(self) -> None:
        """Remove every element."""
        self.head = None
        self._size = 0

    def count_occurrences(self, value: Any) -> int:
        """Number of elements equal to ``value``."""
        return sum(1 for item in self if item == value)

    def delete_occurrences(self, value: Any) -> int:
        """Remove every element equal to ``value``; return how many were removed."""
        removed = 0
        previous: Node | None = None
        node = self.head
        while node is not None:
            following = node.next
            if node.value == value:
                if previous is None:
                    self.head = following
                else:
                    previous.next = following
                node.next = None
                removed += 1
            else:
                previous = node
            node = following
        self._size -= removed
        return removed

    def format(self) -> str:
        """Render the list as ``a -> b ->  NULL``."""
        return "".join(f"{value} -> " for value in self) + " NULL"

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Build a list from standard input and delete the occurrences of a value."
    )
    parser.parse_args(argv)

    tokens = _tokens(sys.stdin)
    try:
        print("Inserisci la dimensione della lista: ", end="")
        size = int(next(tokens))
        items = SinglyLinkedList()
        for position in range(1, size + 1):
            print(f"{position} -> ", end="")
            items.push_front(next(tokens))
        print("Lista creata: " + items.format())

        print("Inserisci il valore dei nodi che vuoi eliminare: ", end="")
        value = next(tokens)
    except StopIteration:
        print("\nInput terminato prematuramente.", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"\nInput non valido: {error}", file=sys.stderr)
        return 1

    print(f"Occorrenze trovate: {items.count_occurrences(value)}")
    items.delete_occurrences(value)
    print("Lista con le occorrenze eliminate: " + items.format())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""An unbalanced binary search tree keyed by integers, with a small interactive program."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any, TextIO


@dataclass(eq=False)
class BSTNode:
    """One node of a binary search tree."""

    key: int
    value: Any
    parent: BSTNode | None = None
    left: BSTNode | None = None
    right: BSTNode | None = None


class BinarySearchTree:
    """Binary search tree; equal keys are placed in the right subtree."""

    def __init__(self) -> None:
        self.root: BSTNode | None = None

    def insert(self, key: int, value: Any) -> BSTNode:
        """Insert a new node for ``key`` and return it."""
        node = BSTNode(key, value)
        if self.root is None:
            self.root = node
            return node
        current = self.root
        while True:
            if key < current.key:
                if current.left is None:
                    current.left = node
                    break
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    break
                current = current.right
        node.parent = current
        return node

    def search(self, key: int) -> BSTNode | None:
        """Return the first node found with ``key``, or None."""
        current = self.root
        while current is not None:
            if key == current.key:
                return current
            current = current.left if key < current.key else current.right
        return None

    def _owns(self, node: BSTNode) -> bool:
        top = node
        while top.parent is not None:
            top = top.parent
        return top is self.root

    def _replace_in_parent(self, old: BSTNode, new: BSTNode | None) -> None:
        parent = old.parent
        if parent is None:
            self.root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new
        if new is not None:
            new.parent = parent

    def delete(self, node: BSTNode | None) -> None:
        """Remove ``node`` from the tree; None is ignored.

        A node with two children is replaced by the largest node of its left
        subtree. Raises ValueError if ``node`` belongs to another tree.
        """
        if node is None or self.root is None:
            return
        if not self._owns(node):
            raise ValueError("node is not in this tree")

        if node.left is None:
            replacement = node.right
        elif node.right is None:
            replacement = node.left
        else:
            replacement = node.left
            while replacement.right is not None:
                replacement = replacement.right
            if replacement is not node.left:
                self._replace_in_parent(replacement, replacement.left)
                replacement.left = node.left
                node.left.parent = replacement
            replacement.right = node.right
            node.right.parent = replacement

        self._replace_in_parent(node, replacement)
        node.parent = node.left = node.right = None

    def format(self) -> str:
        """Render the nodes in key order, one ``key value`` line each."""
        return "".join(f"{key} {value}\n" for key, value in self)

    def __iter__(self) -> Iterator[tuple[int, Any]]:
        """Yield ``(key, value)`` pairs in order."""
        pending: list[BSTNode] = []
        current = self.root
        while pending or current is not None:
            while current is not None:
                pending.append(current)
                current = current.left
            current = pending.pop()
            yield current.key, current.value
            current = current.right


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Build a binary search tree from standard input, then delete one key."
    )
    parser.add_argument("--delete", type=int, default=12, help="key to delete at the end")
    args = parser.parse_args(argv)

    tree = BinarySearchTree()
    tokens = _tokens(sys.stdin)
    try:
        not_done = True
        while not_done:
            print("Inserisci la chiave: ", end="")
            key = int(next(tokens))
            print("Inserisci il valore informativo: ", end="")
            value = next(tokens)
            tree.insert(key, value)
            print(f"Nodo creato: ({key}, {value})")
            print("Vuoi continuare?(Si: 1, No: 0): ", end="")
            not_done = bool(int(next(tokens)))
    except StopIteration:
        print("\nInput terminato prematuramente.", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"\nInput non valido: {error}", file=sys.stderr)
        return 1

    print(tree.format(), end="")
    tree.delete(tree.search(args.delete))
    print(tree.format(), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
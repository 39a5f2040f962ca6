"""Tower of Hanoi played on three bounded pegs."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence


class Peg:
    """A stack of discs with a fixed capacity."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self._discs: list[int] = []

    def push(self, value: int) -> None:
        """Place a disc on top; raises OverflowError when the peg is full."""
        if len(self._discs) == self.capacity:
            raise OverflowError("peg is full")
        self._discs.append(value)

    def pop(self) -> int:
        """Remove and return the top disc; raises IndexError when empty."""
        if not self._discs:
            raise IndexError("pop from an empty peg")
        return self._discs.pop()

    def _slot(self, level: int) -> int:
        return self._discs[level] if level < len(self._discs) else 0

    def __len__(self) -> int:
        return len(self._discs)

    def __iter__(self) -> Iterator[int]:
        """Discs from bottom to top."""
        return iter(self._discs)


def move(source: Peg, dest: Peg) -> None:
    """Move the top disc of ``source`` onto ``dest``."""
    dest.push(source.pop())


def hanoi(n: int, source: Peg, dest: Peg, aux: Peg) -> int:
    """Move ``n`` discs from ``source`` to ``dest``; return the number of moves."""
    if n < 1:
        raise ValueError(f"need at least one disc, got {n}")
    if n == 1:
        move(source, dest)
        return 1
    moves = hanoi(n - 1, source, aux, dest)
    move(source, dest)
    return moves + 1 + hanoi(n - 1, aux, dest, source)


def format_pegs(source: Peg, dest: Peg, aux: Peg) -> str:
    """Render the three pegs as columns, top level first, empty slots as 0."""
    pegs = (source, dest, aux)
    lines = ["".join(f"{name:>3}" for name in "sda")]
    for level in reversed(range(source.capacity)):
        lines.append("".join(f"{peg._slot(level):>3}" for peg in pegs))
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve the Tower of Hanoi.")
    parser.add_argument("discs", nargs="?", type=int, default=5, help="number of discs")
    args = parser.parse_args(argv)
    if args.discs < 1:
        parser.error("the number of discs must be at least 1")

    source, dest, aux = (Peg(args.discs) for _ in range(3))
    for disc in range(args.discs, 0, -1):
        source.push(disc)

    print(format_pegs(source, dest, aux))
    hanoi(args.discs, source, dest, aux)
    print(format_pegs(source, dest, aux))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
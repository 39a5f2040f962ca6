"""Searching and number-theory routines."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _trunc_mod(a: int, b: int) -> int:
    return a - b * _trunc_div(a, b)


def binary_search(key: Any, values: Sequence[Any]) -> int | None:
    """Return the index of ``key`` in the sorted ``values``, or None if absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        middle = (low + high) // 2
        if key == values[middle]:
            return middle
        if key > values[middle]:
            low = middle + 1
        else:
            high = middle - 1
    return None


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm, iteratively."""
    while b != 0:
        a, b = b, _trunc_mod(a, b)
    return a


def gcd_recursive(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm, recursively."""
    if b == 0:
        return a
    return gcd_recursive(b, _trunc_mod(a, b))


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``g`` the gcd of a and b and ``a*x + b*y == g``."""
    if b == 0:
        return a, 1, 0
    g, x1, y1 = extended_gcd(b, _trunc_mod(a, b))
    return g, y1, x1 - y1 * _trunc_div(a, b)


def _check_position(n: int) -> None:
    if n < 1:
        raise ValueError(f"Fibonacci positions start at 1, got {n}")


def fibonacci(n: int) -> int:
    """The n-th Fibonacci number, counting fibonacci(1) == 0 and fibonacci(2) == 1."""
    _check_position(n)
    previous, current = 1, 0
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def fibonacci_recursive(n: int) -> int:
    """The n-th Fibonacci number by naive recursion."""
    _check_position(n)
    if n == 1:
        return 0
    if n == 2:
        return 1
    return fibonacci_recursive(n - 1) + fibonacci_recursive(n - 2)
"""Classic sorting algorithms, each returning a new sorted list."""

from __future__ import annotations

from bisect import insort
from collections.abc import Iterable
from itertools import accumulate
from typing import Any


def _check_range(values: list[int], k: int) -> None:
    if k < 0:
        raise ValueError(f"upper bound must be non-negative, got {k}")
    for value in values:
        if not 0 <= value <= k:
            raise ValueError(f"value {value} outside the range 0..{k}")


def counting_sort(values: Iterable[int], k: int) -> list[int]:
    """Stable counting sort of integers in the range 0..k."""
    items = list(values)
    _check_range(items, k)
    counts = [0] * (k + 1)
    for value in items:
        counts[value] += 1
    positions = list(accumulate(counts))
    result = [0] * len(items)
    for value in reversed(items):
        positions[value] -= 1
        result[positions[value]] = value
    return result


def counting_sort_unstable(values: Iterable[int], k: int) -> list[int]:
    """Counting sort of integers in 0..k that rebuilds the output from the counts."""
    items = list(values)
    _check_range(items, k)
    counts = [0] * (k + 1)
    for value in items:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Stable insertion sort."""
    result: list[Any] = []
    for value in values:
        insort(result, value)
    return result


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    li = ri = 0
    while li < len(left) and ri < len(right):
        if left[li] <= right[ri]:
            merged.append(left[li])
            li += 1
        else:
            merged.append(right[ri])
            ri += 1
    merged.extend(left[li:])
    merged.extend(right[ri:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def _partition(items: list[Any], low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for current in range(low, high):
        if items[current] <= pivot:
            boundary += 1
            items[boundary], items[current] = items[current], items[boundary]
    items[high], items[boundary + 1] = items[boundary + 1], items[high]
    return boundary + 1


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Quick sort with the last element of each range as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = _partition(items, low, high)
        pending.append((pivot + 1, high))
        pending.append((low, pivot - 1))
    return items


def radix_sort(values: Iterable[int], digits: int) -> list[int]:
    """LSD radix sort on the lowest ``digits`` decimal digits of non-negative integers."""
    if digits < 0:
        raise ValueError(f"digit count must be non-negative, got {digits}")
    items = list(values)
    for value in items:
        if value < 0:
            raise ValueError(f"radix sort needs non-negative values, got {value}")
    for position in range(digits):
        divisor = 10**position
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in items:
            buckets[(value // divisor) % 10].append(value)
        items = [value for bucket in buckets for value in bucket]
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Selection sort: repeatedly swap the smallest remaining item into place."""
    items = list(values)
    for start in range(len(items) - 1):
        smallest = min(range(start, len(items)), key=items.__getitem__)
        items[smallest], items[start] = items[start], items[smallest]
    return items
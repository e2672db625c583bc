"""Merge sort, two quicksort variants and insertion sort."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[T]) -> list[T]:
    """Return a stably sorted copy of ``values`` using top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition_by_count(items: list[T], start: int, end: int) -> int:
    pivot = items[start]
    smaller = sum(1 for value in items[start + 1 : end + 1] if value <= pivot)
    pivot_index = start + smaller
    items[pivot_index], items[start] = items[start], items[pivot_index]
    i, j = start, end
    while i < pivot_index < j:
        while items[i] <= pivot:
            i += 1
        while items[j] > pivot:
            j -= 1
        if i < pivot_index < j:
            items[i], items[j] = items[j], items[i]
            i += 1
            j -= 1
    return pivot_index


def _partition_hoare(items: list[T], low: int, high: int) -> int:
    pivot = items[low]
    i, j = low, high
    while i < j:
        while i <= high and items[i] <= pivot:
            i += 1
        while items[j] > pivot:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
        if i > j:
            items[j], items[low] = items[low], items[j]
    return j


def _quick_sort_with(values: Iterable[T], partition) -> list[T]:
    items = list(values)
    ranges = [(0, len(items) - 1)]
    while ranges:
        low, high = ranges.pop()
        if low >= high:
            continue
        p = partition(items, low, high)
        ranges.append((low, p - 1))
        ranges.append((p + 1, high))
    return items


def quick_sort(values: Iterable[T]) -> list[T]:
    """Sorted copy by quicksort; the pivot's place is found by counting."""
    return _quick_sort_with(values, _partition_by_count)


def quick_sort_classic(values: Iterable[T]) -> list[T]:
    """Sorted copy by quicksort with first-element pivot and two scanners."""
    return _quick_sort_with(values, _partition_hoare)


def insertion_sort(values: Iterable[T]) -> list[T]:
    """Return a sorted copy of ``values`` using insertion sort."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


_ALGORITHMS = {
    "merge": merge_sort,
    "quick": quick_sort,
    "quick-classic": quick_sort_classic,
    "insertion": insertion_sort,
}


def _read_counted(text: str) -> list[int]:
    numbers = [int(token) for token in text.split()]
    if not numbers:
        return []
    count, rest = numbers[0], numbers[1:]
    if count < 0 or len(rest) < count:
        raise ValueError(f"expected {count} numbers, got {len(rest)}")
    return rest[:count]


def main(argv: list[str] | None = None) -> int:
    """Sort integers from the command line, or 'n v1 .. vn' from stdin."""
    parser = argparse.ArgumentParser(description="Sort integers.")
    parser.add_argument(
        "-a", "--algorithm", choices=sorted(_ALGORITHMS), default="merge"
    )
    parser.add_argument("numbers", nargs="*", type=int)
    args = parser.parse_args(argv)
    numbers = args.numbers
    if not numbers:
        try:
            numbers = _read_counted(sys.stdin.read())
        except ValueError as exc:
            print(exc, file=sys.stderr)
            return 1
    print(" ".join(str(n) for n in _ALGORITHMS[args.algorithm](numbers)))
    return 0
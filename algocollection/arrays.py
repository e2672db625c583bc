"""Array problems: cake cuts, two-sum, rotation, search and merging."""

from __future__ import annotations

import heapq
from collections.abc import Sequence

_MODULUS = 1_000_000_007


def _largest_gap(length: int, cuts: Sequence[int]) -> int:
    if not cuts:
        raise ValueError("at least one cut is required in each direction")
    edges = [0, *sorted(cuts), length]
    return max(b - a for a, b in zip(edges, edges[1:]))


def max_cake_area(
    h: int, w: int, horizontal_cuts: Sequence[int], vertical_cuts: Sequence[int]
) -> int:
    """Largest piece of an ``h`` by ``w`` cake after the cuts, modulo 10**9+7."""
    return _largest_gap(h, horizontal_cuts) * _largest_gap(w, vertical_cuts) % _MODULUS


def two_sum_sorted(numbers: Sequence[int], target: int) -> tuple[int, int]:
    """1-based positions of two entries of sorted ``numbers`` summing to ``target``."""
    a, b = 0, len(numbers) - 1
    while a < b:
        total = numbers[a] + numbers[b]
        if total == target:
            return a + 1, b + 1
        if total < target:
            a += 1
        else:
            b -= 1
    raise ValueError(f"no two entries sum to {target}")


def rotate(nums: list[int], k: int) -> None:
    """Rotate ``nums`` right by ``k`` places, in place."""
    if not nums:
        return
    shift = k % len(nums)
    nums[:] = nums[len(nums) - shift :] + nums[: len(nums) - shift]


def search_insert(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in sorted ``nums``, or where it would be inserted."""
    start, end = 0, len(nums) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            start = mid + 1
        else:
            end = mid - 1
    return start


def max_subarray(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run of ``nums``."""
    if not nums:
        raise ValueError("max_subarray needs at least one number")
    running = best = nums[0]
    for value in nums[1:]:
        running = max(running, 0) + value
        best = max(best, running)
    return best


def merge_sorted_into(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``n`` of ``nums2`` into the first ``m`` of ``nums1``, in place.

    ``nums1`` must have room for ``m + n`` entries; entries past that stay as they are.
    """
    if len(nums1) < m + n:
        raise ValueError("nums1 has no room for the merged values")
    nums1[: m + n] = list(heapq.merge(nums1[:m], nums2[:n]))
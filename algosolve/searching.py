"""Binary search, two-pointer and sliding-window queries over number sequences."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections import Counter
from collections.abc import Iterable, Sequence

_MAX_CUT = 1_000_000_000


def membership(cards: Iterable[int], queries: Iterable[int]) -> list[bool]:
    """For each query, whether it is among the cards."""
    present = set(cards)
    return [query in present for query in queries]


def count_in_ranges(points: Iterable[int], ranges: Iterable[tuple[int, int]]) -> list[int]:
    """Number of points inside each closed range; reversed ends are swapped."""
    ordered = sorted(points)
    counts = []
    for low, high in ranges:
        if low > high:
            low, high = high, low
        counts.append(bisect_right(ordered, high) - bisect_left(ordered, low))
    return counts


def max_cut_height(trees: Sequence[int], needed: int) -> int:
    """Highest saw setting (0..10**9) that still yields at least ``needed`` wood.

    Returns 0 when even cutting at ground level is not enough.
    """
    trees = list(trees)
    low, high = 0, _MAX_CUT
    best = 0
    while low <= high:
        mid = (low + high) // 2
        if sum(tree - mid for tree in trees if tree > mid) >= needed:
            best = mid
            low = mid + 1
        else:
            high = mid - 1
    return best


def closest_to_zero_pair(values: Iterable[int]) -> tuple[int, int]:
    """Two distinct entries whose sum is closest to zero, smaller first."""
    ordered = sorted(values)
    if len(ordered) < 2:
        raise ValueError("at least two values are needed")
    low, high = 0, len(ordered) - 1
    best = (ordered[low], ordered[high])
    while low < high:
        total = ordered[low] + ordered[high]
        if abs(total) < abs(sum(best)):
            best = (ordered[low], ordered[high])
        if total == 0:
            break
        if total > 0:
            high -= 1
        else:
            low += 1
    return best


def compress_coordinates(values: Iterable[int]) -> list[int]:
    """Replace each value by the number of distinct values smaller than it."""
    values = list(values)
    rank = {value: index for index, value in enumerate(sorted(set(values)))}
    return [rank[value] for value in values]


def merge_sorted(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """All values of both sequences in ascending order."""
    return sorted([*first, *second])


def longest_two_kind_run(values: Iterable[int]) -> int:
    """Length of the longest contiguous stretch holding at most two distinct values."""
    values = list(values)
    counts: Counter[int] = Counter()
    left = 0
    best = 0
    for right, value in enumerate(values):
        counts[value] += 1
        while len(counts) > 2:
            dropped = values[left]
            counts[dropped] -= 1
            if not counts[dropped]:
                del counts[dropped]
            left += 1
        best = max(best, right - left + 1)
    return best
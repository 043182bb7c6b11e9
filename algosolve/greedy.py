"""Greedy choices: change making, grouping, scheduling and levelling."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import groupby

_YEAR_DAYS = 365


def min_coins(coins: Iterable[int], amount: int) -> int:
    """Coins used when paying ``amount`` greedily, largest denominations first."""
    count = 0
    for coin in sorted(coins, reverse=True):
        if coin <= 0:
            raise ValueError("coin values must be positive")
        if not amount:
            break
        used, amount = divmod(amount, coin)
        count += used
    return count


def _pair_products(ordered: Sequence[int]) -> int:
    return sum(a * b for a, b in zip(ordered[::2], ordered[1::2]))


def max_grouped_sum(values: Iterable[int]) -> int:
    """Largest sum when values may be multiplied together in disjoint pairs."""
    values = list(values)
    negatives = sorted(v for v in values if v < 0)
    bigger = sorted((v for v in values if v > 1), reverse=True)
    total = values.count(1)

    total += _pair_products(negatives)
    if len(negatives) % 2 and 0 not in values:
        total += negatives[-1]

    total += _pair_products(bigger)
    if len(bigger) % 2:
        total += bigger[-1]
    return total


def min_level_decreases(scores: Sequence[int]) -> int:
    """Total points removed so that scores strictly increase, keeping the last."""
    if not scores:
        return 0
    total = 0
    ceiling = scores[-1]
    for score in reversed(scores[:-1]):
        if score >= ceiling:
            total += score - ceiling + 1
            score = ceiling - 1
        ceiling = score
    return total


def latest_start(jobs: Iterable[tuple[int, int]]) -> int | None:
    """Latest time to start so every (duration, deadline) job finishes in time.

    Returns None when the jobs cannot all be finished by starting at 0.
    """
    ordered = sorted(((deadline, duration) for duration, deadline in jobs), reverse=True)
    if not ordered:
        return None
    end = ordered[0][0]
    for deadline, duration in ordered:
        end = min(end, deadline) - duration
        if end < 0:
            return None
    return end


def flatten_land(heights: Sequence[Sequence[int]], blocks: int) -> tuple[int, int]:
    """Fastest (time, height) to level the ground with ``blocks`` in the inventory.

    Removing a block takes 2 seconds, placing one takes 1. Ties prefer the
    greater height.
    """
    counts = Counter(h for row in heights for h in row)
    if not counts:
        raise ValueError("the ground must have at least one cell")
    best: tuple[int, int] | None = None
    for target in range(min(counts), max(counts) + 1):
        dug = sum(n * (h - target) for h, n in counts.items() if h > target)
        filled = sum(n * (target - h) for h, n in counts.items() if h < target)
        if filled > blocks + dug:
            continue
        time = 2 * dug + filled
        if best is None or time <= best[0]:
            best = (time, target)
    return best


def calendar_area(schedules: Iterable[tuple[int, int]]) -> int:
    """Paper area needed to cover a calendar of (start, end) day schedules.

    Each run of consecutive busy days needs its length times its most
    overlapping day count.
    """
    busy = [0] * (_YEAR_DAYS + 1)
    for start, end in schedules:
        if not 1 <= start <= end <= _YEAR_DAYS:
            raise ValueError(f"schedule ({start}, {end}) is outside days 1..{_YEAR_DAYS}")
        for day in range(start, end + 1):
            busy[day] += 1
    area = 0
    for occupied, run in groupby(busy[1:], key=bool):
        if occupied:
            run = list(run)
            area += len(run) * max(run)
    return area
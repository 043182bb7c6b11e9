"""Summary statistics, trimmed averages, primes and self numbers."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from fractions import Fraction

_TRIM_PERCENT = 15


def _round_half_away(value: Fraction) -> int:
    magnitude = math.floor(abs(value) + Fraction(1, 2))
    return magnitude if value >= 0 else -magnitude


def trimmed_mean(opinions: Iterable[int]) -> int:
    """Rounded mean after dropping 15% (rounded) of the values at each end.

    No opinions give 0.
    """
    ordered = sorted(opinions)
    if not ordered:
        return 0
    trim = _round_half_away(Fraction(len(ordered) * _TRIM_PERCENT, 100))
    kept = ordered[trim : len(ordered) - trim]
    return _round_half_away(Fraction(sum(kept), len(kept)))


@dataclass(frozen=True)
class Statistics:
    """Rounded mean, median, mode and spread of a list of integers."""

    mean: int
    median: int
    mode: int
    spread: int


def statistics(values: Iterable[int]) -> Statistics:
    """Summarise ``values``; among several modes the second smallest is chosen."""
    ordered = sorted(values)
    if not ordered:
        raise ValueError("at least one value is needed")
    counts = Counter(ordered)
    top = max(counts.values())
    modes = sorted(value for value, count in counts.items() if count == top)
    return Statistics(
        mean=_round_half_away(Fraction(sum(ordered), len(ordered))),
        median=ordered[len(ordered) // 2],
        mode=modes[1] if len(modes) > 1 else modes[0],
        spread=ordered[-1] - ordered[0],
    )


def primes_between(low: int, high: int) -> list[int]:
    """All primes p with low <= p <= high, ascending."""
    if high < 2 or low > high:
        return []
    sieve = bytearray([1]) * (high + 1)
    sieve[0] = sieve[1] = 0
    for n in range(2, math.isqrt(high) + 1):
        if sieve[n]:
            sieve[n * n :: n] = bytes(len(range(n * n, high + 1, n)))
    return [n for n in range(max(low, 2), high + 1) if sieve[n]]


def self_numbers(limit: int = 10000) -> list[int]:
    """Numbers 1..limit that are not n plus the digit sum of n for any n."""
    generated = {n + sum(map(int, str(n))) for n in range(1, limit + 1)}
    return [n for n in range(1, limit + 1) if n not in generated]
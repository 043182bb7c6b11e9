"""Dynamic programming and exhaustive search over small combinatorial problems."""

from __future__ import annotations

import math
from collections.abc import Sequence
from itertools import combinations, permutations

_TILING_MODULUS = 10007


def tiling_count(n: int) -> int:
    """Ways to tile a 2 x n rectangle with 1x2, 2x1 and 2x2 tiles, modulo 10007.

    A width of 0 gives 0.
    """
    if n < 0:
        raise ValueError("width must not be negative")
    if n == 0:
        return 0
    previous, current = 1, 1  # widths 0 (as a tiling base) and 1
    for _ in range(2, n + 1):
        previous, current = current, (current + 2 * previous) % _TILING_MODULUS
    return current


def min_square_terms(n: int) -> int:
    """Fewest perfect squares that add up to ``n``."""
    if n < 1:
        raise ValueError("n must be positive")
    best = [0] * (n + 1)
    for value in range(1, n + 1):
        root = math.isqrt(value)
        if root * root == value:
            best[value] = 1
            continue
        best[value] = min(1 + best[value - i * i] for i in range(1, root + 1))
    return best[n]


def max_stair_score(stairs: Sequence[int]) -> int:
    """Best total when climbing one or two stairs at a time.

    Three consecutive stairs may not all be stepped on, and the last stair
    must be stepped on.
    """
    scores = [0, *stairs]
    top = len(scores) - 1
    unreachable = float("-inf")
    # best[position][streak]: best score from here given the current streak.
    best = [[unreachable] * 3 for _ in range(top + 3)]
    for position in range(top, -1, -1):
        for streak in range(3):
            if position == top:
                best[position][streak] = scores[top]
                continue
            value = best[position + 2][1] + scores[position]
            if streak < 2:
                value = max(value, best[position + 1][streak + 1] + scores[position])
            best[position][streak] = value
    return int(best[0][0])


def padovan(n: int) -> int:
    """The n-th term (1-based) of the Padovan sequence 1, 1, 1, 2, 2, 3, ..."""
    if n < 1:
        raise ValueError("n must be positive")
    terms = [1, 1, 1, 2, 2]
    while len(terms) < n:
        terms.append(terms[-1] + terms[-5])
    return terms[n - 1]


def max_adjacent_difference(values: Sequence[int]) -> int:
    """Largest sum of |a[i] - a[i+1]| over all arrangements of ``values``."""
    return max(
        sum(abs(a - b) for a, b in zip(order, order[1:]))
        for order in permutations(values)
    )


def min_team_gap(matrix: Sequence[Sequence[int]]) -> int:
    """Smallest strength difference when splitting players into two equal teams.

    A team's strength sums ``matrix[i][j]`` over every ordered pair of its members.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("the matrix must be square")
    if size % 2:
        raise ValueError("the number of players must be even")

    def strength(team: Sequence[int]) -> int:
        return sum(matrix[i][j] for i in team for j in team)

    players = range(size)
    best = None
    for team in combinations(players, size // 2):
        picked = set(team)
        rest = [p for p in players if p not in picked]
        gap = abs(strength(rest) - strength(team))
        if best is None or gap < best:
            best = gap
    return best
"""Shortest move counts for pieces, walkers and dice on boards and number lines."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterator, Mapping, Sequence

_LINE_LIMIT = 100_000
_BOARD_END = 100

# Headings: 1 east, 2 west, 3 south, 4 north.
_HEADING = {1: (0, 1), 2: (0, -1), 3: (1, 0), 4: (-1, 0)}
_TURN_LEFT = {1: 4, 2: 3, 3: 1, 4: 2}
_TURN_RIGHT = {1: 3, 2: 4, 3: 2, 4: 1}

_KNIGHT = ((2, 1), (1, 2), (-1, 2), (-2, 1), (-2, -1), (-1, -2), (1, -2), (2, -1))


def robot_min_commands(
    board: Sequence[Sequence],
    start: tuple[int, int, int],
    goal: tuple[int, int, int],
) -> int | None:
    """Fewest commands to move a robot from ``start`` to ``goal``.

    Positions are (row, column, heading) with 1-based rows and columns and
    headings 1 east, 2 west, 3 south, 4 north. A command turns the robot
    left or right, or moves it 1, 2 or 3 cells forward over open cells (0).
    Returns None when the goal cannot be reached.
    """
    cells = [[int(c) for c in row] for row in board]
    height = len(cells)
    width = len(cells[0]) if height else 0
    if width == 0 or any(len(row) != width for row in cells):
        raise ValueError("board must be a non-empty rectangle")

    def state(position: tuple[int, int, int]) -> tuple[int, int, int]:
        row, column, heading = position
        if heading not in _HEADING:
            raise ValueError(f"unknown heading {heading}")
        if not (1 <= row <= height and 1 <= column <= width):
            raise ValueError(f"position ({row}, {column}) is off the board")
        return heading, row - 1, column - 1

    origin = state(start)
    target = state(goal)

    def successors(heading: int, y: int, x: int) -> Iterator[tuple[int, int, int]]:
        yield _TURN_LEFT[heading], y, x
        yield _TURN_RIGHT[heading], y, x
        dy, dx = _HEADING[heading]
        for distance in range(1, 4):
            ny, nx = y + dy * distance, x + dx * distance
            if not (0 <= ny < height and 0 <= nx < width) or cells[ny][nx] == 1:
                break
            yield heading, ny, nx

    seen = {origin}
    frontier = [origin]
    commands = 0
    while frontier:
        following = []
        for current in frontier:
            if current == target:
                return commands
            for nxt in successors(*current):
                if nxt not in seen:
                    seen.add(nxt)
                    following.append(nxt)
        frontier = following
        commands += 1
    return None


def knight_moves(size: int, start: tuple[int, int], end: tuple[int, int]) -> int | None:
    """Fewest knight moves between two (row, column) squares on a size x size board.

    Returns None when the knight cannot get there.
    """
    if size < 1:
        raise ValueError("board size must be positive")
    for row, column in (start, end):
        if not (0 <= row < size and 0 <= column < size):
            raise ValueError(f"square ({row}, {column}) is off the board")
    start, end = tuple(start), tuple(end)
    if start == end:
        return 0

    seen = {start}
    frontier = [start]
    moves = 0
    while frontier:
        moves += 1
        following = []
        for y, x in frontier:
            for dy, dx in _KNIGHT:
                square = (y + dy, x + dx)
                if square == end:
                    return moves
                if 0 <= square[0] < size and 0 <= square[1] < size and square not in seen:
                    seen.add(square)
                    following.append(square)
        frontier = following
    return None


def _check_line(*points: int) -> None:
    for point in points:
        if not 0 <= point <= _LINE_LIMIT:
            raise ValueError(f"{point} is outside 0..{_LINE_LIMIT}")


def hide_and_seek(n: int, k: int) -> int:
    """Seconds to get from ``n`` to ``k`` by stepping ±1 or doubling, each costing 1."""
    _check_line(n, k)
    if n == k:
        return 0
    elapsed = {n: 0}
    queue = deque([n])
    while queue:
        here = queue.popleft()
        for nxt in (here + 1, here - 1, here * 2):
            if 0 <= nxt <= _LINE_LIMIT and nxt not in elapsed:
                elapsed[nxt] = elapsed[here] + 1
                if nxt == k:
                    return elapsed[nxt]
                queue.append(nxt)
    return elapsed[k]


def hide_and_seek_weighted(n: int, k: int) -> int:
    """Seconds to get from ``n`` to ``k`` when steps cost 1 and doubling is free."""
    _check_line(n, k)
    best = [float("inf")] * (_LINE_LIMIT + 1)
    best[n] = 0
    heap = [(0, n)]
    while heap:
        cost, here = heapq.heappop(heap)
        if here == k:
            return cost
        if best[here] < cost:
            continue
        moves = ((here * 2, cost), (here + 1, cost + 1), (here - 1, cost + 1))
        for nxt, nxt_cost in moves:
            if 0 <= nxt <= _LINE_LIMIT and nxt_cost < best[nxt]:
                best[nxt] = nxt_cost
                heapq.heappush(heap, (nxt_cost, nxt))
    raise ValueError(f"{k} cannot be reached from {n}")


def snakes_and_ladders(jumps: Mapping[int, int]) -> int | None:
    """Fewest die rolls from square 1 to square 100.

    ``jumps`` maps the foot of a ladder or head of a snake to where it leads.
    Returns None when square 100 cannot be reached.
    """
    jumps = dict(jumps)
    for source, dest in jumps.items():
        if not (1 <= source <= _BOARD_END and 1 <= dest <= _BOARD_END):
            raise ValueError(f"jump {source} -> {dest} leaves the board")

    seen = {1}
    frontier = [1]
    rolls = 0
    while frontier:
        following = []
        for square in frontier:
            if square == _BOARD_END:
                return rolls
            for face in range(1, 7):
                nxt = square + face
                if nxt > _BOARD_END:
                    continue
                if nxt in jumps:
                    dest = jumps[nxt]
                    if dest not in seen:
                        following.append(dest)
                        seen.add(dest)
                        seen.add(nxt)
                elif nxt not in seen:
                    following.append(nxt)
                    seen.add(nxt)
        frontier = following
        rolls += 1
    return None
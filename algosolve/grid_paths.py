"""Breadth-first shortest paths and reachability on rectangular grids."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence

_STEPS = ((0, 1), (-1, 0), (0, -1), (1, 0))


def _shape(grid: Sequence[Sequence]) -> tuple[int, int]:
    height = len(grid)
    width = len(grid[0]) if height else 0
    if width == 0:
        raise ValueError("grid must not be empty")
    if any(len(row) != width for row in grid):
        raise ValueError("grid rows must all have the same length")
    return height, width


def _digits(grid: Sequence[Sequence]) -> list[list[int]]:
    return [[int(c) for c in row] for row in grid]


def _neighbours(y: int, x: int, height: int, width: int) -> Iterator[tuple[int, int]]:
    for dy, dx in _STEPS:
        ny, nx = y + dy, x + dx
        if 0 <= ny < height and 0 <= nx < width:
            yield ny, nx


def count_reachable_people(grid: Sequence[str]) -> int:
    """Count the 'P' cells reachable from 'I' without crossing 'X' walls.

    Open cells are 'O'; people stand on cells that can also be walked over.
    """
    height, width = _shape(grid)
    starts = [(y, x) for y, row in enumerate(grid) for x, c in enumerate(row) if c == "I"]
    if not starts:
        raise ValueError("grid has no starting cell 'I'")
    start = starts[-1]

    seen = {start}
    queue = deque([start])
    people = 0
    while queue:
        y, x = queue.popleft()
        for cell in _neighbours(y, x, height, width):
            if cell in seen:
                continue
            ny, nx = cell
            if grid[ny][nx] in "OP":
                queue.append(cell)
                if grid[ny][nx] == "P":
                    people += 1
            seen.add(cell)
    return people


def distances_to_target(board: Sequence[Sequence]) -> list[list[int]]:
    """Walking distance from the target cell (2) to every open cell (1).

    Blocked cells (0) and the target report 0; open cells that cannot be
    reached report -1.
    """
    cells = _digits(board)
    height, width = _shape(cells)
    distance = [[0 if value in (0, 2) else -1 for value in row] for row in cells]
    frontier = [(y, x) for y, row in enumerate(cells) for x, v in enumerate(row) if v == 2]
    seen = set(frontier)
    steps = 0
    while frontier:
        steps += 1
        following = []
        for y, x in frontier:
            for cell in _neighbours(y, x, height, width):
                if cell in seen:
                    continue
                ny, nx = cell
                if cells[ny][nx] == 1:
                    following.append(cell)
                    distance[ny][nx] = steps
                seen.add(cell)
        frontier = following
    return distance


def shortest_maze_path(maze: Sequence[Sequence]) -> int:
    """Cells on the shortest path from the top-left to the bottom-right corner.

    Cells of 1 are passable. The count includes both corners.
    """
    cells = _digits(maze)
    height, width = _shape(cells)
    target = (height - 1, width - 1)
    seen = {(0, 0)}
    frontier = [(0, 0)]
    steps = 1
    while frontier:
        steps += 1
        following = []
        for y, x in frontier:
            for dy, dx in _STEPS:
                cell = (y + dy, x + dx)
                if cell == target:
                    return steps
                ny, nx = cell
                if 0 <= ny < height and 0 <= nx < width and cell not in seen and cells[ny][nx] == 1:
                    seen.add(cell)
                    following.append(cell)
        frontier = following
    return steps


def shortest_path_breaking_wall(board: Sequence[Sequence]) -> int | None:
    """Shortest corner-to-corner path length when one wall (1) may be broken.

    Returns None when no such path exists.
    """
    cells = _digits(board)
    height, width = _shape(cells)
    target = (height - 1, width - 1)
    visited = {(0, 0, 0)}
    frontier = [(0, 0, 0)]
    steps = 1
    while frontier:
        following = []
        for broken, y, x in frontier:
            if (y, x) == target:
                return steps
            for ny, nx in _neighbours(y, x, height, width):
                if (broken, ny, nx) in visited:
                    continue
                value = cells[ny][nx]
                if value == 0 and (0, ny, nx) not in visited:
                    following.append((broken, ny, nx))
                if value == 1 and broken == 0:
                    following.append((1, ny, nx))
                    visited.add((1, ny, nx))
                visited.add((broken, ny, nx))
        frontier = following
        steps += 1
    return None


def rescue_time(maze: Sequence[Sequence], limit: int) -> int | None:
    """Fastest time to reach the bottom-right corner within ``limit``.

    Cells: 0 open, 1 wall, 2 a sword that lets walls be walked straight
    through afterwards. Returns None when the corner cannot be reached in time.
    """
    cells = _digits(maze)
    height, width = _shape(cells)
    target = (height - 1, width - 1)
    seen = {(0, 0)}
    frontier = [(0, 0)]
    elapsed = 0
    direct: int | None = None
    with_sword: int | None = None
    while frontier:
        elapsed += 1
        following = []
        for y, x in frontier:
            for cell in _neighbours(y, x, height, width):
                if cell in seen:
                    continue
                ny, nx = cell
                if cell == target and elapsed <= limit:
                    direct = elapsed
                if cells[ny][nx] in (0, 2):
                    following.append(cell)
                    if cells[ny][nx] == 2:
                        total = elapsed + (height - 1 - ny) + (width - 1 - nx)
                        if total <= limit:
                            with_sword = total
                seen.add(cell)
        frontier = following
    candidates = [t for t in (direct, with_sword) if t is not None]
    return min(candidates) if candidates else None
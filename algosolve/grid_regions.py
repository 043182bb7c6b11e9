"""Counting connected regions and uniform squares on two-dimensional grids."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Iterator, Sequence

_STEPS = ((0, 1), (-1, 0), (0, -1), (1, 0))


def _shape(grid: Sequence[Sequence]) -> tuple[int, int]:
    """Return (height, width) of a rectangular grid, rejecting ragged ones."""
    height = len(grid)
    width = len(grid[0]) if height else 0
    if any(len(row) != width for row in grid):
        raise ValueError("grid rows must all have the same length")
    return height, width


def _neighbours(y: int, x: int, height: int, width: int) -> Iterator[tuple[int, int]]:
    for dy, dx in _STEPS:
        ny, nx = y + dy, x + dx
        if 0 <= ny < height and 0 <= nx < width:
            yield ny, nx


def _count_regions(grid: Sequence[Sequence[str]], same: Callable[[str, str], bool]) -> int:
    height, width = _shape(grid)
    seen: set[tuple[int, int]] = set()
    regions = 0
    for y, row in enumerate(grid):
        for x, colour in enumerate(row):
            if (y, x) in seen:
                continue
            regions += 1
            seen.add((y, x))
            queue = deque([(y, x)])
            while queue:
                cy, cx = queue.popleft()
                for cell in _neighbours(cy, cx, height, width):
                    ny, nx = cell
                    if cell not in seen and same(colour, grid[ny][nx]):
                        seen.add(cell)
                        queue.append(cell)
    return regions


def _same_colour(first: str, second: str) -> bool:
    return first == second


def _same_for_colourblind(first: str, second: str) -> bool:
    return first == second or (first in "RG" and second in "RG")


def count_color_regions(grid: Sequence[Sequence[str]]) -> tuple[int, int]:
    """Count colour regions as seen normally and by a red-green colourblind viewer."""
    return (
        _count_regions(grid, _same_colour),
        _count_regions(grid, _same_for_colourblind),
    )


def count_cabbage_patches(width: int, height: int, positions: Iterable[tuple[int, int]]) -> int:
    """Count 4-connected groups of cabbages planted at (x, y) positions."""
    planted: set[tuple[int, int]] = set()
    for x, y in positions:
        if not (0 <= x < width and 0 <= y < height):
            raise ValueError(f"position ({x}, {y}) is outside a {width}x{height} field")
        planted.add((y, x))

    patches = 0
    remaining = set(planted)
    while remaining:
        patches += 1
        queue = deque([remaining.pop()])
        while queue:
            y, x = queue.popleft()
            for cell in _neighbours(y, x, height, width):
                if cell in remaining:
                    remaining.remove(cell)
                    queue.append(cell)
    return patches


def house_complexes(grid: Sequence[Sequence]) -> list[int]:
    """Return the sizes of the connected house complexes in ascending order.

    Cells are digits, 1 marking a house; rows may be strings such as "0110".
    """
    cells = [[int(c) for c in row] for row in grid]
    height, width = _shape(cells)
    seen: set[tuple[int, int]] = set()
    sizes: list[int] = []
    for y, row in enumerate(cells):
        for x, value in enumerate(row):
            if value != 1 or (y, x) in seen:
                continue
            seen.add((y, x))
            queue = deque([(y, x)])
            size = 1
            while queue:
                cy, cx = queue.popleft()
                for cell in _neighbours(cy, cx, height, width):
                    ny, nx = cell
                    if cell not in seen and cells[ny][nx] == 1:
                        seen.add(cell)
                        queue.append(cell)
                        size += 1
            sizes.append(size)
    return sorted(sizes)


def count_paper_squares(grid: Sequence[Sequence]) -> tuple[int, int]:
    """Split a square sheet into uniform quadrants; return (white, blue) counts.

    A cell of 0 is white, anything else is blue.
    """
    cells = [[int(c) for c in row] for row in grid]
    height, width = _shape(cells)
    if height == 0:
        raise ValueError("the sheet must not be empty")
    if height != width:
        raise ValueError("the sheet must be square")

    white = blue = 0

    def uniform(x1: int, x2: int, y1: int, y2: int) -> bool:
        first = cells[y1][x1]
        return all(
            value == first
            for row in cells[y1 : y2 + 1]
            for value in row[x1 : x2 + 1]
        )

    def split(x1: int, x2: int, y1: int, y2: int) -> None:
        nonlocal white, blue
        if uniform(x1, x2, y1, y2):
            if cells[y1][x1] == 0:
                white += 1
            else:
                blue += 1
            return
        mid_x = (x1 + x2) // 2
        mid_y = (y1 + y2) // 2
        split(x1, mid_x, y1, mid_y)
        split(mid_x + 1, x2, y1, mid_y)
        split(x1, mid_x, mid_y + 1, y2)
        split(mid_x + 1, x2, mid_y + 1, y2)

    split(0, width - 1, 0, height - 1)
    return white, blue
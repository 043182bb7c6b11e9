"""Days needed for ripeness to spread through boxes of tomatoes."""

from __future__ import annotations

from collections.abc import Sequence

_STATES = {-1, 0, 1}


def _ripen(cells: dict[tuple[int, ...], int]) -> int | None:
    """Spread ripeness day by day; return the days taken, or None if some stay unripe."""
    if not set(cells.values()) <= _STATES:
        raise ValueError("cells must be -1 (empty), 0 (unripe) or 1 (ripe)")
    frontier = [position for position, value in cells.items() if value == 1]
    days = 0
    while frontier:
        following = []
        for position in frontier:
            for axis, coordinate in enumerate(position):
                for delta in (1, -1):
                    neighbour = position[:axis] + (coordinate + delta,) + position[axis + 1 :]
                    if cells.get(neighbour) == 0:
                        cells[neighbour] = 1
                        following.append(neighbour)
        if following:
            days += 1
        frontier = following
    if 0 in cells.values():
        return None
    return days


def _rows(grid: Sequence[Sequence[int]], width: int | None = None) -> int:
    lengths = {len(row) for row in grid}
    if len(lengths) > 1 or (width is not None and lengths and lengths != {width}):
        raise ValueError("box rows must all have the same length")
    return lengths.pop() if lengths else 0


def ripening_days(grid: Sequence[Sequence[int]]) -> int | None:
    """Days until every tomato in a flat box is ripe, or None if some never ripen."""
    _rows(grid)
    cells = {(y, x): value for y, row in enumerate(grid) for x, value in enumerate(row)}
    return _ripen(cells)


def ripening_days_3d(stack: Sequence[Sequence[Sequence[int]]]) -> int | None:
    """Days until every tomato in a stack of boxes is ripe, or None if some never ripen."""
    if len({len(layer) for layer in stack}) > 1:
        raise ValueError("every layer must have the same number of rows")
    width = None
    for layer in stack:
        width = _rows(layer, width) if layer else width
    cells = {
        (z, y, x): value
        for z, layer in enumerate(stack)
        for y, row in enumerate(layer)
        for x, value in enumerate(row)
    }
    return _ripen(cells)
"""Level-by-level wave escape search on a flat, fixed-width map."""

from __future__ import annotations

from typing import Optional

from algokit.maze import EMPTY, WALL, WATER_SOURCE, Grid, backtrack

_SYMBOLS = {"B": WALL, " ": EMPTY, "W": WATER_SOURCE}


def parse_flat_map(text: str, width: int) -> Grid:
    """Build a grid from a map string with no line breaks.

    'B' is a wall, 'W' a water source and ' ' an empty cell. Consecutive
    runs of ``width`` characters form the rows.
    """
    if width <= 0:
        raise ValueError("width must be positive")
    if not text:
        raise ValueError("map has no cells")
    if len(text) % width:
        raise ValueError(f"map length {len(text)} is not a multiple of {width}")
    cells: list[int] = []
    for position, symbol in enumerate(text):
        try:
            cells.append(_SYMBOLS[symbol])
        except KeyError:
            raise ValueError(
                f"invalid symbol {symbol!r} at position {position}"
            ) from None
    return Grid(cells, width, len(text) // width)


def _is_water(value: int) -> bool:
    return value not in (WALL, EMPTY)


def escape_path(grid: Grid) -> Optional[list[int]]:
    """Spread water one level at a time until a border cell is reached.

    Cells are filled in place with their level (a source is level 1).
    Returns the path from a water source to the border, or None if the
    maze cannot be escaped. Raises ValueError if there is no water.
    """
    frontier = {index for index, value in enumerate(grid.cells) if _is_water(value)}
    if not frontier:
        raise ValueError("map doesn't have a water cell")

    level = WATER_SOURCE + 1
    while True:
        reached: set[int] = set()
        for index in sorted(frontier):
            if grid.is_on_edge(index):
                return backtrack(grid, index)
            for neighbor in grid.neighbors(index):
                if neighbor is None or grid.cells[neighbor] != EMPTY:
                    continue
                grid.cells[neighbor] = level
                reached.add(neighbor)
        if not reached:
            return None
        frontier = reached
        level += 1
"""Wave (flood fill) escape search on a text maze."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

WALL = 2**31 - 1
EMPTY = 0
WATER_SOURCE = 1

_SYMBOLS = {"#": WALL, " ": EMPTY, "w": WATER_SOURCE}


@dataclass
class Grid:
    """A rectangular maze stored row by row in a flat list of cell values."""

    cells: list[int]
    width: int
    height: int

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    def _check(self, index: int) -> None:
        if not 0 <= index < self.cell_count:
            raise IndexError(f"cell index {index} out of range")

    def edge_mask(self, index: int) -> tuple[bool, bool, bool, bool]:
        """Whether ``index`` lies in the left, right, top and bottom border."""
        self._check(index)
        column = index % self.width
        return (
            column == 0,
            column == self.width - 1,
            index < self.width,
            index >= self.cell_count - self.width,
        )

    def neighbors(self, index: int) -> tuple[Optional[int], ...]:
        """Left, right, top and bottom neighbour indices; None where off the grid."""
        offsets = (-1, 1, -self.width, self.width)
        return tuple(
            None if on_edge else index + offset
            for on_edge, offset in zip(self.edge_mask(index), offsets)
        )

    def is_on_edge(self, index: int) -> bool:
        """Whether ``index`` lies on any border of the grid."""
        return any(self.edge_mask(index))


def parse_grid(text: str) -> Grid:
    """Build a grid from lines of '#' (wall), 'w' (water) and ' ' (empty).

    The first line fixes the width; shorter lines are padded with empty
    cells and longer ones are rejected.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    if not lines or not lines[0]:
        raise ValueError("maze has no cells")
    width = len(lines[0])
    cells: list[int] = []
    for row, line in enumerate(lines):
        if len(line) > width:
            raise ValueError(f"row {row} is longer than {width} cells")
        for column, symbol in enumerate(line):
            try:
                cells.append(_SYMBOLS[symbol])
            except KeyError:
                raise ValueError(
                    f"invalid symbol {symbol!r} at row {row}, column {column}"
                ) from None
        cells.extend([EMPTY] * (width - len(line)))
    return Grid(cells, width, len(lines))


def _symbol(value: int) -> str:
    if value == WALL:
        return "#"
    if value == EMPTY:
        return " "
    if value == WATER_SOURCE:
        return "w"
    return str(value)


def format_grid(grid: Grid) -> str:
    """Render the grid, one line per row; flooded cells show their value."""
    return "\n".join(
        "".join(_symbol(value) for value in grid.cells[row * grid.width:(row + 1) * grid.width])
        for row in range(grid.height)
    )


def backtrack(grid: Grid, index: int) -> list[int]:
    """Follow decreasing water values from ``index`` back to a source.

    Returns the path from the water source to ``index``.
    """
    trace = [index]
    current = index
    while grid.cells[current] != WATER_SOURCE:
        best: Optional[int] = None
        for neighbor in grid.neighbors(current):
            if neighbor is None:
                continue
            value = grid.cells[neighbor]
            if value == EMPTY:
                continue
            if best is None or value < grid.cells[best]:
                best = neighbor
        if best is None or grid.cells[best] >= grid.cells[current]:
            raise ValueError(f"no way back to a water source from cell {current}")
        current = best
        trace.append(current)
    trace.reverse()
    return trace


def flood(grid: Grid) -> Optional[list[int]]:
    """Spread water from every source until it reaches the border.

    Cells are filled in place with their distance from a source plus one.
    Returns the path from a source to the first border cell reached, or
    None if the water cannot escape.
    """
    pending = deque(
        index for index, value in enumerate(grid.cells) if value not in (WALL, EMPTY)
    )
    while pending:
        index = pending.popleft()
        if grid.is_on_edge(index):
            return backtrack(grid, index)
        value = grid.cells[index]
        for neighbor in grid.neighbors(index):
            if neighbor is None or grid.cells[neighbor] != EMPTY:
                continue
            grid.cells[neighbor] = value + 1
            pending.append(neighbor)
    return None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a maze file, print it and print the escape path."""
    parser = argparse.ArgumentParser(description="Find the way out of a maze.")
    parser.add_argument("path", nargs="?", default="maze.maze", help="maze file")
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as handle:
            text = handle.read()
        grid = parse_grid(text)
    except (OSError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(format_grid(grid))
    path = flood(grid)
    if path is None:
        print("The maze has no exit")
    else:
        print("The path to exit is: ")
        print(" --> ".join(str(index) for index in path))
    return 0
"""Sea cucumbers: step the two herds until nothing moves."""

from __future__ import annotations

import argparse
import sys

EAST = ">"
SOUTH = "v"
EMPTY = "."
_CELLS = {EAST, SOUTH, EMPTY}

Grid = list[list[str]]


def parse_grid(text: str) -> Grid:
    grid = []
    for raw in text.splitlines():
        line = raw.strip()
        if not line:
            continue
        if set(line) - _CELLS:
            raise ValueError(f"invalid sea floor row {line!r}")
        grid.append(list(line))
    if grid and any(len(row) != len(grid[0]) for row in grid):
        raise ValueError("the sea floor must be rectangular")
    return grid


def _move_herd(grid: Grid, herd: str, dr: int, dc: int) -> bool:
    rows, cols = len(grid), len(grid[0])
    movers = [
        (r, c)
        for r, row in enumerate(grid)
        for c, cell in enumerate(row)
        if cell == herd and grid[(r + dr) % rows][(c + dc) % cols] == EMPTY
    ]
    for r, c in movers:
        grid[r][c] = EMPTY
        grid[(r + dr) % rows][(c + dc) % cols] = herd
    return bool(movers)


def step(grid: Grid) -> bool:
    """Move the east herd, then the south herd, in place; True if anything moved."""
    if not grid or not grid[0]:
        return False
    east = _move_herd(grid, EAST, 0, 1)
    south = _move_herd(grid, SOUTH, 1, 0)
    return east or south


def steps_until_still(grid: Grid) -> int:
    """Number of the first step on which no sea cucumber moves."""
    steps = 1
    while step(grid):
        steps += 1
    return steps


def render(grid: Grid) -> str:
    return "\n".join("".join(row) for row in grid)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    args = parser.parse_args(argv)
    print(steps_until_still(parse_grid(args.input.read())))
"""Dumbo octopuses: count energy flashes and find when they all flash together."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence

FLASH_THRESHOLD = 9
COUNTED_STEPS = 100


class OctopusGrid:
    """A grid of octopus energy levels that advances one step at a time."""

    def __init__(self, grid: Sequence[Sequence[int]]) -> None:
        self._grid = [list(row) for row in grid]
        if not self._grid or not self._grid[0]:
            raise ValueError("the octopus grid is empty")
        self._rows = len(self._grid)
        self._cols = len(self._grid[0])
        if any(len(row) != self._cols for row in self._grid):
            raise ValueError("the octopus grid must be rectangular")
        self.time = 0
        self.flashes = 0

    @property
    def grid(self) -> list[list[int]]:
        return [list(row) for row in self._grid]

    def _neighbours(self, row: int, col: int) -> Iterator[tuple[int, int]]:
        for r in range(max(0, row - 1), min(self._rows, row + 2)):
            for c in range(max(0, col - 1), min(self._cols, col + 2)):
                if (r, c) != (row, col):
                    yield r, c

    def timestep(self) -> bool:
        """Advance one step; True if every octopus flashed during it."""
        for row in self._grid:
            row[:] = [value + 1 for value in row]
        pending = [
            (r, c)
            for r, row in enumerate(self._grid)
            for c, value in enumerate(row)
            if value > FLASH_THRESHOLD
        ]
        flashed: set[tuple[int, int]] = set()
        while pending:
            cell = pending.pop()
            if cell in flashed:
                continue
            flashed.add(cell)
            for r, c in self._neighbours(*cell):
                self._grid[r][c] += 1
                if self._grid[r][c] > FLASH_THRESHOLD and (r, c) not in flashed:
                    pending.append((r, c))
        for r, c in flashed:
            self._grid[r][c] = 0
        self.time += 1
        self.flashes += len(flashed)
        return len(flashed) == self._rows * self._cols

    def render(self) -> str:
        return "\n".join("".join(str(value) for value in row) for row in self._grid)


def parse_grid(text: str) -> list[list[int]]:
    grid = []
    for raw in text.splitlines():
        line = raw.strip()
        if not line:
            continue
        if not all(c in "0123456789" for c in line):
            raise ValueError(f"invalid energy row {line!r}")
        grid.append([int(c) for c in line])
    return grid


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    args = parser.parse_args(argv)
    grid = OctopusGrid(parse_grid(args.input.read()))
    for _ in range(COUNTED_STEPS):
        grid.timestep()
    print(f"At time {grid.time}, we have had a total of {grid.flashes} flashes")
    while not grid.timestep():
        pass
    print(f"At time {grid.time} all the octopi flashed")
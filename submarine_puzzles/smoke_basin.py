"""Smoke basin: find the low points of a height map and the basins that drain into them."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterable, Iterator, Sequence

PEAK = 9
LARGEST_BASINS = 3

Point = tuple[int, int]


class HeightMap:
    """A rectangular grid of heights from 0 to 9."""

    def __init__(self, grid: Sequence[Sequence[int]]) -> None:
        self._grid = [list(row) for row in grid]
        if not self._grid or not self._grid[0]:
            raise ValueError("the height map is empty")
        self.rows = len(self._grid)
        self.cols = len(self._grid[0])
        if any(len(row) != self.cols for row in self._grid):
            raise ValueError("the height map must be rectangular")

    def height(self, point: Point) -> int:
        row, col = point
        return self._grid[row][col]

    def _adjacent(self, point: Point) -> Iterator[Point]:
        row, col = point
        if row > 0:
            yield row - 1, col
        if col > 0:
            yield row, col - 1
        if row < self.rows - 1:
            yield row + 1, col
        if col < self.cols - 1:
            yield row, col + 1

    def _is_low_point(self, point: Point) -> bool:
        here = self.height(point)
        return all(here < self.height(adj) for adj in self._adjacent(point))

    def find_low_points(self) -> list[Point]:
        """Points lower than every orthogonal neighbour, in row-major order."""
        return [
            (row, col)
            for row in range(self.rows)
            for col in range(self.cols)
            if self._is_low_point((row, col))
        ]

    def risk_factor(self, low_points: Iterable[Point]) -> int:
        """Sum of one plus the height of each given point."""
        return sum(self.height(point) + 1 for point in low_points)

    def basin_size(self, point: Point) -> int:
        """Number of points reached by climbing strictly upward from ``point``, stopping at 9s."""
        basin = [point]
        seen = {point}
        for current in basin:
            for adj in self._adjacent(current):
                height = self.height(adj)
                if height == PEAK or adj in seen:
                    continue
                if height > self.height(current):
                    seen.add(adj)
                    basin.append(adj)
        return len(basin)


def parse_heightmap(text: str) -> list[list[int]]:
    """Read rows of digits; any other character counts as a height of 9."""
    grid = []
    for raw in text.splitlines():
        line = raw.strip()
        if not line:
            continue
        grid.append([int(c) if c in "0123456789" else PEAK for c in line])
    if not grid:
        raise ValueError("the height map is empty")
    if any(len(row) != len(grid[0]) for row in grid):
        raise ValueError("the height map must be rectangular")
    return grid


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    args = parser.parse_args(argv)
    heights = HeightMap(parse_heightmap(args.input.read()))
    low_points = heights.find_low_points()
    print(f"Part 1:{heights.risk_factor(low_points)}")
    sizes = sorted((heights.basin_size(point) for point in low_points), reverse=True)
    if len(sizes) < LARGEST_BASINS:
        parser.error(f"fewer than {LARGEST_BASINS} basins")
    print(f"Part 2:{math.prod(sizes[:LARGEST_BASINS])}")
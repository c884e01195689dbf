"""Find the lowest-risk path through a cave of chitons."""

from __future__ import annotations

import argparse
import heapq
import sys
from collections.abc import Iterator, Sequence

TILES = 5


class ChitonMap:
    """A risk grid with the lowest total risk from the top-left to every cell."""

    def __init__(self, risk_map: Sequence[Sequence[int]]) -> None:
        self._risk = [list(row) for row in risk_map]
        if not self._risk or not self._risk[0]:
            raise ValueError("the risk map is empty")
        self._rows = len(self._risk)
        self._cols = len(self._risk[0])
        if any(len(row) != self._cols for row in self._risk):
            raise ValueError("the risk map must be rectangular")
        self._optimal = self._optimize()

    def _adjacent(self, row: int, col: int) -> Iterator[tuple[int, int]]:
        for r, c in ((row - 1, col), (row, col - 1), (row + 1, col), (row, col + 1)):
            if 0 <= r < self._rows and 0 <= c < self._cols:
                yield r, c

    def _optimize(self) -> dict[tuple[int, int], int]:
        best = {(0, 0): 0}
        queue = [(0, 0, 0)]
        while queue:
            cost, row, col = heapq.heappop(queue)
            if cost > best[(row, col)]:
                continue
            for r, c in self._adjacent(row, col):
                candidate = cost + self._risk[r][c]
                if candidate < best.get((r, c), candidate + 1):
                    best[(r, c)] = candidate
                    heapq.heappush(queue, (candidate, r, c))
        return best

    def optimal_path_length(self) -> int:
        return self._optimal[(self._rows - 1, self._cols - 1)]


def parse_grid(text: str) -> list[list[int]]:
    grid = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        if not all(c in "0123456789" for c in line):
            raise ValueError(f"invalid risk row {line!r}")
        grid.append([int(c) for c in line])
    return grid


def _bump(value: int, steps: int) -> int:
    return (value - 1 + steps) % 9 + 1


def enlarge_map(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    """Tile the grid five times each way, raising risk by one per tile and wrapping 9 to 1."""
    tall = [[_bump(v, i) for v in row] for i in range(TILES) for row in grid]
    return [[_bump(v, j) for j in range(TILES) for v in row] for row in tall]


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    args = parser.parse_args(argv)
    grid = enlarge_map(parse_grid(args.input.read()))
    print(f"The optimal path length is {ChitonMap(grid).optimal_path_length()}")
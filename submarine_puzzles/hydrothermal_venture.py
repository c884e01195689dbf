"""Count the points where hydrothermal vent lines overlap."""

from __future__ import annotations

import argparse
import math
import re
import sys
from collections import Counter
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

_LINE = re.compile(r"^\s*(-?\d+)\s*,\s*(-?\d+)\s*->\s*(-?\d+)\s*,\s*(-?\d+)\s*$")


@dataclass(frozen=True)
class Line:
    """A segment between two integer points."""

    x1: int
    y1: int
    x2: int
    y2: int

    @classmethod
    def parse(cls, text: str) -> Line:
        """Read a segment written as ``x1,y1 -> x2,y2``."""
        match = _LINE.match(text)
        if match is None:
            raise ValueError(f"invalid vent line {text!r}")
        return cls(*(int(group) for group in match.groups()))

    def contains(self, x: int, y: int) -> bool:
        if not (min(self.x1, self.x2) <= x <= max(self.x1, self.x2)):
            return False
        if not (min(self.y1, self.y2) <= y <= max(self.y1, self.y2)):
            return False
        return (x - self.x1) * (y - self.y2) == (x - self.x2) * (y - self.y1)

    def is_axis_aligned(self) -> bool:
        return self.x1 == self.x2 or self.y1 == self.y2

    def _points(self) -> Iterator[tuple[int, int]]:
        dx = self.x2 - self.x1
        dy = self.y2 - self.y1
        steps = math.gcd(dx, dy)
        if steps == 0:
            yield self.x1, self.y1
            return
        sx, sy = dx // steps, dy // steps
        for k in range(steps + 1):
            yield self.x1 + k * sx, self.y1 + k * sy


def max_coords(lines: Iterable[Line]) -> tuple[int, int]:
    """Largest x and y among all end points, never below zero."""
    max_x = max_y = 0
    for line in lines:
        max_x = max(max_x, line.x1, line.x2)
        max_y = max(max_y, line.y1, line.y2)
    return max_x, max_y


def count_overlaps(lines: Iterable[Line], cutoff: int = 2) -> int:
    """Number of grid points with non-negative coordinates covered by at least ``cutoff`` lines."""
    if cutoff < 1:
        raise ValueError("cutoff must be at least 1")
    coverage: Counter[tuple[int, int]] = Counter(
        point
        for line in lines
        for point in line._points()
        if point[0] >= 0 and point[1] >= 0
    )
    return sum(1 for count in coverage.values() if count >= cutoff)


def hydrothermal_venture_one(lines: Sequence[Line]) -> int:
    """Overlaps counting only horizontal and vertical lines."""
    return count_overlaps((line for line in lines if line.is_axis_aligned()), 2)


def hydrothermal_venture_two(lines: Sequence[Line]) -> int:
    """Overlaps counting every line."""
    return count_overlaps(lines, 2)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    args = parser.parse_args(argv)
    lines = [Line.parse(text) for text in args.input if text.strip()]
    print(hydrothermal_venture_two(lines))
"""Fold transparent paper covered in dots and read the code it reveals."""

from __future__ import annotations

import argparse
import re
import sys
from enum import Enum

_FOLD = re.compile(r"([xy])\s*=\s*(-?\d+)")
_POINT = re.compile(r"^\s*(-?\d+)\s*,\s*(-?\d+)\s*$")


class Direction(Enum):
    """VERTICAL folds along a line of constant x, HORIZONTAL along constant y."""

    VERTICAL = "x"
    HORIZONTAL = "y"


class TransparentPaper:
    """A sheet with dots at integer points."""

    def __init__(self) -> None:
        self.points: set[tuple[int, int]] = set()

    def add_point(self, line: str) -> None:
        """Add a dot written as ``x,y``."""
        match = _POINT.match(line)
        if match is None:
            raise ValueError(f"invalid dot {line!r}")
        self.points.add((int(match.group(1)), int(match.group(2))))

    def fold(self, direction: Direction, coordinate: int) -> None:
        """Reflect every dot beyond the fold line onto the other side."""
        axis = 0 if direction is Direction.VERTICAL else 1
        folded = set()
        for point in self.points:
            if point[axis] > coordinate:
                moved = list(point)
                moved[axis] = 2 * coordinate - point[axis]
                folded.add((moved[0], moved[1]))
            else:
                folded.add(point)
        self.points = folded

    def point_count(self) -> int:
        return len(self.points)

    def render(self) -> str:
        """Rows from y = 0 to the largest y, '#' for a dot and '.' otherwise."""
        max_x = max((x for x, _ in self.points), default=0)
        max_y = max((y for _, y in self.points), default=0)
        max_x, max_y = max(max_x, 0), max(max_y, 0)
        return "\n".join(
            "".join("#" if (x, y) in self.points else "." for x in range(max_x + 1))
            for y in range(max_y + 1)
        )


def parse_fold(line: str) -> tuple[Direction, int]:
    """Read an instruction such as ``fold along x=5``."""
    match = _FOLD.search(line)
    if match is None:
        raise ValueError(f"invalid fold instruction {line!r}")
    return Direction(match.group(1)), int(match.group(2))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    args = parser.parse_args(argv)
    dots, _, folds = args.input.read().partition("\n\n")
    paper = TransparentPaper()
    for line in dots.splitlines():
        if line.strip():
            paper.add_point(line)
    instructions = [parse_fold(line) for line in folds.splitlines() if line.strip()]
    if not instructions:
        parser.error("no fold instructions given")
    for index, (direction, coordinate) in enumerate(instructions):
        paper.fold(direction, coordinate)
        print(f"Folding at {direction.value} = {coordinate}")
        if index == 0:
            print(f"Answer to part 1 is: {paper.point_count()}")
    print(paper.render())
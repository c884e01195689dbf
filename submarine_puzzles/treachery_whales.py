"""Line up the crab submarines at the position that costs the least fuel."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable


class CrabPos:
    """Horizontal crab positions and the fuel rule in force.

    With ``part1`` each step costs one unit of fuel; otherwise the n-th step
    of a move costs n units.
    """

    def __init__(self, part1: bool, positions: Iterable[int] = ()) -> None:
        self.part1 = part1
        self.positions: list[int] = list(positions)

    def add_crab(self, crab: int) -> None:
        self.positions.append(crab)

    def _require_crabs(self) -> None:
        if not self.positions:
            raise ValueError("there are no crabs")

    def _median(self) -> int:
        ordered = sorted(self.positions)
        return ordered[len(ordered) // 2]

    def _average(self) -> int:
        total = sum(self.positions)
        count = len(self.positions)
        quotient, remainder = divmod(total, count)
        return quotient if remainder < count // 2 else quotient + 1

    def _cost(self, distance: int) -> int:
        return distance if self.part1 else distance * (distance + 1) // 2

    def fuel_to(self, target: int) -> int:
        """Fuel spent moving every crab to ``target``."""
        return sum(self._cost(abs(target - crab)) for crab in self.positions)

    def fuel_needed(self) -> int:
        """Least fuel that lines every crab up at one position."""
        self._require_crabs()
        median = self._median()
        if self.part1:
            return self.fuel_to(median)
        # The optimum lies between the median and the rounded average.
        low, high = sorted((self._average(), median))
        return min(self.fuel_to(target) for target in range(low, high + 1))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    parser.add_argument(
        "--part1", action="store_true", help="use the constant fuel rate of part 1"
    )
    args = parser.parse_args(argv)
    try:
        positions = [int(part) for part in args.input.read().split(",") if part.strip()]
    except ValueError:
        parser.error("crab positions must be integers")
    crabs = CrabPos(args.part1, positions)
    if not crabs.positions:
        parser.error("no crab positions given")
    print(crabs.fuel_needed())
"""Reassemble a map of beacons from overlapping, differently oriented scanner reports."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

ORIENTATIONS = 24
REQUIRED_MATCHES = 12
_FIRST_ANCHOR = REQUIRED_MATCHES - 1

# Pairs known to overlap in the puzzle input, in an order that aligns every scanner to 0.
ALIGNMENT_ORDER: tuple[tuple[int, int], ...] = (
    (0, 13), (13, 26), (13, 11), (11, 20), (20, 7), (7, 25), (7, 5), (5, 34),
    (11, 2), (2, 28), (11, 15), (15, 21), (21, 9), (21, 32), (21, 12), (17, 12),
    (17, 35), (17, 4), (4, 23), (23, 33), (4, 10), (10, 24), (24, 1), (1, 38),
    (1, 22), (1, 18), (18, 27), (27, 8), (18, 31), (31, 36), (1, 16), (16, 37),
    (37, 14), (14, 6), (6, 19), (6, 29), (29, 30), (30, 3),
)


@dataclass(frozen=True, order=True)
class Vector:
    """An integer point or displacement in three dimensions."""

    x: int
    y: int
    z: int

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __str__(self) -> str:
        return f"({self.x},{self.y},{self.z})"

    def manhattan(self) -> int:
        return abs(self.x) + abs(self.y) + abs(self.z)

    def _rot01(self) -> Vector:
        return Vector(-self.y, self.x, self.z)

    def _rot12(self) -> Vector:
        return Vector(self.x, -self.z, self.y)

    def _rot02(self) -> Vector:
        return Vector(-self.z, self.y, self.x)

    def next_orientation(self, orientation_number: int) -> Vector:
        """Rotate one step along a fixed cycle that visits all 24 orientations.

        Applying steps 0 to 23 in order returns the vector to where it started.
        """
        if not 0 <= orientation_number < ORIENTATIONS:
            raise ValueError(f"orientation number must be in [0, {ORIENTATIONS})")
        step = orientation_number + 1
        if step % 4:
            rotation = (Vector._rot12, Vector._rot02, Vector._rot01)[step // 8]
            return rotation(self)
        vector = self
        for rotation in _CORNER_STEPS[step]:
            vector = rotation(vector)
        return vector


_CORNER_STEPS = {
    4: (Vector._rot01, Vector._rot01),
    8: (Vector._rot01,),
    12: (Vector._rot12, Vector._rot12),
    16: (Vector._rot12,),
    20: (Vector._rot02, Vector._rot02),
    24: (Vector._rot02, Vector._rot12),
}

_ORIGIN = Vector(0, 0, 0)


class Scanner:
    """A scanner's beacon report, plus where it sits relative to the scanner it is aligned to."""

    def __init__(self, name: int, beacons: Iterable[Vector] = ()) -> None:
        self.name = name
        self.aligned_to = name
        self.orientation = 0
        self.displacement = _ORIGIN
        self.beacons: list[Vector] = list(beacons)

    def __repr__(self) -> str:
        return (
            f"Scanner(name={self.name}, aligned_to={self.aligned_to}, "
            f"displacement={self.displacement}, beacons={len(self.beacons)})"
        )

    @property
    def position(self) -> Vector:
        return self.displacement

    @property
    def realigned(self) -> bool:
        return self.name != self.aligned_to

    def add_beacon(self, point: Vector) -> None:
        self.beacons.append(point)

    def absolute_beacons(self) -> list[Vector]:
        """Beacons in the frame of the scanner this one is aligned to."""
        return [beacon + self.displacement for beacon in self.beacons]

    def _next_orientation(self) -> None:
        number = self.orientation
        self.beacons = [beacon.next_orientation(number) for beacon in self.beacons]
        self.displacement = self.displacement.next_orientation(number)
        self.orientation = (number + 1) % ORIENTATIONS


def _align_by(first: Scanner, base: Vector, second: Scanner) -> bool:
    offsets = {beacon - base for beacon in first.beacons}
    for _ in range(ORIENTATIONS):
        for anchor in second.beacons[_FIRST_ANCHOR:]:
            matches = sum(1 for beacon in second.beacons if beacon - anchor in offsets)
            if matches >= REQUIRED_MATCHES:
                second.displacement = second.displacement + (base - anchor) + first.displacement
                second.aligned_to = first.aligned_to
                return True
        second._next_orientation()
    return False


def _attempt_align(first: Scanner, second: Scanner) -> bool:
    return any(_align_by(first, base, second) for base in first.beacons)


def align(scanners: Sequence[Scanner], first: int, second: int) -> bool:
    """Try to merge the alignment groups of two scanners; True if they were merged.

    The group with the higher root is re-expressed in the frame of the lower one.
    """
    if scanners[first].aligned_to == scanners[second].aligned_to:
        return False
    if scanners[first].aligned_to > scanners[second].aligned_to:
        first, second = second, first
    target, moving = scanners[first], scanners[second]
    old_alignment = moving.aligned_to
    old_orientation = moving.orientation
    old_displacement = moving.displacement
    if not _attempt_align(target, moving):
        return False
    for scanner in scanners:
        if scanner.aligned_to != old_alignment:
            continue
        scanner.displacement = scanner.displacement - old_displacement
        scanner.orientation = old_orientation
        while scanner.orientation != moving.orientation:
            scanner._next_orientation()
        scanner.aligned_to = moving.aligned_to
        scanner.displacement = scanner.displacement + moving.displacement
    return True


def align_all(scanners: Sequence[Scanner]) -> None:
    """Try every pair of scanners, lower index first."""
    for i in range(len(scanners)):
        for j in range(i + 1, len(scanners)):
            align(scanners, i, j)


def count_match(a: Scanner, b: Scanner) -> int:
    """How many of b's beacons coincide with one of a's, in absolute position."""
    seen = set(a.absolute_beacons())
    return sum(1 for beacon in b.absolute_beacons() if beacon in seen)


def distinct_beacons(scanners: Iterable[Scanner]) -> set[Vector]:
    return {beacon for scanner in scanners for beacon in scanner.absolute_beacons()}


def max_distance(scanners: Sequence[Scanner]) -> int:
    """Largest Manhattan distance between the positions of any two scanners."""
    return max(
        ((a.position - b.position).manhattan() for a in scanners for b in scanners),
        default=0,
    )


_HEADER = re.compile(r"scanner\s+(-?\d+)")


def parse_scanners(text: str) -> list[Scanner]:
    scanners: list[Scanner] = []
    for raw in text.splitlines():
        line = raw.strip()
        if not line:
            continue
        if line.endswith("-"):
            match = _HEADER.search(line)
            if match is None:
                raise ValueError(f"invalid scanner header {line!r}")
            scanners.append(Scanner(int(match.group(1))))
            continue
        if not scanners:
            raise ValueError("beacon listed before any scanner header")
        try:
            x, y, z = (int(part) for part in line.split(","))
        except ValueError:
            raise ValueError(f"invalid beacon line {line!r}") from None
        scanners[-1].add_beacon(Vector(x, y, z))
    return scanners


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    parser.add_argument(
        "--puzzle-order",
        action="store_true",
        help="align in the fixed order worked out for the puzzle input",
    )
    args = parser.parse_args(argv)
    scanners = parse_scanners(args.input.read())
    if args.puzzle_order:
        needed = max(max(pair) for pair in ALIGNMENT_ORDER) + 1
        if len(scanners) < needed:
            parser.error(f"the puzzle order needs {needed} scanners")
        for first, second in ALIGNMENT_ORDER:
            align(scanners, first, second)
    else:
        align_all(scanners)
    for scanner in scanners:
        print(f"{scanner.name}: {scanner.position}")
    print(f"Size {len(distinct_beacons(scanners))}")
    print(f"Max distance {max_distance(scanners)}")
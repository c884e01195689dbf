"""Reboot the reactor: count lit cubes after a sequence of on/off cuboid steps."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass

_AXIS = re.compile(r"([xyz])=(-?\d+)\.\.(-?\d+)")


@dataclass(frozen=True)
class Cuboid:
    """An axis-aligned box of cubes, bounds inclusive."""

    minx: int
    maxx: int
    miny: int
    maxy: int
    minz: int
    maxz: int

    def __post_init__(self) -> None:
        if self.minx > self.maxx or self.miny > self.maxy or self.minz > self.maxz:
            raise ValueError("a cuboid's lower bounds must not exceed its upper bounds")

    @classmethod
    def parse(cls, text: str) -> Cuboid:
        """Read bounds written as ``x=a..b,y=c..d,z=e..f``."""
        bounds: dict[str, tuple[int, int]] = {}
        for axis, low, high in _AXIS.findall(text):
            bounds.setdefault(axis, (int(low), int(high)))
        if len(bounds) != 3:
            raise ValueError(f"invalid cuboid {text!r}")
        return cls(*bounds["x"], *bounds["y"], *bounds["z"])

    @classmethod
    def construct(
        cls, minx: int, maxx: int, miny: int, maxy: int, minz: int, maxz: int
    ) -> Cuboid | None:
        """The cuboid with these bounds, or None if it would be empty."""
        if maxx >= minx and maxy >= miny and maxz >= minz:
            return cls(minx, maxx, miny, maxy, minz, maxz)
        return None

    def contains(self, x: int, y: int, z: int) -> bool:
        return (
            self.minx <= x <= self.maxx
            and self.miny <= y <= self.maxy
            and self.minz <= z <= self.maxz
        )

    def intersect(self, other: Cuboid) -> Cuboid | None:
        return Cuboid.construct(
            max(self.minx, other.minx), min(self.maxx, other.maxx),
            max(self.miny, other.miny), min(self.maxy, other.maxy),
            max(self.minz, other.minz), min(self.maxz, other.maxz),
        )

    def intersects(self, other: Cuboid) -> bool:
        return self.intersect(other) is not None

    def size(self) -> int:
        return (
            (self.maxx - self.minx + 1)
            * (self.maxy - self.miny + 1)
            * (self.maxz - self.minz + 1)
        )

    def __str__(self) -> str:
        return (
            f"x={self.minx}..{self.maxx},y={self.miny}..{self.maxy},"
            f"z={self.minz}..{self.maxz}"
        )


class Region:
    """Lit cubes kept as signed cuboids: lit ones add, dark ones cancel overlaps."""

    def __init__(self) -> None:
        self.lit: list[Cuboid] = []
        self.dark: list[Cuboid] = []

    def add(self, cuboid: Cuboid, on: bool) -> None:
        new_dark = [o for c in self.lit if (o := c.intersect(cuboid)) is not None]
        new_lit = [o for c in self.dark if (o := c.intersect(cuboid)) is not None]
        self.dark.extend(new_dark)
        self.lit.extend(new_lit)
        if on:
            self.lit.append(cuboid)

    def count_on(self) -> int:
        return sum(c.size() for c in self.lit) - sum(c.size() for c in self.dark)


def parse_instruction(line: str) -> tuple[bool, Cuboid]:
    """Read ``on x=..,y=..,z=..`` or ``off ...`` into (on, cuboid)."""
    word, _, rest = line.strip().partition(" ")
    if word not in ("on", "off"):
        raise ValueError(f"invalid reboot step {line!r}")
    return word == "on", Cuboid.parse(rest)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    args = parser.parse_args(argv)
    region = Region()
    for line in args.input:
        if line.strip():
            on, cuboid = parse_instruction(line)
            region.add(cuboid, on)
    print(f"Now there are {region.count_on()} cubes lit")
"""Enhance an infinite trench image with a 512-entry lookup table."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Mapping, Sequence

ALGORITHM_SIZE = 512
LIGHT = "#"
DARK = "."

Point = tuple[int, int]


def _neighbours(point: Point) -> list[Point]:
    row, col = point
    return [(row + dr, col + dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1)]


def _check_algorithm(algorithm: Sequence[bool]) -> None:
    if len(algorithm) != ALGORITHM_SIZE:
        raise ValueError(f"the enhancement algorithm must have {ALGORITHM_SIZE} entries")


class Image:
    """Pixels at known points; every other pixel of the infinite plane is ``outside_light``."""

    def __init__(self, pixels: Mapping[Point, bool], outside_light: bool = False) -> None:
        self.pixels: dict[Point, bool] = dict(pixels)
        self.outside_light = outside_light

    def at(self, point: Point) -> bool:
        return self.pixels.get(point, self.outside_light)

    def _filter(self, algorithm: Sequence[bool], point: Point) -> bool:
        index = 0
        for adj in _neighbours(point):
            index = (index << 1) | int(self.at(adj))
        return algorithm[index]

    def enhance(self, algorithm: Sequence[bool]) -> Image:
        """The image after one enhancement step; the known area grows by one on every side."""
        _check_algorithm(algorithm)
        pixels: dict[Point, bool] = {}
        for point in self.pixels:
            for adj in _neighbours(point):
                if adj not in pixels:
                    pixels[adj] = self._filter(algorithm, adj)
        outside = algorithm[ALGORITHM_SIZE - 1] if self.outside_light else algorithm[0]
        return Image(pixels, outside)

    def count_light(self) -> int:
        """Lit pixels among the known points."""
        return sum(1 for lit in self.pixels.values() if lit)


def parse_input(text: str) -> tuple[tuple[bool, ...], Image]:
    """Read the algorithm line, a blank line, then the rows of the image."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("missing enhancement algorithm")
    algorithm = tuple(c == LIGHT for c in lines[0].strip())
    _check_algorithm(algorithm)
    pixels: dict[Point, bool] = {}
    rows = (line.strip() for line in lines[1:])
    for row, line in enumerate(line for line in rows if line):
        for col, char in enumerate(line):
            if char not in (LIGHT, DARK):
                raise ValueError(f"invalid pixel {char!r}")
            pixels[(row, col)] = char == LIGHT
    return algorithm, Image(pixels)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    args = parser.parse_args(argv)
    algorithm, image = parse_input(args.input.read())
    for _ in range(2):
        image = image.enhance(algorithm)
    print(f"After enhancing twice, the number of light pixels is {image.count_light()}")
    for _ in range(48):
        image = image.enhance(algorithm)
    print(f"After enhancing fifty times, the number of light pixels is {image.count_light()}")
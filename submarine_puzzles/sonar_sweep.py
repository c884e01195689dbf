"""Sonar sweep: count how often the sea floor depth increases."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable

WINDOW_SIZE = 3


def sonar_sweep_one(measurements: Iterable[int]) -> int:
    """Number of measurements larger than the one before."""
    values = list(measurements)
    return sum(1 for before, after in zip(values, values[1:]) if after > before)


def sonar_sweep_two(measurements: Iterable[int]) -> int:
    """Number of three-measurement sliding-window sums larger than the one before."""
    values = list(measurements)
    if len(values) < WINDOW_SIZE:
        raise ValueError(f"at least {WINDOW_SIZE} measurements are needed")
    return sum(
        1 for before, after in zip(values, values[WINDOW_SIZE:]) if after > before
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("part", choices=("1", "2"), help="which part of the puzzle to run")
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    args = parser.parse_args(argv)
    try:
        values = [int(line) for line in args.input if line.strip()]
    except ValueError:
        parser.error("measurements must be integers")
    if args.part == "1":
        print(f"There were {sonar_sweep_one(values)} increases in the measurements.")
    else:
        print(f"There were {sonar_sweep_two(values)} increases in the sums.")
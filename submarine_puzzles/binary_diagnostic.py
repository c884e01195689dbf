"""Decode the submarine's binary diagnostic report."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Sequence

_BIT_WEIGHT = {"0": -1, "1": 1}


def count_bits(lines: Iterable[str]) -> list[int]:
    """Per position, the number of ones minus the number of zeros."""
    lines = list(lines)
    if not lines:
        return []
    width = len(lines[0])
    if any(len(line) != width for line in lines):
        raise ValueError("all report lines must have the same length")
    try:
        return [sum(_BIT_WEIGHT[bit] for bit in column) for column in zip(*lines)]
    except KeyError as exc:
        raise ValueError(f"invalid bit {exc.args[0]!r}") from None


def power_consumption(bit_counts: Sequence[int]) -> int:
    gamma = "".join("1" if count > 0 else "0" for count in bit_counts)
    epsilon = "".join("0" if count > 0 else "1" for count in bit_counts)
    if not gamma:
        return 0
    return int(gamma, 2) * int(epsilon, 2)


def _rating(lines: Iterable[str], keep: Callable[[int], str]) -> int:
    remaining = list(lines)
    if not remaining:
        raise ValueError("no report lines")
    width = len(remaining[0])
    position = 0
    while len(remaining) > 1:
        if position >= width:
            raise ValueError("report lines do not narrow down to one")
        wanted = keep(count_bits(remaining)[position])
        remaining = [line for line in remaining if line[position] == wanted]
        if not remaining:
            raise ValueError("no report line matches the bit criteria")
        position += 1
    return int(remaining[0], 2)


def generator_rating(lines: Iterable[str]) -> int:
    """Oxygen generator rating: keep the most common bit, ones on ties."""
    return _rating(lines, lambda balance: "1" if balance >= 0 else "0")


def scrubber_rating(lines: Iterable[str]) -> int:
    """CO2 scrubber rating: keep the least common bit, zeros on ties."""
    return _rating(lines, lambda balance: "0" if balance >= 0 else "1")


def binary_diagnostic_one(lines: Iterable[str]) -> int:
    return power_consumption(count_bits(lines))


def binary_diagnostic_two(lines: Iterable[str]) -> int:
    lines = list(lines)
    return scrubber_rating(lines) * generator_rating(lines)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    args = parser.parse_args(argv)
    lines = [line.strip() for line in args.input if line.strip()]
    print(binary_diagnostic_two(lines))
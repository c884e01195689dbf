"""Untangle scrambled seven-segment displays and read their outputs."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence

SEGMENTS = "abcdefg"
ALL_SEGMENTS = frozenset(SEGMENTS)

Digit = frozenset

_UNIQUE_LENGTHS = {2: 1, 3: 7, 4: 4, 7: 8}
# (digit to find, its segment count, known digit that together with it lights every segment)
_DEDUCTIONS = ((2, 5, 4), (5, 5, 2), (3, 5, 8), (6, 6, 1), (0, 6, 5), (9, 6, 8))
_EASY = (1, 4, 7, 8)


def make_digit(text: str) -> frozenset[str]:
    """The set of lit segments in a pattern; characters other than a-g are ignored."""
    return frozenset(c for c in text if c in ALL_SEGMENTS)


def read_digits(segments: str) -> list[frozenset[str]]:
    """Whitespace-separated patterns as digits."""
    return [make_digit(word) for word in segments.split()]


def compute_digits(digits: Sequence[frozenset[str]]) -> list[frozenset[str]]:
    """Work out which of the ten patterns shows which digit; index ``i`` shows ``i``."""
    if len(digits) != 10:
        raise ValueError("exactly ten signal patterns are needed")
    ordered: dict[int, frozenset[str]] = {}
    remaining: list[frozenset[str]] = []
    for digit in digits:
        known = _UNIQUE_LENGTHS.get(len(digit))
        if known is None:
            remaining.append(digit)
        else:
            ordered[known] = digit
    for target, size, reference in _DEDUCTIONS:
        if reference not in ordered:
            raise ValueError(f"cannot identify digit {reference}")
        match = next(
            (d for d in remaining if len(d) == size and d | ordered[reference] == ALL_SEGMENTS),
            None,
        )
        if match is None:
            raise ValueError(f"cannot identify digit {target}")
        remaining.remove(match)
        ordered[target] = match
    return [ordered[i] for i in range(10)]


def _read_number(ordered: Sequence[frozenset[str]], outputs: Iterable[frozenset[str]]) -> int:
    lookup = {digit: value for value, digit in enumerate(ordered)}
    number = 0
    for digit in outputs:
        if digit not in lookup:
            raise ValueError(f"output pattern {''.join(sorted(digit))!r} is not a digit")
        number = number * 10 + lookup[digit]
    return number


def decode_output(
    patterns: Sequence[frozenset[str]], outputs: Iterable[frozenset[str]]
) -> int:
    """The number shown by the output digits, given the ten signal patterns."""
    return _read_number(compute_digits(patterns), outputs)


def solve(lines: Iterable[str]) -> tuple[int, int]:
    """Count of 1, 4, 7 and 8 among all outputs, and the sum of all output numbers."""
    easy_count = 0
    total = 0
    for line in lines:
        if not line.strip():
            continue
        left, sep, right = line.partition("|")
        if not sep:
            raise ValueError(f"entry without '|': {line!r}")
        ordered = compute_digits(read_digits(left))
        outputs = read_digits(right)
        easy = {ordered[i] for i in _EASY}
        easy_count += sum(1 for digit in outputs if digit in easy)
        total += _read_number(ordered, outputs)
    return easy_count, total


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    args = parser.parse_args(argv)
    part_one, part_two = solve(args.input.read().splitlines())
    print(f"The answer to part 1 is {part_one}")
    print(f"The answer to part 2 is {part_two}")
"""Snailfish numbers: add, reduce and measure nested pairs."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Sequence
from functools import reduce
from itertools import permutations

OPEN = "["
SEP = ","
CLOSE = "]"
EXPLODE_DEPTH = 5
SPLIT_AT = 10
LEFT_WEIGHT = 3
RIGHT_WEIGHT = 2

Part = int | str

_LEXEME_PATTERN = re.compile(r"\d+|[\[\],]|(.)", re.DOTALL)


def _lex(text: str) -> list[Part]:
    parts: list[Part] = []
    for match in _LEXEME_PATTERN.finditer(text):
        if match.group(1) is not None:
            raise ValueError(f"unexpected character {match.group(1)!r} in snailfish number")
        lexeme = match.group(0)
        parts.append(int(lexeme) if lexeme.isdigit() else lexeme)
    return parts


def _check_element(parts: Sequence[Part], index: int) -> int:
    if index >= len(parts):
        raise ValueError("snailfish number ends too early")
    if isinstance(parts[index], int):
        return index + 1
    for expected, is_element in ((OPEN, False), (None, True), (SEP, False), (None, True), (CLOSE, False)):
        if is_element:
            index = _check_element(parts, index)
            continue
        if index >= len(parts) or parts[index] != expected:
            raise ValueError(f"expected {expected!r} in snailfish number")
        index += 1
    return index


class SnailNum:
    """A snailfish number kept as a flat list of brackets, commas and regular numbers."""

    def __init__(self, text: str) -> None:
        parts = _lex(text.strip())
        if _check_element(parts, 0) != len(parts):
            raise ValueError("trailing characters after snailfish number")
        self._parts = parts

    @classmethod
    def _from_parts(cls, parts: list[Part]) -> SnailNum:
        number = cls.__new__(cls)
        number._parts = parts
        return number

    def __add__(self, other: SnailNum) -> SnailNum:
        result = SnailNum._from_parts([OPEN, *self._parts, SEP, *other._parts, CLOSE])
        result._reduce()
        return result

    def __str__(self) -> str:
        return "".join(str(part) for part in self._parts)

    def __repr__(self) -> str:
        return f"SnailNum({str(self)!r})"

    def magnitude(self) -> int:
        """Three times the left magnitude plus twice the right, applied recursively."""
        factors: list[int] = []
        total = 0
        for part in self._parts:
            if part == OPEN:
                factors.append(LEFT_WEIGHT)
            elif part == SEP:
                factors[-1] = RIGHT_WEIGHT
            elif part == CLOSE:
                factors.pop()
            else:
                value = part
                for factor in factors:
                    value *= factor
                total += value
        return total

    def _explode(self) -> bool:
        parts = self._parts
        depth = 0
        left = None
        for i, part in enumerate(parts):
            if part == OPEN:
                depth += 1
                if (
                    depth >= EXPLODE_DEPTH
                    and isinstance(parts[i + 1], int)
                    and isinstance(parts[i + 3], int)
                    and parts[i + 4] == CLOSE
                ):
                    left = i
                    break
            elif part == CLOSE:
                depth -= 1
        if left is None:
            return False
        right = left + 4
        left_value, right_value = parts[left + 1], parts[left + 3]
        for i in range(left - 1, -1, -1):
            if isinstance(parts[i], int):
                parts[i] += left_value
                break
        for i in range(right + 1, len(parts)):
            if isinstance(parts[i], int):
                parts[i] += right_value
                break
        parts[left : right + 1] = [0]
        return True

    def _split(self) -> bool:
        parts = self._parts
        for i, part in enumerate(parts):
            if isinstance(part, int) and part >= SPLIT_AT:
                parts[i : i + 1] = [OPEN, part // 2, SEP, (part + 1) // 2, CLOSE]
                return True
        return False

    def _reduce(self) -> None:
        while self._explode() or self._split():
            pass


def maximal_magnitude(numbers: Sequence[SnailNum]) -> int:
    """Largest magnitude of the sum of two different numbers from the list, in either order."""
    return max((a + b).magnitude() for a, b in permutations(numbers, 2)) if len(numbers) > 1 else 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    args = parser.parse_args(argv)
    numbers = [SnailNum(line) for line in args.input if line.strip()]
    if not numbers:
        parser.error("no snailfish numbers given")
    total = reduce(lambda a, b: a + b, numbers)
    print(f"Result after summing all numbers is {total}")
    print(f"Magnitude of the result is {total.magnitude()}")
    print(f"Maximal magnitude of the sum of any two is {maximal_magnitude(numbers)}")
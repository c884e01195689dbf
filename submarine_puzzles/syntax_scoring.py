"""Score corrupted and incomplete lines of bracketed navigation syntax."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable

CORRUPT_SCORE = {")": 3, "]": 57, "}": 1197, ">": 25137}
COMPLETE_SCORE = {")": 1, "]": 2, "}": 3, ">": 4}
MATCHING = {"(": ")", "[": "]", "{": "}", "<": ">"}


def score_corrupted(line: str) -> int:
    """Score of the first wrong closing character, or 0 if there is none."""
    stack: list[str] = []
    for char in line:
        if char in MATCHING:
            stack.append(char)
        elif char in CORRUPT_SCORE:
            if not stack:
                raise ValueError(f"closing {char!r} with nothing open")
            if MATCHING[stack[-1]] != char:
                return CORRUPT_SCORE[char]
            stack.pop()
    return 0


def score_incomplete(line: str) -> int:
    """Score of the characters needed to close every open chunk; 0 for a complete line.

    Closing characters that do not match are ignored.
    """
    stack: list[str] = []
    for char in line:
        if char in MATCHING:
            stack.append(char)
        elif char in COMPLETE_SCORE:
            if not stack:
                raise ValueError(f"closing {char!r} with nothing open")
            if MATCHING[stack[-1]] == char:
                stack.pop()
    score = 0
    for opener in reversed(stack):
        score = score * 5 + COMPLETE_SCORE[MATCHING[opener]]
    return score


def _summarise(lines: Iterable[str]) -> tuple[int, int]:
    corrupted_total = 0
    completion_scores = []
    for line in lines:
        corrupted = score_corrupted(line)
        if corrupted:
            corrupted_total += corrupted
        else:
            completion_scores.append(score_incomplete(line))
    if not completion_scores:
        raise ValueError("no incomplete lines to score")
    completion_scores.sort()
    return corrupted_total, completion_scores[len(completion_scores) // 2]


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    args = parser.parse_args(argv)
    lines = [line.strip() for line in args.input if line.strip()]
    corrupted, middle = _summarise(lines)
    print(f"Part 1: {corrupted}")
    print(f"Part 2: {middle}")
"""Bingo with a giant squid: find the first and the last board to win."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence

SIZE = 5


class BingoBoard:
    """A 5x5 bingo board that remembers which numbers have been called."""

    def __init__(self, numbers: Sequence[Sequence[int]]) -> None:
        self.numbers = [list(row) for row in numbers]
        if len(self.numbers) != SIZE or any(len(row) != SIZE for row in self.numbers):
            raise ValueError(f"a bingo board must be {SIZE}x{SIZE}")
        self.marked: set[tuple[int, int]] = set()

    def _bingo(self, row: int, col: int) -> bool:
        full_row = all((row, k) in self.marked for k in range(SIZE))
        full_col = all((k, col) in self.marked for k in range(SIZE))
        return full_row or full_col

    def call_num(self, call: int) -> bool:
        """Mark the called number; True if that completes a row or column."""
        for r, row in enumerate(self.numbers):
            for c, value in enumerate(row):
                if value == call:
                    self.marked.add((r, c))
                    return self._bingo(r, c)
        return False

    def score(self, call: int) -> int:
        unmarked = sum(
            value
            for r, row in enumerate(self.numbers)
            for c, value in enumerate(row)
            if (r, c) not in self.marked
        )
        return unmarked * call


def parse_bingo(text: str) -> tuple[list[int], list[BingoBoard]]:
    head, _, rest = text.strip().partition("\n")
    try:
        calls = [int(part) for part in head.split(",")]
        numbers = [int(part) for part in rest.split()]
    except ValueError:
        raise ValueError("bingo input holds a non-numeric entry") from None
    cells = SIZE * SIZE
    if len(numbers) % cells:
        raise ValueError("the board numbers do not fill whole boards")
    boards = [
        BingoBoard([numbers[start + r * SIZE : start + (r + 1) * SIZE] for r in range(SIZE)])
        for start in range(0, len(numbers), cells)
    ]
    return calls, boards


def giant_squid_one(calls: Iterable[int], boards: Sequence[BingoBoard]) -> int:
    """Score of the first board to win. Marks the boards as it goes."""
    for call in calls:
        for board in boards:
            if board.call_num(call):
                return board.score(call)
    raise ValueError("no board wins")


def giant_squid_two(calls: Iterable[int], boards: Sequence[BingoBoard]) -> int:
    """Score of the last board to win. Marks the boards as it goes."""
    remaining = list(boards)
    for call in calls:
        still_playing = []
        for board in remaining:
            if board.call_num(call):
                if len(remaining) == 1:
                    return board.score(call)
            else:
                still_playing.append(board)
        remaining = still_playing
        if not remaining:
            break
    raise ValueError("no single board wins last")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    args = parser.parse_args(argv)
    calls, boards = parse_bingo(args.input.read())
    print(giant_squid_two(calls, boards))
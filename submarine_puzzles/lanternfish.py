"""Model a growing school of lanternfish by counting fish per timer value."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable

TIMER_VALUES = 9
RESET_TIMER = 6
DEFAULT_DAYS = 256


class FishCounts:
    """How many fish there are with each internal timer value."""

    def __init__(self, initial: Iterable[int]) -> None:
        counts = list(initial)
        if len(counts) != TIMER_VALUES:
            raise ValueError(f"expected {TIMER_VALUES} timer counts")
        if any(count < 0 for count in counts):
            raise ValueError("fish counts cannot be negative")
        self._counts = deque(counts)

    @property
    def counts(self) -> list[int]:
        return list(self._counts)

    def time_step(self) -> None:
        """Advance one day: fish at zero reset to six and each spawns a fish at eight."""
        self._counts.rotate(-1)
        self._counts[RESET_TIMER] += self._counts[-1]

    def total_fish(self) -> int:
        return sum(self._counts)


def parse_fish(text: str) -> list[int]:
    """Turn a comma-separated list of timers into per-timer counts."""
    counts = [0] * TIMER_VALUES
    for part in text.split(","):
        part = part.strip()
        if not part:
            continue
        if not part.isdigit() or int(part) >= TIMER_VALUES:
            raise ValueError(f"invalid fish timer {part!r}")
        counts[int(part)] += 1
    return counts


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    parser.add_argument("--days", type=int, default=DEFAULT_DAYS)
    args = parser.parse_args(argv)
    fish = FishCounts(parse_fish(args.input.read()))
    for _ in range(args.days):
        fish.time_step()
    print(fish.total_fish())
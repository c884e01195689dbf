"""Count the paths through a cave system that respect the small-cave visiting rules."""

from __future__ import annotations

import argparse
import sys

START = "start"
END = "end"


def _is_small(cave: str) -> bool:
    return cave[0].islower()


class CaveSystem:
    """Caves joined by undirected passages."""

    def __init__(self) -> None:
        self._links: dict[str, list[str]] = {}

    @property
    def caves(self) -> list[str]:
        return list(self._links)

    def add_connection(self, connection: str) -> None:
        """Add a passage written as ``name-name``."""
        one, sep, two = connection.strip().partition("-")
        if not sep or not one or not two:
            raise ValueError(f"invalid connection {connection!r}")
        for a, b in ((one, two), (two, one)):
            links = self._links.setdefault(a, [])
            if b not in links:
                links.append(b)

    def count_paths(self, visit_twice: bool = False) -> int:
        """Paths from start to end visiting small caves at most once.

        With ``visit_twice``, a single small cave other than start may be visited twice.
        """
        if START not in self._links:
            raise ValueError("the cave system has no start")
        for cave, links in self._links.items():
            if not _is_small(cave) and any(not _is_small(other) for other in links):
                raise ValueError(f"big cave {cave} joins another big cave; paths are endless")
        return self._count(START, frozenset({START}), visit_twice)

    def _count(self, cave: str, seen: frozenset[str], twice_available: bool) -> int:
        if cave == END:
            return 1
        total = 0
        for other in self._links[cave]:
            if other == START:
                continue
            if not _is_small(other):
                total += self._count(other, seen, twice_available)
            elif other not in seen:
                total += self._count(other, seen | {other}, twice_available)
            elif twice_available:
                total += self._count(other, seen, False)
        return total


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    args = parser.parse_args(argv)
    system = CaveSystem()
    for line in args.input:
        if line.strip():
            system.add_connection(line)
    print(f"Part 1: {system.count_paths()}")
    print(f"Part 2: {system.count_paths(True)}")
"""Pilot the submarine from a list of course commands."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable

COMMANDS: dict[str, tuple[int, int]] = {
    "forward": (1, 0),
    "down": (0, 1),
    "up": (0, -1),
}

Command = tuple[str, int]


def _delta(name: str) -> tuple[int, int]:
    try:
        return COMMANDS[name]
    except KeyError:
        raise ValueError(f"unknown command {name!r}") from None


def parse_commands(text: str) -> list[Command]:
    """Read whitespace-separated pairs of command name and magnitude."""
    tokens = text.split()
    if len(tokens) % 2:
        raise ValueError("a command is missing its magnitude")
    pairs = iter(tokens)
    commands = []
    for name, magnitude in zip(pairs, pairs):
        _delta(name)
        try:
            commands.append((name, int(magnitude)))
        except ValueError:
            raise ValueError(f"invalid magnitude {magnitude!r}") from None
    return commands


def dive_one(commands: Iterable[Command]) -> int:
    """Horizontal position times depth, with up and down changing depth directly."""
    horizontal = depth = 0
    for name, magnitude in commands:
        dx, dy = _delta(name)
        horizontal += dx * magnitude
        depth += dy * magnitude
    return horizontal * depth


def dive_two(commands: Iterable[Command]) -> int:
    """Horizontal position times depth, with up and down changing the aim."""
    aim = horizontal = depth = 0
    for name, magnitude in commands:
        dx, dy = _delta(name)
        aim += dy * magnitude
        horizontal += dx * magnitude
        depth += dx * magnitude * aim
    return horizontal * depth


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    args = parser.parse_args(argv)
    print(dive_two(parse_commands(args.input.read())))
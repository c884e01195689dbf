"""Check model numbers against the fourteen-block monitoring program."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

DIGITS = 14


@dataclass(frozen=True)
class BlockInputs:
    """The three values that differ between the program's blocks."""

    div26_z: bool
    add_x: int
    add_y: int


BLOCKS: tuple[BlockInputs, ...] = (
    BlockInputs(False, 15, 4),
    BlockInputs(False, 14, 16),
    BlockInputs(False, 11, 14),
    BlockInputs(True, -13, 3),
    BlockInputs(False, 14, 11),
    BlockInputs(False, 15, 13),
    BlockInputs(True, -7, 11),
    BlockInputs(False, 10, 7),
    BlockInputs(True, -12, 12),
    BlockInputs(False, 15, 15),
    BlockInputs(True, -16, 13),
    BlockInputs(True, -9, 1),
    BlockInputs(True, -8, 15),
    BlockInputs(True, -8, 4),
)

KNOWN_VALID = (91897399498995, 51121176121391)


def evaluate_block(z: int, block: BlockInputs, w: int) -> int:
    """Run one block with input digit ``w`` and return the new ``z``."""
    x = z % 26
    if block.div26_z:
        z //= 26
    x += block.add_x
    x = 0 if x == w else 1
    z *= 25 * x + 1
    z += (w + block.add_y) * x
    return z


def model_digits(number: int) -> list[int]:
    """The fourteen digits of a model number, most significant first."""
    if number < 0:
        raise ValueError("model numbers are non-negative")
    return [int(c) for c in str(number % 10**DIGITS).zfill(DIGITS)]


def z_trace(number: int, blocks: Sequence[BlockInputs] = BLOCKS) -> list[int]:
    """The value of ``z`` after each block."""
    trace = []
    z = 0
    for block, digit in zip(blocks, model_digits(number)):
        z = evaluate_block(z, block, digit)
        trace.append(z)
    return trace


def check_valid(number: int, blocks: Sequence[BlockInputs] = BLOCKS) -> bool:
    trace = z_trace(number, blocks)
    return trace[-1] == 0


def _base26(z: int) -> Iterator[int]:
    while z > 0:
        yield z % 26
        z //= 26


def main(argv: list[str] | None = None) -> None:
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    for index, number in enumerate(KNOWN_VALID):
        if index:
            print()
        print("Value of z in base 26 at each step, least significant first")
        trace = z_trace(number)
        for step, z in enumerate(trace):
            print(f"Step {step}: " + "".join(f"{d}, " for d in _base26(z)))
        print(f"{number} -> {trace[-1]}")
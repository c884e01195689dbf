"""Dirac Dice: a deterministic game to 1000 and a quantum game to 21."""

from __future__ import annotations

import argparse
from functools import lru_cache
from typing import NamedTuple

BOARD_SIZE = 10
DETERMINISTIC_TARGET = 1000
QUANTUM_TARGET = 21

# Sum of three three-sided dice, and in how many universes it occurs.
ROLL_FREQUENCIES = ((3, 1), (4, 3), (5, 6), (6, 7), (7, 6), (8, 3), (9, 1))


class DeterministicResult(NamedTuple):
    score1: int
    score2: int
    rolls: int


class QuantumResult(NamedTuple):
    first_wins: int
    second_wins: int


def _check_position(position: int) -> None:
    if not 1 <= position <= BOARD_SIZE:
        raise ValueError(f"starting position must be between 1 and {BOARD_SIZE}")


def part_one(pos1: int, pos2: int) -> DeterministicResult:
    """Play with the deterministic hundred-sided die until someone reaches 1000."""
    _check_position(pos1)
    _check_position(pos2)
    # Positions are kept zero-based; the n-th triple roll moves a pawn (6 - n) mod 10.
    positions = [pos1 - 1, pos2 - 1]
    scores = [0, 0]
    turn = 0
    total_rolls = 0
    player = 0
    while True:
        positions[player] = (positions[player] + 16 - turn) % BOARD_SIZE
        scores[player] += positions[player] + 1
        turn = (turn + 1) % BOARD_SIZE
        total_rolls += 3
        if scores[player] >= DETERMINISTIC_TARGET:
            break
        player ^= 1
    return DeterministicResult(scores[0], scores[1], total_rolls)


@lru_cache(maxsize=None)
def _wins(pos_now: int, score_now: int, pos_other: int, score_other: int) -> tuple[int, int]:
    """Universes won by the player about to move and by the other, in that order."""
    mover = other = 0
    for total, frequency in ROLL_FREQUENCIES:
        position = (pos_now + total) % BOARD_SIZE
        score = score_now + position + 1
        if score >= QUANTUM_TARGET:
            mover += frequency
        else:
            next_mover, next_other = _wins(pos_other, score_other, position, score)
            mover += frequency * next_other
            other += frequency * next_mover
    return mover, other


def part_two(pos1: int, pos2: int) -> QuantumResult:
    """Count the universes each player wins with the Dirac die."""
    _check_position(pos1)
    _check_position(pos2)
    return QuantumResult(*_wins(pos1 - 1, 0, pos2 - 1, 0))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("pos1", nargs="?", type=int, default=10)
    parser.add_argument("pos2", nargs="?", type=int, default=3)
    args = parser.parse_args(argv)
    one = part_one(args.pos1, args.pos2)
    print(
        f"For part 1, scores are:{one.score1},{one.score2} "
        f"and there were {one.rolls} total rolls"
    )
    two = part_two(args.pos1, args.pos2)
    print(
        f"For part 2, player 1 won {two.first_wins} times, "
        f"and player 2 won {two.second_wins} times"
    )
    print(f"Difference of {two.first_wins - two.second_wins}")
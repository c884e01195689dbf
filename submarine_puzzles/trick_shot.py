"""Trick shot: find launch velocities that put the probe in the target area."""

from __future__ import annotations

import argparse
from dataclasses import dataclass


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def integer_sum(start: int, end: int) -> int:
    """Sum of the integers in the half-open range (start, end]."""
    return (end - start) * (start + end + 1) // 2


def max_pos(velocity: int) -> int:
    """Furthest x reached by a probe launched with a non-negative x velocity."""
    return integer_sum(0, velocity)


def x_pos(time: int, x_velocity: int) -> int:
    """x coordinate after ``time`` steps; drag stops the probe at ``max_pos``."""
    if time < x_velocity:
        return integer_sum(x_velocity - time, x_velocity)
    return max_pos(x_velocity)


def y_pos(time: int, y_velocity: int) -> int:
    """y coordinate after ``time`` steps under gravity."""
    if time <= y_velocity:
        return integer_sum(y_velocity - time, y_velocity)
    falling = time - y_velocity - 1
    if falling <= y_velocity:
        return integer_sum(falling, y_velocity)
    return -integer_sum(y_velocity, falling)


@dataclass(frozen=True)
class Region:
    """A target area to the right of and below the launcher, bounds inclusive."""

    xmin: int
    xmax: int
    ymin: int
    ymax: int

    def valid_x(self, x: int) -> bool:
        return self.xmin <= x <= self.xmax

    def valid_y(self, y: int) -> bool:
        return self.ymin <= y <= self.ymax

    def candidate_small_times(self, x_velocity: int) -> list[int]:
        """Times before the probe stops at which its x coordinate is inside the area."""
        candidates = []
        position = 0
        time = 0
        while position < self.xmin and time < x_velocity:
            position += x_velocity - time
            time += 1
        while position <= self.xmax and time < x_velocity:
            candidates.append(time)
            position += x_velocity - time
            time += 1
        return candidates

    def candidate_y_velocity(self, time: int) -> list[int]:
        """y velocities that put the probe inside the area's y range at ``time``."""
        if time < 1:
            raise ValueError("time must be at least 1")
        velocity = _trunc_div(_trunc_div(2 * self.ymin, time) - 1 + time, 2)
        while y_pos(time, velocity) < self.ymin:
            velocity += 1
        candidates = []
        while y_pos(time, velocity) <= self.ymax:
            candidates.append(velocity)
            velocity += 1
        return candidates


def solve(x1: int, x2: int, y1: int, y2: int) -> tuple[int, int]:
    """Highest reachable y and the number of distinct launch velocities that hit the area."""
    if x1 < 1 or x2 < x1 or y1 > y2 or y2 >= 0:
        raise ValueError("the target must lie to the right of and below the launcher")
    target = Region(x1, x2, y1, y2)
    probes: set[tuple[int, int]] = set()
    for init_x in range(1, x2 + 1):
        times = list(target.candidate_small_times(init_x))
        if target.valid_x(max_pos(init_x)):
            times.extend(range(init_x, -2 * target.ymin + 1))
        for time in times:
            for y_velocity in target.candidate_y_velocity(time):
                probes.add((init_x, y_velocity))
    max_height = max((max_pos(y) for _, y in probes), default=0)
    return max(max_height, 0), len(probes)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("x1", nargs="?", type=int, default=119)
    parser.add_argument("x2", nargs="?", type=int, default=176)
    parser.add_argument("y1", nargs="?", type=int, default=-141)
    parser.add_argument("y2", nargs="?", type=int, default=-84)
    args = parser.parse_args(argv)
    try:
        height, count = solve(args.x1, args.x2, args.y1, args.y2)
    except ValueError as error:
        parser.error(str(error))
    print(f"The maximum possible height is {height}")
    print(f"There number of valid probes is {count}")
"""Amphipod burrow: find the least energy needed to sort every amphipod into its room."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from enum import Enum, auto

EMPTY = "."
HALL_SIZE = 7
ROOM_COUNT = 4


class MoveType(Enum):
    """Direction of a single amphipod move."""

    TO_HALL = auto()
    TO_ROOM = auto()


def _target(room_num: int) -> str:
    return chr(ord("A") + room_num)


def _left_of(room_num: int) -> range:
    return range(room_num + 1, -1, -1)


def _right_of(room_num: int) -> range:
    return range(room_num + 2, HALL_SIZE)


def _cost(kind: str, room_num: int, pos: int, hall_pos: int) -> int:
    scale = 10 ** (ord(kind) - ord("A"))
    distance = pos + 1
    if room_num + 1 >= hall_pos:
        distance += 2 * room_num - 2 * hall_pos + 3
        if hall_pos == 0:
            distance -= 1
    else:
        distance += 2 * hall_pos - 2 * room_num - 3
        if hall_pos == HALL_SIZE - 1:
            distance -= 1
    return scale * distance


@dataclass(frozen=True, order=True)
class Position:
    """A burrow state: the seven stopping squares of the hall, four rooms (top first) and the energy spent."""

    hall: tuple[str, ...]
    rooms: tuple[tuple[str, ...], ...]
    energy: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "hall", tuple(self.hall))
        object.__setattr__(self, "rooms", tuple(tuple(room) for room in self.rooms))
        if len(self.hall) != HALL_SIZE:
            raise ValueError(f"the hall must have {HALL_SIZE} spaces")
        if len(self.rooms) != ROOM_COUNT:
            raise ValueError(f"there must be {ROOM_COUNT} rooms")
        if len({len(room) for room in self.rooms}) != 1 or not self.rooms[0]:
            raise ValueError("all rooms must share the same non-zero depth")

    @property
    def depth(self) -> int:
        return len(self.rooms[0])

    def with_move(self, move_type: MoveType, room_num: int, hall_pos: int) -> Position:
        """Return the position after moving between a room and a hall space."""
        hall = list(self.hall)
        rooms = [list(room) for room in self.rooms]
        room = rooms[room_num]
        if move_type is MoveType.TO_HALL:
            pos = next((i for i, c in enumerate(room) if c != EMPTY), None)
            if pos is None:
                raise ValueError(f"room {room_num} is empty")
            if hall[hall_pos] != EMPTY:
                raise ValueError(f"hall space {hall_pos} is occupied")
            kind = room[pos]
            room[pos] = EMPTY
            hall[hall_pos] = kind
        else:
            free = [i for i, c in enumerate(room) if c == EMPTY]
            if not free:
                raise ValueError(f"room {room_num} is full")
            kind = hall[hall_pos]
            if kind == EMPTY:
                raise ValueError(f"hall space {hall_pos} is empty")
            pos = free[-1]
            hall[hall_pos] = EMPTY
            room[pos] = kind
        return Position(
            tuple(hall),
            tuple(tuple(r) for r in rooms),
            self.energy + _cost(kind, room_num, pos, hall_pos),
        )

    def is_done(self) -> bool:
        return all(
            all(c == _target(room_num) for c in room)
            for room_num, room in enumerate(self.rooms)
        )

    def _only_correct(self, room_num: int) -> bool:
        target = _target(room_num)
        return all(c in (EMPTY, target) for c in self.rooms[room_num])

    def _next_move_in(self) -> tuple[int, int] | None:
        for room_num in range(ROOM_COUNT):
            if not self._only_correct(room_num):
                continue
            target = _target(room_num)
            for path in (_left_of(room_num), _right_of(room_num)):
                for hall_pos in path:
                    occupant = self.hall[hall_pos]
                    if occupant == target:
                        return room_num, hall_pos
                    if occupant != EMPTY:
                        break
        return None

    def settle(self) -> Position:
        """Move amphipods from the hall into their rooms while any can go."""
        position = self
        while (move := position._next_move_in()) is not None:
            position = position.with_move(MoveType.TO_ROOM, *move)
        return position

    def moves_out(self) -> list[Position]:
        """All distinct settled positions reached by moving one amphipod out into the hall."""
        children: set[Position] = set()
        for room_num in range(ROOM_COUNT):
            if self._only_correct(room_num):
                continue
            for path in (_left_of(room_num), _right_of(room_num)):
                for hall_pos in path:
                    if self.hall[hall_pos] != EMPTY:
                        break
                    children.add(self.with_move(MoveType.TO_HALL, room_num, hall_pos).settle())
        return sorted(children)

    def render(self) -> str:
        h = self.hall
        lines = [
            f"Energy : {self.energy}",
            "#############",
            "#" + h[0] + h[1] + "".join("." + c for c in h[2:5]) + "." + h[5] + h[6] + "#",
            "##" + "".join("#" + room[0] for room in self.rooms) + "###",
        ]
        lines.extend(
            "  " + "".join("#" + room[level] for room in self.rooms) + "#"
            for level in range(1, self.depth)
        )
        lines.append("  #########  ")
        return "\n".join(lines) + "\n"


def default_position() -> Position:
    """The built-in puzzle input, four deep."""
    return Position(
        hall=(EMPTY,) * HALL_SIZE,
        rooms=(
            ("D", "D", "D", "C"),
            ("A", "C", "B", "A"),
            ("C", "B", "A", "B"),
            ("D", "A", "C", "B"),
        ),
    )


def minimal_energy(position: Position) -> int:
    """Least total energy with which the burrow can be sorted."""
    best: int | None = None
    seen: dict[tuple, int] = {}
    stack = [position]
    while stack:
        current = stack.pop().settle()
        if best is not None and current.energy > best:
            continue
        if current.is_done():
            best = current.energy if best is None else min(best, current.energy)
            continue
        key = (current.hall, current.rooms)
        if seen.get(key, current.energy + 1) <= current.energy:
            continue
        seen[key] = current.energy
        stack.extend(reversed(current.moves_out()))
    if best is None:
        raise ValueError("the burrow cannot be sorted")
    return best


def main(argv: list[str] | None = None) -> None:
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    print(minimal_energy(default_position()))
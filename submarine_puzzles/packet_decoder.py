"""Decode the hierarchical packets of the BITS transmission format."""

from __future__ import annotations

import argparse
import math
import sys
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum

HEADER_BITS = 6
LITERAL_TYPE = 4
_HEX_DIGITS = "0123456789ABCDEF"


class OperatorType(IntEnum):
    """Type ids of the operator packets."""

    SUM = 0
    PRODUCT = 1
    MINIMUM = 2
    MAXIMUM = 3
    GREATER = 5
    LESS = 6
    EQUAL = 7


def hex_to_bits(hex_input: str) -> list[int]:
    """Expand upper-case hexadecimal into a list of bits, four per digit."""
    bits: list[int] = []
    for char in hex_input:
        if char not in _HEX_DIGITS:
            raise ValueError(f"invalid hexadecimal digit {char!r}")
        bits.extend(int(bit) for bit in format(_HEX_DIGITS.index(char), "04b"))
    return bits


def integer_value(bits: Sequence[int], start: int, length: int) -> int:
    """Read ``length`` bits from ``start`` as an unsigned big-endian integer."""
    if start < 0 or length < 0 or start + length > len(bits):
        raise ValueError("the packet is truncated")
    value = 0
    for bit in bits[start : start + length]:
        value = (value << 1) | int(bit)
    return value


@dataclass(frozen=True)
class Packet(ABC):
    """A decoded packet; ``length`` is the number of bits it occupies."""

    version: int
    type_id: int
    length: int

    def version_sum(self) -> int:
        """Sum of the versions of this packet and every packet inside it."""
        return self.version

    @abstractmethod
    def value(self) -> int:
        """The value the packet evaluates to."""


@dataclass(frozen=True)
class Literal(Packet):
    """A packet carrying a single number."""

    literal: int

    def value(self) -> int:
        return self.literal


@dataclass(frozen=True)
class Operator(Packet):
    """A packet combining the values of its sub-packets."""

    subpackets: tuple[Packet, ...]

    def __post_init__(self) -> None:
        if self.type_id not in OperatorType.__members__.values():
            raise ValueError(f"{self.type_id} is not an operator type")

    def version_sum(self) -> int:
        return self.version + sum(packet.version_sum() for packet in self.subpackets)

    def value(self) -> int:
        values = [packet.value() for packet in self.subpackets]
        kind = OperatorType(self.type_id)
        if kind is OperatorType.SUM:
            return sum(values)
        if kind is OperatorType.PRODUCT:
            return math.prod(values)
        if not values:
            raise ValueError(f"{kind.name.lower()} packet has no sub-packets")
        if kind is OperatorType.MINIMUM:
            return min(values)
        if kind is OperatorType.MAXIMUM:
            return max(values)
        first, last = values[0], values[-1]
        if kind is OperatorType.GREATER:
            return int(first > last)
        if kind is OperatorType.LESS:
            return int(first < last)
        return int(first == last)


def _parse(bits: Sequence[int], start: int) -> Packet:
    version = integer_value(bits, start, 3)
    type_id = integer_value(bits, start + 3, 3)
    if type_id == LITERAL_TYPE:
        literal = 0
        cursor = start + HEADER_BITS
        while True:
            group = integer_value(bits, cursor, 5)
            literal = (literal << 4) | (group & 0xF)
            cursor += 5
            if not group & 0x10:
                break
        return Literal(version, type_id, cursor - start, literal)

    subpackets: list[Packet] = []
    if integer_value(bits, start + 6, 1) == 0:
        total = integer_value(bits, start + 7, 15)
        cursor = start + 22
        end = cursor + total
        while cursor < end:
            packet = _parse(bits, cursor)
            subpackets.append(packet)
            cursor += packet.length
    else:
        count = integer_value(bits, start + 7, 11)
        cursor = start + 18
        for _ in range(count):
            packet = _parse(bits, cursor)
            subpackets.append(packet)
            cursor += packet.length
    return Operator(version, type_id, cursor - start, tuple(subpackets))


def make_packet(bits: Sequence[int]) -> Packet:
    """Decode the packet that starts at the first bit; trailing bits are ignored."""
    return _parse(list(bits), 0)


def decode(hex_input: str) -> Packet:
    return make_packet(hex_to_bits(hex_input.strip()))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    args = parser.parse_args(argv)
    line = args.input.readline().strip()
    if not line:
        parser.error("no transmission given")
    packet = decode(line)
    print(f"The sum of versions is {packet.version_sum()}")
    print(f"The packet value is {packet.value()}")
import math

import pytest

from submarine_puzzles.packet_decoder import (
    Literal,
    Operator,
    decode,
    hex_to_bits,
    integer_value,
    make_packet,
)


def _bits(value, width):
    return [int(b) for b in format(value, f"0{width}b")]


def literal_bits(version, value):
    nibbles = [int(c, 16) for c in format(value, "x")]
    out = _bits(version, 3) + _bits(4, 3)
    for index, nibble in enumerate(nibbles):
        out += [1 if index < len(nibbles) - 1 else 0] + _bits(nibble, 4)
    return out


def operator_bits(version, type_id, subs, by_count=True):
    body = [bit for sub in subs for bit in sub]
    head = _bits(version, 3) + _bits(type_id, 3)
    if by_count:
        return head + [1] + _bits(len(subs), 11) + body
    return head + [0] + _bits(len(body), 15) + body


def to_hex(bits):
    padded = bits + [0] * (-len(bits) % 4)
    return format(int("".join(map(str, padded)), 2), "X").zfill(len(padded) // 4)


@pytest.mark.parametrize("text", ["0", "F", "D2FE28", "38006F45291200", "00FF"])
def test_hex_to_bits_round_trip(text):
    bits = hex_to_bits(text)
    assert len(bits) == 4 * len(text)
    assert integer_value(bits, 0, len(bits)) == int(text, 16)


def test_hex_to_bits_rejects_invalid_digit():
    with pytest.raises(ValueError):
        hex_to_bits("12G4")


def test_integer_value_out_of_range():
    with pytest.raises(ValueError):
        integer_value([1, 0, 1], 1, 5)


def test_literal_example():
    packet = decode("D2FE28")
    assert isinstance(packet, Literal)
    assert packet.value() == 2021


def test_version_sum_example():
    assert decode("8A004A801A8002F478").version_sum() == 16


def test_equal_of_sums_example():
    assert decode("9C0141080250320F1802104A08").value() == 1


@pytest.mark.parametrize("version,value", [(0, 0), (7, 15), (3, 16), (5, 123456789)])
def test_literal_round_trip(version, value):
    bits = literal_bits(version, value)
    packet = make_packet(bits)
    assert packet.value() == value
    assert packet.version == version
    assert packet.length == len(bits)


@pytest.mark.parametrize("by_count", [True, False])
def test_sum_operator(by_count):
    literals = [(1, 10), (2, 20), (6, 7)]
    bits = operator_bits(4, 0, [literal_bits(v, x) for v, x in literals], by_count)
    packet = make_packet(bits)
    assert isinstance(packet, Operator)
    assert packet.value() == sum(x for _, x in literals)
    assert packet.version_sum() == 4 + sum(v for v, _ in literals)
    assert packet.length == len(bits)


@pytest.mark.parametrize(
    "type_id,combine",
    [(1, math.prod), (2, min), (3, max)],
)
def test_reducing_operators(type_id, combine):
    values = [9, 3, 14, 5]
    packet = make_packet(operator_bits(0, type_id, [literal_bits(1, x) for x in values]))
    assert packet.value() == combine(values)


@pytest.mark.parametrize("a,b", [(5, 3), (3, 5), (4, 4)])
def test_comparison_operators(a, b):
    subs = [literal_bits(0, a), literal_bits(0, b)]
    assert make_packet(operator_bits(0, 5, subs)).value() == (a > b)
    assert make_packet(operator_bits(0, 6, subs, by_count=False)).value() == (a < b)
    assert make_packet(operator_bits(0, 7, subs)).value() == (a == b)


def test_nested_operators_via_hex():
    inner = operator_bits(2, 0, [literal_bits(1, 4), literal_bits(3, 6)], by_count=False)
    outer = operator_bits(5, 1, [inner, literal_bits(6, 3)])
    packet = decode(to_hex(outer))
    assert packet.value() == (4 + 6) * 3
    assert packet.version_sum() == 5 + 2 + 1 + 3 + 6


def test_trailing_bits_are_ignored():
    bits = operator_bits(1, 3, [literal_bits(0, 8), literal_bits(0, 2)])
    packet = make_packet(bits + [0] * 7)
    assert packet.length == len(bits)
    assert packet.value() == 8


def test_truncated_packet_raises():
    bits = literal_bits(1, 300)
    with pytest.raises(ValueError):
        make_packet(bits[:-3])


def test_minimum_without_subpackets_raises():
    packet = Operator(version=0, type_id=2, length=22, subpackets=())
    with pytest.raises(ValueError):
        packet.value()


def test_operator_rejects_literal_type():
    with pytest.raises(ValueError):
        Operator(version=0, type_id=4, length=22, subpackets=())
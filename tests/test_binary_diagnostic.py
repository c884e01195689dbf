import pytest

from submarine_puzzles.binary_diagnostic import (
    binary_diagnostic_one,
    binary_diagnostic_two,
    count_bits,
    generator_rating,
    power_consumption,
    scrubber_rating,
)

EXAMPLE = [
    "00100", "11110", "10110", "10111", "10101", "01111",
    "00111", "11100", "10000", "11001", "00010", "01010",
]


def _complement(line):
    return line.translate(str.maketrans("01", "10"))


def test_example_power_consumption():
    assert binary_diagnostic_one(EXAMPLE) == 198


def test_example_life_support():
    assert binary_diagnostic_two(EXAMPLE) == 230


def test_example_generator_rating():
    assert generator_rating(EXAMPLE) == 23


def test_complement_negates_counts():
    counts = count_bits(EXAMPLE)
    assert count_bits([_complement(line) for line in EXAMPLE]) == [-c for c in counts]
    assert len(counts) == 5


def test_power_consumption_symmetric():
    counts = count_bits(EXAMPLE)
    assert power_consumption(counts) == power_consumption([-c for c in counts])


def test_ratings_are_report_values():
    values = {int(line, 2) for line in EXAMPLE}
    assert generator_rating(EXAMPLE) in values
    assert scrubber_rating(EXAMPLE) in values


@pytest.mark.parametrize("line", ["101100111000", "000000000001"])
def test_single_line_rating(line):
    assert generator_rating([line]) == int(line, 2)
    assert scrubber_rating([line]) == int(line, 2)


def test_invalid_bit():
    with pytest.raises(ValueError):
        count_bits(["10a"])


def test_uneven_lines():
    with pytest.raises(ValueError):
        count_bits(["101", "10"])


def test_empty_report():
    with pytest.raises(ValueError):
        generator_rating([])


def test_duplicates_cannot_be_narrowed():
    with pytest.raises(ValueError):
        generator_rating(["101", "101"])
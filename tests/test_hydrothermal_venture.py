import pytest

from submarine_puzzles.hydrothermal_venture import (
    Line,
    count_overlaps,
    hydrothermal_venture_one,
    hydrothermal_venture_two,
    max_coords,
)

EXAMPLE = """0,9 -> 5,9
8,0 -> 0,8
9,4 -> 3,4
2,2 -> 2,1
7,0 -> 7,4
6,4 -> 2,0
0,9 -> 2,9
3,4 -> 1,4
0,0 -> 8,8
5,5 -> 8,2"""


def _lines():
    return [Line.parse(text) for text in EXAMPLE.splitlines()]


def test_example_part_one():
    assert hydrothermal_venture_one(_lines()) == 5


def test_example_part_two():
    assert hydrothermal_venture_two(_lines()) == 12


def test_parse():
    assert Line.parse("8,0 -> 0,8") == Line(8, 0, 0, 8)


def test_parse_rejects_garbage():
    with pytest.raises(ValueError):
        Line.parse("8,0 to 0,8")


def test_contains_diagonal_and_bounds():
    line = Line(0, 0, 4, 4)
    assert line.contains(2, 2)
    assert not line.contains(2, 3)
    assert not line.contains(5, 5)


def test_contains_only_lattice_points_on_steep_line():
    line = Line(0, 0, 2, 4)
    assert line.contains(1, 2)
    assert not line.contains(1, 1)


def test_axis_aligned():
    assert Line(2, 2, 2, 1).is_axis_aligned()
    assert Line(0, 9, 5, 9).is_axis_aligned()
    assert not Line(0, 0, 8, 8).is_axis_aligned()


def test_max_coords():
    assert max_coords(_lines()) == (9, 9)
    assert max_coords([]) == (0, 0)


def test_count_overlaps_with_cutoff_one_counts_covered_points():
    lines = [Line(0, 0, 3, 0), Line(1, 0, 1, 2)]
    covered = {(x, y) for x in range(4) for y in range(3) if any(l.contains(x, y) for l in lines)}
    assert count_overlaps(lines, 1) == len(covered)


def test_single_line_never_overlaps():
    assert count_overlaps([Line(0, 0, 5, 5)], 2) == 0


def test_invalid_cutoff():
    with pytest.raises(ValueError):
        count_overlaps(_lines(), 0)
import pytest

from submarine_puzzles.treachery_whales import CrabPos

EXAMPLE = [16, 1, 2, 0, 4, 2, 7, 1, 2, 14]


def test_part_one_example():
    assert CrabPos(True, EXAMPLE).fuel_needed() == 37


def test_part_two_example():
    assert CrabPos(False, EXAMPLE).fuel_needed() == 168


def test_part_one_is_fuel_at_median():
    crabs = CrabPos(True, EXAMPLE)
    assert crabs.fuel_needed() == crabs.fuel_to(2)


@pytest.mark.parametrize("part1", [True, False])
def test_fuel_needed_is_minimal_over_range(part1):
    crabs = CrabPos(part1, EXAMPLE)
    best = crabs.fuel_needed()
    assert all(best <= crabs.fuel_to(t) for t in range(min(EXAMPLE), max(EXAMPLE) + 1))
    assert best in {crabs.fuel_to(t) for t in range(min(EXAMPLE), max(EXAMPLE) + 1)}


def test_add_crab_builds_positions():
    crabs = CrabPos(True)
    for crab in (3, 8):
        crabs.add_crab(crab)
    assert crabs.positions == [3, 8]


@pytest.mark.parametrize("part1", [True, False])
def test_single_crab_costs_nothing(part1):
    assert CrabPos(part1, [7]).fuel_needed() == 0


def test_increasing_cost_rule():
    assert CrabPos(False, [0]).fuel_to(3) == 6


def test_constant_cost_rule_is_distance():
    assert CrabPos(True, [0, 10]).fuel_to(4) == 4 + 6


@pytest.mark.parametrize("part1", [True, False])
def test_no_crabs_raises(part1):
    with pytest.raises(ValueError):
        CrabPos(part1).fuel_needed()
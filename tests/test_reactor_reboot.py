import random

import pytest

from submarine_puzzles.reactor_reboot import Cuboid, Region, parse_instruction

EXAMPLE = [
    "on x=10..12,y=10..12,z=10..12",
    "on x=11..13,y=11..13,z=11..13",
    "off x=9..11,y=9..11,z=9..11",
    "on x=10..10,y=10..10,z=10..10",
]


def brute_force(instructions):
    lit = set()
    for on, c in instructions:
        cells = {
            (x, y, z)
            for x in range(c.minx, c.maxx + 1)
            for y in range(c.miny, c.maxy + 1)
            for z in range(c.minz, c.maxz + 1)
        }
        lit = lit | cells if on else lit - cells
    return len(lit)


def random_cuboid(rng):
    bounds = []
    for _ in range(3):
        a, b = sorted(rng.randint(-3, 3) for _ in range(2))
        bounds += [a, b]
    return Cuboid.construct(*bounds)


def test_small_example():
    region = Region()
    for line in EXAMPLE:
        region.add(*reversed(parse_instruction(line)))
    assert region.count_on() == 39


@pytest.mark.parametrize("seed", range(6))
def test_matches_brute_force(seed):
    rng = random.Random(seed)
    instructions = [(rng.random() < 0.6, random_cuboid(rng)) for _ in range(8)]
    region = Region()
    for on, cuboid in instructions:
        region.add(cuboid, on)
    assert region.count_on() == brute_force(instructions)


def test_size_of_cube():
    assert Cuboid.construct(-1, 1, -1, 1, -1, 1).size() == 27


def test_construct_rejects_empty():
    assert Cuboid.construct(0, 1, 2, 1, 0, 0) is None


def test_direct_constructor_rejects_reversed_bounds():
    with pytest.raises(ValueError):
        Cuboid(3, 2, 0, 0, 0, 0)


@pytest.mark.parametrize("seed", range(5))
def test_intersection_is_common_part(seed):
    rng = random.Random(100 + seed)
    a, b = random_cuboid(rng), random_cuboid(rng)
    both = a.intersect(b)
    assert both == b.intersect(a)
    common = brute_force([(True, a)]) + brute_force([(True, b)]) - brute_force(
        [(True, a), (True, b)]
    )
    assert (both.size() if both else 0) == common
    if both:
        for x, y, z in ((both.minx, both.miny, both.minz), (both.maxx, both.maxy, both.maxz)):
            assert a.contains(x, y, z) and b.contains(x, y, z)


def test_disjoint_cuboids_do_not_intersect():
    a = Cuboid(0, 1, 0, 1, 0, 1)
    b = Cuboid(2, 3, 0, 1, 0, 1)
    assert a.intersect(b) is None
    assert not a.intersects(b)


def test_contains_bounds():
    c = Cuboid(-2, 2, 0, 0, 5, 7)
    assert c.contains(-2, 0, 7)
    assert not c.contains(3, 0, 5)
    assert not c.contains(0, 1, 5)


def test_str_parse_round_trip():
    c = Cuboid(-5, 47, -31, 22, -19, 33)
    assert Cuboid.parse(str(c)) == c


def test_parse_instruction():
    on, cuboid = parse_instruction("off x=-54112..-39298,y=-85059..-49293,z=-27449..7877\n")
    assert on is False
    assert cuboid == Cuboid(-54112, -39298, -85059, -49293, -27449, 7877)


def test_parse_instruction_rejects_unknown_word():
    with pytest.raises(ValueError):
        parse_instruction("toggle x=1..2,y=1..2,z=1..2")


def test_parse_rejects_missing_axis():
    with pytest.raises(ValueError):
        Cuboid.parse("x=1..2,y=1..2")
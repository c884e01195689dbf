import pytest

from submarine_puzzles.dumbo_octopus import OctopusGrid, parse_grid

SMALL = "11111\n19991\n19191\n19991\n11111"


def test_small_example_first_step():
    grid = OctopusGrid(parse_grid(SMALL))
    assert grid.timestep() is False
    assert grid.render() == "34543\n40004\n50005\n40004\n34543"
    assert grid.flashes == 9
    assert grid.time == 1


def test_parse_and_render_round_trip():
    text = "5483143223\n2745854711\n5264556173"
    assert OctopusGrid(parse_grid(text)).render() == text


def test_uniform_grid_flashes_together():
    size = 3
    grid = OctopusGrid([[0] * size for _ in range(size)])
    results = [grid.timestep() for _ in range(FLASH_STEPS)]
    assert results[:-1] == [False] * (FLASH_STEPS - 1)
    assert results[-1] is True
    assert grid.flashes == size * size
    assert grid.time == FLASH_STEPS
    assert grid.grid == [[0] * size for _ in range(size)]


FLASH_STEPS = 10


def test_no_flash_only_increments():
    grid = OctopusGrid([[1, 2], [3, 4]])
    grid.timestep()
    assert grid.grid == [[2, 3], [4, 5]]
    assert grid.flashes == 0


def test_flashed_cells_reset_to_zero():
    grid = OctopusGrid([[9, 0], [0, 0]])
    grid.timestep()
    assert grid.grid[0][0] == 0
    assert grid.flashes == 1
    assert grid.grid[1][1] == 2


def test_invalid_character_rejected():
    with pytest.raises(ValueError):
        parse_grid("12a4\n1234")


def test_ragged_grid_rejected():
    with pytest.raises(ValueError):
        OctopusGrid([[1, 2, 3], [1, 2]])


def test_empty_grid_rejected():
    with pytest.raises(ValueError):
        OctopusGrid([])
import pytest

from submarine_puzzles.chiton import ChitonMap, enlarge_map, main, parse_grid

EXAMPLE = """\
1163751742
1381373672
2136511328
3694931569
7463417111
1319128137
1359912421
3125421639
1293138521
2311944581
"""

ENLARGED_ANSWER = 315


def test_example_path():
    assert ChitonMap(parse_grid(EXAMPLE)).optimal_path_length() == 40


def test_example_enlarged_path():
    grid = enlarge_map(parse_grid(EXAMPLE))
    assert ChitonMap(grid).optimal_path_length() == ENLARGED_ANSWER


def test_single_row_path_sums_risks():
    row = [3, 1, 4, 1, 5, 9, 2, 6]
    assert ChitonMap([row]).optimal_path_length() == sum(row[1:])


def test_enlarge_shape_and_first_tile():
    grid = parse_grid(EXAMPLE)
    big = enlarge_map(grid)
    assert len(big) == 50
    assert all(len(row) == 50 for row in big)
    assert [row[:10] for row in big[:10]] == grid


def test_parse_rejects_non_digits():
    with pytest.raises(ValueError):
        parse_grid("12x4\n")


def test_ragged_map_rejected():
    with pytest.raises(ValueError):
        ChitonMap([[1, 2], [3]])


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    main([str(path)])
    assert capsys.readouterr().out == f"The optimal path length is {ENLARGED_ANSWER}\n"
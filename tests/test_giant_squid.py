import pytest

from submarine_puzzles.giant_squid import (
    BingoBoard,
    giant_squid_one,
    giant_squid_two,
    parse_bingo,
)

EXAMPLE = """7,4,9,5,11,17,23,2,0,14,21,24,10,16,13,6,15,25,12,22,18,20,8,19,3,26,1

22 13 17 11  0
 8  2 23  4 24
21  9 14 16  7
 6 10  3 18  5
 1 12 20 15 19

 3 15  0  2 22
 9 18 13 17  5
19  8  7 25 23
20 11 10 24  4
14 21 16 12  6

14 21 17 24  4
10 16 15  9 19
18  8 23 26 20
22 11 13  6  5
 2  0 12  3  7
"""


def _grid():
    return [[r * 5 + c for c in range(5)] for r in range(5)]


def test_example_first_winner():
    calls, boards = parse_bingo(EXAMPLE)
    assert giant_squid_one(calls, boards) == 4512


def test_example_last_winner():
    calls, boards = parse_bingo(EXAMPLE)
    assert giant_squid_two(calls, boards) == 1924


def test_parse_reads_calls_and_boards():
    calls, boards = parse_bingo(EXAMPLE)
    assert calls[:3] == [7, 4, 9]
    assert len(boards) == 3
    assert boards[1].numbers[0] == [3, 15, 0, 2, 22]


def test_score_without_marks():
    board = BingoBoard(_grid())
    assert board.score(2) == sum(range(25)) * 2


def test_row_completes_bingo():
    board = BingoBoard(_grid())
    results = [board.call_num(n) for n in range(5, 10)]
    assert results == [False, False, False, False, True]
    assert board.score(9) == (sum(range(25)) - sum(range(5, 10))) * 9


def test_column_completes_bingo():
    board = BingoBoard(_grid())
    results = [board.call_num(n) for n in (2, 7, 12, 17, 22)]
    assert results[-1] is True
    assert not any(results[:-1])


def test_diagonal_is_not_bingo():
    board = BingoBoard(_grid())
    assert not any(board.call_num(n) for n in (0, 6, 12, 18, 24))


def test_missing_number_is_ignored():
    board = BingoBoard(_grid())
    assert board.call_num(99) is False
    assert board.marked == set()


def test_no_winner_raises():
    with pytest.raises(ValueError):
        giant_squid_one([100, 101], [BingoBoard(_grid())])


def test_incomplete_board_rejected():
    with pytest.raises(ValueError):
        parse_bingo("1,2,3\n\n1 2 3 4 5")


def test_wrong_board_shape_rejected():
    with pytest.raises(ValueError):
        BingoBoard([[1, 2, 3]])
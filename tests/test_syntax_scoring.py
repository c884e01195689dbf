import pytest

from submarine_puzzles.syntax_scoring import main, score_corrupted, score_incomplete


def test_corrupted_example_line():
    assert score_corrupted("{([(<{}[<>[]}>{[]{[(<()>") == 1197


@pytest.mark.parametrize(
    "line, expected",
    [("(]", 57), ("[)", 3), ("<}", 1197), ("(>", 25137)],
)
def test_corrupted_scores_per_character(line, expected):
    assert score_corrupted(line) == expected


def test_complete_line_scores_zero_both_ways():
    line = "()[]{}<>([{<>}])"
    assert score_corrupted(line) == 0
    assert score_incomplete(line) == 0


def test_incomplete_line_is_not_corrupted():
    assert score_corrupted("[({(<(())[]>[[{[]{<()<>>") == 0


@pytest.mark.parametrize("opener, expected", [("(", 1), ("[", 2), ("{", 3), ("<", 4)])
def test_single_open_chunk_completion(opener, expected):
    assert score_incomplete(opener) == expected


def test_completion_score_grows_with_open_chunks():
    assert score_incomplete("((") > score_incomplete("(")


def test_unmatched_closer_raises():
    with pytest.raises(ValueError):
        score_corrupted(")")


def test_main(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("(]\n<\n(\n[\n")
    main([str(path)])
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Part 1: 57"
    assert out[1] == f"Part 2: {score_incomplete('[')}"
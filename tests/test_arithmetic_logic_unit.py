import pytest

from submarine_puzzles.arithmetic_logic_unit import (
    BLOCKS,
    BlockInputs,
    check_valid,
    evaluate_block,
    main,
    model_digits,
    z_trace,
)


@pytest.mark.parametrize("number", [91897399498995, 51121176121391])
def test_known_numbers_are_valid(number):
    assert check_valid(number, BLOCKS) is True


def test_changed_last_digit_is_invalid():
    assert check_valid(91897399498996, BLOCKS) is False


def test_model_digits():
    assert model_digits(91897399498995) == [9, 1, 8, 9, 7, 3, 9, 9, 4, 9, 8, 9, 9, 5]


def test_model_digits_pads_short_numbers():
    digits = model_digits(42)
    assert len(digits) == 14
    assert digits[-2:] == [4, 2]
    assert set(digits[:-2]) == {0}


def test_model_digits_rejects_negative():
    with pytest.raises(ValueError):
        model_digits(-1)


def test_first_block_pushes_digit():
    assert evaluate_block(0, BlockInputs(False, 15, 4), 9) == 13


def test_matching_pop_block_clears_z():
    z = evaluate_block(0, BlockInputs(False, 15, 4), 9)
    assert evaluate_block(z, BlockInputs(True, -4, 7), z % 26 - 4) == 0


def test_trace_shape():
    trace = z_trace(51121176121391, BLOCKS)
    assert len(trace) == 14
    assert trace[-1] == 0
    assert all(z >= 0 for z in trace)


def test_main_output(capsys):
    main([])
    out = capsys.readouterr().out
    assert "91897399498995 -> 0" in out
    assert "51121176121391 -> 0" in out
    assert "Value of z in base 26 at each step, least significant first" in out
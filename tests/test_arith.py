import pytest

from funcsteps.arith import (
    INT_MAX,
    INT_MIN,
    IntRangeError,
    add,
    main,
    parse_int,
    sum_arguments,
)


def test_add_integers():
    assert add(3, 4) == 7


def test_add_floats_and_commutes():
    assert add(1.5, 2.25) == add(2.25, 1.5)
    assert isinstance(add(1.5, 2), float)


@pytest.mark.parametrize("text,expected", [("42", 42), ("-17", -17), ("+5", 5), ("0", 0)])
def test_parse_int_valid(text, expected):
    assert parse_int(text) == expected


@pytest.mark.parametrize("text", ["", "abc", " 1", "1 ", "1_000", "0x10", "1.5", "--1", "+"])
def test_parse_int_invalid_syntax(text):
    with pytest.raises(ValueError):
        parse_int(text)


def test_parse_int_bounds():
    assert parse_int(str(INT_MAX)) == INT_MAX
    assert parse_int(str(INT_MIN)) == INT_MIN


def test_parse_int_out_of_range():
    with pytest.raises(IntRangeError) as info:
        parse_int(str(INT_MAX + 1))
    assert info.value.clamped == INT_MAX
    with pytest.raises(IntRangeError) as info:
        parse_int(str(INT_MIN - 1))
    assert info.value.clamped == INT_MIN


def test_sum_arguments_ignores_bad_values():
    assert sum_arguments(["abc", "5", ""]) == 5


def test_sum_arguments_clamps_overflow():
    assert sum_arguments([str(INT_MAX + 10)]) == INT_MAX


def test_sum_arguments_empty():
    assert sum_arguments([]) == 0


def test_sum_arguments_matches_parsed_values():
    args = ["10", "-3", "8"]
    assert sum_arguments(args) == sum(parse_int(a) for a in args)


def test_main_sums_arguments():
    assert main(["3", "4"]) == add(3, 4)


def test_main_no_arguments():
    assert main([]) == 0
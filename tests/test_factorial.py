import io
import math

import pytest

from funcsteps.factorial import (
    UndefinedValue,
    catch,
    each,
    factorial,
    main,
    make_factorial,
    no_defined_value,
    print_factorial,
    print_result,
)


@pytest.mark.parametrize("n", range(0, 21))
def test_factorial_matches_exact_value_below_21(n):
    assert factorial(n) == math.factorial(n)


def test_factorial_of_zero_is_one():
    assert factorial(0) == 1


def test_factorial_wraps_beyond_64_bits():
    value = factorial(25)
    assert -(1 << 63) <= value < (1 << 63)
    assert value != math.factorial(25)
    assert (value - math.factorial(25)) % (1 << 64) == 0


def test_factorial_negative_raises_with_value():
    with pytest.raises(UndefinedValue) as info:
        factorial(-3)
    assert info.value.value == -3


@pytest.mark.parametrize("n", [0, 1, 5, 12, 20, 30, 70])
def test_make_factorial_agrees_with_factorial(n):
    f = make_factorial()
    assert f(n) == factorial(n)


def test_make_factorial_is_consistent_across_calls():
    f = make_factorial()
    high = f(15)
    assert f(10) == factorial(10)
    assert f(15) == high
    assert f(16) == factorial(16)


def test_make_factorial_negative_raises():
    f = make_factorial()
    with pytest.raises(UndefinedValue) as info:
        f(-1)
    assert info.value.value == -1


def test_each_visits_in_order():
    seen = []
    each(["a", "b", "c"], seen.append)
    assert seen == ["a", "b", "c"]


def test_catch_passes_undefined_value_to_handler():
    caught = []
    run = catch(caught.append)

    def fail():
        raise UndefinedValue("x")

    run(fail)
    assert caught == ["x"]


def test_catch_does_not_call_handler_on_success():
    caught = []
    done = []
    run = catch(caught.append)
    run(lambda: done.append(1))
    assert caught == [] and done == [1]


def test_catch_lets_other_errors_through():
    run = catch(lambda v: None)

    def fail():
        raise KeyError("k")

    with pytest.raises(KeyError):
        run(fail)


def test_no_defined_value_message():
    out = io.StringIO()
    no_defined_value("factorial", out)("abc")
    assert out.getvalue() == "no factorial defined for abc\n"


def test_print_factorial_writes_line():
    out = io.StringIO()
    print_factorial("6", out)()
    assert out.getvalue() == f"6! = {math.factorial(6)}\n"


@pytest.mark.parametrize("text", ["-2", "abc", "", "99999999999999999999"])
def test_print_factorial_rejects_bad_input(text):
    out = io.StringIO()
    with pytest.raises(UndefinedValue) as info:
        print_factorial(text, out)()
    assert info.value.value == text
    assert out.getvalue() == ""


def test_print_result_writes_line():
    out = io.StringIO()
    print_result("4", make_factorial(), out)()
    assert out.getvalue() == f"f(4) = {math.factorial(4)}\n"


def test_print_result_negative_reports_integer():
    out = io.StringIO()
    with pytest.raises(UndefinedValue) as info:
        print_result("-5", make_factorial(), out)()
    assert info.value.value == -5


def test_print_result_bad_text_reports_text():
    with pytest.raises(UndefinedValue) as info:
        print_result("x1", make_factorial(), io.StringIO())()
    assert info.value.value == "x1"


def test_main_reports_each_argument(capsys):
    status = main(["3", "oops", "-1", "0"])
    lines = capsys.readouterr().out.splitlines()
    assert status == 0
    assert lines == [
        f"f(3) = {math.factorial(3)}",
        "no factorial defined for oops",
        "no factorial defined for -1",
        "f(0) = 1",
    ]
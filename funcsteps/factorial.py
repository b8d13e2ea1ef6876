"""Factorials, with undefined inputs reported instead of aborting the run."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Sequence
from typing import Any, TextIO, TypeVar

from funcsteps.arith import INT_MIN, parse_int

T = TypeVar("T")

_MODULUS = 1 << 64


class UndefinedValue(Exception):
    """Raised when a function has no value defined for its argument."""

    def __init__(self, value: Any) -> None:
        super().__init__(value)
        self.value = value

    def __str__(self) -> str:
        return str(self.value)


def _wrap_int(value: int) -> int:
    """Reduce an integer to the signed 64-bit range, wrapping on overflow."""
    return (value - INT_MIN) % _MODULUS + INT_MIN


def factorial(n: int) -> int:
    """Return n! as a signed 64-bit integer.

    Results are exact only for n < 21; beyond that they wrap around.
    Raises UndefinedValue for negative n.
    """
    if n < 0:
        raise UndefinedValue(n)
    result = 1
    for k in range(2, n + 1):
        result = _wrap_int(result * k)
    return result


def make_factorial() -> Callable[[int], int]:
    """Return a factorial function that remembers every value it computes."""
    cache: dict[int, int] = {0: 1}

    def memo_factorial(n: int) -> int:
        if n < 0:
            raise UndefinedValue(n)
        pending = []
        k = n
        while cache.get(k, 0) == 0:
            pending.append(k)
            k -= 1
        result = cache[k]
        for k in reversed(pending):
            result = _wrap_int(k * result)
            cache[k] = result
        return cache[n]

    return memo_factorial


def each(items: Iterable[T], func: Callable[[T], Any]) -> None:
    """Call func on every item, in order."""
    for item in items:
        func(item)


def catch(handler: Callable[[Any], Any]) -> Callable[[Callable[[], Any]], None]:
    """Return a runner that calls a thunk and hands any undefined value to handler."""

    def run(thunk: Callable[[], Any]) -> None:
        try:
            thunk()
        except UndefinedValue as error:
            handler(error.value)

    return run


def no_defined_value(name: str, out: TextIO | None = None) -> Callable[[Any], None]:
    """Return a handler that reports that no value called name is defined."""

    def report(value: Any) -> None:
        stream = sys.stdout if out is None else out
        stream.write(f"no {name} defined for {value}\n")

    return report


def print_factorial(text: str, out: TextIO | None = None) -> Callable[[], None]:
    """Return a thunk that prints the factorial of the integer in text.

    The thunk raises UndefinedValue(text) when text is not a non-negative integer.
    """

    def show() -> None:
        try:
            x = parse_int(text)
        except ValueError:
            raise UndefinedValue(text) from None
        if x < 0:
            raise UndefinedValue(text)
        stream = sys.stdout if out is None else out
        stream.write(f"{x}! = {factorial(x)}\n")

    return show


def print_result(
    text: str, func: Callable[[int], Any], out: TextIO | None = None
) -> Callable[[], None]:
    """Return a thunk that prints func applied to the integer in text.

    The thunk raises UndefinedValue(text) when text is not an integer.
    """

    def show() -> None:
        try:
            x = parse_int(text)
        except ValueError:
            raise UndefinedValue(text) from None
        result = func(x)
        stream = sys.stdout if out is None else out
        stream.write(f"f({x}) = {result}\n")

    return show


def main(argv: Sequence[str] | None = None) -> int:
    """Print the factorial of each argument, reporting those that have none."""
    if argv is None:
        argv = sys.argv[1:]
    f = make_factorial()
    skip_undefined = catch(no_defined_value("factorial"))
    each(argv, lambda v: skip_undefined(print_result(v, f)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
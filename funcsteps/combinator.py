"""Factorial through a fixed-point combinator, with an optional memoising form."""

from __future__ import annotations

import sys
from collections.abc import Callable, Hashable, Sequence
from typing import Any, TextIO

from funcsteps.factorial import (
    UndefinedValue,
    _wrap_int,
    catch,
    each,
    no_defined_value,
    print_result,
)

Function = Callable[[Any], Any]
Transformer = Callable[[Function], Function]


class Recursor:
    """A function that, given a recursor, produces a function."""

    def __init__(self, func: Callable[[Recursor], Function]) -> None:
        self.func = func

    def __call__(self, other: Recursor) -> Function:
        return self.func(other)

    def apply(self, transformer: Transformer) -> Function:
        """Apply transformer to the function this recursor makes from itself."""
        return transformer(self(self))


def y(transformer: Transformer) -> Function:
    """Return the fixed point of transformer: a function that can call itself."""
    g = Recursor(lambda r: lambda x: r.apply(transformer)(x))
    return g(g)


def memo_y(transformer: Transformer, out: TextIO | None = None) -> Function:
    """Like y, but remember results and report each one as it is stored."""
    memo: dict[Hashable, Any] = {}

    def make(r: Recursor) -> Function:
        def call(x):
            if x in memo:
                return memo[x]
            value = r.apply(transformer)(x)
            memo[x] = value
            stream = sys.stdout if out is None else out
            stream.write(f"Y: setting m[{x}] = {value}\n")
            return value

        return call

    g = Recursor(make)
    return g(g)


def factorial_step(h: Function) -> Function:
    """One step of factorial, deferring the smaller case to h."""

    def step(n):
        if isinstance(n, bool) or not isinstance(n, int) or n < 0:
            raise UndefinedValue(n)
        if n > 1:
            return _wrap_int(n * h(n - 1))
        return 1

    return step


def main(argv: Sequence[str] | None = None) -> int:
    """Print the memoised factorial of each argument, reporting those that have none."""
    if argv is None:
        argv = sys.argv[1:]
    skip_undefined = catch(no_defined_value("factorial"))
    f = memo_y(factorial_step)
    each(argv, lambda v: skip_undefined(print_result(v, f)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
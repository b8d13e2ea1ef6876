"""A running-total accumulator that is called with each new value."""

from __future__ import annotations

import numbers
import sys
from collections.abc import Sequence

from funcsteps.arith import _lenient_int


class Accumulator:
    """Keeps a running total; calling it adds a value and returns the total."""

    def __init__(self, *args) -> None:
        self._total = 0
        for value in args:
            self.add(value)

    def __call__(self, x):
        """Add x to the total and return the new total."""
        self._total += x
        return self._total

    def add(self, x) -> Accumulator:
        """Add a number, or anything convertible with int(); ignore the rest.

        Returns the accumulator so that calls can be chained.
        """
        if isinstance(x, numbers.Real) and not isinstance(x, Accumulator):
            self(x)
        elif hasattr(type(x), "__int__"):
            self(int(x))
        return self

    def __int__(self) -> int:
        return int(self(0))

    def __repr__(self) -> str:
        return f"Accumulator({self._total!r})"


def make_accumulator(*args) -> Accumulator:
    """Return an accumulator that already holds the sum of the given values."""
    return Accumulator(*args)


def main(argv: Sequence[str] | None = None) -> int:
    """Accumulate the integer arguments and return the total as the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    return int(make_accumulator(*(_lenient_int(v) for v in argv)))


if __name__ == "__main__":
    sys.exit(main())
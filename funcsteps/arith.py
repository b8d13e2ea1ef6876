"""Adding numbers and summing integer command-line arguments."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Sequence

INT_MIN = -(1 << 63)
INT_MAX = (1 << 63) - 1

_DECIMAL = re.compile(r"[+-]?[0-9]+")


class IntRangeError(ValueError):
    """A well-formed integer that does not fit in a signed 64-bit int."""

    def __init__(self, text: str, clamped: int) -> None:
        super().__init__(f"value out of range: {text!r}")
        self.text = text
        self.clamped = clamped


def add(x, y):
    """Return the sum of two numbers."""
    return x + y


def parse_int(text: str) -> int:
    """Parse a signed decimal integer that fits in 64 bits.

    Only an optional sign followed by ASCII digits is accepted. Raises
    ValueError for anything else and IntRangeError (a ValueError) when the
    value is out of range.
    """
    if not _DECIMAL.fullmatch(text):
        raise ValueError(f"invalid syntax: {text!r}")
    value = int(text)
    if value > INT_MAX:
        raise IntRangeError(text, INT_MAX)
    if value < INT_MIN:
        raise IntRangeError(text, INT_MIN)
    return value


def _lenient_int(text: str) -> int:
    """Parse like parse_int, giving 0 for bad syntax and the bound on overflow."""
    try:
        return parse_int(text)
    except IntRangeError as error:
        return error.clamped
    except ValueError:
        return 0


def sum_arguments(args: Iterable[str]) -> int:
    """Sum the integer values of the given strings, counting bad ones as zero."""
    total = 0
    for text in args:
        total = add(total, _lenient_int(text))
    return total


def main(argv: Sequence[str] | None = None) -> int:
    """Return the sum of the arguments as the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    return sum_arguments(argv)


if __name__ == "__main__":
    sys.exit(main())
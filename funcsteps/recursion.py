"""Unbounded and bounded recursion."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from funcsteps.arith import parse_int


def recurse_forever() -> None:
    """Call itself without end; raises RecursionError when the stack gives out."""
    recurse_forever()


def recurse_safely() -> int:
    """Recurse without end, recover from running out of stack, return the depth reached."""
    deepest = 0

    def descend(depth: int) -> None:
        nonlocal deepest
        deepest = depth
        descend(depth + 1)

    try:
        descend(1)
    except RecursionError:
        pass
    return deepest


def count_down(limit: int) -> int:
    """Recurse once per step until limit is used up; return the number of calls.

    At least one call is always made. Raises RecursionError when limit is
    deeper than the interpreter allows.
    """

    def step(remaining: int) -> int:
        remaining -= 1
        if remaining > 0:
            return 1 + step(remaining)
        return 1

    return step(limit)


def main(argv: Sequence[str] | None = None) -> int:
    """Count down from the first argument; exit status 1 when it is missing or bad."""
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        return 1
    try:
        limit = parse_int(argv[0])
    except ValueError:
        return 1
    count_down(limit)
    return 0


if __name__ == "__main__":
    sys.exit(main())
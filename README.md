# funcsteps

Small, self-contained building blocks for working with functions in
Python: adding numbers, running accumulators, bounded and guarded
recursion, factorials with and without memoisation, and a fixed-point
(Y) combinator. It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

### Arithmetic (`funcsteps.arith`)

```python
from funcsteps.arith import add, parse_int, sum_arguments

add(3, 4)                          # 7
parse_int("12")                    # 12
parse_int("x")                     # raises ValueError
sum_arguments(["1", "2", "x"])     # 3: text that is not an integer counts as 0
```

`parse_int` accepts an optional sign followed by ASCII digits, and only
values that fit in a signed 64-bit integer. Out-of-range values raise
`IntRangeError`, a subclass of `ValueError`. `sum_arguments` counts
malformed text as 0 and out-of-range values as the nearest 64-bit bound.

### Accumulators (`funcsteps.accumulator`)

An `Accumulator` keeps a running total. Calling it adds a value and
returns the new total. `add` accepts numbers or anything convertible
with `int()`, including another accumulator, ignores anything else, and
returns the accumulator so calls can be chained.

```python
from funcsteps.accumulator import Accumulator, make_accumulator

acc = make_accumulator(1, 2, 3)
acc(4)                              # 10
acc.add(5).add(Accumulator(6))
int(acc)                            # 21
```

### Recursion (`funcsteps.recursion`)

```python
from funcsteps.recursion import count_down, recurse_forever, recurse_safely

count_down(100)      # 100: one call per step, always at least one
recurse_safely()     # recurses until the interpreter refuses, returns the depth reached
recurse_forever()    # raises RecursionError
```

`count_down` raises `RecursionError` when the limit is deeper than the
interpreter's recursion limit allows.

### Factorials (`funcsteps.factorial`)

`factorial` raises `UndefinedValue` for negative input. Results are
exact for `n < 21`; beyond that they wrap around as signed 64-bit
integers. `make_factorial` returns a factorial function that caches its
results.

```python
import sys
from funcsteps.factorial import (
    UndefinedValue, catch, each, factorial, make_factorial,
    no_defined_value, print_factorial, print_result,
)

factorial(5)                        # 120
fact = make_factorial()
fact(20)                            # 2432902008176640000

skip_undefined = catch(no_defined_value("factorial", sys.stdout))
each(["3", "-1", "abc"], lambda v: skip_undefined(print_factorial(v, sys.stdout)))
# 3! = 6
# no factorial defined for -1
# no factorial defined for abc
```

`catch(handler)` returns a runner that calls a zero-argument function and
passes the value of any `UndefinedValue` it raises to `handler`.
`print_result(text, func, out)` returns such a function, printing
`f(x) = ...` for the integer in `text`. Output goes to `sys.stdout` when
no stream is given.

### Fixed-point combinator (`funcsteps.combinator`)

`y` turns a one-step definition into a recursive function; `memo_y`
does the same while caching results and writing a line for each new
entry. `factorial_step` is a one-step factorial definition; `Recursor`
is the self-applying building block both combinators use.

```python
import sys
from funcsteps.combinator import factorial_step, memo_y, y

fact = y(factorial_step)
fact(6)                             # 720

memo_fact = memo_y(factorial_step, sys.stdout)
memo_fact(3)
# Y: setting m[1] = 1
# Y: setting m[2] = 2
# Y: setting m[3] = 6
```

## Commands

Each command takes its inputs as arguments.

- `funcsteps-add 1 2 3` — adds the integer arguments and exits with the
  sum as its status.
- `funcsteps-accumulate 1 2 3` — feeds the arguments into an
  accumulator and exits with the total as its status.
- `funcsteps-recurse 100` — recurses the given number of times and exits
  with status 0; exits with status 1 if the limit is missing or is not
  an integer.
- `funcsteps-factorial 0 5 -2` — prints `f(n) = n!` for each argument
  using the caching factorial, and `no factorial defined for ...` for
  arguments that have none.
- `funcsteps-combinator 0 5 -2` — the same, computed through `memo_y`,
  which also prints a `Y: setting ...` line for each newly cached value.

## Limitations

- The operating system keeps only the low bits of an exit status, so
  `funcsteps-add` and `funcsteps-accumulate` report large or negative
  sums modulo 256 on most systems.
- Recursion depth is bounded by the interpreter's recursion limit;
  `funcsteps-recurse` fails with `RecursionError` for limits beyond it.
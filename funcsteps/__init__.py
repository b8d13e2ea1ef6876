"""Small functional-programming building blocks: accumulators, recursion, factorials and a Y combinator."""

__version__ = "0.1.0"
__all__ = ["accumulator", "arith", "combinator", "factorial", "recursion"]
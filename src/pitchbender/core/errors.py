"""
Exceptions raised by the interval primitives.
"""


class ParseError(ValueError):
    """Text is not a valid number, ratio, integer or Scala file."""


class UndefinedIntervalError(ArithmeticError):
    """
    The requested interval has no finite value.

    Raised for zero denominators, logarithms of non-positive decimals and
    non-finite input to the rational approximation.
    """

"""
Interval primitives - conversions between ratios, decimals and cents.

An interval can be written three ways:
- as a whole-number ratio string ("3/2")
- as a decimal multiplier (1.5)
- in cents, a logarithmic measure with 1200 cents to the octave (701.955)

All functions are pure.
"""

from __future__ import annotations

import math

from pitchbender.constants import (
    CENTS_PER_OCTAVE,
    MAX_CONTINUED_FRACTION_TERMS,
    RATIO_SEPARATOR,
    RATIO_TOLERANCE,
    ErrorMessages,
)
from pitchbender.core.errors import ParseError, UndefinedIntervalError


def parse_number(text: str) -> float:
    """Parse a float, raising ParseError instead of ValueError."""
    try:
        return float(text)
    except ValueError:
        raise ParseError(ErrorMessages.NOT_A_NUMBER.format(text=text)) from None


def is_ratio(text: str) -> bool:
    """True if the text is written as a ratio ("3/2")."""
    return RATIO_SEPARATOR in text


def convert_decimal_to_ratio(decimal: float) -> str:
    """
    Approximate a decimal by a low-denominator fraction.

    Uses the continued-fraction expansion of the decimal and stops at the
    first convergent within RATIO_TOLERANCE (relative) of the input.
    Negative input yields a negated ratio; integers come back over 1.

        convert_decimal_to_ratio(1.5)      -> "3/2"
        convert_decimal_to_ratio(1.25)     -> "5/4"
        convert_decimal_to_ratio(-0.75)    -> "-3/4"
        convert_decimal_to_ratio(2.0)      -> "2/1"

    Raises:
        UndefinedIntervalError: If the decimal is infinite or NaN
    """
    if not math.isfinite(decimal):
        raise UndefinedIntervalError(ErrorMessages.NON_FINITE_DECIMAL.format(value=decimal))

    if decimal < 0:
        return "-" + convert_decimal_to_ratio(-decimal)

    if decimal == math.floor(decimal):
        return f"{int(decimal)}/1"

    m1, m2 = 1.0, 0.0
    n1, n2 = 0.0, 1.0
    b = decimal
    for _ in range(MAX_CONTINUED_FRACTION_TERMS):
        a = math.floor(b)
        m1, m2 = a * m1 + m2, m1
        n1, n2 = a * n1 + n2, n1
        if abs(decimal - m1 / n1) <= decimal * RATIO_TOLERANCE:
            break
        remainder = b - a
        if remainder == 0:
            # Expansion terminated: m1/n1 is exact
            break
        b = 1 / remainder
        if not math.isfinite(b):
            # Remainder too small to invert; m1/n1 is as close as floats get
            break

    return f"{int(m1)}/{int(n1)}"


def convert_ratio_to_decimal(ratio: str) -> float:
    """
    Convert a ratio string ("3/2") or a plain number ("1.5") to a decimal.

    Raises:
        ParseError: If either side of the ratio is not a number
        UndefinedIntervalError: If the denominator is zero or the value is
            infinite or NaN ("inf/1", "1/nan", "1e308/1e-308")
    """
    if not is_ratio(ratio):
        decimal = parse_number(ratio)
    else:
        parts = ratio.split(RATIO_SEPARATOR)
        if len(parts) != 2:
            raise ParseError(ErrorMessages.NOT_A_RATIO.format(text=ratio))

        numerator = parse_number(parts[0])
        denominator = parse_number(parts[1])
        if denominator == 0:
            raise UndefinedIntervalError(ErrorMessages.ZERO_DENOMINATOR.format(text=ratio))
        decimal = numerator / denominator

    if not math.isfinite(decimal):
        raise UndefinedIntervalError(ErrorMessages.NON_FINITE_RATIO.format(text=ratio))
    return decimal


def convert_decimal_to_cents(decimal: float) -> float:
    """
    Size of a decimal interval in cents: 1200 * log2(decimal).

    Raises:
        UndefinedIntervalError: If the decimal is not positive
    """
    if not decimal > 0:
        raise UndefinedIntervalError(ErrorMessages.NON_POSITIVE_INTERVAL.format(value=decimal))
    return CENTS_PER_OCTAVE * math.log2(decimal)


def convert_ratio_to_cents(ratio: str) -> float:
    """
    Size of a ratio in cents.

        convert_ratio_to_cents("2/1") -> 1200.0
        convert_ratio_to_cents("3/2") -> 701.955...
    """
    return convert_decimal_to_cents(convert_ratio_to_decimal(ratio))


def convert_cents_to_decimal(cents: float) -> float:
    """
    Decimal multiplier for an interval in cents: 2 ** (cents / 1200).

    Never raises: results beyond the float range come back as math.inf,
    and tiny ones underflow to 0.0.
    """
    try:
        return float(2.0 ** (cents / CENTS_PER_OCTAVE))
    except OverflowError:
        return math.inf


def convert_cents_to_ratio(cents: float) -> str:
    """Nearest low-denominator ratio for an interval in cents."""
    return convert_decimal_to_ratio(convert_cents_to_decimal(cents))


def interval_between(low_hz: float, high_hz: float) -> float:
    """
    Decimal interval from one frequency to another.

    interval_between(440.0, 660.0) -> 1.5

    Raises:
        UndefinedIntervalError: If either frequency is not positive
    """
    for frequency in (low_hz, high_hz):
        if not frequency > 0:
            raise UndefinedIntervalError(
                ErrorMessages.NON_POSITIVE_INTERVAL.format(value=frequency)
            )
    return high_hz / low_hz

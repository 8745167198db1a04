"""
Scala (.scl) interval lines.

A Scala interval line holds one interval, either in cents (contains a ".")
or as a ratio (contains a "/"), optionally followed by a "!" comment or by
free text after a space:

    700.0 ! perfect fifth
    5/4   major third
    3/2!fifth
"""

from __future__ import annotations

from pitchbender.constants import CENTS_MARKER, SCALA_COMMENT
from pitchbender.core.intervals import (
    convert_cents_to_decimal,
    convert_ratio_to_decimal,
    is_ratio,
    parse_number,
)


def scala_token(line: str) -> str:
    """Strip a Scala line down to its interval token."""
    line = line.strip()
    if " " in line:
        return line[: line.index(" ")]
    if SCALA_COMMENT in line:
        return line[: line.index(SCALA_COMMENT)]
    return line


def is_cents(token: str) -> bool:
    """True if a Scala interval token is written in cents."""
    return CENTS_MARKER in token


def parse_decimal_from_scala_line(line: str) -> float | None:
    """
    Parse the decimal value of a Scala interval line.

    Cents take precedence over ratios. A line with neither (blank, a bare
    integer, a comment) yields None rather than a zero interval.

    Raises:
        ParseError: If the token looks like cents or a ratio but isn't numeric
    """
    token = scala_token(line)

    if is_cents(token):
        return convert_cents_to_decimal(parse_number(token))
    if is_ratio(token):
        return convert_ratio_to_decimal(token)
    return None

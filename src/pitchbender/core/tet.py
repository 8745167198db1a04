"""
Equal-temperament primitives.

An n-TET system divides the octave into n equal steps. Systems are named by
their division count ("12", "19", "31") and a list of systems is written
comma-separated ("12,19,31").
"""

from __future__ import annotations

import math
import re

from pitchbender.constants import (
    A0_FREQUENCY,
    CENTS_PER_OCTAVE,
    SEMITONES_PER_OCTAVE,
    ErrorMessages,
)
from pitchbender.core.errors import ParseError
from pitchbender.core.intervals import convert_cents_to_decimal

_INTEGER_RE = re.compile(r"-?[0-9]+")


def is_integer(text: str) -> bool:
    """
    True if the text is an optionally negative run of ASCII digits.

    Surrounding whitespace is ignored. "-" alone, decimals and the empty
    string are rejected.
    """
    return _INTEGER_RE.fullmatch(text.strip()) is not None


def _parse_int(text: str) -> int:
    if not is_integer(text):
        raise ParseError(ErrorMessages.NOT_AN_INTEGER.format(text=text))
    return int(text)


def parse_tet(text: str) -> list[int]:
    """
    Parse one or more comma-separated division counts.

        parse_tet("12")        -> [12]
        parse_tet("12,19,31")  -> [12, 19, 31]

    Raises:
        ParseError: If any part is not an integer
    """
    return [_parse_int(part) for part in text.split(",")]


def tet_step_cents(divisions: int) -> float:
    """Size in cents of one step of an n-TET system."""
    if divisions <= 0:
        raise ValueError(f"Divisions must be positive, got {divisions}")
    return CENTS_PER_OCTAVE / divisions


def build_tet_frequencies(
    divisions: int = SEMITONES_PER_OCTAVE,
    reference_hz: float = A0_FREQUENCY,
    count: int = 88,
) -> tuple[float, ...]:
    """
    Build an ascending n-TET frequency table.

    Entry k is reference_hz * 2 ** (k / divisions). With the defaults this
    reproduces the 88-key 12-TET table from A0.

    Args:
        divisions: Steps per octave
        reference_hz: Frequency of the first entry
        count: Number of entries

    Returns:
        Tuple of frequencies in Hz
    """
    if divisions <= 0:
        raise ValueError(f"Divisions must be positive, got {divisions}")
    if count < 1:
        raise ValueError(f"Count must be at least 1, got {count}")
    if not (reference_hz > 0 and math.isfinite(reference_hz)):
        raise ValueError(f"Reference frequency must be positive, got {reference_hz}")

    step = tet_step_cents(divisions)
    table = tuple(reference_hz * convert_cents_to_decimal(k * step) for k in range(count))
    if not math.isfinite(table[-1]):
        raise ValueError(f"{count} steps of {divisions}-TET from {reference_hz} Hz overflow")
    return table

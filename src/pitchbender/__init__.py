"""
Pitchbender - interval and pitch-class utilities.

Converts musical intervals between whole-number ratios, decimals and cents,
parses Scala (.scl) scales, and names the 12-TET pitch class of a detected
frequency.
"""

from pitchbender.constants import NO_PITCH_DETECTED, NOTES, NOTES_FLAT, PITCH_FREQUENCIES_12TET
from pitchbender.core import (
    FrequencyAverager,
    ParseError,
    PitchClass,
    UndefinedIntervalError,
    build_tet_frequencies,
    convert_cents_to_decimal,
    convert_cents_to_ratio,
    convert_decimal_to_cents,
    convert_decimal_to_ratio,
    convert_ratio_to_cents,
    convert_ratio_to_decimal,
    find_frequency_index,
    interval_between,
    is_integer,
    is_ratio,
    parse_decimal_from_scala_line,
    parse_pitch_class_from_frequency,
    parse_tet,
    tet_step_cents,
)

__version__ = "0.1.0"

__all__ = [
    "NO_PITCH_DETECTED",
    "NOTES",
    "NOTES_FLAT",
    "PITCH_FREQUENCIES_12TET",
    "FrequencyAverager",
    "ParseError",
    "PitchClass",
    "UndefinedIntervalError",
    "build_tet_frequencies",
    "convert_cents_to_decimal",
    "convert_cents_to_ratio",
    "convert_decimal_to_cents",
    "convert_decimal_to_ratio",
    "convert_ratio_to_cents",
    "convert_ratio_to_decimal",
    "find_frequency_index",
    "interval_between",
    "is_integer",
    "is_ratio",
    "parse_decimal_from_scala_line",
    "parse_pitch_class_from_frequency",
    "parse_tet",
    "tet_step_cents",
]

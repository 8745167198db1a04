"""
Core interval primitives.

Pure functions over the three ways of writing an interval and over
frequency tables:
- intervals: ratio <-> decimal <-> cents conversions
- scala: Scala (.scl) interval-line parsing
- pitch: PitchClass and frequency-to-pitch-class classification
- tet: integer validation, n-TET lists and tables
- tracking: averaging a stream of detector samples
"""

from pitchbender.core.errors import ParseError, UndefinedIntervalError
from pitchbender.core.intervals import (
    convert_cents_to_decimal,
    convert_cents_to_ratio,
    convert_decimal_to_cents,
    convert_decimal_to_ratio,
    convert_ratio_to_cents,
    convert_ratio_to_decimal,
    interval_between,
    is_ratio,
)
from pitchbender.core.pitch import (
    PitchClass,
    find_frequency_index,
    parse_pitch_class_from_frequency,
)
from pitchbender.core.scala import parse_decimal_from_scala_line
from pitchbender.core.tet import build_tet_frequencies, is_integer, parse_tet, tet_step_cents
from pitchbender.core.tracking import FrequencyAverager

__all__ = [
    # Errors
    "ParseError",
    "UndefinedIntervalError",
    # Intervals
    "convert_decimal_to_ratio",
    "convert_ratio_to_decimal",
    "is_ratio",
    "convert_ratio_to_cents",
    "convert_cents_to_decimal",
    "convert_decimal_to_cents",
    "convert_cents_to_ratio",
    "interval_between",
    # Scala
    "parse_decimal_from_scala_line",
    # Pitch
    "PitchClass",
    "find_frequency_index",
    "parse_pitch_class_from_frequency",
    # TET
    "is_integer",
    "parse_tet",
    "tet_step_cents",
    "build_tet_frequencies",
    # Tracking
    "FrequencyAverager",
]

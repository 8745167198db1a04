"""
Pitch primitives - PitchClass and frequency classification.

PitchClass represents the 12 chromatic pitches (octave-independent).
Classification maps a frequency in Hz onto an ascending frequency table and
folds the table index onto the 12 pitch classes.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from enum import IntEnum

from pitchbender.constants import (
    FLAT,
    NOTES,
    NOTES_FLAT,
    PITCH_FREQUENCIES_12TET,
    SEMITONES_PER_OCTAVE,
    SHARP,
)

# Table index 0 is A, which is PitchClass 9
_TABLE_OFFSET = 9


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C♯ == D♭ == 1).
    """

    C = 0
    Cs = 1  # C♯ / D♭
    D = 2
    Ds = 3  # D♯ / E♭
    E = 4
    F = 5
    Fs = 6  # F♯ / G♭
    G = 7
    Gs = 8  # G♯ / A♭
    A = 9
    As = 10  # A♯ / B♭
    B = 11

    @classmethod
    def from_table_index(cls, index: int) -> PitchClass:
        """Pitch class of an index into a table that starts at A."""
        return cls((index + _TABLE_OFFSET) % SEMITONES_PER_OCTAVE)

    def table_index(self) -> int:
        """Position of this pitch class in NOTES (A = 0)."""
        return (self.value - _TABLE_OFFSET) % SEMITONES_PER_OCTAVE

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name."""
        names = NOTES_FLAT if prefer_flats else NOTES
        return names[self.table_index()]

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """Parse a pitch class from a string like 'C', 'C#', 'Db', 'D♭' or 'Cs'."""
        name = name.strip()

        # ASCII accidentals: '#' anywhere, 'b' only as a suffix
        spelled = name.replace("#", SHARP)
        if len(spelled) > 1 and spelled.endswith("b"):
            spelled = spelled[:-1] + FLAT

        if spelled in NOTES:
            return cls.from_table_index(NOTES.index(spelled))
        if spelled in NOTES_FLAT:
            return cls.from_table_index(NOTES_FLAT.index(spelled))

        # Try enum names (C, Cs, D, Ds, etc.)
        name_upper = name.upper()
        for member in cls:
            if member.name.upper() == name_upper:
                return member

        raise ValueError(f"Unknown pitch class: {name}")


def find_frequency_index(
    frequency_hz: float,
    frequency_table: Sequence[float] = PITCH_FREQUENCIES_12TET,
) -> int | None:
    """
    Find j such that table[j] <= frequency < table[j + 1].

    Returns None below the first entry, at or above the last entry, and for
    tables with fewer than two entries.
    """
    if math.isnan(frequency_hz):
        return None
    for j in range(len(frequency_table) - 1):
        if frequency_table[j] <= frequency_hz < frequency_table[j + 1]:
            return j
    return None


def parse_pitch_class_from_frequency(
    frequency_hz: float,
    frequency_table: Sequence[float] = PITCH_FREQUENCIES_12TET,
    *,
    prefer_flats: bool = False,
) -> str | None:
    """
    Name the pitch class a frequency falls in.

    The table is scanned for the half-open band [table[j], table[j + 1])
    holding the frequency; the band index is folded onto the note names
    with j % 12, so the table must start at A.

        parse_pitch_class_from_frequency(440.0)  -> "A"
        parse_pitch_class_from_frequency(450.0)  -> "A"
        parse_pitch_class_from_frequency(470.0)  -> "A♯"
        parse_pitch_class_from_frequency(10.0)   -> None

    Args:
        frequency_hz: Detected fundamental in Hz
        frequency_table: Ascending frequencies, index 0 being an A
        prefer_flats: Spell accidentals as flats

    Returns:
        The pitch-class name, or None when no pitch was detected
    """
    index = find_frequency_index(frequency_hz, frequency_table)
    if index is None:
        return None
    names = NOTES_FLAT if prefer_flats else NOTES
    return names[index % SEMITONES_PER_OCTAVE]

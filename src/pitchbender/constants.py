"""
Constants for the interval and pitch system.

All tables are module-level tuples.
"""

# Enharmonic symbols
FLAT = "♭"
SHARP = "♯"

# Ratio strings look like "3/2"
RATIO_SEPARATOR = "/"

# Scala interval lines: "." marks cents, "!" starts a comment
CENTS_MARKER = "."
SCALA_COMMENT = "!"

CENTS_PER_OCTAVE = 1200.0
SEMITONES_PER_OCTAVE = 12

# Relative error allowed when approximating a decimal by a fraction
RATIO_TOLERANCE = 1.0e-6
MAX_CONTINUED_FRACTION_TERMS = 64

A4_FREQUENCY = 440.0
A0_FREQUENCY = 27.5

# Number of detector samples averaged before classifying
DEFAULT_COLLECTION_LIMIT = 50

# Display string for frequencies outside the classification table
NO_PITCH_DETECTED = "No pitch detected"

# 12-TET frequencies in Hz, A0 (27.5) through C8, with A4 = 440 Hz
PITCH_FREQUENCIES_12TET: tuple[float, ...] = (
    27.5000, 29.1352, 30.8677, 32.7032, 34.6478, 36.7081, 38.8909, 41.2034, 43.6535,
    46.2493, 48.9994, 51.9131, 55.0000, 58.2705, 61.7354, 65.4064, 69.2957, 73.4162,
    77.7817, 82.4069, 87.3071, 92.4986, 97.9989, 103.826, 110.000, 116.541, 123.471,
    130.813, 138.591, 146.832, 155.563, 164.814, 174.614, 184.997, 195.998, 207.652,
    220.000, 233.082, 246.942, 261.626, 277.183, 293.665, 311.127, 329.628, 349.228,
    369.994, 391.995, 415.305, 440.000, 466.164, 493.883, 523.251, 554.365, 587.330,
    622.254, 659.255, 698.456, 739.989, 783.991, 830.609, 880.000, 932.328, 987.767,
    1046.50, 1108.73, 1174.66, 1244.51, 1318.51, 1396.91, 1479.98, 1567.98, 1661.22,
    1760.00, 1864.66, 1975.53, 2093.00, 2217.46, 2349.32, 2489.02, 2637.02, 2793.83,
    2959.96, 3135.96, 3322.44, 3520.00, 3729.31, 3951.07, 4186.01,
)  # fmt: skip

# Pitch-class names, one octave starting at A (index 0 of the table above)
NOTES: tuple[str, ...] = (
    "A",
    "A" + SHARP,
    "B",
    "C",
    "C" + SHARP,
    "D",
    "D" + SHARP,
    "E",
    "F",
    "F" + SHARP,
    "G",
    "G" + SHARP,
)

NOTES_FLAT: tuple[str, ...] = (
    "A",
    "B" + FLAT,
    "B",
    "C",
    "D" + FLAT,
    "D",
    "E" + FLAT,
    "E",
    "F",
    "G" + FLAT,
    "G",
    "A" + FLAT,
)


class ErrorMessages:
    """Standardized error messages."""

    NOT_A_NUMBER = "Not a number: '{text}'."
    NOT_A_RATIO = "Invalid ratio: '{text}'. Expected format like '3/2'."
    NOT_AN_INTEGER = "Invalid integer: '{text}'."
    ZERO_DENOMINATOR = "Ratio '{text}' has a zero denominator."
    NON_POSITIVE_INTERVAL = "Interval must be positive, got {value}."
    NON_FINITE_DECIMAL = "Cannot approximate non-finite value {value} as a ratio."
    NON_FINITE_RATIO = "Ratio '{text}' does not have a finite value."
    CENTS_OUT_OF_RANGE = "Interval of {cents} cents has no finite decimal value."
    SCALE_NOT_FOUND = "Scale '{name}' not found."
    SCALA_MISSING_COUNT = "Scala file '{name}' has no note count line."
    SCALA_BAD_COUNT = "Scala file '{name}' has an invalid note count: '{text}'."
    SCALA_BAD_INTERVAL = "Scala file '{name}' has an unrecognized interval line: '{text}'."
    SCALA_TOO_FEW_INTERVALS = "Scala file '{name}' declares {expected} notes but lists {found}."

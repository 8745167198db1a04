#!/usr/bin/env python3
"""
Example: Classifying a stream of detected frequencies.

Pitch detectors emit one estimate per audio buffer, with -1 for silence.
This feeds a synthetic detector stream through a FrequencyAverager and
names the pitch class of each averaged note.

Usage:
    python examples/classify_stream.py
"""

import random

from pitchbender import NO_PITCH_DETECTED, FrequencyAverager, PitchClass, build_tet_frequencies


def detector_stream(frequency_hz: float, samples: int, seed: int = 0) -> list[float]:
    """Simulate a jittery detector with occasional dropouts."""
    rng = random.Random(seed)
    stream = []
    for _ in range(samples):
        if rng.random() < 0.1:
            stream.append(-1.0)
        else:
            stream.append(frequency_hz * (1 + rng.uniform(-0.004, 0.004)))
    return stream


def main() -> None:
    """Classify a few synthetic notes."""
    print("Pitchbender Stream Demo")
    print("=" * 40)
    print()

    table = build_tet_frequencies()
    averager = FrequencyAverager(collection_limit=50)

    for name, octave in [("A", 4), ("C", 4), ("F#", 3), ("Bb", 2)]:
        pitch = PitchClass.parse(name)
        # Table index of the note, counting from A0
        index = pitch.table_index() + 12 * octave - (0 if pitch.table_index() < 3 else 12)
        target = table[index]

        averager.reset()
        # Bands open at the table frequency, so sing a little sharp
        collected = averager.extend(detector_stream(target * 1.01, samples=80, seed=index))
        note = averager.pitch_class(table)

        print(f"{name}{octave} ({target:.2f} Hz)")
        print(f"  collected {collected} samples, average {averager.average:.2f} Hz")
        print(f"  detected: {note or NO_PITCH_DETECTED}")
        print()


if __name__ == "__main__":
    main()

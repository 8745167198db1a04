#!/usr/bin/env python3
"""
Example: Converting intervals.

This demonstrates the three ways of writing an interval - ratio, decimal
and cents - and how to move between them.

Usage:
    python examples/convert_intervals.py
"""

from pitchbender import (
    convert_cents_to_decimal,
    convert_cents_to_ratio,
    convert_decimal_to_ratio,
    convert_ratio_to_cents,
    convert_ratio_to_decimal,
    parse_decimal_from_scala_line,
)


def main() -> None:
    """Print a small interval table."""
    print("Pitchbender Interval Demo")
    print("=" * 40)
    print()

    print(f"{'ratio':>8}  {'decimal':>10}  {'cents':>10}")
    for ratio in ["1/1", "16/15", "9/8", "6/5", "5/4", "4/3", "3/2", "5/3", "15/8", "2/1"]:
        decimal = convert_ratio_to_decimal(ratio)
        cents = convert_ratio_to_cents(ratio)
        print(f"{ratio:>8}  {decimal:>10.6f}  {cents:>10.3f}")
    print()

    # Equal-tempered semitones are irrational; find their nearest simple ratios
    print("12-TET steps as ratios:")
    for step in range(1, 13):
        cents = step * 100.0
        print(f"  {cents:>7.1f} cents -> {convert_cents_to_ratio(cents)}")
    print()

    # Decimal -> ratio works on any real number
    for decimal in [1.5, 1.2599, 0.75, -1.25]:
        print(f"  {decimal} -> {convert_decimal_to_ratio(decimal)}")
    print()

    # Scala lines carry cents or ratios plus comments
    print("Scala lines:")
    for line in ["700.0 ! perfect fifth", "5/4 major third", "! comment only"]:
        decimal = parse_decimal_from_scala_line(line)
        shown = "no interval" if decimal is None else f"{decimal:.6f}"
        print(f"  {line!r:28} -> {shown}")
    print()

    print(f"An octave in cents is {convert_ratio_to_cents('2/1'):.1f}")
    print(f"100 cents multiplies a frequency by {convert_cents_to_decimal(100.0):.6f}")


if __name__ == "__main__":
    main()

"""
Tests for interval conversions.

Tests cover:
- Decimal -> ratio (continued-fraction approximation)
- Ratio -> decimal, is_ratio
- Ratio <-> cents, cents -> decimal
- Scala interval-line parsing
"""

import math
import sys
from fractions import Fraction

import pytest

from pitchbender.core import (
    ParseError,
    UndefinedIntervalError,
    convert_cents_to_decimal,
    convert_cents_to_ratio,
    convert_decimal_to_cents,
    convert_decimal_to_ratio,
    convert_ratio_to_cents,
    convert_ratio_to_decimal,
    interval_between,
    is_ratio,
    parse_decimal_from_scala_line,
)


class TestDecimalToRatio:
    """Tests for convert_decimal_to_ratio."""

    def test_common_intervals(self) -> None:
        """Just intervals come back as their ratios."""
        assert convert_decimal_to_ratio(1.5) == "3/2"
        assert convert_decimal_to_ratio(1.25) == "5/4"
        assert convert_decimal_to_ratio(4 / 3) == "4/3"
        assert convert_decimal_to_ratio(15 / 8) == "15/8"
        assert convert_decimal_to_ratio(81 / 64) == "81/64"

    def test_below_one(self) -> None:
        """Decimals below 1 work."""
        assert convert_decimal_to_ratio(0.5) == "1/2"
        assert convert_decimal_to_ratio(1 / 3) == "1/3"
        assert convert_decimal_to_ratio(0.75) == "3/4"

    def test_negative(self) -> None:
        """Negative input negates the ratio."""
        assert convert_decimal_to_ratio(-1.5) == "-3/2"
        assert convert_decimal_to_ratio(-0.75) == "-3/4"

    def test_integers(self) -> None:
        """Integers come back over 1."""
        assert convert_decimal_to_ratio(2.0) == "2/1"
        assert convert_decimal_to_ratio(1.0) == "1/1"
        assert convert_decimal_to_ratio(7) == "7/1"

    def test_zero(self) -> None:
        """Zero is 0/1, not a division error."""
        assert convert_decimal_to_ratio(0.0) == "0/1"
        assert convert_decimal_to_ratio(-0.0) == "0/1"

    def test_approximates_irrational(self) -> None:
        """Irrational decimals get a ratio within tolerance."""
        decimal = 2 ** (1 / 12)
        ratio = convert_decimal_to_ratio(decimal)
        assert abs(convert_ratio_to_decimal(ratio) - decimal) <= decimal * 1e-6

    def test_pi(self) -> None:
        """Pi hits the classic 355/113 convergent."""
        assert convert_decimal_to_ratio(math.pi) == "355/113"

    def test_round_trip_reduced_fractions(self) -> None:
        """Every reduced m/n with n <= 1000 survives a round trip."""
        denominators = list(range(1, 60)) + [97, 128, 243, 499, 512, 729, 997, 1000]
        for n in denominators:
            for m in range(1, 3 * n, max(1, n // 20)):
                if math.gcd(m, n) != 1:
                    continue
                decimal = m / n
                result = convert_ratio_to_decimal(convert_decimal_to_ratio(decimal))
                assert abs(result - decimal) <= decimal * 1e-6, f"{m}/{n}"

    def test_lowest_terms(self) -> None:
        """Results are the reduced fraction."""
        for m, n in [(6, 4), (10, 8), (9, 6)]:
            expected = Fraction(m, n)
            assert convert_decimal_to_ratio(m / n) == f"{expected.numerator}/{expected.denominator}"

    def test_non_finite_raises(self) -> None:
        """Infinity and NaN have no ratio."""
        with pytest.raises(UndefinedIntervalError):
            convert_decimal_to_ratio(math.inf)
        with pytest.raises(UndefinedIntervalError):
            convert_decimal_to_ratio(math.nan)


    def test_tiny_decimals(self) -> None:
        """Subnormal remainders end the expansion instead of overflowing."""
        assert convert_decimal_to_ratio(1e-320) == "0/1"
        assert convert_decimal_to_ratio(-1e-320) == "-0/1"
        assert convert_decimal_to_ratio(5e-324) == "0/1"

        ratio = convert_decimal_to_ratio(1e-300)
        assert ratio.startswith("1/")
        assert convert_ratio_to_decimal(ratio) == pytest.approx(1e-300, rel=1e-6)

    def test_huge_decimals(self) -> None:
        """Large magnitudes stay within tolerance."""
        assert convert_decimal_to_ratio(1e300) == f"{int(1e300)}/1"
        assert convert_ratio_to_decimal(convert_decimal_to_ratio(1e300)) == 1e300
        assert convert_decimal_to_ratio(sys.float_info.max) == f"{int(sys.float_info.max)}/1"

        decimal = 1e15 + 0.5
        result = convert_ratio_to_decimal(convert_decimal_to_ratio(decimal))
        assert abs(result - decimal) <= decimal * 1e-6


class TestRatioToDecimal:
    """Tests for convert_ratio_to_decimal and is_ratio."""

    def test_ratio(self) -> None:
        """Ratios divide."""
        assert convert_ratio_to_decimal("3/2") == 1.5
        assert convert_ratio_to_decimal("5/4") == 1.25
        assert convert_ratio_to_decimal("2/1") == 2.0

    def test_unreduced_ratio(self) -> None:
        """Ratios need not be in lowest terms."""
        assert convert_ratio_to_decimal("6/4") == 1.5

    def test_plain_number(self) -> None:
        """A string without separator is parsed as a number."""
        assert convert_ratio_to_decimal("1.5") == 1.5
        assert convert_ratio_to_decimal("2") == 2.0

    def test_decimal_parts(self) -> None:
        """Each side may be a real number."""
        assert convert_ratio_to_decimal("1.5/1") == 1.5

    def test_not_numeric(self) -> None:
        """Non-numeric parts raise ParseError."""
        with pytest.raises(ParseError):
            convert_ratio_to_decimal("a/2")
        with pytest.raises(ParseError):
            convert_ratio_to_decimal("3/b")
        with pytest.raises(ParseError):
            convert_ratio_to_decimal("fifth")
        with pytest.raises(ParseError):
            convert_ratio_to_decimal("/2")

    def test_too_many_separators(self) -> None:
        """A ratio has exactly one separator."""
        with pytest.raises(ParseError):
            convert_ratio_to_decimal("3/2/1")

    def test_zero_denominator(self) -> None:
        """Zero denominators fail fast."""
        with pytest.raises(UndefinedIntervalError):
            convert_ratio_to_decimal("3/0")

    def test_parse_error_is_value_error(self) -> None:
        """ParseError can be caught as ValueError."""
        with pytest.raises(ValueError):
            convert_ratio_to_decimal("x")

    def test_is_ratio(self) -> None:
        """is_ratio looks for the separator."""
        assert is_ratio("3/2")
        assert not is_ratio("1.5")
        assert not is_ratio("")


    def test_non_finite(self) -> None:
        """Ratios must have a finite value."""
        for text in ("inf/1", "1/nan", "1e308/1e-308", "inf", "nan", "-inf/2"):
            with pytest.raises(UndefinedIntervalError):
                convert_ratio_to_decimal(text)


class TestCents:
    """Tests for cents conversions."""

    def test_cents_to_decimal(self) -> None:
        """Cents convert to multipliers."""
        assert convert_cents_to_decimal(0) == 1.0
        assert convert_cents_to_decimal(1200) == pytest.approx(2.0)
        assert convert_cents_to_decimal(-1200) == pytest.approx(0.5)
        assert convert_cents_to_decimal(700) == pytest.approx(2 ** (7 / 12))

    def test_ratio_to_cents(self) -> None:
        """Ratios measure in cents."""
        assert convert_ratio_to_cents("2/1") == pytest.approx(1200.0)
        assert convert_ratio_to_cents("3/2") == pytest.approx(701.955, abs=1e-3)
        assert convert_ratio_to_cents("5/4") == pytest.approx(386.314, abs=1e-3)
        assert convert_ratio_to_cents("1/1") == 0.0

    def test_descending_ratio_is_negative(self) -> None:
        """Ratios below 1 are negative cents."""
        assert convert_ratio_to_cents("1/2") == pytest.approx(-1200.0)

    def test_round_trip(self) -> None:
        """Ratio -> cents -> decimal matches ratio -> decimal."""
        cents = convert_ratio_to_cents("3/2")
        assert convert_cents_to_decimal(cents) == pytest.approx(convert_ratio_to_decimal("3/2"))

    def test_non_positive_ratio(self) -> None:
        """Logs of non-positive decimals fail fast."""
        with pytest.raises(UndefinedIntervalError):
            convert_ratio_to_cents("0/1")
        with pytest.raises(UndefinedIntervalError):
            convert_ratio_to_cents("-3/2")
        with pytest.raises(UndefinedIntervalError):
            convert_decimal_to_cents(0.0)

    def test_cents_to_ratio(self) -> None:
        """Cents find their nearest simple ratio."""
        assert convert_cents_to_ratio(1200.0) == "2/1"
        assert convert_cents_to_ratio(convert_ratio_to_cents("5/4")) == "5/4"

    def test_interval_between(self) -> None:
        """Frequencies give their decimal interval."""
        assert interval_between(440.0, 660.0) == 1.5
        assert interval_between(440.0, 220.0) == 0.5
        with pytest.raises(UndefinedIntervalError):
            interval_between(0.0, 440.0)


    def test_cents_to_decimal_is_total(self) -> None:
        """Out-of-range cents saturate instead of raising."""
        assert convert_cents_to_decimal(2_000_000.0) == math.inf
        assert convert_cents_to_decimal(-2_000_000.0) == 0.0
        assert convert_cents_to_decimal(1_200_000.0) == 2.0**1000
        assert convert_cents_to_decimal(sys.float_info.max) == math.inf

    def test_cents_to_ratio_out_of_range(self) -> None:
        """An infinite decimal has no ratio."""
        with pytest.raises(UndefinedIntervalError):
            convert_cents_to_ratio(2_000_000.0)
        assert convert_cents_to_ratio(-2_000_000.0) == "0/1"


class TestScalaLine:
    """Tests for parse_decimal_from_scala_line."""

    def test_cents_with_comment(self) -> None:
        """Cents followed by a comment."""
        assert parse_decimal_from_scala_line("700.0 ! perfect fifth") == pytest.approx(
            convert_cents_to_decimal(700.0)
        )

    def test_ratio(self) -> None:
        """Plain ratios."""
        assert parse_decimal_from_scala_line("3/2") == convert_ratio_to_decimal("3/2") == 1.5

    def test_whitespace(self) -> None:
        """Leading and trailing whitespace is stripped."""
        assert parse_decimal_from_scala_line("   5/4   ") == 1.25
        assert parse_decimal_from_scala_line("\t1200.0\n") == pytest.approx(2.0)

    def test_trailing_text(self) -> None:
        """Text after a space is ignored."""
        assert parse_decimal_from_scala_line("9/8 major whole tone") == 1.125

    def test_comment_without_space(self) -> None:
        """A '!' directly after the value starts a comment."""
        assert parse_decimal_from_scala_line("3/2!fifth") == 1.5
        assert parse_decimal_from_scala_line("100.0!semitone") == pytest.approx(2 ** (1 / 12))

    def test_cents_take_precedence(self) -> None:
        """A token with a '.' is read as cents."""
        assert parse_decimal_from_scala_line("1200.") == pytest.approx(2.0)

    def test_zero_cents_is_a_value(self) -> None:
        """0.0 cents is unison, not 'nothing parsed'."""
        assert parse_decimal_from_scala_line("0.0") == 1.0

    def test_unrecognized(self) -> None:
        """Lines with neither cents nor ratio parse to None."""
        assert parse_decimal_from_scala_line("2") is None
        assert parse_decimal_from_scala_line("") is None
        assert parse_decimal_from_scala_line("! comment") is None
        assert parse_decimal_from_scala_line("fifth") is None

    def test_malformed(self) -> None:
        """Tokens that look like cents or ratios but aren't raise."""
        with pytest.raises(ParseError):
            parse_decimal_from_scala_line("abc.def")
        with pytest.raises(ParseError):
            parse_decimal_from_scala_line("x/2")

    def test_huge_cents(self) -> None:
        """Cents past the float range read as infinity, not an error."""
        assert parse_decimal_from_scala_line("2000000.0") == math.inf
        assert parse_decimal_from_scala_line("-2000000.0 ! way down") == 0.0

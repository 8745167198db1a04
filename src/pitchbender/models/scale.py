"""
Scale model - a whole Scala (.scl) scale.

A Scala file lists the intervals of a scale above an implied 1/1, the last
interval usually being the period (2/1 for octave-repeating scales).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator

from pitchbender.core.intervals import convert_decimal_to_cents, convert_decimal_to_ratio


class ScalaScale(BaseModel):
    """
    A parsed Scala scale.

    `intervals` keeps the tokens as written in the file; `decimals` holds the
    parsed value of each one.
    """

    name: str = Field(..., description="Scale name (file stem)")
    description: str = Field("", description="Description line of the file")
    intervals: list[str] = Field(default_factory=list, description="Interval tokens as written")
    decimals: list[float] = Field(default_factory=list, description="Decimal value of each interval")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_lengths(self) -> ScalaScale:
        if len(self.intervals) != len(self.decimals):
            raise ValueError(
                f"Scale '{self.name}' has {len(self.intervals)} intervals "
                f"but {len(self.decimals)} decimals"
            )
        for decimal in self.decimals:
            if decimal <= 0:
                raise ValueError(f"Scale '{self.name}' has a non-positive interval {decimal}")
        return self

    @property
    def note_count(self) -> int:
        """Number of notes per period."""
        return len(self.intervals)

    @property
    def cents(self) -> list[float]:
        """Interval sizes in cents."""
        return [convert_decimal_to_cents(d) for d in self.decimals]

    @property
    def period(self) -> float | None:
        """Decimal value of the last interval (the repeat interval)."""
        return self.decimals[-1] if self.decimals else None

    def frequencies(self, fundamental_hz: float) -> list[float]:
        """Frequencies of the scale over a fundamental, starting with the fundamental."""
        return [fundamental_hz] + [fundamental_hz * d for d in self.decimals]

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to YAML-serializable dictionary."""
        return {
            "name": self.name,
            "description": self.description,
            "notes": self.note_count,
            "intervals": [
                {
                    "token": token,
                    "decimal": round(decimal, 6),
                    "cents": round(convert_decimal_to_cents(decimal), 3),
                    "ratio": convert_decimal_to_ratio(decimal),
                }
                for token, decimal in zip(self.intervals, self.decimals)
            ],
        }


class ScaleMetadata(BaseModel):
    """Lightweight metadata for listing scales."""

    name: str
    description: str
    note_count: int

    model_config = {"frozen": True}

    @classmethod
    def from_scale(cls, scale: ScalaScale) -> ScaleMetadata:
        """Create metadata from a scale."""
        return cls(
            name=scale.name,
            description=scale.description,
            note_count=scale.note_count,
        )

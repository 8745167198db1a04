"""
Frequency averaging over a stream of detector samples.

Pitch detectors report a new estimate per audio buffer and the estimates
jitter. FrequencyAverager collects a fixed number of positive samples and
classifies their mean.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from pitchbender.constants import DEFAULT_COLLECTION_LIMIT, PITCH_FREQUENCIES_12TET
from pitchbender.core.pitch import parse_pitch_class_from_frequency

logger = logging.getLogger(__name__)


class FrequencyAverager:
    """
    Accumulates detector samples until a collection limit is reached.

    Non-positive samples (detectors report -1 or 0 for silence) and samples
    arriving after the limit are ignored. Owned by a single consumer.
    """

    def __init__(self, collection_limit: int = DEFAULT_COLLECTION_LIMIT):
        if collection_limit < 1:
            raise ValueError(f"Collection limit must be at least 1, got {collection_limit}")
        self.collection_limit = collection_limit
        self._total = 0.0
        self._count = 0

    @property
    def count(self) -> int:
        """Number of samples collected so far."""
        return self._count

    @property
    def is_ready(self) -> bool:
        """True once collection_limit samples have been collected."""
        return self._count >= self.collection_limit

    @property
    def average(self) -> float | None:
        """Mean of the collected samples, None until ready."""
        if not self.is_ready:
            return None
        return self._total / self.collection_limit

    def add(self, frequency_hz: float) -> bool:
        """
        Offer a sample.

        Returns:
            True if the sample was collected
        """
        if self.is_ready or not (frequency_hz > 0 and math.isfinite(frequency_hz)):
            return False

        self._total += frequency_hz
        self._count += 1
        if self.is_ready:
            logger.debug(f"Collected {self._count} samples, average {self.average:.3f} Hz")
        return True

    def extend(self, samples: Sequence[float]) -> int:
        """Offer several samples. Returns how many were collected."""
        return sum(1 for sample in samples if self.add(sample))

    def pitch_class(
        self,
        frequency_table: Sequence[float] = PITCH_FREQUENCIES_12TET,
        prefer_flats: bool = False,
    ) -> str | None:
        """Classify the average, None until ready or when out of range."""
        average = self.average
        if average is None:
            return None
        return parse_pitch_class_from_frequency(
            average, frequency_table, prefer_flats=prefer_flats
        )

    def reset(self) -> None:
        """Discard all collected samples."""
        self._total = 0.0
        self._count = 0

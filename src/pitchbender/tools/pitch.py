"""
Pitch tools - MCP tools for frequency classification and n-TET tables.
"""

from __future__ import annotations

import json
import logging
import math
from typing import TYPE_CHECKING, Any

from pitchbender.constants import A0_FREQUENCY, DEFAULT_COLLECTION_LIMIT, NO_PITCH_DETECTED
from pitchbender.core import (
    FrequencyAverager,
    build_tet_frequencies,
    find_frequency_index,
    parse_pitch_class_from_frequency,
    parse_tet,
    tet_step_cents,
)

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_pitch_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register pitch classification tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_classify_frequency(frequency_hz: float, prefer_flats: bool = False) -> str:
        """
        Name the 12-TET pitch class of a frequency.

        Frequencies between A0 (27.5 Hz) and C8 (4186.01 Hz) are classified;
        anything outside that range reports no pitch.

        Args:
            frequency_hz: Frequency in Hz
            prefer_flats: Spell accidentals as flats (B♭ instead of A♯)

        Returns:
            JSON string with the pitch class

        Example:
            pitch_classify_frequency(frequency_hz=440.0)
        """
        try:
            note = parse_pitch_class_from_frequency(frequency_hz, prefer_flats=prefer_flats)
            return json.dumps(
                {
                    "status": "success",
                    "frequency_hz": frequency_hz if math.isfinite(frequency_hz) else None,
                    "detected": note is not None,
                    "pitch_class": note,
                    "table_index": find_frequency_index(frequency_hz),
                    "display": note if note is not None else NO_PITCH_DETECTED,
                }
            )
        except Exception as e:
            logger.exception("Failed to classify frequency")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_classify_frequency"] = pitch_classify_frequency

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_classify_samples(
        samples: list[float],
        collection_limit: int = DEFAULT_COLLECTION_LIMIT,
        prefer_flats: bool = False,
    ) -> str:
        """
        Average a run of detector samples and classify the result.

        Non-positive samples (silence) are skipped. The average is only
        taken once collection_limit positive samples have been seen.

        Args:
            samples: Detected frequencies in Hz, in arrival order
            collection_limit: Number of positive samples to average
            prefer_flats: Spell accidentals as flats

        Returns:
            JSON string with the average frequency and pitch class

        Example:
            pitch_classify_samples(samples=[440.2, 439.8, -1.0, 440.1], collection_limit=3)
        """
        try:
            averager = FrequencyAverager(collection_limit)
            collected = averager.extend(samples)

            if not averager.is_ready:
                return json.dumps(
                    {
                        "status": "error",
                        "message": (
                            f"Only {collected} usable samples, need {collection_limit}."
                        ),
                    }
                )

            note = averager.pitch_class(prefer_flats=prefer_flats)
            return json.dumps(
                {
                    "status": "success",
                    "average_hz": averager.average,
                    "collected": collected,
                    "detected": note is not None,
                    "pitch_class": note,
                    "display": note if note is not None else NO_PITCH_DETECTED,
                }
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to classify samples")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_classify_samples"] = pitch_classify_samples

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_tet_frequencies(
        divisions: str = "12",
        reference_hz: float = A0_FREQUENCY,
        count: int = 88,
    ) -> str:
        """
        Build equal-temperament frequency tables.

        Args:
            divisions: One or more comma-separated steps per octave (e.g., '12,19,31')
            reference_hz: Frequency of the first entry (default: A0)
            count: Number of entries per table

        Returns:
            JSON string with one table per division count

        Example:
            pitch_tet_frequencies(divisions="12,24", reference_hz=440.0, count=25)
        """
        try:
            tables = []
            for n in parse_tet(divisions):
                tables.append(
                    {
                        "divisions": n,
                        "step_cents": tet_step_cents(n),
                        "frequencies": [
                            round(f, 4) for f in build_tet_frequencies(n, reference_hz, count)
                        ],
                    }
                )

            return json.dumps({"status": "success", "tables": tables})
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to build TET tables")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_tet_frequencies"] = pitch_tet_frequencies

    return tools

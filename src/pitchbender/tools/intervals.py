"""
Interval tools - MCP tools for ratio, decimal and cents conversion.
"""

from __future__ import annotations

import json
import logging
import math
from typing import TYPE_CHECKING, Any

from pitchbender.constants import ErrorMessages
from pitchbender.core import (
    ParseError,
    UndefinedIntervalError,
    convert_cents_to_decimal,
    convert_cents_to_ratio,
    convert_decimal_to_cents,
    convert_decimal_to_ratio,
    convert_ratio_to_cents,
    convert_ratio_to_decimal,
    parse_decimal_from_scala_line,
)
from pitchbender.core.scala import scala_token

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _error(message: str) -> str:
    return json.dumps({"status": "error", "message": message})


def register_interval_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register interval conversion tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_decimal_to_ratio(decimal: float) -> str:
        """
        Approximate a decimal interval by a whole-number ratio.

        Args:
            decimal: Decimal interval (e.g., 1.5 for a perfect fifth)

        Returns:
            JSON string with the ratio and its size in cents

        Example:
            pitch_decimal_to_ratio(decimal=1.25)
        """
        try:
            ratio = convert_decimal_to_ratio(decimal)
            return json.dumps(
                {
                    "status": "success",
                    "decimal": decimal,
                    "ratio": ratio,
                    "cents": convert_decimal_to_cents(decimal) if decimal > 0 else None,
                }
            )
        except UndefinedIntervalError as e:
            return _error(str(e))
        except Exception as e:
            logger.exception("Failed to convert decimal to ratio")
            return _error(str(e))

    tools["pitch_decimal_to_ratio"] = pitch_decimal_to_ratio

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_ratio_to_decimal(ratio: str) -> str:
        """
        Convert a ratio string to a decimal interval.

        Args:
            ratio: Ratio like '3/2', or a plain number like '1.5'

        Returns:
            JSON string with the decimal value

        Example:
            pitch_ratio_to_decimal(ratio="5/4")
        """
        try:
            return json.dumps(
                {
                    "status": "success",
                    "ratio": ratio,
                    "decimal": convert_ratio_to_decimal(ratio),
                }
            )
        except (ParseError, UndefinedIntervalError) as e:
            return _error(str(e))
        except Exception as e:
            logger.exception("Failed to convert ratio to decimal")
            return _error(str(e))

    tools["pitch_ratio_to_decimal"] = pitch_ratio_to_decimal

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_ratio_to_cents(ratio: str) -> str:
        """
        Measure a ratio in cents (1200 cents to the octave).

        Args:
            ratio: Ratio like '3/2'

        Returns:
            JSON string with the size in cents

        Example:
            pitch_ratio_to_cents(ratio="3/2")
        """
        try:
            return json.dumps(
                {
                    "status": "success",
                    "ratio": ratio,
                    "cents": convert_ratio_to_cents(ratio),
                }
            )
        except (ParseError, UndefinedIntervalError) as e:
            return _error(str(e))
        except Exception as e:
            logger.exception("Failed to convert ratio to cents")
            return _error(str(e))

    tools["pitch_ratio_to_cents"] = pitch_ratio_to_cents

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_cents_to_decimal(cents: float) -> str:
        """
        Convert an interval in cents to a decimal multiplier.

        Multiply a fundamental frequency by the result to get the
        frequency of the interval above it.

        Args:
            cents: Interval in cents

        Returns:
            JSON string with the decimal value

        Example:
            pitch_cents_to_decimal(cents=700.0)
        """
        try:
            decimal = convert_cents_to_decimal(cents)
            if not math.isfinite(decimal):
                return _error(ErrorMessages.CENTS_OUT_OF_RANGE.format(cents=cents))

            return json.dumps({"status": "success", "cents": cents, "decimal": decimal})
        except Exception as e:
            logger.exception("Failed to convert cents to decimal")
            return _error(str(e))

    tools["pitch_cents_to_decimal"] = pitch_cents_to_decimal

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_cents_to_ratio(cents: float) -> str:
        """
        Find the simplest whole-number ratio for an interval in cents.

        Args:
            cents: Interval in cents

        Returns:
            JSON string with the ratio and decimal value

        Example:
            pitch_cents_to_ratio(cents=386.3137)
        """
        try:
            return json.dumps(
                {
                    "status": "success",
                    "cents": cents,
                    "decimal": convert_cents_to_decimal(cents),
                    "ratio": convert_cents_to_ratio(cents),
                }
            )
        except UndefinedIntervalError as e:
            return _error(str(e))
        except Exception as e:
            logger.exception("Failed to convert cents to ratio")
            return _error(str(e))

    tools["pitch_cents_to_ratio"] = pitch_cents_to_ratio

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_parse_scala_line(line: str) -> str:
        """
        Parse one interval line of a Scala (.scl) file.

        Lines containing '.' are cents, lines containing '/' are ratios.
        Trailing comments ('!') and text after a space are ignored.

        Args:
            line: The interval line (e.g., '700.0 ! fifth' or '5/4')

        Returns:
            JSON string with the decimal value, or parsed=false if the
            line holds no interval

        Example:
            pitch_parse_scala_line(line="3/2 ! perfect fifth")
        """
        try:
            decimal = parse_decimal_from_scala_line(line)
            if decimal is None:
                return json.dumps({"status": "success", "parsed": False, "line": line})
            if not math.isfinite(decimal):
                return _error(ErrorMessages.CENTS_OUT_OF_RANGE.format(cents=scala_token(line)))

            return json.dumps(
                {
                    "status": "success",
                    "parsed": True,
                    "line": line,
                    "decimal": decimal,
                    "cents": convert_decimal_to_cents(decimal) if decimal > 0 else None,
                }
            )
        except (ParseError, UndefinedIntervalError) as e:
            return _error(str(e))
        except Exception as e:
            logger.exception("Failed to parse Scala line")
            return _error(str(e))

    tools["pitch_parse_scala_line"] = pitch_parse_scala_line

    return tools

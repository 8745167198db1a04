"""
Scale tools - MCP tools for Scala (.scl) scales.

Tools for discovering, parsing and exporting scales.
"""

from __future__ import annotations

import json
import logging
import math
from typing import TYPE_CHECKING, Any

import yaml

from pitchbender.core import ParseError, UndefinedIntervalError
from pitchbender.scales import ScaleLoader, parse_scala_text

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_scale_tools(
    mcp: ChukMCPServer,
    loader: ScaleLoader,
) -> dict[str, Any]:
    """
    Register scale tools with the MCP server.

    Args:
        mcp: The MCP server instance
        loader: The scale loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_list_scales() -> str:
        """
        List available Scala scales.

        Returns scales from the built-in library and the project's
        scales directory.

        Returns:
            JSON string with list of scales

        Example:
            pitch_list_scales()
        """
        try:
            scales = loader.list_scales()

            return json.dumps(
                {
                    "status": "success",
                    "scales": [
                        {
                            "name": s.name,
                            "description": s.description,
                            "notes": s.note_count,
                        }
                        for s in scales
                    ],
                }
            )
        except Exception as e:
            logger.exception("Failed to list scales")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_list_scales"] = pitch_list_scales

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_describe_scale(name: str, fundamental_hz: float | None = None) -> str:
        """
        Describe a scale interval by interval.

        Args:
            name: Scale name (e.g., 'just-major', 'pythagorean')
            fundamental_hz: Optional fundamental to compute frequencies over

        Returns:
            JSON string with intervals as tokens, decimals, cents and ratios

        Example:
            pitch_describe_scale(name="just-major", fundamental_hz=261.626)
        """
        try:
            scale = loader.get_scale(name)
            if scale is None:
                return json.dumps({"status": "error", "message": f"Scale not found: {name}"})

            result: dict[str, Any] = {"status": "success", "scale": scale.to_yaml_dict()}
            if fundamental_hz is not None:
                frequencies = scale.frequencies(fundamental_hz)
                if not all(math.isfinite(f) for f in frequencies):
                    return json.dumps(
                        {
                            "status": "error",
                            "message": f"Frequencies over {fundamental_hz} Hz are out of range.",
                        }
                    )
                result["frequencies"] = frequencies

            return json.dumps(result)
        except (ParseError, UndefinedIntervalError) as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to describe scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_describe_scale"] = pitch_describe_scale

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_parse_scale(text: str, name: str = "untitled") -> str:
        """
        Parse the contents of a Scala (.scl) file.

        Args:
            text: Full file contents
            name: Name to give the scale

        Returns:
            JSON string with the parsed scale

        Example:
            pitch_parse_scale(text="! x.scl\\nfifths\\n 2\\n 3/2\\n 2/1\\n")
        """
        try:
            scale = parse_scala_text(text, name=name)
            return json.dumps({"status": "success", "scale": scale.to_yaml_dict()})
        except (ParseError, UndefinedIntervalError) as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to parse scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_parse_scale"] = pitch_parse_scale

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_export_scale_yaml(name: str) -> str:
        """
        Export a scale as YAML.

        Args:
            name: Scale name

        Returns:
            JSON string containing the YAML content

        Example:
            pitch_export_scale_yaml(name="pythagorean")
        """
        try:
            scale = loader.get_scale(name)
            if scale is None:
                return json.dumps({"status": "error", "message": f"Scale not found: {name}"})

            yaml_content = yaml.safe_dump(
                scale.to_yaml_dict(),
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            )

            return json.dumps(
                {
                    "status": "success",
                    "yaml": yaml_content,
                }
            )
        except (ParseError, UndefinedIntervalError) as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to export YAML")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_export_scale_yaml"] = pitch_export_scale_yaml

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_copy_scale_to_project(name: str) -> str:
        """
        Copy a library scale into the project for editing.

        Args:
            name: Scale name

        Returns:
            JSON string with the new file path

        Example:
            pitch_copy_scale_to_project(name="just-major")
        """
        try:
            path = loader.copy_to_project(name)
            if path is None:
                return json.dumps({"status": "error", "message": f"Scale not found: {name}"})

            return json.dumps(
                {
                    "status": "success",
                    "message": f"Copied scale to {path}",
                    "path": str(path),
                }
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to copy scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_copy_scale_to_project"] = pitch_copy_scale_to_project

    return tools

#!/usr/bin/env python3
"""
Async Pitchbender MCP Server using chuk-mcp-server

This server provides MCP tools for working with musical intervals and
pitch. Intervals can be written as ratios (3/2), decimals (1.5) or cents
(701.955), and detected frequencies can be named as 12-TET pitch classes.

The server provides tools for:
- Converting between ratios, decimals and cents
- Parsing Scala (.scl) interval lines and whole scale files
- Classifying frequencies and averaged detector samples
- Building n-TET frequency tables
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from pitchbender.scales import ScaleLoader
from pitchbender.tools import (
    register_interval_tools,
    register_pitch_tools,
    register_scale_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("pitchbender")

# Paths - project scales default to ./scales, overridable with --scales-dir
BASE_PATH = Path.cwd()
SCALES_DIR = Path(os.environ.get("PITCHBENDER_SCALES_DIR", BASE_PATH / "scales"))
LIBRARY_PATH = Path(__file__).parent / "scales" / "library"

scale_loader = ScaleLoader(
    library_path=LIBRARY_PATH,
    project_path=SCALES_DIR,
)

# Register all tools
interval_tools = register_interval_tools(mcp)
pitch_tools = register_pitch_tools(mcp)
scale_tools = register_scale_tools(mcp, scale_loader)

# Export tool functions for direct access
pitch_decimal_to_ratio = interval_tools["pitch_decimal_to_ratio"]
pitch_ratio_to_decimal = interval_tools["pitch_ratio_to_decimal"]
pitch_ratio_to_cents = interval_tools["pitch_ratio_to_cents"]
pitch_cents_to_decimal = interval_tools["pitch_cents_to_decimal"]
pitch_cents_to_ratio = interval_tools["pitch_cents_to_ratio"]
pitch_parse_scala_line = interval_tools["pitch_parse_scala_line"]

pitch_classify_frequency = pitch_tools["pitch_classify_frequency"]
pitch_classify_samples = pitch_tools["pitch_classify_samples"]
pitch_tet_frequencies = pitch_tools["pitch_tet_frequencies"]

pitch_list_scales = scale_tools["pitch_list_scales"]
pitch_describe_scale = scale_tools["pitch_describe_scale"]
pitch_parse_scale = scale_tools["pitch_parse_scale"]
pitch_export_scale_yaml = scale_tools["pitch_export_scale_yaml"]
pitch_copy_scale_to_project = scale_tools["pitch_copy_scale_to_project"]

logger.info("Pitchbender MCP Server initialized")
logger.info(f"  Library path: {LIBRARY_PATH}")
logger.info(f"  Scales dir: {SCALES_DIR}")

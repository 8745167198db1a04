"""
MCP tool implementations.

Tools are organized by domain:
- intervals - Ratio, decimal and cents conversion
- pitch - Frequency classification and n-TET tables
- scales - Scala scale discovery, parsing and export
"""

from pitchbender.tools.intervals import register_interval_tools
from pitchbender.tools.pitch import register_pitch_tools
from pitchbender.tools.scales import register_scale_tools

__all__ = [
    "register_interval_tools",
    "register_pitch_tools",
    "register_scale_tools",
]

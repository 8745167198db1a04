"""
Pydantic models for the interval system.

This module provides:
- ScalaScale: A parsed Scala (.scl) scale
- ScaleMetadata: Listing summary of a scale
"""

from pitchbender.models.scale import ScalaScale, ScaleMetadata

__all__ = [
    "ScalaScale",
    "ScaleMetadata",
]

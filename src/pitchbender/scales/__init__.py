"""
Scala scale discovery and loading.

Provides:
- ScaleLoader: Discover and load .scl scales from library and project
- parse_scala_text: Parse the contents of a single .scl file
"""

from pitchbender.scales.loader import ScaleLoader, parse_scala_text

__all__ = [
    "ScaleLoader",
    "parse_scala_text",
]

"""
Scale loader - discovers and loads Scala (.scl) scale files.

Scales can come from:
1. Built-in library (shipped with package)
2. Project scales (user's project/scales directory)

File layout (lines starting with "!" are comments):

    ! just-major.scl
    !
    5-limit just major scale
     7
    !
     9/8
     5/4
     ...
     2/1
"""

from __future__ import annotations

import logging
import math
from pathlib import Path

from pitchbender.constants import SCALA_COMMENT, ErrorMessages
from pitchbender.core.errors import ParseError, UndefinedIntervalError
from pitchbender.core.scala import parse_decimal_from_scala_line, scala_token
from pitchbender.core.tet import is_integer
from pitchbender.models.scale import ScalaScale, ScaleMetadata

logger = logging.getLogger(__name__)

SCALA_SUFFIX = ".scl"


def _parse_interval(line: str, name: str) -> tuple[str, float]:
    """Parse one interval line into (token, decimal)."""
    token = scala_token(line)
    decimal = parse_decimal_from_scala_line(line)

    # A bare integer n means n/1
    if decimal is None and is_integer(token):
        decimal = float(token)

    # Non-positive, or past the float range
    if decimal is None or not 0 < decimal < math.inf:
        raise ParseError(ErrorMessages.SCALA_BAD_INTERVAL.format(name=name, text=line.strip()))
    return token, decimal


def parse_scala_text(text: str, name: str = "unknown") -> ScalaScale:
    """
    Parse the contents of a Scala file.

    Args:
        text: File contents
        name: Name to give the scale

    Returns:
        The parsed scale

    Raises:
        ParseError: If the count line or an interval line is invalid, or
            fewer intervals are listed than declared
    """
    lines = [line for line in text.splitlines() if not line.lstrip().startswith(SCALA_COMMENT)]

    if len(lines) < 2:
        raise ParseError(ErrorMessages.SCALA_MISSING_COUNT.format(name=name))

    description = lines[0].strip()
    count_text = lines[1].strip()
    count_token = count_text.split()[0] if count_text else ""
    if not is_integer(count_token) or int(count_token) < 0:
        raise ParseError(ErrorMessages.SCALA_BAD_COUNT.format(name=name, text=count_text))
    expected = int(count_token)

    interval_lines = [line for line in lines[2:] if line.strip()]
    if len(interval_lines) < expected:
        raise ParseError(
            ErrorMessages.SCALA_TOO_FEW_INTERVALS.format(
                name=name, expected=expected, found=len(interval_lines)
            )
        )

    parsed = [_parse_interval(line, name) for line in interval_lines[:expected]]

    return ScalaScale(
        name=name,
        description=description,
        intervals=[token for token, _ in parsed],
        decimals=[decimal for _, decimal in parsed],
    )


class ScaleLoader:
    """
    Discovers and loads Scala scales.

    Scales are loaded from .scl files in the library and project directories.
    Project scales override library scales with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the scale loader.

        Args:
            library_path: Path to built-in scale library
            project_path: Path to project scales directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, ScalaScale] = {}

    def list_scales(self) -> list[ScaleMetadata]:
        """
        List all available scales.

        Returns scales from both library and project, with project
        scales taking precedence. Files that fail to parse are skipped.
        """
        scales: dict[str, ScaleMetadata] = {}

        for directory in (self.library_path, self.project_path):
            if directory is None or not directory.exists():
                continue
            for path in sorted(directory.glob(f"*{SCALA_SUFFIX}")):
                scale = self._try_load(path)
                if scale:
                    scales[scale.name] = ScaleMetadata.from_scale(scale)

        return list(scales.values())

    def get_scale(self, name: str) -> ScalaScale | None:
        """
        Get a scale by name.

        Project scales take precedence over library scales.

        Args:
            name: Scale name (file stem)

        Returns:
            ScalaScale if found, None otherwise

        Raises:
            ParseError: If the file exists but is not a valid Scala file
        """
        if name in self._cache:
            return self._cache[name]

        for directory in (self.project_path, self.library_path):
            if directory is None:
                continue
            path = directory / f"{name}{SCALA_SUFFIX}"
            if path.exists():
                scale = self.load_file(path)
                self._cache[name] = scale
                return scale

        return None

    def load_file(self, path: Path) -> ScalaScale:
        """Load a scale from a .scl file, named after the file stem."""
        text = path.read_text(encoding="utf-8", errors="replace")
        return parse_scala_text(text, name=path.stem)

    def copy_to_project(self, name: str) -> Path | None:
        """
        Copy a library scale to the project for customization.

        Args:
            name: Scale name

        Returns:
            Path to copied file, or None if not found
        """
        if not self.project_path:
            raise ValueError("No project path configured")

        library_file = self.library_path / f"{name}{SCALA_SUFFIX}"
        if not library_file.exists():
            return None

        self.project_path.mkdir(parents=True, exist_ok=True)

        dest_file = self.project_path / f"{name}{SCALA_SUFFIX}"
        if dest_file.exists():
            raise ValueError(f"Scale already exists in project: {name}")

        dest_file.write_text(library_file.read_text(encoding="utf-8"), encoding="utf-8")

        self._cache.pop(name, None)

        return dest_file

    def _try_load(self, path: Path) -> ScalaScale | None:
        """Load a scale for listing, logging and skipping invalid files."""
        try:
            return self.load_file(path)
        except (OSError, ParseError, UndefinedIntervalError) as e:
            logger.debug(f"Skipping {path}: {e}")
            return None

    def clear_cache(self) -> None:
        """Clear the scale cache."""
        self._cache.clear()

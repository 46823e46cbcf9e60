"""
Header Record
=============

Transient record of one pixel-map header.

A header is four whitespace-delimited tokens:

    <magic> <width> <height> <max intensity>

The record exists only while a header is being checked; the stacker keeps
nothing but the agreed width and height.
"""

from dataclasses import dataclass
from typing import List

from exposure_stacker.models.image import MAX_DIMENSION
from exposure_stacker.models.pixel import MAX_INTENSITY


MAGIC = "P3"


@dataclass(frozen=True, slots=True)
class HeaderRecord:
    """
    Parsed pixel-map header.

    Attributes:
        magic: Format tag (must be MAGIC)
        width: Declared width in pixels
        height: Declared height in pixels
        max_intensity: Declared maximum channel value (must be MAX_INTENSITY)
    """

    magic: str
    width: int
    height: int
    max_intensity: int

    def problems(self) -> List[str]:
        """List every way this header fails the format checks."""
        found = []
        if self.magic != MAGIC:
            found.append(f"magic {self.magic!r} != {MAGIC!r}")
        if self.max_intensity != MAX_INTENSITY:
            found.append(f"max intensity {self.max_intensity} != {MAX_INTENSITY}")
        if not 0 <= self.width <= MAX_DIMENSION:
            found.append(f"width {self.width} outside [0, {MAX_DIMENSION}]")
        if not 0 <= self.height <= MAX_DIMENSION:
            found.append(f"height {self.height} outside [0, {MAX_DIMENSION}]")
        return found

    @property
    def is_valid(self) -> bool:
        return not self.problems()

    @property
    def dimensions(self) -> tuple:
        """(width, height) pair."""
        return (self.width, self.height)

"""
Pixel Model
===========

A single RGB triple with channels bounded to MAX_INTENSITY.
"""

from dataclasses import dataclass
from typing import Tuple


MAX_INTENSITY = 255


@dataclass(frozen=True, slots=True)
class Pixel:
    """
    One RGB pixel.

    Attributes:
        red: Red channel in [0, MAX_INTENSITY]
        green: Green channel in [0, MAX_INTENSITY]
        blue: Blue channel in [0, MAX_INTENSITY]
    """

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        """Validate channel bounds."""
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if not 0 <= value <= MAX_INTENSITY:
                raise ValueError(
                    f"{name} must be in [0, {MAX_INTENSITY}], got {value}"
                )

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    def __str__(self) -> str:
        return f"{self.red} {self.green} {self.blue}"

"""
Data Models
===========

Data models for the exposure stacker.

Models:
    Image:
        - Pixel: Bounded RGB triple
        - ImageBuffer: Fixed-capacity pixel grid with logical extent
        - HeaderRecord: Transient parsed pixel-map header

    Results:
        - ErrorKind: Failure categories
        - StackResult: Outcome of a stacking run
"""

from exposure_stacker.models.pixel import MAX_INTENSITY, Pixel
from exposure_stacker.models.image import MAX_DIMENSION, ImageBuffer
from exposure_stacker.models.header import MAGIC, HeaderRecord
from exposure_stacker.models.result import ErrorKind, StackResult

__all__ = [
    # Image
    "MAX_INTENSITY",
    "MAX_DIMENSION",
    "MAGIC",
    "Pixel",
    "ImageBuffer",
    "HeaderRecord",
    # Results
    "ErrorKind",
    "StackResult",
]

"""
Stream Module
=============

Token-level reading of exposure files.

This module provides the input layer for the stacker:
    - TokenReader: Whitespace token stream with rewind
    - ExposureStream: One exposure file with explicit state
    - ExposureStreamSet: The ordered, fixed-size set of exposures

Example:
    from exposure_stacker.stream import ExposureStreamSet

    with ExposureStreamSet(paths) as streams:
        streams.open_all()
        pixel = streams[0].read_pixel()
"""

from exposure_stacker.stream.tokens import TokenReader
from exposure_stacker.stream.exposure import (
    EXPOSURE_COUNT,
    ExposureStream,
    ExposureStreamSet,
    StreamState,
)


__all__ = [
    "EXPOSURE_COUNT",
    "TokenReader",
    "ExposureStream",
    "ExposureStreamSet",
    "StreamState",
]

"""
Pixel-map Module
================

Plain-text (P3) pixel-map format handling:
    - parse_header: Read and validate a four-token header
    - read_image: Load a whole pixel map into an ImageBuffer
    - write_image: Serialize an ImageBuffer to disk
"""

from exposure_stacker.pixmap.header import parse_header
from exposure_stacker.pixmap.reader import read_image
from exposure_stacker.pixmap.writer import format_header, write_image


__all__ = [
    "parse_header",
    "read_image",
    "format_header",
    "write_image",
]

"""
Pixel-map Reader
================

Loads a single plain-text pixel map into an ImageBuffer.
"""

import logging
from pathlib import Path
from typing import Union

from exposure_stacker.errors import ExposureDataError, ExposureOpenError
from exposure_stacker.models.image import ImageBuffer
from exposure_stacker.models.pixel import Pixel
from exposure_stacker.pixmap.header import parse_header
from exposure_stacker.stream.tokens import TokenReader


logger = logging.getLogger(__name__)


def read_image(path: Union[str, Path]) -> ImageBuffer:
    """
    Read a pixel map from disk.

    Args:
        path: Pixel-map file path

    Returns:
        ImageBuffer holding the file's pixels

    Raises:
        ExposureOpenError: If the file cannot be opened
        HeaderError: If the header is invalid
        ExposureDataError: If pixel data is short or malformed
    """
    try:
        handle = open(path, "r")
    except OSError as e:
        raise ExposureOpenError(f"cannot open {path}: {e}") from e

    with handle:
        reader = TokenReader(handle)
        header = parse_header(reader)

        image = ImageBuffer()
        image.set_dimensions(header.width, header.height)

        for row in range(image.height):
            for column in range(image.width):
                try:
                    pixel = Pixel(reader.next_int(), reader.next_int(), reader.next_int())
                except (EOFError, ValueError) as e:
                    raise ExposureDataError(
                        f"{path}: bad pixel at ({row}, {column}): {e}",
                        row=row,
                        column=column,
                    ) from e
                image.set_pixel(row, column, pixel)

    logger.debug(f"Read {image.width}x{image.height} image from {path}")
    return image

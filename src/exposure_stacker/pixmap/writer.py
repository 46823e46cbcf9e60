"""
Image Writer
============

Serializes an ImageBuffer as a plain-text pixel map.

Output layout:

    P3
    <width> <height>
    255
    R G B        (one line per pixel, row-major)

The writer does no validation of its own; ImageBuffer already guarantees
every channel is within [0, MAX_INTENSITY].
"""

import logging
from pathlib import Path
from typing import TextIO, Union

from exposure_stacker.errors import ImageWriteError
from exposure_stacker.models.header import MAGIC
from exposure_stacker.models.image import ImageBuffer
from exposure_stacker.models.pixel import MAX_INTENSITY


logger = logging.getLogger(__name__)


def format_header(image: ImageBuffer) -> str:
    """Header text for an image, including the trailing newline."""
    return f"{MAGIC}\n{image.width} {image.height}\n{MAX_INTENSITY}\n"


def write_pixels(outfile: TextIO, image: ImageBuffer) -> None:
    """Write one "R G B" line per pixel in row-major order."""
    for row in image.view():
        outfile.writelines(f"{r} {g} {b}\n" for r, g, b in row.tolist())


def write_image(path: Union[str, Path], image: ImageBuffer) -> None:
    """
    Write an image to disk, truncating any existing file.

    Args:
        path: Destination file path
        image: Fully populated image

    Raises:
        ImageWriteError: If the destination cannot be opened or written
    """
    try:
        outfile = open(path, "w")
    except OSError as e:
        raise ImageWriteError(f"cannot open output file {path}: {e}") from e

    try:
        with outfile:
            outfile.write(format_header(image))
            write_pixels(outfile, image)
    except OSError as e:
        raise ImageWriteError(f"failed writing output file {path}: {e}") from e

    logger.info(f"Wrote {image.width}x{image.height} image to {path}")

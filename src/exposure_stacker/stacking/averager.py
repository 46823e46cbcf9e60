"""
Lock-Step Pixel Averager
========================

Walks the output grid row-major and, for every cell, reads one pixel from
each exposure in exposure order before moving on. The channel mean is the
truncated integer quotient of the channel sum, never rounded:

    mean = sum(channel_i for i in exposures) // len(exposures)

Sums are plain Python ints; each finished row is handed to the image in
one call, which stores it with a single numpy assignment.

Short or malformed pixel data stops the walk immediately with an
ExposureDataError naming the exposure and cell.
"""

import logging
from typing import Tuple

from exposure_stacker.errors import ExposureDataError
from exposure_stacker.models.image import ImageBuffer
from exposure_stacker.stream.exposure import ExposureStreamSet


logger = logging.getLogger(__name__)


def average_pixel(streams: ExposureStreamSet) -> Tuple[int, int, int]:
    """
    Read the next pixel from every exposure and average it.

    Returns:
        The three truncated channel means

    Raises:
        ExposureDataError: If any exposure has no valid next pixel
    """
    red = green = blue = 0
    for stream in streams:
        r, g, b = stream.read_channels()
        red += r
        green += g
        blue += b
    count = len(streams)
    return red // count, green // count, blue // count


def average_exposures(streams: ExposureStreamSet, image: ImageBuffer) -> None:
    """
    Fill the image with the per-channel mean of all exposures.

    Args:
        streams: Validated exposures, each positioned at its first pixel
        image: Output image with width and height already set

    Raises:
        ExposureDataError: If an exposure runs out of data or a pixel
            token fails to parse
    """
    logger.info(
        f"Averaging {len(streams)} exposures over {image.width}x{image.height} pixels"
    )

    for row in range(image.height):
        means = []
        for column in range(image.width):
            try:
                means.append(average_pixel(streams))
            except ExposureDataError as e:
                raise ExposureDataError(
                    f"{e} at pixel ({row}, {column})",
                    stream_index=e.stream_index,
                    row=row,
                    column=column,
                ) from e
        image.set_row(row, means)

    logger.debug(f"Averaged {image.pixel_count} pixels")

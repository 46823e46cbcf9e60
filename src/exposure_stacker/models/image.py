"""
Image Buffer
============

Bounded 2-D grid of RGB pixels.

The grid is allocated once at MAX_DIMENSION x MAX_DIMENSION so its memory
footprint does not depend on the image being processed. The logical extent
(width, height) is tracked separately and every accessor is checked against
it, so cells outside the extent are never read.

Indexing is [row][column], i.e. (y, x).
"""

from typing import Iterator, Sequence, Tuple, Union

import numpy as np

from exposure_stacker.models.pixel import MAX_INTENSITY, Pixel


MAX_DIMENSION = 600


class ImageBuffer:
    """
    Fixed-capacity RGB image.

    Attributes:
        width: Logical width in pixels
        height: Logical height in pixels

    Example:
        image = ImageBuffer()
        image.set_dimensions(width=2, height=1)
        image.set_pixel(0, 1, Pixel(10, 20, 30))
        image.get_pixel(0, 1)   # Pixel(red=10, green=20, blue=30)
    """

    def __init__(self) -> None:
        self._data = np.zeros((MAX_DIMENSION, MAX_DIMENSION, 3), dtype=np.uint8)
        self._width: int = 0
        self._height: int = 0

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def capacity(self) -> int:
        """Physical size of each grid axis."""
        return MAX_DIMENSION

    @property
    def pixel_count(self) -> int:
        return self._width * self._height

    def set_dimensions(self, width: int, height: int) -> None:
        """
        Set the logical extent of the image.

        Raises:
            ValueError: If either dimension is outside [0, MAX_DIMENSION]
        """
        if not 0 <= width <= MAX_DIMENSION:
            raise ValueError(f"width must be in [0, {MAX_DIMENSION}], got {width}")
        if not 0 <= height <= MAX_DIMENSION:
            raise ValueError(f"height must be in [0, {MAX_DIMENSION}], got {height}")
        self._width = width
        self._height = height

    def _check_cell(self, row: int, column: int) -> None:
        if not (0 <= row < self._height and 0 <= column < self._width):
            raise IndexError(
                f"cell ({row}, {column}) outside {self._width}x{self._height} image"
            )

    def get_pixel(self, row: int, column: int) -> Pixel:
        self._check_cell(row, column)
        red, green, blue = (int(v) for v in self._data[row, column])
        return Pixel(red, green, blue)

    def set_pixel(
        self,
        row: int,
        column: int,
        pixel: Union[Pixel, Sequence[int], np.ndarray],
    ) -> None:
        """
        Store a pixel at (row, column).

        Accepts a Pixel or any 3-sequence of channel values; the values are
        bounds-checked through Pixel before they reach the uint8 grid.
        """
        self._check_cell(row, column)
        if not isinstance(pixel, Pixel):
            pixel = Pixel(*(int(v) for v in pixel))
        self._data[row, column] = pixel.as_tuple()

    def set_row(self, row: int, pixels: Union[Sequence[Sequence[int]], np.ndarray]) -> None:
        """
        Store a whole row of width RGB triples at once.

        Raises:
            IndexError: If row is outside the image
            ValueError: If the row has the wrong shape or a channel is
                outside [0, MAX_INTENSITY]
        """
        if not 0 <= row < self._height:
            raise IndexError(f"row {row} outside {self._width}x{self._height} image")
        values = np.asarray(pixels, dtype=np.int64).reshape(-1, 3)
        if values.shape[0] != self._width:
            raise ValueError(f"row has {values.shape[0]} pixels, expected {self._width}")
        if values.size and (values.min() < 0 or values.max() > MAX_INTENSITY):
            raise ValueError(f"row {row} has a channel outside [0, {MAX_INTENSITY}]")
        self._data[row, : self._width] = values

    def view(self) -> np.ndarray:
        """Read-only view of the logical extent, shape (height, width, 3)."""
        extent = self._data[: self._height, : self._width]
        extent.flags.writeable = False
        return extent

    def iter_pixels(self) -> Iterator[Tuple[int, int, Pixel]]:
        """Yield (row, column, pixel) in row-major order."""
        for row in range(self._height):
            for column in range(self._width):
                yield row, column, self.get_pixel(row, column)

    def __repr__(self) -> str:
        return f"ImageBuffer(width={self._width}, height={self._height})"

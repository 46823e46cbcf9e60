"""
Exposure Streams
================

Ordered, fixed-size set of exposure streams read in lock-step.

Each ExposureStream owns one open text file and tracks an explicit state.
ExposureStreamSet holds exactly EXPOSURE_COUNT of them, in a stable order,
and closes every one of them when the set is closed, whether or not it
opened.

Design Rules:
    - Iteration order is the exposure order (stream 0 first)
    - Streams are owned by one pipeline run and never shared
    - close() on a stream that never opened is a no-op

Example:
    with ExposureStreamSet(paths) as streams:
        streams.open_all()
        for stream in streams:
            stream.rewind()
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, TextIO, Tuple, Union

from exposure_stacker.errors import ExposureDataError, ExposureOpenError
from exposure_stacker.models.pixel import MAX_INTENSITY, Pixel
from exposure_stacker.stream.tokens import TokenReader


logger = logging.getLogger(__name__)


EXPOSURE_COUNT = 10


class StreamState(str, Enum):
    """
    Lifecycle state of one exposure stream.

    Attributes:
        PENDING: Not opened yet
        OPEN: Opened, header not yet validated
        FAILED: Could not be opened
        VALIDATED: Header validated, positioned at the first pixel
        EXHAUSTED: Ran out of pixel tokens mid-grid
        BAD_DATA: Hit a malformed or out-of-range pixel token
        CLOSED: Released
    """

    PENDING = "PENDING"
    OPEN = "OPEN"
    FAILED = "FAILED"
    VALIDATED = "VALIDATED"
    EXHAUSTED = "EXHAUSTED"
    BAD_DATA = "BAD_DATA"
    CLOSED = "CLOSED"


class ExposureStream:
    """
    One exposure file and its read position.

    Attributes:
        index: Position of this exposure in the set (0-based)
        path: File path of the exposure
        state: Current StreamState
    """

    def __init__(self, index: int, path: Union[str, Path]) -> None:
        self.index = index
        self.path = Path(path)
        self.state = StreamState.PENDING
        self._handle: Optional[TextIO] = None
        self._reader: Optional[TokenReader] = None

    @property
    def is_open(self) -> bool:
        return self._handle is not None

    @property
    def reader(self) -> TokenReader:
        """
        Token reader for this stream.

        Raises:
            ExposureOpenError: If the stream is not open
        """
        if self._reader is None:
            raise ExposureOpenError(f"exposure {self.index} ({self.path}) is not open")
        return self._reader

    def open(self) -> bool:
        """
        Open the exposure file for reading.

        Returns:
            True if the file opened, False otherwise (state becomes FAILED)
        """
        try:
            self._handle = open(self.path, "r")
        except OSError as e:
            logger.error(f"Failed to open exposure {self.index}: {self.path} ({e})")
            self.state = StreamState.FAILED
            return False

        self._reader = TokenReader(self._handle)
        self.state = StreamState.OPEN
        logger.debug(f"Opened exposure {self.index}: {self.path}")
        return True

    def rewind(self) -> None:
        """
        Return to the start of the file and clear any error state.

        Raises:
            ExposureOpenError: If the stream is not open
        """
        self.reader.rewind()
        self.state = StreamState.OPEN

    def read_channels(self) -> Tuple[int, int, int]:
        """
        Read the next RGB triple as plain ints.

        Raises:
            ExposureDataError: If the stream is exhausted or a token is
                not a valid channel value
        """
        reader = self.reader
        try:
            red = reader.next_int()
            green = reader.next_int()
            blue = reader.next_int()
        except EOFError as e:
            self.state = StreamState.EXHAUSTED
            raise ExposureDataError(
                f"exposure {self.index} ({self.path}) ran out of pixel data",
                stream_index=self.index,
            ) from e
        except ValueError as e:
            self.state = StreamState.BAD_DATA
            raise ExposureDataError(
                f"exposure {self.index} ({self.path}): {e}",
                stream_index=self.index,
            ) from e

        if not (
            0 <= red <= MAX_INTENSITY
            and 0 <= green <= MAX_INTENSITY
            and 0 <= blue <= MAX_INTENSITY
        ):
            self.state = StreamState.BAD_DATA
            raise ExposureDataError(
                f"exposure {self.index} ({self.path}): channel outside "
                f"[0, {MAX_INTENSITY}] in {red} {green} {blue}",
                stream_index=self.index,
            )

        return red, green, blue

    def read_pixel(self) -> Pixel:
        """Read the next RGB triple as a Pixel (see read_channels)."""
        return Pixel(*self.read_channels())

    def close(self) -> None:
        """Release the file handle. Safe to call on an unopened stream."""
        if self._handle is not None:
            self._handle.close()
            logger.debug(f"Closed exposure {self.index}: {self.path}")
        self._handle = None
        self._reader = None
        self.state = StreamState.CLOSED

    def __repr__(self) -> str:
        return f"ExposureStream(index={self.index}, path='{self.path}', state={self.state.value})"


class ExposureStreamSet:
    """
    Ordered collection of EXPOSURE_COUNT exposure streams.

    Used as a context manager so every stream is closed on every exit path.

    Attributes:
        streams: The exposure streams, in exposure order
    """

    def __init__(self, paths: Sequence[Union[str, Path]]) -> None:
        """
        Create the stream set (nothing is opened yet).

        Args:
            paths: Exposure file paths, in exposure order

        Raises:
            ValueError: If the number of paths is not EXPOSURE_COUNT
        """
        if len(paths) != EXPOSURE_COUNT:
            raise ValueError(
                f"expected {EXPOSURE_COUNT} exposures, got {len(paths)}"
            )
        self.streams: List[ExposureStream] = [
            ExposureStream(index, path) for index, path in enumerate(paths)
        ]

    def __len__(self) -> int:
        return len(self.streams)

    def __iter__(self) -> Iterator[ExposureStream]:
        return iter(self.streams)

    def __getitem__(self, index: int) -> ExposureStream:
        return self.streams[index]

    def __enter__(self) -> "ExposureStreamSet":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close_all()

    def open_all(self) -> None:
        """
        Open every exposure, attempting all of them before reporting.

        Raises:
            ExposureOpenError: If any exposure failed to open
        """
        failed = [stream for stream in self.streams if not stream.open()]
        if failed:
            names = ", ".join(str(stream.path) for stream in failed)
            raise ExposureOpenError(
                f"{len(failed)} of {len(self.streams)} exposures could not be opened: {names}"
            )
        logger.info(f"Opened {len(self.streams)} exposures")

    def close_all(self) -> None:
        for stream in self.streams:
            stream.close()

    def states(self) -> List[StreamState]:
        """Current state of every stream, in order."""
        return [stream.state for stream in self.streams]

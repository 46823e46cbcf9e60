"""
Stacker Exceptions
==================

Exception hierarchy for the stacking pipeline.

Every exception carries the ErrorKind that the pipeline reports for it, so
the driver can turn any failure into a StackResult without inspecting
exception types one by one.
"""

from typing import Optional

from exposure_stacker.models.result import ErrorKind


class StackError(Exception):
    """Base class for all stacking failures."""

    kind: ErrorKind = ErrorKind.DATA

    def __init__(self, message: str, kind: Optional[ErrorKind] = None) -> None:
        super().__init__(message)
        if kind is not None:
            self.kind = kind


class ExposureOpenError(StackError):
    """Raised when one or more exposure files cannot be opened."""

    kind = ErrorKind.OPEN


class HeaderError(StackError):
    """Raised when a pixel-map header is missing, malformed or out of range."""

    kind = ErrorKind.HEADER


class ExposureDataError(StackError):
    """Raised when pixel data runs out or fails to parse mid-grid."""

    kind = ErrorKind.DATA

    def __init__(
        self,
        message: str,
        stream_index: Optional[int] = None,
        row: Optional[int] = None,
        column: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.stream_index = stream_index
        self.row = row
        self.column = column


class ImageWriteError(StackError):
    """Raised when the output pixel map cannot be written."""

    kind = ErrorKind.WRITE

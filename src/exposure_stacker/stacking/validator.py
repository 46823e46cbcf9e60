"""
Cross-File Validator
====================

Checks that every exposure carries a valid header and that all of them agree
on width and height, before any averaging starts.

Every stream is checked even after a failure so that all problems are
reported in one pass. On success each stream is left at its first pixel
token and the output image is dimensioned from the first exposure.

Failure Sources:
    - OPEN: a stream is not open
    - HEADER: a header fails magic, max-intensity or dimension checks
    - CONSISTENCY: a later exposure's width/height differs from the first
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from exposure_stacker.errors import ExposureOpenError, HeaderError
from exposure_stacker.models.image import ImageBuffer
from exposure_stacker.models.result import ErrorKind
from exposure_stacker.pixmap.header import parse_header
from exposure_stacker.stream.exposure import ExposureStreamSet, StreamState


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """One problem found with one exposure."""

    stream_index: int
    kind: ErrorKind
    message: str


@dataclass
class ValidationReport:
    """
    Outcome of validating the exposure set.

    Attributes:
        width: Agreed width (None if no exposure validated)
        height: Agreed height (None if no exposure validated)
        issues: Every problem found, in exposure order
    """

    width: Optional[int] = None
    height: Optional[int] = None
    issues: List[ValidationIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues and self.width is not None

    def __bool__(self) -> bool:
        return self.ok

    @property
    def error(self) -> Optional[ErrorKind]:
        """Kind of the first issue, None if valid."""
        return self.issues[0].kind if self.issues else None

    def summary(self) -> str:
        return "; ".join(
            f"exposure {issue.stream_index + 1}: {issue.message}" for issue in self.issues
        )


def preread_headers(streams: ExposureStreamSet) -> int:
    """
    Read each open stream's header once and log the ones that fail.

    This is diagnostic only; validate_exposures() rewinds and checks again.

    Returns:
        Number of headers that parsed cleanly
    """
    valid = 0
    for stream in streams:
        if not stream.is_open:
            logger.warning(f"Exposure {stream.index + 1} not open")
            continue
        try:
            parse_header(stream.reader)
            valid += 1
        except HeaderError as e:
            logger.warning(f"Exposure {stream.index + 1}: {e}")
    return valid


def validate_exposures(streams: ExposureStreamSet, image: ImageBuffer) -> ValidationReport:
    """
    Validate all exposures and dimension the output image.

    Args:
        streams: Opened exposure set
        image: Output image; its dimensions are set on success

    Returns:
        ValidationReport; truthy only if every exposure validated and agreed
    """
    report = ValidationReport()

    for stream in streams:
        try:
            stream.rewind()
        except ExposureOpenError as e:
            logger.error(f"Exposure {stream.index + 1} is invalid: {e}")
            report.issues.append(ValidationIssue(stream.index, ErrorKind.OPEN, str(e)))
            continue

        try:
            header = parse_header(stream.reader)
        except HeaderError as e:
            logger.error(f"Invalid header in exposure {stream.index + 1}: {e}")
            report.issues.append(ValidationIssue(stream.index, ErrorKind.HEADER, str(e)))
            continue

        if report.width is None:
            report.width = header.width
            report.height = header.height
        elif (header.width, header.height) != (report.width, report.height):
            message = (
                f"dimension mismatch: {header.width}x{header.height} "
                f"!= {report.width}x{report.height}"
            )
            logger.error(f"Exposure {stream.index + 1}: {message}")
            report.issues.append(
                ValidationIssue(stream.index, ErrorKind.CONSISTENCY, message)
            )
            continue

        stream.state = StreamState.VALIDATED

    if report.ok:
        image.set_dimensions(report.width, report.height)
        logger.info(
            f"Validated {len(streams)} exposures: {report.width}x{report.height}"
        )

    return report

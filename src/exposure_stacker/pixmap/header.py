"""
Header Parser
=============

Reads and validates the four-token header of a plain-text pixel map.

Missing tokens, non-integer tokens and out-of-range values are all reported
the same way, as a HeaderError. After a failure the stream position is
undefined; rewind before reusing it.
"""

import logging

from exposure_stacker.errors import HeaderError
from exposure_stacker.models.header import HeaderRecord
from exposure_stacker.stream.tokens import TokenReader


logger = logging.getLogger(__name__)


def parse_header(reader: TokenReader) -> HeaderRecord:
    """
    Parse and validate one header.

    Leaves the reader positioned at the first pixel token.

    Args:
        reader: Token reader positioned at the start of a pixel map

    Returns:
        The validated HeaderRecord

    Raises:
        HeaderError: If the header is missing, malformed or fails the
            magic, max-intensity or dimension checks
    """
    try:
        magic = reader.next_token()
        width = reader.next_int()
        height = reader.next_int()
        max_intensity = reader.next_int()
    except (EOFError, ValueError) as e:
        raise HeaderError(f"unreadable header: {e}") from e

    record = HeaderRecord(
        magic=magic,
        width=width,
        height=height,
        max_intensity=max_intensity,
    )

    problems = record.problems()
    if problems:
        raise HeaderError(f"invalid header: {'; '.join(problems)}")

    return record

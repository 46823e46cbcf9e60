"""
Token Reader
============

Whitespace-delimited token stream over a text file.

Pixel maps are a flat sequence of tokens with no significance attached to
line breaks, so the reader pulls one line at a time and hands tokens out
individually. The underlying file position only moves forward in whole lines;
rewind() resets both the file and the pending tokens.
"""

import logging
import re
from collections import deque
from typing import Deque, TextIO


logger = logging.getLogger(__name__)


# Optional sign followed by ASCII digits
INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")


class TokenReader:
    """
    Sequential token reader with rewind support.

    Attributes:
        tokens_read: Number of tokens handed out since the last rewind

    Example:
        with open("orion_001.ppm") as f:
            reader = TokenReader(f)
            magic = reader.next_token()
            width = reader.next_int()
    """

    def __init__(self, handle: TextIO) -> None:
        self._handle = handle
        self._pending: Deque[str] = deque()
        self._tokens_read: int = 0

    @property
    def tokens_read(self) -> int:
        return self._tokens_read

    def next_token(self) -> str:
        """
        Return the next token.

        Raises:
            EOFError: If the stream has no more tokens
        """
        while not self._pending:
            line = self._handle.readline()
            if not line:
                raise EOFError(f"end of stream after {self._tokens_read} tokens")
            self._pending.extend(line.split())
        self._tokens_read += 1
        return self._pending.popleft()

    def next_int(self) -> int:
        """
        Return the next token as an integer.

        Raises:
            EOFError: If the stream has no more tokens
            ValueError: If the token is not an integer
        """
        token = self.next_token()
        if not INTEGER_TOKEN.fullmatch(token):
            raise ValueError(
                f"token {self._tokens_read} is not an integer: {token!r}"
            )
        return int(token)

    def rewind(self) -> None:
        """Seek back to the start of the stream and drop pending tokens."""
        self._handle.seek(0)
        self._pending.clear()
        self._tokens_read = 0

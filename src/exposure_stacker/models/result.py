"""
Stage Results
=============

Error codes and the result value returned by the stacking pipeline.

Each stage reports its outcome explicitly; the driver composes them into a
single StackResult and the command line turns that into an exit status.

Rules:
    - Exactly one ErrorKind per failed run
    - Every detected error is terminal for the run
    - exit_code is 0 only for a successful run
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


EXIT_SUCCESS = 0
EXIT_FAILURE = 1


class ErrorKind(str, Enum):
    """
    Machine-readable failure categories.

    Attributes:
        ARGUMENTS: Wrong number of command-line arguments
        OPEN: An exposure (or the output) could not be opened
        HEADER: A header failed magic, max-intensity or dimension checks
        CONSISTENCY: Exposure dimensions disagree
        DATA: Pixel data ran out or failed to parse while averaging
        WRITE: The output pixel map could not be written
    """

    ARGUMENTS = "ARGUMENTS"
    OPEN = "OPEN"
    HEADER = "HEADER"
    CONSISTENCY = "CONSISTENCY"
    DATA = "DATA"
    WRITE = "WRITE"


class StackResult(BaseModel):
    """
    Outcome of one stacking run.

    Attributes:
        success: Whether the output image was written
        error: Failure category, None on success
        message: Human-readable summary
        output_path: Path of the written (or intended) output file
        width: Width of the stacked image, once known
        height: Height of the stacked image, once known
    """

    success: bool = Field(..., description="Whether the output image was written")

    error: Optional[ErrorKind] = Field(
        default=None,
        description="Failure category (None on success)",
    )

    message: str = Field(default="", description="Human-readable summary")

    output_path: Optional[str] = Field(
        default=None,
        description="Path of the output pixel map",
    )

    width: Optional[int] = Field(default=None, ge=0, description="Image width")
    height: Optional[int] = Field(default=None, ge=0, description="Image height")

    @property
    def exit_code(self) -> int:
        """Process exit status for this result."""
        return EXIT_SUCCESS if self.success else EXIT_FAILURE

    @classmethod
    def failure(
        cls,
        error: ErrorKind,
        message: str,
        output_path: Optional[str] = None,
    ) -> "StackResult":
        """Build a failed result."""
        return cls(
            success=False,
            error=error,
            message=message,
            output_path=output_path,
        )

"""
Stacking Module
===============

Validation and averaging of exposure sets.

Components:
    - validate_exposures: Cross-file header and geometry checks
    - average_exposures: Lock-step truncated mean of all exposures
    - exposure_paths / output_path: File naming from a base name
    - StackPipeline: Open, validate, average and write in one run
"""

from exposure_stacker.stacking.validator import (
    ValidationIssue,
    ValidationReport,
    preread_headers,
    validate_exposures,
)
from exposure_stacker.stacking.averager import average_exposures, average_pixel
from exposure_stacker.stacking.naming import exposure_paths, output_path
from exposure_stacker.stacking.pipeline import StackPipeline


__all__ = [
    "ValidationIssue",
    "ValidationReport",
    "preread_headers",
    "validate_exposures",
    "average_pixel",
    "average_exposures",
    "exposure_paths",
    "output_path",
    "StackPipeline",
]

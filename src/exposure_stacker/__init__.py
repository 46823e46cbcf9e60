"""
Exposure Stacker
================

Noise reduction by averaging ten co-registered exposures of the same scene.

Each exposure is a plain-text pixel map (P3). The stacker validates that all
ten exposures agree on format and geometry, walks them in lock-step and writes
the per-channel truncated mean as a new pixel map.

Components:
    - models: Pixel, HeaderRecord, ImageBuffer, result and error codes
    - stream: Token reading and the ordered exposure stream set
    - pixmap: Header parsing, reading and writing of pixel maps
    - stacking: Validation, lock-step averaging and the pipeline driver

Example:
    from exposure_stacker.stacking import StackPipeline

    result = StackPipeline().run("orion")
    if not result.success:
        print(result.error, result.message)
"""

__version__ = "0.1.0"
__author__ = "Exposure Stacker Project"

__all__ = [
    "__version__",
]

"""
Exposure Stacker Command Line
=============================

Entry point for stacking one exposure set.

Usage:
    exposure-stacker orion
    exposure-stacker --image-dir ./imageFiles orion
    exposure-stacker --config config.yaml --log-level DEBUG orion

Reads <image_dir>/orion/orion_001.ppm ... orion_010.ppm and writes
<image_dir>/orion.ppm. Exits 0 on success, 1 on any failure.
"""

import argparse
import logging
import sys
from typing import List, Optional

from exposure_stacker.config import load_config, settings as default_settings, setup_logging
from exposure_stacker.models.result import ErrorKind, StackResult
from exposure_stacker.stacking.pipeline import StackPipeline


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exposure-stacker",
        description="Denoise an image by averaging ten exposures of the same scene",
    )
    parser.add_argument(
        "names",
        nargs="*",
        metavar="NAME",
        help="Base name of the exposure set (exactly one)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config.yaml",
    )
    parser.add_argument(
        "--image-dir",
        default=None,
        help="Directory holding exposure folders (overrides config)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (overrides config)",
    )
    return parser


def run(argv: Optional[List[str]] = None) -> StackResult:
    """
    Parse arguments and run the pipeline.

    Args:
        argv: Command-line arguments (without program name)

    Returns:
        StackResult of the run
    """
    args = build_parser().parse_intermixed_args(argv)

    settings = load_config(args.config) if args.config else default_settings.model_copy(deep=True)
    if args.image_dir:
        settings.stack.image_dir = args.image_dir
    if args.log_level:
        settings.logging.level = args.log_level
    setup_logging(settings)

    if len(args.names) != 1:
        message = f"expected exactly one image name, got {len(args.names)}"
        logger.error(f"Usage error: {message}")
        return StackResult.failure(ErrorKind.ARGUMENTS, message)

    result = StackPipeline(settings).run(args.names[0])

    if result.success:
        logger.info(f"Use an image viewer (e.g. `display`) to view: {result.output_path}")
    else:
        logger.error(f"Stacking failed [{result.error.value}]: {result.message}")

    return result


def main(argv: Optional[List[str]] = None) -> int:
    """Console entry point; returns the process exit status."""
    return run(argv).exit_code


if __name__ == "__main__":
    sys.exit(main())

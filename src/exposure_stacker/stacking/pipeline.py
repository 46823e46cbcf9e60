"""
Stacking Pipeline
=================

Composes the stacking stages into one run:

    open -> pre-read headers -> validate -> average -> write

Each stage either succeeds or raises a StackError (validation reports its
issues in a ValidationReport instead). The pipeline converts any failure into
a StackResult carrying the matching ErrorKind. Exposure streams are closed
on every path out of run().

Example:
    pipeline = StackPipeline()
    result = pipeline.run("orion")
    sys.exit(result.exit_code)
"""

import logging
from pathlib import Path
from typing import List, Optional

from exposure_stacker.config import Settings, settings as default_settings
from exposure_stacker.errors import StackError
from exposure_stacker.models.image import ImageBuffer
from exposure_stacker.models.result import StackResult
from exposure_stacker.pixmap.writer import write_image
from exposure_stacker.stacking.averager import average_exposures
from exposure_stacker.stacking.naming import exposure_paths, output_path
from exposure_stacker.stacking.validator import preread_headers, validate_exposures
from exposure_stacker.stream.exposure import ExposureStreamSet


logger = logging.getLogger(__name__)


class StackPipeline:
    """
    Runs one denoising stack from exposures on disk to an output pixel map.

    Attributes:
        settings: Loaded configuration (image directory, extension)
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or default_settings

    def run(self, base_name: str) -> StackResult:
        """
        Stack the exposures for base_name.

        Args:
            base_name: Name of the exposure set (directory and file prefix)

        Returns:
            StackResult describing success or the first failure category
        """
        inputs = exposure_paths(base_name, self.settings.stack)
        destination = output_path(base_name, self.settings.stack)

        for path in inputs:
            logger.debug(f"Exposure: {path}")

        return self.stack(inputs, destination)

    def stack(self, inputs: List[Path], destination: Path) -> StackResult:
        """
        Stack explicit exposure paths into destination.

        Args:
            inputs: Exposure paths, in exposure order
            destination: Output pixel-map path

        Returns:
            StackResult for the run
        """
        logger.info("Processing images ...")
        image = ImageBuffer()

        with ExposureStreamSet(inputs) as streams:
            try:
                streams.open_all()
            except StackError as e:
                logger.error(str(e))
                return StackResult.failure(e.kind, str(e), str(destination))

            preread_headers(streams)

            report = validate_exposures(streams, image)
            if not report:
                logger.error(f"Validation failed: {report.summary()}")
                return StackResult.failure(
                    report.error, report.summary(), str(destination)
                )

            try:
                average_exposures(streams, image)
            except StackError as e:
                logger.error(f"Averaging failed: {e}")
                return StackResult.failure(e.kind, str(e), str(destination))

        try:
            write_image(destination, image)
        except StackError as e:
            logger.error(str(e))
            return StackResult.failure(e.kind, str(e), str(destination))

        logger.info("Done processing")
        return StackResult(
            success=True,
            message=f"stacked {len(inputs)} exposures",
            output_path=str(destination),
            width=image.width,
            height=image.height,
        )

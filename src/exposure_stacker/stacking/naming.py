"""
Exposure Naming
===============

Derives exposure and output paths from a base name:

    <image_dir>/<base>/<base>_001<ext> ... <base>_010<ext>   (exposures)
    <image_dir>/<base><ext>                                    (output)
"""

from pathlib import Path
from typing import List, Optional

from exposure_stacker.config import StackConfig


def exposure_paths(base_name: str, config: Optional[StackConfig] = None) -> List[Path]:
    """Paths of the numbered exposures for base_name, in exposure order."""
    config = config or StackConfig()
    directory = Path(config.image_dir) / base_name
    return [
        directory / f"{base_name}_{number:0{config.index_width}d}{config.extension}"
        for number in range(1, config.exposure_count + 1)
    ]


def output_path(base_name: str, config: Optional[StackConfig] = None) -> Path:
    """Path of the stacked output image for base_name."""
    config = config or StackConfig()
    return Path(config.image_dir) / f"{base_name}{config.extension}"

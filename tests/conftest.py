"""
Test Configuration
==================

Pytest fixtures and test configuration for the exposure stacker.
"""

from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

import pytest

from exposure_stacker.config import Settings, StackConfig


Triple = Tuple[int, int, int]


def write_pixmap(
    path: Path,
    width: int,
    height: int,
    pixels: Sequence[Triple],
    magic: str = "P3",
    max_intensity: int = 255,
) -> Path:
    """Write a plain-text pixel map with one pixel per line."""
    path.parent.mkdir(parents=True, exist_ok=True)
    lines = [magic, f"{width} {height}", str(max_intensity)]
    lines.extend(f"{r} {g} {b}" for r, g, b in pixels)
    path.write_text("\n".join(lines) + "\n")
    return path


@pytest.fixture
def image_dir(tmp_path: Path) -> Path:
    """Empty image directory inside the test's temp dir."""
    directory = tmp_path / "imageFiles"
    directory.mkdir()
    return directory


@pytest.fixture
def stack_settings(image_dir: Path) -> Settings:
    """Settings pointing at the temp image directory."""
    return Settings(stack=StackConfig(image_dir=str(image_dir)))


@pytest.fixture
def make_exposures(image_dir: Path) -> Callable[..., List[Path]]:
    """
    Factory writing ten exposures for a base name.

    Call with a list of ten pixel lists (one per exposure). Optional
    per-exposure overrides for width/height/magic/max_intensity can be
    given as dicts keyed by exposure index (0-based).
    """

    def _make(
        base: str,
        width: int,
        height: int,
        exposures: Sequence[Sequence[Triple]],
        overrides: Optional[dict] = None,
    ) -> List[Path]:
        overrides = overrides or {}
        paths = []
        for index, pixels in enumerate(exposures):
            header = {"width": width, "height": height, **overrides.get(index, {})}
            path = image_dir / base / f"{base}_{index + 1:03d}.ppm"
            paths.append(write_pixmap(path, pixels=pixels, **header))
        return paths

    return _make


@pytest.fixture
def uniform_exposures() -> Callable[[int, int, Triple], List[List[Triple]]]:
    """Ten identical exposures filled with one pixel value."""

    def _uniform(width: int, height: int, pixel: Triple) -> List[List[Triple]]:
        return [[pixel] * (width * height) for _ in range(10)]

    return _uniform


@pytest.fixture
def pixmap_writer() -> Callable[..., Path]:
    """Expose write_pixmap to tests."""
    return write_pixmap

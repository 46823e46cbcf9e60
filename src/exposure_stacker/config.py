"""
Exposure Stacker Configuration
==============================

This module handles configuration loading for the exposure stacker.

Configuration Sources (in order of precedence):
    1. Environment variables (highest priority)
    2. config.yaml file
    3. Default values (lowest priority)

Environment Variable Mapping:
    EXPOSURE_STACKER_IMAGE_DIR  -> stack.image_dir
    EXPOSURE_STACKER_EXTENSION  -> stack.extension
    EXPOSURE_STACKER_LOG_LEVEL  -> logging.level
    EXPOSURE_STACKER_LOG_FORMAT -> logging.format

Example:
    from exposure_stacker.config import settings

    print(settings.stack.image_dir)
    print(settings.logging.level)
"""

import os
import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from exposure_stacker.stream.exposure import EXPOSURE_COUNT


logger = logging.getLogger(__name__)


# =============================================================================
# Configuration Models
# =============================================================================

class StackConfig(BaseModel):
    """Exposure location and naming configuration."""

    image_dir: str = Field(
        default="imageFiles",
        description="Directory holding <base>/ exposure folders and stacked output",
    )
    extension: str = Field(
        default=".ppm",
        description="File extension of exposures and output",
    )
    exposure_count: int = Field(
        default=EXPOSURE_COUNT,
        description="Number of exposures per stack",
    )
    index_width: int = Field(
        default=3,
        ge=1,
        le=6,
        description="Zero-padded width of the exposure number",
    )

    @field_validator("exposure_count")
    @classmethod
    def validate_exposure_count(cls, v: int) -> int:
        """Only stacks of exactly EXPOSURE_COUNT exposures are supported."""
        if v != EXPOSURE_COUNT:
            raise ValueError(f"exposure_count must be {EXPOSURE_COUNT}")
        return v

    @field_validator("extension")
    @classmethod
    def validate_extension(cls, v: str) -> str:
        """Ensure the extension starts with a dot."""
        if not v.startswith("."):
            v = "." + v
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="text", description="Log format: json or text")

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Accept "json" or "text", case-insensitively."""
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("logging format must be 'json' or 'text'")
        return v


class Settings(BaseModel):
    """
    Main settings class for the exposure stacker.

    Loads configuration from YAML file and environment variables.
    Environment variables take precedence over file values.
    """

    stack: StackConfig = Field(default_factory=StackConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# =============================================================================
# Configuration Loading
# =============================================================================

def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Load configuration from YAML file and environment variables.

    Priority (highest to lowest):
        1. Environment variables
        2. YAML config file
        3. Default values

    Args:
        config_path: Path to config.yaml. If None, searches common locations.

    Returns:
        Settings: Loaded configuration
    """
    if config_path is None:
        search_paths = [
            Path("config.yaml"),
            Path("config.yml"),
            Path(__file__).parent.parent.parent / "config.yaml",
        ]
        for path in search_paths:
            if path.exists():
                config_path = str(path)
                break

    config_data = {}
    if config_path and Path(config_path).exists():
        logger.info(f"Loading config from: {config_path}")
        with open(config_path, "r") as f:
            config_data = yaml.safe_load(f) or {}
    else:
        logger.debug("No config file found, using defaults and environment variables")

    _apply_env_overrides(config_data)

    return Settings.model_validate(config_data)


def _apply_env_overrides(config_data: dict) -> None:
    """Apply environment variable overrides to config data."""

    # Stack settings
    if env_dir := os.environ.get("EXPOSURE_STACKER_IMAGE_DIR"):
        config_data.setdefault("stack", {})["image_dir"] = env_dir
    if env_ext := os.environ.get("EXPOSURE_STACKER_EXTENSION"):
        config_data.setdefault("stack", {})["extension"] = env_ext

    # Logging settings
    if env_log := os.environ.get("EXPOSURE_STACKER_LOG_LEVEL"):
        config_data.setdefault("logging", {})["level"] = env_log
    if env_fmt := os.environ.get("EXPOSURE_STACKER_LOG_FORMAT"):
        config_data.setdefault("logging", {})["format"] = env_fmt


LOG_FORMATS = {
    "json": (
        '{"time": "%(asctime)s", "app": "exposure-stacker", "level": "%(levelname)s", '
        '"module": "%(name)s", "message": "%(message)s"}'
    ),
    "text": "%(asctime)s [exposure-stacker] %(levelname)s %(name)s: %(message)s",
}


def setup_logging(settings: Settings) -> None:
    """
    Configure root logging for a stacking run.

    Unknown level names fall back to INFO.
    """
    log_level = getattr(logging, settings.logging.level.upper(), logging.INFO)
    log_format = LOG_FORMATS[settings.logging.format]

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
    )


# =============================================================================
# Global Settings Instance
# =============================================================================

# Global settings instance - loaded on import
settings = load_config()

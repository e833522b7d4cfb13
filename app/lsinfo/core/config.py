"""Listing configuration and settings.

This module provides the configuration model and loader for the
listing output. Settings are read from the ``[listing]`` table of
``~/.config/lsinfo/config.toml``:

    [listing]
    time_format = "%Y-%m-%d %H:%M"
    color = false
"""

import logging
import tomllib
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from lsinfo.core.paths import get_config_path

logger = logging.getLogger(__name__)

DEFAULT_TIME_FORMAT = "%m/%d/%Y - %H:%M:%S"


class ListingConfig(BaseModel):
    """Configuration for entry rendering.

    Attributes:
        time_format: strftime pattern used for every timestamp.
        color: Whether entry paths are colored by type.
    """

    model_config = ConfigDict(extra="forbid")

    time_format: Annotated[
        str,
        Field(description="strftime pattern for timestamps"),
    ] = DEFAULT_TIME_FORMAT
    color: Annotated[
        bool,
        Field(description="Color entry paths by type"),
    ] = True

    @field_validator("time_format")
    @classmethod
    def validate_time_format(cls, v: str) -> str:
        """Require at least one strftime directive."""
        if "%" not in v:
            msg = f"time_format must contain a strftime directive, got {v!r}"
            raise ValueError(msg)
        return v


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> ListingConfig:
    """Load listing configuration from a TOML file.

    A missing file is not an error: the defaults are returned.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated ListingConfig object.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or its content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return ListingConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    section = data.get("listing", {})
    if not isinstance(section, dict):
        raise ConfigError(f"Invalid 'listing' section in {config_path}")

    try:
        return ListingConfig.model_validate(section)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e

"""
Drive geometry configuration for the swerve_drive library.

This module provides:
- A `DriveGeometryConfig` dataclass describing the module layout
- JSON load/save helpers so a robot's geometry can live in a profile file
"""

import json
import logging
import math
from dataclasses import asdict, dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Union

from .constants import (
    CONFIG_REQUIRED_KEYS,
    DEFAULT_CONFIG_DESCRIPTION,
    DEFAULT_CONFIG_NAME,
    DEFAULT_DIST_FRONT_BACK,
    DEFAULT_DIST_LEFT_RIGHT,
)
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass
class DriveGeometryConfig:
    """Geometry of a four-module swerve base."""
    # Wheel spacing, same linear unit as the velocity commands
    dist_front_back: float = DEFAULT_DIST_FRONT_BACK
    dist_left_right: float = DEFAULT_DIST_LEFT_RIGHT

    # Metadata
    name: str = DEFAULT_CONFIG_NAME
    description: str = DEFAULT_CONFIG_DESCRIPTION
    created_at: str = field(default_factory=lambda: datetime.now().isoformat())
    modified_at: str = field(default_factory=lambda: datetime.now().isoformat())

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DriveGeometryConfig":
        """
        Builds a config from a plain dictionary (e.g. parsed JSON).

        Unknown keys are ignored with a warning.

        Raises:
            ConfigurationError: If a distance is missing, not a number,
                                not finite, or not positive.
        """
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration must be a JSON object, got {type(data).__name__}."
            )

        missing = [key for key in CONFIG_REQUIRED_KEYS if key not in data]
        if missing:
            raise ConfigurationError(f"Configuration is missing required keys: {missing}")

        known = {f for f in cls.__dataclass_fields__}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning(f"Ignoring unknown configuration keys: {unknown}")

        values = {key: value for key, value in data.items() if key in known}
        for key in CONFIG_REQUIRED_KEYS:
            values[key] = _validate_distance(key, values[key])
        return cls(**values)


def _validate_distance(key: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"'{key}' must be a number, got {value!r}.")
    if not math.isfinite(value) or value <= 0:
        raise ConfigurationError(f"'{key}' must be positive and finite, got {value}.")
    return float(value)


def load_config(path: PathLike) -> DriveGeometryConfig:
    """
    Loads a drive geometry configuration from a JSON file.

    Args:
        path: Path to the JSON file.

    Returns:
        The parsed DriveGeometryConfig.

    Raises:
        ConfigurationError: If the file cannot be read, is not valid JSON,
                            or does not describe a valid geometry.
    """
    config_path = Path(path)
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ConfigurationError("Configuration file not found.", path=config_path) from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in configuration: {e}", path=config_path) from e
    except OSError as e:
        raise ConfigurationError(f"Could not read configuration: {e}", path=config_path) from e

    try:
        config = DriveGeometryConfig.from_dict(data)
    except ConfigurationError as e:
        raise ConfigurationError(e.message, path=config_path) from e

    logger.info(f"Loaded configuration '{config.name}' from {config_path}")
    return config


def save_config(config: DriveGeometryConfig, path: PathLike) -> Path:
    """
    Writes a configuration to a JSON file, creating parent directories.

    The config's `modified_at` timestamp is refreshed before writing.

    Returns:
        The path written to.

    Raises:
        ConfigurationError: If the file cannot be written.
    """
    config_path = Path(path)
    config.modified_at = datetime.now().isoformat()
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(config.to_dict(), f, indent=2)
    except OSError as e:
        raise ConfigurationError(f"Could not write configuration: {e}", path=config_path) from e

    logger.info(f"Saved configuration '{config.name}' to {config_path}")
    return config_path

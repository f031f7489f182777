"""
core/config.py
--------------
Centralized configuration management for the nhsnumber package.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from nhsnumber.core.errors import ConfigError

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("digits", "spaced", "hyphenated")


@dataclass
class NhsNumberConfig:
    """
    Configuration object for generation and description.

    Attributes:
        default_quantity:       Numbers to generate when no quantity is given.
        default_valid:          Whether generated numbers carry a correct check digit.
        output_format:          Rendering of generated numbers: ``digits``,
                                ``spaced`` or ``hyphenated``.
        max_attempts:           Consecutive rejected candidates tolerated before
                                generation gives up.
        seed:                   Seed for the generator's random source; ``None``
                                draws from system entropy.
        unknown_region_comment: Descriptor comment when no region matches.
    """

    default_quantity: int = 1
    default_valid: bool = True
    output_format: str = "digits"
    max_attempts: int = 10000
    seed: Optional[int] = None
    unknown_region_comment: str = "Number did not match a known NHS number range"

    def validate(self) -> None:
        """Validate configuration values are within acceptable ranges."""
        if self.default_quantity < 0:
            raise ConfigError("default_quantity must not be negative.")
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigError(
                f"output_format must be one of {', '.join(OUTPUT_FORMATS)}, "
                f"got {self.output_format!r}."
            )
        if self.max_attempts <= 0:
            raise ConfigError("max_attempts must be positive.")


def load_config(path: Union[str, Path]) -> NhsNumberConfig:
    """
    Load configuration overrides from a YAML file.

    Expected YAML structure::

        version: 1
        nhsnumber:
          default_quantity: 5
          output_format: spaced

    Args:
        path: Location of the YAML file.

    Returns:
        A validated :class:`NhsNumberConfig`.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ConfigError:       If the file is not valid YAML or holds unknown keys.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse config YAML: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError("Config file must be a YAML dictionary.")
    if "version" not in data:
        raise ConfigError("Config file missing top-level 'version' key.")

    overrides: Dict[str, Any] = data.get("nhsnumber") or {}
    if not isinstance(overrides, dict):
        raise ConfigError("Config file 'nhsnumber' section must be a dictionary.")

    known = {f.name for f in fields(NhsNumberConfig)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

    config = NhsNumberConfig(**overrides)
    config.validate()
    logger.debug("Loaded config from %s: %s", config_path, overrides)
    return config


# Singleton default config — callers may override by passing their own instance.
DEFAULT_CONFIG = NhsNumberConfig()

"""core sub-package — ranges, regions, registry, configuration, and descriptors."""

from nhsnumber.core.ranges import Range, Region
from nhsnumber.core.registry import FULL_RANGE, REGIONS, RANGES, classify, region_for_tag
from nhsnumber.core.config import NhsNumberConfig, DEFAULT_CONFIG, load_config
from nhsnumber.core.descriptor import NhsNumber, describe
from nhsnumber.core.errors import (
    ConfigError,
    GenerationExhaustedError,
    InvalidRegionArgument,
    UnknownRegionTagError,
)

__all__ = [
    "Range",
    "Region",
    "FULL_RANGE",
    "REGIONS",
    "RANGES",
    "classify",
    "region_for_tag",
    "NhsNumberConfig",
    "DEFAULT_CONFIG",
    "load_config",
    "NhsNumber",
    "describe",
    "ConfigError",
    "GenerationExhaustedError",
    "InvalidRegionArgument",
    "UnknownRegionTagError",
]

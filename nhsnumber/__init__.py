"""
nhsnumber — validation, formatting, classification and generation of NHS numbers
"""

__version__ = "0.1.0"
__author__ = "nhsnumber"

from nhsnumber.core.config import NhsNumberConfig, DEFAULT_CONFIG
from nhsnumber.core.descriptor import NhsNumber, describe
from nhsnumber.core.errors import InvalidRegionArgument, UnknownRegionTagError
from nhsnumber.core.ranges import Range, Region
from nhsnumber.core.registry import FULL_RANGE, REGIONS, classify, region_for_tag
from nhsnumber.generation.generator import generate
from nhsnumber.validation.checksum import calculate_checksum
from nhsnumber.validation.normalizer import normalize, standardise_format
from nhsnumber.validation.validator import is_valid

__all__ = [
    "NhsNumberConfig",
    "DEFAULT_CONFIG",
    "NhsNumber",
    "describe",
    "InvalidRegionArgument",
    "UnknownRegionTagError",
    "Range",
    "Region",
    "FULL_RANGE",
    "REGIONS",
    "classify",
    "region_for_tag",
    "generate",
    "calculate_checksum",
    "normalize",
    "standardise_format",
    "is_valid",
    "__version__",
]

"""validation sub-package — normalisation, checksum, and validity checks."""

from nhsnumber.validation.checksum import calculate_checksum
from nhsnumber.validation.normalizer import format_number, normalize, standardise_format
from nhsnumber.validation.validator import is_valid

__all__ = ["calculate_checksum", "format_number", "normalize", "standardise_format", "is_valid"]

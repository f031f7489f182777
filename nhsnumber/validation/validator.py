"""
validation/validator.py
-----------------------
Single yes/no validity check for NHS numbers.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from nhsnumber.core.errors import InvalidRegionArgument
from nhsnumber.core.ranges import Region
from nhsnumber.validation.checksum import calculate_checksum
from nhsnumber.validation.normalizer import standardise_format

logger = logging.getLogger(__name__)


def is_valid(nhs_number: Union[str, int], for_region: Optional[Region] = None) -> bool:
    """
    Check that *nhs_number* is well formed and carries the correct check digit.

    Args:
        nhs_number: Raw NHS number as text or integer.
        for_region: If given, the number must also fall inside one of the
                    region's ranges.

    Returns:
        ``True`` only if the number normalises, lies in *for_region* (when
        supplied) and its check digit matches the computed checksum.

    Raises:
        InvalidRegionArgument: If *for_region* is not a :class:`Region`.
    """
    if for_region is not None and not isinstance(for_region, Region):
        raise InvalidRegionArgument(for_region)

    canonical = standardise_format(nhs_number)
    if not canonical:
        logger.debug("is_valid: %r is not in a recognised format", nhs_number)
        return False

    if for_region is not None and not for_region.contains_number(canonical):
        logger.debug("is_valid: %s is outside %s", canonical, for_region.label)
        return False

    identifier_digits = canonical[:-1]
    check_digit = int(canonical[-1])
    calculated = calculate_checksum(identifier_digits)
    if calculated != check_digit:
        logger.debug(
            "is_valid: %s check digit %d does not match checksum %s",
            canonical, check_digit, calculated,
        )
        return False
    return True

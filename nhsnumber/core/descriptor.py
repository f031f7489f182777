"""
core/descriptor.py
------------------
Read-only summary of a single NHS number: its parts, checksum, validity
and the region that issued it.

Classes
-------
* :class:`NhsNumber` — the descriptor itself.

Functions
---------
* :func:`describe` — build a descriptor from raw input.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from nhsnumber.core.config import DEFAULT_CONFIG, NhsNumberConfig
from nhsnumber.core.ranges import Region
from nhsnumber.core.registry import classify
from nhsnumber.validation.checksum import calculate_checksum
from nhsnumber.validation.normalizer import standardise_format


@dataclass(frozen=True)
class NhsNumber:
    """
    Snapshot of an NHS number's validity and region.

    Attributes:
        nhs_number:          Canonical form, or the stripped raw text if the
                             input could not be normalised.
        identifier_digits:   Everything before the check digit.
        check_digit:         The final digit, or ``None`` if it is not a digit.
        calculated_checksum: Checksum of ``identifier_digits``, or ``None``
                             if it could not be computed.
        valid:               ``True`` if the check digit matches the checksum.
        region:              The issuing region, if any known region claims
                             the number.
        region_comment:      The region's label, or the "unknown" comment.
    """

    nhs_number: str
    identifier_digits: str
    check_digit: Optional[int]
    calculated_checksum: Optional[int]
    valid: bool
    region: Optional[Region]
    region_comment: str

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialise to a plain dictionary.

        Returns:
            Dict representation, with the region expanded to its label,
            tags and ranges.
        """
        return {
            "nhs_number": self.nhs_number,
            "identifier_digits": self.identifier_digits,
            "check_digit": self.check_digit,
            "calculated_checksum": self.calculated_checksum,
            "valid": self.valid,
            "region": self.region.to_dict() if self.region is not None else None,
            "region_comment": self.region_comment,
        }


def describe(
    nhs_number: Union[str, int],
    config: NhsNumberConfig = DEFAULT_CONFIG,
) -> NhsNumber:
    """
    Build an :class:`NhsNumber` descriptor.

    The input is normalised first. Input that does not normalise is
    described from its stripped text, is never valid and has no region.

    Args:
        nhs_number: Raw NHS number as text or integer.
        config:     Supplies the comment used when no region matches.

    Returns:
        The descriptor.
    """
    canonical = standardise_format(nhs_number)
    text = canonical or str(nhs_number).strip()

    identifier_digits = text[:-1]
    last = text[-1:]
    check_digit = int(last) if last.isascii() and last.isdigit() else None
    calculated_checksum = calculate_checksum(identifier_digits)
    valid = bool(canonical) and check_digit is not None and calculated_checksum == check_digit

    region = classify(canonical) if canonical else None
    region_comment = region.label if region is not None else config.unknown_region_comment

    return NhsNumber(
        nhs_number=text,
        identifier_digits=identifier_digits,
        check_digit=check_digit,
        calculated_checksum=calculated_checksum,
        valid=valid,
        region=region,
        region_comment=region_comment,
    )

"""
generation/generator.py
-----------------------
Random NHS numbers for test data, valid or deliberately invalid.

Candidates are drawn in two steps: a range is picked uniformly from the
pool (the region's ranges, or :data:`FULL_RANGE`), then a nine-digit
identifier prefix is picked uniformly from the prefixes whose numbers fit
inside that range. Ranges are weighted equally regardless of their size.

Prefixes whose checksum is 10 are discarded and redrawn; they cannot carry
a single check digit.

Usage
-----
::

    from nhsnumber.generation import generate
    from nhsnumber.core.registry import REGION_SCOTLAND

    generate(quantity=3, for_region=REGION_SCOTLAND)
    generate(valid=False)
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence, Tuple

from nhsnumber.core.config import DEFAULT_CONFIG, NhsNumberConfig
from nhsnumber.core.errors import GenerationExhaustedError, InvalidRegionArgument
from nhsnumber.core.ranges import Range, Region
from nhsnumber.core.registry import FULL_RANGE
from nhsnumber.validation.checksum import calculate_checksum

logger = logging.getLogger(__name__)


def _prefix_bounds(number_range: Range) -> Tuple[int, int]:
    """
    Lowest and highest nine-digit prefix whose every completion lies in *number_range*.

    Raises:
        ValueError: If the range cannot hold a single prefix.
    """
    low = -(-number_range.start // 10)
    high = (number_range.end - 9) // 10
    if low > high:
        raise ValueError(
            f"Range {number_range.label!r} is too narrow to generate NHS numbers from"
        )
    return low, high


class NhsNumberGenerator:
    """
    Produces random NHS numbers.

    Args:
        config: Supplies defaults, the retry limit and the seed.
        rng:    Random source; if omitted one is created from ``config.seed``.
    """

    def __init__(
        self,
        config: NhsNumberConfig = DEFAULT_CONFIG,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config
        self.rng = rng if rng is not None else random.Random(config.seed)

    def generate(
        self,
        valid: Optional[bool] = None,
        for_region: Optional[Region] = None,
        quantity: Optional[int] = None,
    ) -> List[str]:
        """
        Generate canonical 10-digit NHS numbers.

        Args:
            valid:      Give each number its correct check digit; when
                        ``False`` a different digit is used. Defaults to
                        ``config.default_valid``.
            for_region: Restrict numbers to the ranges of this region.
            quantity:   How many numbers to return. Defaults to
                        ``config.default_quantity``.

        Returns:
            The numbers, in the order they were generated.

        Raises:
            InvalidRegionArgument:    If *for_region* is not a :class:`Region`.
            ValueError:               If *quantity* is negative.
            GenerationExhaustedError: If ``config.max_attempts`` consecutive
                                      candidates are rejected.
        """
        if for_region is not None and not isinstance(for_region, Region):
            raise InvalidRegionArgument(for_region)

        if valid is None:
            valid = self.config.default_valid
        if quantity is None:
            quantity = self.config.default_quantity
        if quantity < 0:
            raise ValueError(f"quantity must not be negative, got {quantity}")

        ranges: Sequence[Range] = for_region.ranges if for_region is not None else (FULL_RANGE,)
        bounds = [_prefix_bounds(r) for r in ranges]

        nhs_numbers: List[str] = []
        rejected = 0
        while len(nhs_numbers) < quantity:
            low, high = self.rng.choice(bounds)
            candidate_str = f"{self.rng.randint(low, high):09d}"
            checksum = calculate_checksum(candidate_str)
            if checksum is None or checksum == 10:
                rejected += 1
                logger.debug("Discarding candidate %s: checksum %s", candidate_str, checksum)
                if rejected >= self.config.max_attempts:
                    raise GenerationExhaustedError(rejected)
                continue
            rejected = 0

            if valid:
                check_digit = checksum
            else:
                check_digit = self.rng.choice([d for d in range(10) if d != checksum])
            nhs_numbers.append(f"{candidate_str}{check_digit}")

        logger.info(
            "Generated %d %s NHS number(s)%s",
            len(nhs_numbers),
            "valid" if valid else "invalid",
            f" for {for_region.label}" if for_region is not None else "",
        )
        return nhs_numbers


def generate(
    valid: bool = True,
    for_region: Optional[Region] = None,
    quantity: int = 1,
    rng: Optional[random.Random] = None,
) -> List[str]:
    """
    Generate *quantity* NHS numbers with a default :class:`NhsNumberGenerator`.

    See :meth:`NhsNumberGenerator.generate` for argument details.
    """
    return NhsNumberGenerator(rng=rng).generate(
        valid=valid, for_region=for_region, quantity=quantity
    )

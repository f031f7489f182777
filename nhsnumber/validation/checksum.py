"""
validation/checksum.py
----------------------
Modulus 11 check digit for NHS numbers.

1. Multiply each of the nine identifier digits by its weight (10 down to 2).
2. Sum the results and take the remainder after division by 11.
3. Subtract the remainder from 11; a result of 11 becomes 0.

A result of 10 cannot be expressed as a single check digit, so no issued
NHS number has nine identifier digits that produce it.
"""

from __future__ import annotations

from typing import Optional

CHECKSUM_WEIGHTS = (10, 9, 8, 7, 6, 5, 4, 3, 2)


def calculate_checksum(identifier_digits: str) -> Optional[int]:
    """
    Compute the check digit for nine identifier digits.

    Args:
        identifier_digits: The first nine characters of an NHS number.

    Returns:
        The checksum in ``0..10``, or ``None`` if the input is not exactly
        nine ASCII digits.
    """
    if len(identifier_digits) != 9:
        return None
    if not (identifier_digits.isascii() and identifier_digits.isdigit()):
        return None

    total = sum(int(d) * w for d, w in zip(identifier_digits, CHECKSUM_WEIGHTS))
    checksum = 11 - (total % 11)
    if checksum == 11:
        checksum = 0
    return checksum

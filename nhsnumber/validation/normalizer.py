"""
validation/normalizer.py
------------------------
Normalisation of NHS numbers into their canonical 10-digit form.

Three textual shapes are accepted::

    9876543210
    987 654 3210
    987-654-3210

Surrounding whitespace is ignored. Integers are zero-padded to ten digits,
so CHI numbers that lose their leading zero in numeric storage still
normalise correctly.
"""

from __future__ import annotations

import re
from typing import Union

GOOD_FORMAT = re.compile(r"[0-9]{10}|[0-9]{3} [0-9]{3} [0-9]{4}|[0-9]{3}-[0-9]{3}-[0-9]{4}")

_SEPARATORS = re.compile(r"[- ]")

_STYLE_SEPARATORS = {"digits": "", "spaced": " ", "hyphenated": "-"}


def standardise_format(nhs_number: Union[str, int]) -> str:
    """
    Convert *nhs_number* into canonical digits-only form.

    Args:
        nhs_number: Text in one of the accepted shapes, or a non-negative integer.

    Returns:
        The 10-digit canonical string, or ``""`` if the input is not in a
        recognised format.
    """
    if isinstance(nhs_number, bool):
        return ""
    if isinstance(nhs_number, int):
        working_number = str(nhs_number).rjust(10, "0")
    else:
        working_number = str(nhs_number).strip()

    if not GOOD_FORMAT.fullmatch(working_number):
        return ""
    return _SEPARATORS.sub("", working_number)


normalize = standardise_format


def format_number(nhs_number: str, style: str = "spaced") -> str:
    """
    Render a canonical NHS number for display.

    Args:
        nhs_number: Canonical 10-digit string.
        style:      ``"digits"``, ``"spaced"`` (``987 654 3210``) or
                    ``"hyphenated"`` (``987-654-3210``).

    Returns:
        The formatted number, or ``""`` if *nhs_number* is not canonical.

    Raises:
        ValueError: If *style* is not recognised.
    """
    try:
        separator = _STYLE_SEPARATORS[style]
    except KeyError:
        raise ValueError(
            f"Unknown format style {style!r}. Valid styles: {sorted(_STYLE_SEPARATORS)}"
        ) from None

    if len(nhs_number) != 10 or not (nhs_number.isascii() and nhs_number.isdigit()):
        return ""
    return separator.join((nhs_number[:3], nhs_number[3:6], nhs_number[6:]))

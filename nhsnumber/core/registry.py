"""
core/registry.py
----------------
Fixed catalogue of NHS number ranges and the regions that issue them.

Every object here is immutable and built once at import time, so the
registry can be shared freely between threads.

Classification walks :data:`REGIONS` in declaration order and the first
region that contains the number wins.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from nhsnumber.core.errors import UnknownRegionTagError
from nhsnumber.core.ranges import Number, Range, Region


# ---------------------------------------------------------------------------
# Ranges
# ---------------------------------------------------------------------------

RANGE_UNALLOCATED_1 = Range(10, 9999999, "Unallocated 1 (not in use)")
RANGE_SCOTLAND = Range(10000000, 3112999999, "Scotland CHI numbers")
RANGE_UNALLOCATED_2 = Range(3113000000, 3199999999, "Unallocated 2 (not in use)")
RANGE_NORTHERN_IRELAND = Range(3200000000, 3999999999, "Northern Ireland H&C Numbers")
RANGE_ENGLAND_WALES_IOM_1 = Range(
    4000000000, 4999999999, "England Wales and IOM NHS Numbers Range 1"
)
RANGE_RESERVED = Range(5000000000, 5999999999, "Reserved Range - not to be issued")
RANGE_ENGLAND_WALES_IOM_2 = Range(
    6000000000, 7999999999, "England Wales and IOM NHS Numbers Range 2"
)
RANGE_EIRE = Range(
    8000000000,
    8599999999,
    "Used within the Republic of Ireland Individual Health Identifier (IHI)",
)
RANGE_UNALLOCATED_3 = Range(8600000000, 8999999999, "Unallocated 3 (not in use)")
RANGE_NOT_ISSUED_SYNTHETIC = Range(
    9000000000, 9999999999, "Not to be issued (Synthetic/test patients PDS)"
)

# Not owned by any region; the default scope for unrestricted generation.
FULL_RANGE = Range(
    10, 9999999999, "Full range of possible numbers, not all are actually valid"
)

RANGES: Dict[str, Range] = {
    "UNALLOCATED_1": RANGE_UNALLOCATED_1,
    "SCOTLAND": RANGE_SCOTLAND,
    "UNALLOCATED_2": RANGE_UNALLOCATED_2,
    "NORTHERN_IRELAND": RANGE_NORTHERN_IRELAND,
    "ENGLAND_WALES_IOM_1": RANGE_ENGLAND_WALES_IOM_1,
    "RESERVED": RANGE_RESERVED,
    "ENGLAND_WALES_IOM_2": RANGE_ENGLAND_WALES_IOM_2,
    "EIRE": RANGE_EIRE,
    "UNALLOCATED_3": RANGE_UNALLOCATED_3,
    "NOT_ISSUED_SYNTHETIC": RANGE_NOT_ISSUED_SYNTHETIC,
}


# ---------------------------------------------------------------------------
# Regions
# ---------------------------------------------------------------------------

REGION_SCOTLAND = Region(
    label="Scotland CHI numbers",
    tags=("scotland", "chi"),
    ranges=(RANGE_SCOTLAND,),
)
REGION_ENGLAND_WALES_IOM = Region(
    label="England Wales and IOM NHS Numbers",
    tags=("england-wales", "e-w-iom", "isle-of-man", "cymru", "wales"),
    ranges=(RANGE_ENGLAND_WALES_IOM_1, RANGE_ENGLAND_WALES_IOM_2),
)
REGION_NORTHERN_IRELAND = Region(
    label="Northern Ireland H&C Numbers",
    tags=("northern-ireland", "ni", "tuaisceart-éireann"),
    ranges=(RANGE_NORTHERN_IRELAND,),
)
REGION_EIRE = Region(
    label="Used within the Republic of Ireland Individual Health Identifier (IHI)",
    tags=(
        "eire",
        "republic-of-ireland",
        "ihi",
        "individual-health-identifier",
        "poblacht-na-héireann",
    ),
    ranges=(RANGE_EIRE,),
)
REGION_SYNTHETIC = Region(
    label="Not to be issued (Synthetic/test patients PDS)",
    tags=("test", "synthetic"),
    ranges=(RANGE_NOT_ISSUED_SYNTHETIC,),
)
REGION_UNALLOCATED = Region(
    label="Unallocated - should not be a valid Number",
    tags=("unallocated",),
    ranges=(RANGE_UNALLOCATED_1, RANGE_UNALLOCATED_2, RANGE_UNALLOCATED_3),
)
REGION_RESERVED = Region(
    label="Reserved and not issued",
    tags=("reserved",),
    ranges=(RANGE_RESERVED,),
)

# Declaration order is classification order.
REGIONS: Dict[str, Region] = {
    "UNALLOCATED": REGION_UNALLOCATED,
    "SCOTLAND": REGION_SCOTLAND,
    "NORTHERN_IRELAND": REGION_NORTHERN_IRELAND,
    "ENGLAND_WALES_IOM": REGION_ENGLAND_WALES_IOM,
    "RESERVED": REGION_RESERVED,
    "EIRE": REGION_EIRE,
    "SYNTHETIC": REGION_SYNTHETIC,
}


def _build_tag_index() -> Dict[str, Region]:
    index: Dict[str, Region] = {}
    for handle, region in REGIONS.items():
        index[handle.lower()] = region
        index[handle.lower().replace("_", "-")] = region
        for tag in region.tags:
            index[tag] = region
    return index


_TAG_INDEX: Dict[str, Region] = _build_tag_index()


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------

def classify(number: Number) -> Optional[Region]:
    """
    Find the region that issued *number*.

    Args:
        number: A canonical 10-digit identifier (or its integer value).

    Returns:
        The first region in :data:`REGIONS` containing the number, or
        ``None`` if no known region claims it.
    """
    for region in REGIONS.values():
        if region.contains_number(number):
            return region
    return None


def region_for_tag(tag: str) -> Region:
    """
    Resolve a tag (``"scotland"``, ``"ni"``) or registry handle
    (``"ENGLAND_WALES_IOM"``) to its :class:`Region`.

    Matching is case-insensitive and ignores surrounding whitespace.

    Raises:
        UnknownRegionTagError: If nothing matches.
    """
    key = tag.strip().lower()
    try:
        return _TAG_INDEX[key]
    except KeyError:
        raise UnknownRegionTagError(tag, all_tags()) from None


def all_tags() -> List[str]:
    """Every tag declared by a region, in registry order."""
    return [tag for region in REGIONS.values() for tag in region.tags]

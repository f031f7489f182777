"""
core/ranges.py
--------------
Numeric ranges of NHS numbers and the regions that own them.

A :class:`Range` is an inclusive interval over the integer value of a
10-digit identifier. A :class:`Region` groups one or more ranges under a
label and a set of lookup tags.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union

Number = Union[str, int]


def _as_int(number: Number) -> Optional[int]:
    """Integer value of a canonical identifier, or ``None`` if it has no digits-only form."""
    if isinstance(number, bool):
        return None
    if isinstance(number, int):
        return number
    text = str(number)
    if text.isascii() and text.isdigit():
        return int(text)
    return None


@dataclass(frozen=True)
class Range:
    """
    Inclusive interval of identifier values.

    Attributes:
        start: Lowest identifier value in the range.
        end:   Highest identifier value in the range.
        label: Human-readable description of the allocation.
    """

    start: int
    end: int
    label: str

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(
                f"Range {self.label!r} has start {self.start} greater than end {self.end}"
            )

    def contains_number(self, number: Number) -> bool:
        value = _as_int(number)
        if value is None:
            return False
        return self.start <= value <= self.end

    def to_dict(self) -> Dict[str, Any]:
        return {"start": self.start, "end": self.end, "label": self.label}


@dataclass(frozen=True)
class Region:
    """
    An administrative allocator of NHS number ranges.

    Attributes:
        label:  Human-readable name, also used as the descriptor comment.
        tags:   Lower-case, hyphenated aliases used to select the region.
        ranges: Ranges owned by the region, in declaration order.
    """

    label: str
    tags: Tuple[str, ...]
    ranges: Tuple[Range, ...]

    def contains_number(self, number: Number) -> bool:
        """Return ``True`` if *number* falls in any range owned by this region."""
        return any(r.contains_number(number) for r in self.ranges)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "label": self.label,
            "tags": list(self.tags),
            "ranges": [r.to_dict() for r in self.ranges],
        }

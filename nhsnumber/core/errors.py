"""
core/errors.py
--------------
Exception types raised by the nhsnumber package.

Malformed identifiers are never an error: normalisation, checksum and
validation report them as negative results. The exceptions below cover
contract violations by the caller and unusable configuration.
"""

from __future__ import annotations

from typing import Iterable, List


class InvalidRegionArgument(TypeError):
    """Raised when ``for_region`` is supplied but is not a :class:`Region`."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"The for_region argument must be of type Region, got {type(value).__name__}"
        )


class UnknownRegionTagError(ValueError):
    """Raised when a tag string does not resolve to any known Region."""

    def __init__(self, tag: str, known_tags: Iterable[str]) -> None:
        self.tag = tag
        self.known_tags: List[str] = sorted(known_tags)
        super().__init__(
            f"Unknown region tag {tag!r}. Known tags: {', '.join(self.known_tags)}"
        )


class GenerationExhaustedError(RuntimeError):
    """Raised when the random source keeps producing unusable candidates."""

    def __init__(self, attempts: int) -> None:
        self.attempts = attempts
        super().__init__(
            f"Gave up after {attempts} consecutive rejected candidates; "
            "is the random source degenerate?"
        )


class ConfigError(ValueError):
    """Raised when configuration values are out of range or cannot be parsed."""

"""generation sub-package — synthetic NHS numbers for testing."""

from nhsnumber.generation.generator import NhsNumberGenerator, generate

__all__ = ["NhsNumberGenerator", "generate"]

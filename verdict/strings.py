"""
String validators.
"""

from .core import fail, succeed
from .types import ValidationResult


def str_(s: str) -> ValidationResult[str]:
    """Accept any string as-is."""
    return succeed(s)


def non_empty(s: str) -> ValidationResult[str]:
    """Fail if the string has no characters."""
    if len(s) < 1:
        return fail("is empty")
    return succeed(s)

"""
Number validators.
"""

import math

from .core import fail, succeed
from .mapping import chain, map_
from .types import ValidationResult, Validator


def num(s: str) -> ValidationResult[float]:
    """Parse a string into a finite float."""
    if len(s) < 1:
        return fail("is not a number")
    try:
        n = float(s)
    except ValueError:
        return fail("is not a number")
    if not math.isfinite(n):
        return fail("is not a number")
    return succeed(n)


def whole_number(n: float) -> ValidationResult[float]:
    """Fail if the number has a fractional part."""
    if isinstance(n, int) or n.is_integer():
        return succeed(n)
    return fail("is not a whole number")


# Parse, require an integral value, then hand back a real int.
int_: Validator[str, int] = map_(int, chain(num, whole_number))


def less_than(limit: float) -> Validator[float, float]:
    """
    Build a validator that fails unless the number is strictly below `limit`.

    Usage:
        less_than(2)(1)  # Ok(1)
        less_than(2)(2)  # Err(Failure("must be less than 2"))
    """

    def check(n: float) -> ValidationResult[float]:
        if not n < limit:
            return fail(f"must be less than {limit}")
        return succeed(n)

    return check

"""
Combinators for building larger validators out of smaller ones.

Two kinds of composition:
- chain: sequential. The output of one validator is the input of the next.
- map_n and map2..map5: applicative. Every validator sees the same original
  input; the first failure in argument order is returned and the remaining
  validators are not run.
"""

from typing import Any, Callable, TypeVar

from .types import Err, Ok, ValidationResult, Validator

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
T = TypeVar("T")


def _ensure_callable(*validators: Any) -> None:
    for position, v in enumerate(validators, start=1):
        if not callable(v):
            raise TypeError(
                f"Validator {position} must be callable, got {type(v).__name__}"
            )


def chain(validator1: Validator[A, B], validator2: Validator[B, C]) -> Validator[A, C]:
    """
    Feed the success value of `validator1` into `validator2`.

    A failure from `validator1` is returned unchanged.

    Usage:
        chain(num, less_than(29))("28")   # Ok(28.0)
        chain(num, less_than(29))("30")   # Err(Failure("must be less than 29"))
        chain(num, less_than(29))("foo")  # Err(Failure("is not a number"))
    """
    _ensure_callable(validator1, validator2)

    def check(a: A) -> ValidationResult[C]:
        return validator1(a).and_then(validator2)

    return check


def map_(f: Callable[[B], T], validator: Validator[A, B]) -> Validator[A, T]:
    """Transform the success value of `validator` with `f`."""
    _ensure_callable(f, validator)

    def check(a: A) -> ValidationResult[T]:
        return validator(a).map(f)

    return check


def map_n(f: Callable[..., T], *validators: Validator[A, Any]) -> Validator[A, T]:
    """
    Run every validator on the same input and combine the values with `f`.

    Validators run left to right. The first Err is returned as soon as it is
    seen, so when several fields are invalid the one listed first is reported.
    """
    _ensure_callable(f, *validators)

    def check(a: A) -> ValidationResult[T]:
        values = []
        for validator in validators:
            result = validator(a)
            match result:
                case Err():
                    return result
                case Ok(value):
                    values.append(value)
        return Ok(f(*values))

    return check


def map2(f: Callable[..., T], v1: Validator, v2: Validator) -> Validator[Any, T]:
    return map_n(f, v1, v2)


def map3(
    f: Callable[..., T], v1: Validator, v2: Validator, v3: Validator
) -> Validator[Any, T]:
    return map_n(f, v1, v2, v3)


def map4(
    f: Callable[..., T],
    v1: Validator,
    v2: Validator,
    v3: Validator,
    v4: Validator,
) -> Validator[Any, T]:
    return map_n(f, v1, v2, v3, v4)


def map5(
    f: Callable[..., T],
    v1: Validator,
    v2: Validator,
    v3: Validator,
    v4: Validator,
    v5: Validator,
) -> Validator[Any, T]:
    return map_n(f, v1, v2, v3, v4, v5)

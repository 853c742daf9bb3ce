"""
Core constructors and the validate() runner.

validate() is the one place where a failed result can turn into an
exception, and only when the caller opts in with validation_context.
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Iterator, TypeVar

from .types import Err, Failure, Ok, ValidationResult, Validator

T = TypeVar("T")

_raise_on_failure: ContextVar[bool] = ContextVar("raise_on_failure", default=False)


def fail(reason: str) -> Err[Failure]:
    """Describe why validation failed."""
    return Err(Failure(reason))


def succeed(value: T) -> Ok[T]:
    """Return the validated value."""
    return Ok(value)


def hardcoded(default: T) -> Validator[Any, T]:
    """
    Build a validator that ignores its input and always succeeds with `default`.

    Useful for filling a record field that has no counterpart in the input:
        map3(Account, required("email", str_), hardcoded("free"), ...)
    """

    def check(_value: Any) -> ValidationResult[T]:
        return succeed(default)

    return check


def is_strict() -> bool:
    """True inside validation_context(strict=True)."""
    return _raise_on_failure.get()


@contextmanager
def validation_context(*, strict: bool = False) -> Iterator[None]:
    """
    Choose what validate() hands back for the duration of the block.

    Args:
        strict: If True, validate() returns the bare value on success and
               raises ValidationFailed on failure. Validators called
               directly still return Ok/Err.

    Example:
        signup = map2(make_user, required("name", str_), required("age", int_))

        validate(signup, form)  # Ok(...) or Err(Failure(...))

        with validation_context(strict=True):
            user = validate(signup, form)  # the user, or ValidationFailed
    """
    token = _raise_on_failure.set(strict)
    try:
        yield
    finally:
        _raise_on_failure.reset(token)


def validate(validator: Validator[Any, T], data: Any) -> Any:
    """
    Run a validator against one input.

    Args:
        validator: Any validator, typically a composite built with map2..map5
        data: The input (form, string, JsonValue, ...)

    Returns:
        Ok(value) or Err(Failure) outside strict mode.
        The bare value inside validation_context(strict=True).

    Raises:
        ValidationFailed: In strict mode, if validation fails
        TypeError: If `validator` is not callable
    """
    if not callable(validator):
        raise TypeError(f"Validator must be callable, got {type(validator).__name__}")

    result = validator(data)
    if is_strict():
        return result.unwrap()
    return result

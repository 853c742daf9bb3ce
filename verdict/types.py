"""
Type definitions for verdict.

Provides a minimal Result type (Ok/Err), the Failure payload and the
Validator alias every other module is written against.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

from .errors import ValidationFailed

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")
A = TypeVar("A")


@dataclass(frozen=True, slots=True)
class Failure:
    """Why a value failed validation."""

    reason: str

    def prefixed(self, context: str) -> Failure:
        """Return a new Failure with `context` in front of the reason."""
        return Failure(f"{context} {self.reason}")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success result containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def map(self, f: Callable[[T], U]) -> Ok[U]:
        return Ok(f(self.value))

    def map_error(self, f: Callable[[Any], Any]) -> Ok[T]:
        return self

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return f(self.value)

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: Any) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Error result containing an error value."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def map(self, f: Callable[[Any], Any]) -> Err[E]:
        return self

    def map_error(self, f: Callable[[E], F]) -> Err[F]:
        return Err(f(self.error))

    def and_then(self, f: Callable[[Any], Any]) -> Err[E]:
        return self

    def unwrap(self) -> Any:
        """
        Raises:
            ValidationFailed: if the error is a Failure
            ValueError: for any other error payload
        """
        if isinstance(self.error, Failure):
            raise ValidationFailed(self.error)
        raise ValueError(f"Called unwrap on Err: {self.error!r}")

    def unwrap_or(self, default: T) -> T:
        return default


Result = Union[Ok[T], Err[E]]


# Free-function forms, so combinators read the same for any conforming result.
def map_result(f: Callable[[T], U], result: Result[T, E]) -> Result[U, E]:
    return result.map(f)


def map_error(f: Callable[[E], F], result: Result[T, E]) -> Result[T, F]:
    return result.map_error(f)


def and_then(f: Callable[[T], Result[U, E]], result: Result[T, E]) -> Result[U, E]:
    return result.and_then(f)


# Type aliases
ValidationResult = Union[Ok[T], Err[Failure]]
Validator = Callable[[A], Union[Ok[T], Err[Failure]]]

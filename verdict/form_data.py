"""
Field extraction for form-like input.

`required`, `optional` and `nullable` lift a string validator into a
validator over a whole form. A form is anything with a `get(name)` method;
only a `str` result counts as a submitted value.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, Protocol, TypeVar
from urllib.parse import parse_qsl

from .core import fail, succeed
from .types import Failure, ValidationResult, Validator

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FormLike(Protocol):
    """The one operation field extraction needs from its input."""

    def get(self, name: str) -> Any: ...


class FormData:
    """
    Ordered multi-map of submitted form fields.

    Repeated names are kept, but `get` only ever sees the first value.

    Examples:
        FormData([("name", "Brendan"), ("tag", "a"), ("tag", "b")])
        FormData.from_query("name=Brendan&newsletter=on")
    """

    def __init__(self, pairs: Iterable[tuple[str, str]] = ()):
        self._pairs: list[tuple[str, str]] = []
        for name, value in pairs:
            self.append(name, value)

    @classmethod
    def from_query(cls, query: str) -> FormData:
        """Parse an application/x-www-form-urlencoded body or query string."""
        return cls(parse_qsl(query, keep_blank_values=True))

    def append(self, name: str, value: str) -> None:
        self._pairs.append((name, value))

    def get(self, name: str) -> str | None:
        for key, value in self._pairs:
            if key == name:
                return value
        return None

    def get_all(self, name: str) -> list[str]:
        return [value for key, value in self._pairs if key == name]

    def items(self) -> Iterator[tuple[str, str]]:
        return iter(self._pairs)

    def __contains__(self, name: object) -> bool:
        return any(key == name for key, _ in self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __repr__(self) -> str:
        return f"FormData({self._pairs!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FormData):
            return self._pairs == other._pairs
        return False


def _field_value(data: FormLike, field_name: str) -> str | None:
    value = data.get(field_name)
    if isinstance(value, str):
        return value
    logger.debug("Field %r not submitted", field_name)
    return None


def _in_field(field_name: str, result: ValidationResult[T]) -> ValidationResult[T]:
    def add_context(failure: Failure) -> Failure:
        return failure.prefixed(f"field '{field_name}'")

    return result.map_error(add_context)


def required(field_name: str, from_string: Validator[str, T]) -> Validator[FormLike, T]:
    """
    Validate the named field, failing if it was not submitted.

    Usage:
        required("name", str_)(FormData())  # Err(Failure("field 'name' is empty"))
        required("age", int_)(FormData([("age", "x")]))
        # Err(Failure("field 'age' is not a number"))
    """

    def check(data: FormLike) -> ValidationResult[T]:
        value = _field_value(data, field_name)
        if value is None:
            return fail(f"field '{field_name}' is empty")
        return _in_field(field_name, from_string(value))

    return check


def optional(
    field_name: str, from_string: Validator[str, T], default: T
) -> Validator[FormLike, T]:
    """
    Validate the named field if it was submitted, else succeed with `default`.

    `from_string` is not called when the field is absent.
    """

    def check(data: FormLike) -> ValidationResult[T]:
        value = _field_value(data, field_name)
        if value is None:
            return succeed(default)
        return _in_field(field_name, from_string(value))

    return check


def nullable(
    field_name: str, from_string: Validator[str, T]
) -> Validator[FormLike, T | None]:
    """Like `optional`, with None standing in for a missing field."""
    return optional(field_name, from_string, None)


def checkbox(value: str = "on") -> Validator[str, bool]:
    """
    Build a validator that reports whether a checkbox was ticked.

    A checked <input type="checkbox"> submits "on" unless it has its own
    value attribute; pass that attribute here. Never fails.

    Usage:
        checkbox()("on")              # Ok(True)
        checkbox("notifs")("notifs")  # Ok(True)
        checkbox("notifs")("on")      # Ok(False)
    """

    def check(s: str) -> ValidationResult[bool]:
        return succeed(s == value)

    return check

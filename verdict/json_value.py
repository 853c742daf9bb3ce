"""
JSON validators.

`json_` turns a string into a JsonValue: a value restricted to what JSON can
represent. `json_str`, `json_num` and `require_key` then pick it apart.

Usage:
    user = chain(
        json_,
        map2(User, require_key("name", json_str), require_key("age", json_num)),
    )
    user('{"name": "Brendan", "age": 100}')  # Ok(User(name="Brendan", age=100))
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Any, TypeVar, Union

from pydantic_core import from_json

from .core import fail, succeed
from .types import Failure, ValidationResult, Validator

logger = logging.getLogger(__name__)

T = TypeVar("T")

JsonValue = Union[
    str, int, float, bool, None, list["JsonValue"], dict[str, "JsonValue"]
]


def from_unknown(value: Any) -> JsonValue:
    """
    Coerce any Python value into a JsonValue. Never fails.

    Conversion rules:
        str, bool, int, finite float -> unchanged
        list, tuple -> list, items converted recursively
        Mapping -> dict with str keys, values converted recursively
        anything else (None, nan, sets, objects, ...) -> None
    """
    if isinstance(value, (str, bool, int)):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, (list, tuple)):
        return [from_unknown(item) for item in value]
    if isinstance(value, Mapping):
        return {str(k): from_unknown(v) for k, v in value.items()}
    return None


def from_string(s: str | bytes) -> JsonValue:
    """
    Decode a JSON document into a JsonValue.

    Strings are handed to the decoder as UTF-8. Lone surrogates are carried
    through with "surrogatepass", so the decoder rejects them as malformed
    UTF-8 rather than refusing the argument.

    Raises:
        ValueError: If `s` is not valid JSON
    """
    if isinstance(s, str):
        s = s.encode("utf-8", "surrogatepass")
    return from_unknown(from_json(s, allow_inf_nan=False))


def json_(s: str) -> ValidationResult[JsonValue]:
    """Parse a string as JSON."""
    try:
        value = from_string(s)
    except (ValueError, TypeError) as e:
        logger.debug("Invalid JSON input: %s", e)
        return fail("is not valid json")
    return succeed(value)


def json_str(data: JsonValue) -> ValidationResult[str]:
    if not isinstance(data, str):
        return fail("is not a string")
    return succeed(data)


def json_num(data: JsonValue) -> ValidationResult[int | float]:
    # bool is an int subclass, but true/false are not JSON numbers
    if isinstance(data, bool) or not isinstance(data, (int, float)):
        return fail("is not a number")
    return succeed(data)


def require_key(key: str, validator: Validator[JsonValue, T]) -> Validator[JsonValue, T]:
    """
    Build a validator for one property of a JSON object.

    Fails with "has no property '<key>'" unless the value is an object. A key
    that is missing from the object is passed to `validator` as None.
    Failures from `validator` are prefixed with "property '<key>'".
    """

    def add_context(failure: Failure) -> Failure:
        return failure.prefixed(f"property '{key}'")

    def check(data: JsonValue) -> ValidationResult[T]:
        if not isinstance(data, dict):
            return fail(f"has no property '{key}'")
        return validator(data.get(key)).map_error(add_context)

    return check

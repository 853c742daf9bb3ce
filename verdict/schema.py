"""
Pydantic interop for verdict.

Provides model(), a validator that finishes a record with a Pydantic model.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from .core import fail, succeed
from .types import ValidationResult, Validator

logger = logging.getLogger(__name__)

_ModelT = TypeVar("_ModelT", bound=BaseModel)


def model(model_cls: type[_ModelT]) -> Validator[Any, _ModelT]:
    """
    Build a validator that constructs `model_cls` from its input.

    Pydantic still raises internally; the first reported error is turned
    into a Failure so nothing escapes the validator.

    Usage:
        class User(BaseModel):
            name: str
            age: int

        chain(json_, model(User))('{"name": "Brendan", "age": 100}')
        # Ok(User(name='Brendan', age=100))
        chain(json_, model(User))('{"name": "Brendan"}')
        # Err(Failure("property 'age' field required"))
    """
    if not (isinstance(model_cls, type) and issubclass(model_cls, BaseModel)):
        raise TypeError(
            f"model() requires a pydantic BaseModel subclass, got {model_cls!r}"
        )

    def check(value: Any) -> ValidationResult[_ModelT]:
        try:
            return succeed(model_cls.model_validate(value))
        except ValidationError as e:
            logger.debug("%s rejected input: %s", model_cls.__name__, e)
            return fail(_first_reason(e))

    return check


def _first_reason(error: ValidationError) -> str:
    """Render the first Pydantic error in the same voice as other failures."""
    first = error.errors()[0]
    msg = first["msg"]
    msg = msg[:1].lower() + msg[1:]
    loc = ".".join(str(part) for part in first["loc"])
    if loc:
        return f"property '{loc}' {msg}"
    return msg

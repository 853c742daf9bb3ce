"""
verdict - composable validators for form fields, JSON values and strings.

Usage:
    from verdict import FormData, checkbox, int_, map3, optional, required, str_

    signup = map3(
        Signup,
        required("name", str_),
        required("age", int_),
        optional("newsletter", checkbox(), False),
    )

    signup(FormData.from_query("name=Brendan&age=28"))
    # Ok(value=Signup(name='Brendan', age=28, newsletter=False))
    signup(FormData.from_query("age=28"))
    # Err(error=Failure(reason="field 'name' is empty"))
"""

import logging

from .core import fail, hardcoded, is_strict, succeed, validate, validation_context
from .errors import ValidationFailed
from .form_data import FormData, FormLike, checkbox, nullable, optional, required
from .json_value import (
    JsonValue,
    from_string,
    from_unknown,
    json_,
    json_num,
    json_str,
    require_key,
)
from .mapping import chain, map2, map3, map4, map5, map_, map_n
from .numbers import int_, less_than, num, whole_number
from .schema import model
from .strings import non_empty, str_
from .types import (
    Err,
    Failure,
    Ok,
    Result,
    ValidationResult,
    Validator,
    and_then,
    map_error,
    map_result,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Result types
    "Ok",
    "Err",
    "Result",
    "Failure",
    "ValidationResult",
    "Validator",
    "map_result",
    "map_error",
    "and_then",
    # Core
    "fail",
    "succeed",
    "hardcoded",
    "validate",
    "validation_context",
    "is_strict",
    "ValidationFailed",
    # Leaf validators
    "str_",
    "non_empty",
    "num",
    "whole_number",
    "int_",
    "less_than",
    # JSON
    "JsonValue",
    "json_",
    "json_str",
    "json_num",
    "require_key",
    "from_unknown",
    "from_string",
    # Forms
    "FormLike",
    "FormData",
    "required",
    "optional",
    "nullable",
    "checkbox",
    # Combinators
    "chain",
    "map_",
    "map_n",
    "map2",
    "map3",
    "map4",
    "map5",
    # Pydantic interop
    "model",
]

# File: userposts/services/validator.py

"""
Request validation.

`validate()` checks a raw decoded JSON value against a pydantic schema and
returns a tagged result instead of raising:

  - Valid(record)       the normalized, typed record
  - Invalid(violations) one FieldViolation per failing field

Every field is checked in a single pass, but each field reports only its
first failure.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from userposts.core.exceptions import FieldViolation, ValidationError

T = TypeVar("T", bound=BaseModel)

# Leading loc entries FastAPI adds to say where a value came from
_REQUEST_LOCATIONS = {"body", "query", "path", "header", "cookie"}

_MESSAGES = {
    "missing": "{field} is required",
    "string_too_short": "{field} must be at least {min_length} characters",
    "string_too_long": "{field} must be at most {max_length} characters",
    "string_type": "{field} must be a string",
    "int_type": "{field} must be an integer",
    "int_parsing": "{field} must be an integer",
    "int_from_float": "{field} must be an integer",
    "greater_than_equal": "{field} must be at least {ge}",
    "less_than_equal": "{field} must be at most {le}",
    "model_type": "{field} must be a JSON object",
    "model_attributes_type": "{field} must be a JSON object",
    "dict_type": "{field} must be a JSON object",
    "json_invalid": "request body is not valid JSON",
}


@dataclass(frozen=True)
class Valid(Generic[T]):
    record: T
    ok: ClassVar[bool] = True


@dataclass(frozen=True)
class Invalid:
    violations: list[FieldViolation]
    ok: ClassVar[bool] = False


ValidationResult = Union[Valid[T], Invalid]


def field_path(loc: Sequence[Any]) -> str:
    parts = list(loc)
    if len(parts) > 1 and parts[0] in _REQUEST_LOCATIONS:
        parts = parts[1:]
    return ".".join(str(p) for p in parts) or "body"


def describe(field: str, error: Mapping[str, Any]) -> str:
    kind = error["type"]
    ctx = error.get("ctx") or {}

    if kind == "string_too_short" and ctx.get("min_length") == 1:
        return f"{field} must not be empty"

    template = _MESSAGES.get(kind)
    if template is not None:
        return template.format(field=field, **ctx)
    return f"{field} {error['msg']}"


def violations_from_errors(errors: Sequence[Mapping[str, Any]]) -> list[FieldViolation]:
    """Turn pydantic/FastAPI error dicts into one violation per field."""
    violations: list[FieldViolation] = []
    seen: set[str] = set()

    for error in errors:
        if error["type"] == "json_invalid":
            field = "body"
        else:
            field = field_path(error["loc"])
        if field in seen:
            continue
        seen.add(field)
        violations.append(FieldViolation(field=field, message=describe(field, error)))

    return violations


def validate(schema: type[T], raw: Any) -> ValidationResult[T]:
    """Check `raw` against `schema` without raising. No side effects."""
    if not isinstance(raw, Mapping):
        return Invalid([FieldViolation(field="body", message="request body must be a JSON object")])

    try:
        record = schema.model_validate(dict(raw))
    except PydanticValidationError as exc:
        return Invalid(violations_from_errors(exc.errors()))
    return Valid(record)


def validate_or_raise(schema: type[T], raw: Any) -> T:
    result = validate(schema, raw)
    if isinstance(result, Invalid):
        raise ValidationError(result.violations)
    return result.record

# File: userposts/schemas/common.py

"""
Field types shared by the user and post schemas.

Custom errors carry a predicate-style message ("must be ...") so the
validator can prefix it with the field name.
"""

from typing import Annotated, Any

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator
from pydantic_core import PydanticCustomError


def _check_email(value: str) -> str:
    try:
        return validate_email(value, check_deliverability=False).normalized
    except EmailNotValidError:
        raise PydanticCustomError("email_format", "must be a valid email address") from None


Email = Annotated[str, AfterValidator(_check_email)]


def reject_null(value: Any) -> Any:
    """Patch schemas allow omitting a column, but not nulling a NOT NULL one."""
    if value is None:
        raise PydanticCustomError("not_null", "must not be null")
    return value

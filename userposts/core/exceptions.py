# File: userposts/core/exceptions.py

"""
Error kinds raised by the service and repository layers.

The API layer maps them onto HTTP responses:
  - ValidationError -> 400 with per-field messages
  - NotFoundError   -> 404
  - StoreError      -> 500 with a generic message
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldViolation:
    field: str
    message: str


class RecordError(Exception):
    """Base class for errors surfaced to API callers."""


class ValidationError(RecordError):
    def __init__(self, violations: list[FieldViolation]):
        self.violations = list(violations)
        super().__init__("; ".join(v.message for v in self.violations))

    @classmethod
    def single(cls, field: str, message: str) -> "ValidationError":
        return cls([FieldViolation(field=field, message=message)])

    @property
    def messages(self) -> list[str]:
        return [v.message for v in self.violations]


class NotFoundError(RecordError):
    def __init__(self, resource: str, record_id: int):
        self.resource = resource
        self.record_id = record_id
        super().__init__(f"{resource} {record_id} not found")


class StoreError(RecordError):
    """Any database-layer failure. The original exception is chained."""

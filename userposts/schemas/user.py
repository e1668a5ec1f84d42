# File: userposts/schemas/user.py

from datetime import datetime
from typing import Annotated, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StringConstraints, field_validator

from userposts.schemas.common import Email, reject_null

NAME_MIN_LENGTH = 4

UserName = Annotated[str, StringConstraints(min_length=NAME_MIN_LENGTH, max_length=255)]


class UserCreate(BaseModel):
    name: UserName
    email: Email
    address: Optional[str] = None


class UserUpdate(BaseModel):
    """Partial replacement: only keys present in the payload are applied."""

    name: Optional[UserName] = None
    email: Optional[Email] = None
    address: Optional[str] = None

    @field_validator("name", "email", mode="before")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)


class UserRead(BaseModel):
    id: int
    name: str
    email: str
    address: Optional[str] = None
    created_at: datetime = Field(
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
    )

    model_config = ConfigDict(from_attributes=True)

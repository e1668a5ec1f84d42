# File: userposts/schemas/post.py

from datetime import datetime
from typing import Annotated, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictInt, StringConstraints, field_validator

from userposts.models.base import MAX_ID, MIN_ID
from userposts.schemas.common import reject_null

PostTitle = Annotated[str, StringConstraints(min_length=1, max_length=255)]

# JSON true/false must not pass as 1/0, and ids must fit the column
UserId = Annotated[StrictInt, Field(ge=MIN_ID, le=MAX_ID)]

# JSON uses camelCase, but snake_case is accepted too
USER_ID_ALIASES = AliasChoices("userId", "user_id")


class PostCreate(BaseModel):
    title: PostTitle
    content: Optional[str] = None
    user_id: UserId = Field(validation_alias=USER_ID_ALIASES)


class PostUpdate(BaseModel):
    title: Optional[PostTitle] = None
    content: Optional[str] = None
    user_id: Optional[UserId] = Field(default=None, validation_alias=USER_ID_ALIASES)

    @field_validator("title", "user_id", mode="before")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)


class PostRead(BaseModel):
    id: int
    title: str
    content: Optional[str] = None
    user_id: int = Field(
        validation_alias=USER_ID_ALIASES,
        serialization_alias="userId",
    )
    created_at: datetime = Field(
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
    )

    model_config = ConfigDict(from_attributes=True)

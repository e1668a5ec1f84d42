# File: userposts/repositories/user_repo.py

"""
Data access layer for user records.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from userposts.core.exceptions import NotFoundError, RecordError, ValidationError
from userposts.core.logger import get_logger
from userposts.models.post import Post  # noqa: F401  (registers the relationship target)
from userposts.models.base import id_in_range
from userposts.models.user import User
from userposts.repositories.base import BaseRepository
from userposts.schemas.user import UserCreate, UserUpdate

logger = get_logger(__name__)

EMAIL_TAKEN = "email is already registered"


class UserRepository(BaseRepository):
    """Repository for CRUD operations on the users table."""

    def _integrity_error(self, exc: IntegrityError) -> RecordError:
        # The only constraint a users write can trip is the unique email
        return ValidationError.single("email", EMAIL_TAKEN)

    def _ensure_email_free(self, email: str, exclude_id: Optional[int] = None) -> None:
        stmt = select(User.id).where(User.email == email)
        if exclude_id is not None:
            stmt = stmt.where(User.id != exclude_id)
        if self.db.scalar(stmt) is not None:
            raise ValidationError.single("email", EMAIL_TAKEN)

    def create(self, data: UserCreate) -> User:
        """
        Insert a validated user and return it with its generated id and timestamp.
        """
        with self._guard("create user"):
            self._ensure_email_free(data.email)
            user = User(**data.model_dump())
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
        return user

    def get_by_id(self, user_id: int) -> User:
        if not id_in_range(user_id):
            raise NotFoundError("User", user_id)
        with self._guard("load user"):
            user = self.db.get(User, user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    def list_all(self) -> list[User]:
        with self._guard("list users"):
            return list(self.db.scalars(select(User).order_by(User.id)))

    def update(self, user_id: int, patch: UserUpdate) -> User:
        """
        Apply the fields present in `patch`; an empty patch is a no-op.
        """
        user = self.get_by_id(user_id)
        changes = patch.model_dump(exclude_unset=True)
        if not changes:
            return user

        with self._guard("update user"):
            if "email" in changes and changes["email"] != user.email:
                self._ensure_email_free(changes["email"], exclude_id=user_id)
            for key, value in changes.items():
                setattr(user, key, value)
            self.db.commit()
            self.db.refresh(user)
        return user

    def delete(self, user_id: int) -> None:
        user = self.get_by_id(user_id)
        with self._guard("delete user"):
            self.db.delete(user)
            self.db.commit()
        logger.debug("Deleted user %s", user_id)

# File: userposts/services/user_service.py

"""
User operations: validate the raw payload, then hand it to the repository.

Raises:
  ValidationError  payload failed validation (or email already taken)
  NotFoundError    id does not resolve
  StoreError       database failure
"""

from typing import Any

from sqlalchemy.orm import Session

from userposts.core.logger import get_logger
from userposts.models.user import User
from userposts.repositories.user_repo import UserRepository
from userposts.schemas.user import UserCreate, UserUpdate
from userposts.services.validator import validate_or_raise

logger = get_logger(__name__)


def create_user(db: Session, raw: Any) -> User:
    data = validate_or_raise(UserCreate, raw)
    user = UserRepository(db).create(data)
    logger.info("Created user %s", user.id)
    return user


def get_user(db: Session, user_id: int) -> User:
    return UserRepository(db).get_by_id(user_id)


def list_users(db: Session) -> list[User]:
    return UserRepository(db).list_all()


def update_user(db: Session, user_id: int, raw: Any) -> User:
    patch = validate_or_raise(UserUpdate, raw)
    user = UserRepository(db).update(user_id, patch)
    logger.info("Updated user %s (%s)", user_id, ", ".join(sorted(patch.model_fields_set)) or "no changes")
    return user


def delete_user(db: Session, user_id: int) -> None:
    UserRepository(db).delete(user_id)
    logger.info("Deleted user %s", user_id)

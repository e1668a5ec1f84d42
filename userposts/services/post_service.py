# File: userposts/services/post_service.py

from typing import Any, Optional

from sqlalchemy.orm import Session

from userposts.core.logger import get_logger
from userposts.models.post import Post
from userposts.repositories.post_repo import PostRepository
from userposts.schemas.post import PostCreate, PostUpdate
from userposts.services.validator import validate_or_raise

logger = get_logger(__name__)


def create_post(db: Session, raw: Any) -> Post:
    data = validate_or_raise(PostCreate, raw)
    post = PostRepository(db).create(data)
    logger.info("Created post %s for user %s", post.id, post.user_id)
    return post


def get_post(db: Session, post_id: int) -> Post:
    return PostRepository(db).get_by_id(post_id)


def list_posts(db: Session, user_id: Optional[int] = None) -> list[Post]:
    return PostRepository(db).list_all(user_id=user_id)


def update_post(db: Session, post_id: int, raw: Any) -> Post:
    patch = validate_or_raise(PostUpdate, raw)
    return PostRepository(db).update(post_id, patch)


def delete_post(db: Session, post_id: int) -> None:
    PostRepository(db).delete(post_id)
    logger.info("Deleted post %s", post_id)

# File: userposts/repositories/post_repo.py

"""
Data access layer for post records.

A post's owner is checked before every write that sets `user_id`, so a
dangling reference is reported as a validation failure on `userId` rather
than surfacing as a foreign-key error (SQLite does not enforce those by
default anyway).
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from userposts.core.exceptions import NotFoundError, RecordError, ValidationError
from userposts.models.base import id_in_range
from userposts.models.post import Post
from userposts.models.user import User
from userposts.repositories.base import BaseRepository
from userposts.schemas.post import PostCreate, PostUpdate


def unknown_user(user_id: int) -> ValidationError:
    return ValidationError.single("userId", f"userId {user_id} does not reference an existing user")


class PostRepository(BaseRepository):
    """Repository for CRUD operations on the posts table."""

    def _integrity_error(self, exc: IntegrityError) -> RecordError:
        return ValidationError.single("userId", "userId does not reference an existing user")

    def _ensure_user_exists(self, user_id: int) -> None:
        if not id_in_range(user_id) or self.db.get(User, user_id) is None:
            raise unknown_user(user_id)

    def create(self, data: PostCreate) -> Post:
        with self._guard("create post"):
            self._ensure_user_exists(data.user_id)
            post = Post(**data.model_dump())
            self.db.add(post)
            self.db.commit()
            self.db.refresh(post)
        return post

    def get_by_id(self, post_id: int) -> Post:
        if not id_in_range(post_id):
            raise NotFoundError("Post", post_id)
        with self._guard("load post"):
            post = self.db.get(Post, post_id)
        if post is None:
            raise NotFoundError("Post", post_id)
        return post

    def list_all(self, user_id: Optional[int] = None) -> list[Post]:
        if user_id is not None and not id_in_range(user_id):
            return []
        stmt = select(Post).order_by(Post.id)
        if user_id is not None:
            stmt = stmt.where(Post.user_id == user_id)
        with self._guard("list posts"):
            return list(self.db.scalars(stmt))

    def update(self, post_id: int, patch: PostUpdate) -> Post:
        post = self.get_by_id(post_id)
        changes = patch.model_dump(exclude_unset=True)
        if not changes:
            return post

        with self._guard("update post"):
            if "user_id" in changes and changes["user_id"] != post.user_id:
                self._ensure_user_exists(changes["user_id"])
            for key, value in changes.items():
                setattr(post, key, value)
            self.db.commit()
            self.db.refresh(post)
        return post

    def delete(self, post_id: int) -> None:
        post = self.get_by_id(post_id)
        with self._guard("delete post"):
            self.db.delete(post)
            self.db.commit()

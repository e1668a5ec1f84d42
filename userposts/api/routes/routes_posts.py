# File: userposts/api/routes/routes_posts.py

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query, Response, status
from sqlalchemy.orm import Session

from userposts.api.deps import get_db
from userposts.schemas.post import PostRead
from userposts.services import post_service

router = APIRouter()


@router.post(
    "",
    response_model=PostRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create post",
)
def create_post(payload: Any = Body(...), db: Session = Depends(get_db)):
    """
    Insert a post for an existing user.

    An unknown `userId` is a 400 on that field, not a database error.
    """
    return post_service.create_post(db, payload)


@router.get("", response_model=list[PostRead], summary="List posts")
def list_posts(
    user_id: Optional[int] = Query(None, alias="userId", description="Only posts owned by this user"),
    db: Session = Depends(get_db),
):
    return post_service.list_posts(db, user_id=user_id)


@router.get("/{post_id}", response_model=PostRead, summary="Get post")
def get_post(post_id: int, db: Session = Depends(get_db)):
    return post_service.get_post(db, post_id)


@router.put("/{post_id}", response_model=PostRead, summary="Update post")
def update_post(post_id: int, payload: Any = Body(...), db: Session = Depends(get_db)):
    return post_service.update_post(db, post_id, payload)


@router.delete(
    "/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete post",
)
def delete_post(post_id: int, db: Session = Depends(get_db)):
    post_service.delete_post(db, post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

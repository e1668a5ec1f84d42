# File: userposts/api/routes/routes_users.py

from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status
from sqlalchemy.orm import Session

from userposts.api.deps import get_db
from userposts.schemas.user import UserRead
from userposts.services import user_service

router = APIRouter()


@router.post(
    "",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
)
def create_user(payload: Any = Body(...), db: Session = Depends(get_db)):
    """
    Validate the payload and insert a user.

    400 lists every failing field; a taken email is reported on `email`.
    """
    return user_service.create_user(db, payload)


@router.get("", response_model=list[UserRead], summary="List users")
def list_users(db: Session = Depends(get_db)):
    return user_service.list_users(db)


@router.get("/{user_id}", response_model=UserRead, summary="Get user")
def get_user(user_id: int, db: Session = Depends(get_db)):
    return user_service.get_user(db, user_id)


@router.put("/{user_id}", response_model=UserRead, summary="Update user")
def update_user(user_id: int, payload: Any = Body(...), db: Session = Depends(get_db)):
    """
    Partial update: keys missing from the payload keep their stored value.
    """
    return user_service.update_user(db, user_id, payload)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete user and its posts",
)
def delete_user(user_id: int, db: Session = Depends(get_db)):
    user_service.delete_user(db, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

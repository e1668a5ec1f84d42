# File: userposts/api/routes/routes_misc.py

from fastapi import APIRouter, Path

from userposts.schemas.user import NAME_MIN_LENGTH

router = APIRouter(tags=["misc"])


@router.get("/", summary="Greeting")
def root():
    return {"message": "Hello from the userposts API!"}


@router.get("/greet/{name}", summary="Greet by name")
def greet(name: str = Path(..., min_length=NAME_MIN_LENGTH)):
    """
    Same length rule as a user's name; shorter names get a 400.
    """
    return {"message": f"Hello, {name}!"}


@router.get("/healthz", summary="Liveness probe")
def healthz():
    return {"status": "ok"}

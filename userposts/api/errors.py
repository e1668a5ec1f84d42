# File: userposts/api/errors.py

"""
Exception handlers mapping service errors onto HTTP responses.

  ValidationError / RequestValidationError -> 400
      {"detail": [messages...], "violations": [{"field", "message"}...]}
  NotFoundError -> 404 {"detail": "..."}
  StoreError    -> 500 {"detail": "Internal server error"}
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from userposts.core.exceptions import FieldViolation, NotFoundError, StoreError, ValidationError
from userposts.core.logger import get_logger
from userposts.services.validator import violations_from_errors

logger = get_logger(__name__)


def validation_response(violations: list[FieldViolation]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": [v.message for v in violations],
            "violations": [{"field": v.field, "message": v.message} for v in violations],
        },
    )


async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return validation_response(exc.violations)


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed JSON, non-integer path ids, bad query params
    return validation_response(violations_from_errors(exc.errors()))


async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


async def handle_store_error(request: Request, exc: StoreError) -> JSONResponse:
    logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc.__cause__ or exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(StoreError, handle_store_error)

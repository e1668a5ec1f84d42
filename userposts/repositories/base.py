# File: userposts/repositories/base.py

"""
Shared plumbing for the repositories.

Every database call runs inside `_guard()`, which rolls back the session on
failure and translates SQLAlchemy errors into the service error kinds:

  - IntegrityError  -> whatever `_integrity_error()` returns
  - SQLAlchemyError -> StoreError (original logged, never exposed)
"""

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from userposts.core.exceptions import RecordError, StoreError
from userposts.core.logger import get_logger

logger = get_logger(__name__)


class BaseRepository:
    def __init__(self, db: Session):
        self.db = db

    def _integrity_error(self, exc: IntegrityError) -> RecordError:
        return StoreError("Integrity constraint violated")

    @contextmanager
    def _guard(self, action: str) -> Iterator[None]:
        try:
            yield
        except RecordError:
            self.db.rollback()
            raise
        except IntegrityError as exc:
            self.db.rollback()
            logger.warning("Integrity error while trying to %s: %s", action, exc.orig)
            raise self._integrity_error(exc) from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Database error while trying to %s", action)
            raise StoreError(f"Failed to {action}") from exc

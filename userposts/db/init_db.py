"""
Database initialization helpers.

Models are imported so their tables get registered on Base.metadata.
"""

from sqlalchemy import text
from sqlalchemy.engine import Engine

from userposts.core.logger import get_logger
from userposts.db.session import engine as default_engine
from userposts.models.base import Base
from userposts.models import post, user  # noqa: F401

logger = get_logger(__name__)


def init_db(bind: Engine = default_engine) -> None:
    """
    Create all tables based on SQLAlchemy models.
    """
    Base.metadata.create_all(bind=bind)
    logger.info("Database tables ensured: %s", ", ".join(sorted(Base.metadata.tables)))


def check_connection(bind: Engine = default_engine) -> None:
    """
    Run a trivial query so a bad DATABASE_URL fails at startup, not on the first request.
    """
    logger.info("Testing database connection...")
    with bind.connect() as conn:
        conn.execute(text("SELECT 1"))
    logger.info("Database connected successfully.")

# File: userposts/models/base.py

from sqlalchemy.orm import DeclarativeBase

# Range of the Integer primary/foreign key columns (32-bit on PostgreSQL).
# Ids outside it can never resolve, and drivers raise on them instead of
# returning no row.
MIN_ID = 1
MAX_ID = 2**31 - 1


def id_in_range(record_id: int) -> bool:
    return MIN_ID <= record_id <= MAX_ID


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Actual models (User, Post) inherit from this.
    """
    pass

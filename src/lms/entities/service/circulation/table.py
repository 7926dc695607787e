"""Reservation and borrow table models."""

from datetime import datetime

import sqlalchemy as sa
from sqlmodel import Field

from src.lms.entities._base import EntityTable, utcnow


class LoanTable(EntityTable, table=False):
    book_id: int = Field(index=True)
    user_id: int = Field(index=True)
    start_time: datetime = Field(
        default_factory=utcnow, sa_type=sa.DateTime(timezone=True)
    )
    end_time: datetime | None = Field(
        default=None, nullable=True, sa_type=sa.DateTime(timezone=True)
    )


class ReserveTable(LoanTable, table=True):
    """Database persistence model for reservations."""

    __tablename__ = "reserve"

    canceled: bool = False


class BorrowTable(LoanTable, table=True):
    """Database persistence model for borrows."""

    __tablename__ = "borrow"

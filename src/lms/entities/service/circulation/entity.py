"""Entities: ReserveBook, BorrowBook."""

from datetime import datetime

from pydantic import Field

from src.lms.entities._base import Entity


class LoanRecord(Entity):
    """A reservation or borrow of one book by one user.

    The record is open while ``end_time`` is unset.
    """

    book_id: int = Field(description="Book id")
    user_id: int = Field(description="User id")
    start_time: datetime = Field(description="When the record was opened")
    end_time: datetime | None = Field(default=None, description="When the record was closed")

    @property
    def is_open(self) -> bool:
        return self.end_time is None


class ReserveBook(LoanRecord):
    """A reservation; closed when cancelled or turned into a borrow."""

    canceled: bool = Field(default=False, description="Closed by cancellation, not by a borrow")


class BorrowBook(LoanRecord):
    """A borrow; closed when the book is returned."""

"""Read models assembled from several tables; never persisted."""

from datetime import datetime

from pydantic import BaseModel, Field

from src.lms.core.models.status import BookStatus


class BookMetaData(BaseModel):
    """A book joined with its location name, category name and status."""

    id: int
    name: str
    author: str
    isbn: str
    language: str
    location: str = Field(default="", description="Location name, empty if unset")
    category: str = Field(default="", description="Category name, empty if unset")
    status: BookStatus = Field(default=BookStatus.IDLE)


class ReserveBookStatus(BookMetaData):
    """A user's reservation of a book.

    ``end_time`` is set once the reservation is closed; ``canceled_time`` only
    when it was closed by cancellation rather than by borrowing the book.
    """

    start_time: datetime
    end_time: datetime | None = None
    canceled_time: datetime | None = None


class BorrowBookStatus(BookMetaData):
    """A user's borrow of a book with its due date and accrued fine."""

    start_time: datetime
    end_time: datetime | None = None
    deadline: datetime
    fine: int = 0

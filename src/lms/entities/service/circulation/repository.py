"""Data-access layer for reservations and borrows."""

from datetime import datetime

from sqlalchemy import exists, update
from sqlmodel import Session, select

from src.lms.entities._base import utcnow
from src.lms.entities.service.circulation.entity import BorrowBook, LoanRecord, ReserveBook
from src.lms.entities.service.circulation.table import BorrowTable, ReserveTable


class _LoanRepository:
    table: type[ReserveTable] | type[BorrowTable]
    entity: type[ReserveBook] | type[BorrowBook]

    def __init__(self, session: Session) -> None:
        self._session = session

    def has_open(self, book_id: int) -> bool:
        """Return True when the book has a record whose end_time is unset."""
        statement = select(
            exists().where(self.table.book_id == book_id, self.table.end_time.is_(None))
        )
        return bool(self._session.exec(statement).one())

    def get_open(self, book_id: int, user_id: int | None = None) -> LoanRecord | None:
        """Return the most recent open record for a book, optionally for one user."""
        statement = select(self.table).where(
            self.table.book_id == book_id, self.table.end_time.is_(None)
        )
        if user_id is not None:
            statement = statement.where(self.table.user_id == user_id)
        row = self._session.exec(statement.order_by(self.table.id.desc())).first()
        if row is None:
            return None
        return self.entity.model_validate(row, from_attributes=True)

    def list_by_user(self, user_id: int) -> list[LoanRecord]:
        statement = (
            select(self.table)
            .where(self.table.user_id == user_id)
            .order_by(self.table.id.desc())
        )
        rows = self._session.exec(statement).all()
        return [self.entity.model_validate(row, from_attributes=True) for row in rows]

    def open(self, book_id: int, user_id: int, start_time: datetime | None = None) -> LoanRecord:
        row = self.table(book_id=book_id, user_id=user_id, start_time=start_time or utcnow())
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return self.entity.model_validate(row, from_attributes=True)

    def close(self, record_id: int, end_time: datetime | None = None, **values) -> bool:
        """Set end_time on an open record; returns False if it was already closed."""
        statement = (
            update(self.table)
            .where(self.table.id == record_id, self.table.end_time.is_(None))
            .values(end_time=end_time or utcnow(), **values)
        )
        result = self._session.exec(statement)
        return result.rowcount == 1


class ReserveRepository(_LoanRepository):
    """Data-access layer for reservations."""

    table = ReserveTable
    entity = ReserveBook

    def cancel(self, record_id: int, end_time: datetime | None = None) -> bool:
        """Close an open reservation at the user's request rather than by a borrow."""
        return self.close(record_id, end_time, canceled=True)


class BorrowRepository(_LoanRepository):
    """Data-access layer for borrows."""

    table = BorrowTable
    entity = BorrowBook

"""Reservation and borrowing lifecycle."""

import math
from collections.abc import Callable
from datetime import datetime, timedelta

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from src.lms.core.exceptions import ConflictError, LibraryError, NotFoundError
from src.lms.core.models import BorrowBookStatus, ReserveBookStatus, StatusCode, StatusResult
from src.lms.core.services.catalog.catalog_service import resolve_book
from src.lms.core.services.database.db_session import DbSessionService
from src.lms.entities._base import as_utc, utcnow
from src.lms.entities.core.user import UserRepository
from src.lms.entities.service.catalog import Book, BookRepository
from src.lms.entities.service.circulation import BorrowRepository, ReserveRepository
from src.lms.entities.service.payment import PayRepository
from src.lms.runtime.config.config_data import LibraryConfig


class CirculationService:
    def __init__(
        self,
        db_service: DbSessionService,
        library_config: LibraryConfig | None = None,
        clock: Callable[[], datetime] = utcnow,
    ):
        self._db = db_service
        self._config = library_config or LibraryConfig()
        self._clock = clock

    def deadline(self, start_time: datetime) -> datetime:
        return as_utc(start_time) + timedelta(days=self._config.loan_days)

    def fine_for(self, start_time: datetime, returned_at: datetime) -> int:
        """Fine for a borrow: every started day past the deadline costs ``fine_per_day``."""
        overdue = as_utc(returned_at) - self.deadline(start_time)
        if overdue <= timedelta(0):
            return 0
        return math.ceil(overdue / timedelta(days=1)) * self._config.fine_per_day

    def _require(self, session: Session, user_id: int, book_id: int) -> Book:
        if UserRepository(session).get(user_id) is None:
            raise NotFoundError(f"user {user_id} does not exist")
        book = BookRepository(session).get(book_id)
        if book is None:
            raise NotFoundError(f"book {book_id} does not exist")
        return book

    def _run(
        self,
        action: Callable[[Session], str],
        ok: StatusCode,
        failed: StatusCode,
        failed_message: str,
    ) -> StatusResult:
        try:
            with self._db.session_scope() as session:
                message = action(session)
        except LibraryError as e:
            logger.info("{}: {}", failed_message, e.message)
            return StatusResult.failure(failed, f"{failed_message}: {e.message}", code=e.code)
        except SQLAlchemyError:
            return StatusResult.failure(failed, failed_message, code=500)
        return StatusResult.success(ok, message)

    def reserve_book(self, user_id: int, book_id: int) -> StatusResult:
        def action(session: Session) -> str:
            self._require(session, user_id, book_id)
            if BorrowRepository(session).has_open(book_id):
                raise ConflictError("book is borrowed")
            reserves = ReserveRepository(session)
            if reserves.has_open(book_id):
                raise ConflictError("book is already reserved")
            reserves.open(book_id, user_id, self._clock())
            return f"Book {book_id} reserved"

        return self._run(
            action, StatusCode.RESERVE_OK, StatusCode.RESERVE_FAILED, "Failed to reserve book"
        )

    def cancel_reserve(self, user_id: int, book_id: int) -> StatusResult:
        def action(session: Session) -> str:
            reserves = ReserveRepository(session)
            reservation = reserves.get_open(book_id, user_id=user_id)
            if reservation is None:
                raise NotFoundError("no open reservation for this book")
            if not reserves.cancel(reservation.id, self._clock()):
                raise ConflictError("reservation already closed")
            return f"Reservation of book {book_id} cancelled"

        return self._run(
            action,
            StatusCode.CANCEL_RESERVE_OK,
            StatusCode.CANCEL_RESERVE_FAILED,
            "Failed to cancel reservation",
        )

    def borrow_book(self, user_id: int, book_id: int) -> StatusResult:
        def action(session: Session) -> str:
            self._require(session, user_id, book_id)
            borrows = BorrowRepository(session)
            if borrows.has_open(book_id):
                raise ConflictError("book is already borrowed")
            reserves = ReserveRepository(session)
            reservation = reserves.get_open(book_id)
            now = self._clock()
            if reservation is not None:
                if reservation.user_id != user_id:
                    raise ConflictError("book is reserved by another user")
                if not reserves.close(reservation.id, now):
                    raise ConflictError("reservation already closed")
            borrows.open(book_id, user_id, now)
            return f"Book {book_id} borrowed, due {self.deadline(now):%Y-%m-%d}"

        return self._run(
            action, StatusCode.BORROW_OK, StatusCode.BORROW_FAILED, "Failed to borrow book"
        )

    def return_book(self, user_id: int, book_id: int) -> StatusResult:
        def action(session: Session) -> str:
            borrows = BorrowRepository(session)
            borrow = borrows.get_open(book_id, user_id=user_id)
            if borrow is None:
                raise NotFoundError("no open borrow for this book")
            now = self._clock()
            if not borrows.close(borrow.id, now):
                raise ConflictError("borrow already closed")
            fine = self.fine_for(borrow.start_time, now)
            if fine > 0:
                pay = PayRepository(session).create(user_id, fine)
                logger.info("Issued fine {} of {} for late return of book {}", pay.id, fine, book_id)
                return f"Book {book_id} returned late, fine {fine} issued as payment {pay.id}"
            return f"Book {book_id} returned"

        return self._run(
            action, StatusCode.RETURN_OK, StatusCode.RETURN_FAILED, "Failed to return book"
        )

    def get_reserved_books(self, user_id: int) -> list[ReserveBookStatus]:
        try:
            with self._db.get_session() as session:
                books = BookRepository(session)
                result = []
                for record in ReserveRepository(session).list_by_user(user_id):
                    book = books.get(record.book_id)
                    if book is None:
                        continue
                    result.append(
                        ReserveBookStatus(
                            **resolve_book(session, book).model_dump(),
                            start_time=as_utc(record.start_time),
                            end_time=as_utc(record.end_time) if record.end_time else None,
                            canceled_time=(
                                as_utc(record.end_time) if record.canceled else None
                            ),
                        )
                    )
                return result
        except SQLAlchemyError as e:
            logger.bind(error_type=type(e).__name__).error("Reservation lookup failed: {}", e)
            return []

    def get_borrowed_books(self, user_id: int) -> list[BorrowBookStatus]:
        try:
            with self._db.get_session() as session:
                books = BookRepository(session)
                now = self._clock()
                result = []
                for record in BorrowRepository(session).list_by_user(user_id):
                    book = books.get(record.book_id)
                    if book is None:
                        continue
                    end_time = as_utc(record.end_time) if record.end_time else None
                    result.append(
                        BorrowBookStatus(
                            **resolve_book(session, book).model_dump(),
                            start_time=as_utc(record.start_time),
                            end_time=end_time,
                            deadline=self.deadline(record.start_time),
                            fine=self.fine_for(record.start_time, end_time or now),
                        )
                    )
                return result
        except SQLAlchemyError as e:
            logger.bind(error_type=type(e).__name__).error("Borrow lookup failed: {}", e)
            return []

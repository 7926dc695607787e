"""Book listings with derived location, category and availability."""

from collections.abc import Callable
from typing import TypeVar

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from src.lms.core.exceptions import ConflictError, LibraryError, NotFoundError, ValidationError
from src.lms.core.models import BookMetaData, BookStatus, StatusCode, StatusResult
from src.lms.core.services.database.db_session import DbSessionService
from src.lms.entities.service.catalog import (
    Book,
    BookRepository,
    Category,
    CategoryRepository,
    Location,
    LocationRepository,
)
from src.lms.entities.service.circulation import BorrowRepository, ReserveRepository
from src.lms.runtime.config.config_data import LibraryConfig

T = TypeVar("T")


def page_count(total: int, page_size: int) -> int:
    """Number of pages needed for ``total`` items; zero items means zero pages."""
    if total <= 0:
        return 0
    return (total - 1) // page_size + 1


def page_offset(page: int, page_size: int) -> int:
    """Offset of a 1-based page; pages below 1 are treated as page 1."""
    return (max(page, 1) - 1) * page_size


def _lookup(fn: Callable[[], T], default: T, what: str) -> T:
    """Run a read-only lookup, logging a storage failure and returning ``default``."""
    try:
        return fn()
    except SQLAlchemyError as e:
        logger.bind(error_type=type(e).__name__).warning("{} lookup failed: {}", what, e)
        return default


def resolve_book(session: Session, book: Book) -> BookMetaData:
    """Build the derived view of a book inside an existing session.

    Location and category names fall back to an empty string. Status is
    Borrowed if an open borrow exists, else Reserved if an open reservation
    exists, else Idle. Lookup errors count as "no such row".
    """
    location = _lookup(
        lambda: LocationRepository(session).get_name(book.location_id), "", "Location"
    )
    category = _lookup(
        lambda: CategoryRepository(session).get_name(book.category_id), "", "Category"
    )

    status = BookStatus.IDLE
    if _lookup(lambda: BorrowRepository(session).has_open(book.id), False, "Borrow"):
        status = BookStatus.BORROWED
    elif _lookup(lambda: ReserveRepository(session).has_open(book.id), False, "Reserve"):
        status = BookStatus.RESERVED

    return BookMetaData(
        id=book.id,
        name=book.name,
        author=book.author,
        isbn=book.isbn,
        language=book.language,
        location=location,
        category=category,
        status=status,
    )


class CatalogService:
    """Paginated book listings and catalog administration."""

    def __init__(self, db_service: DbSessionService, library_config: LibraryConfig | None = None):
        self._db = db_service
        self._page_size = (library_config or LibraryConfig()).page_size

    @property
    def page_size(self) -> int:
        return self._page_size

    # --- Derived views ---

    def get_book_data(self, book: Book) -> BookMetaData:
        with self._db.get_session() as session:
            return resolve_book(session, book)

    def get_books_data(self, books: list[Book]) -> list[BookMetaData]:
        with self._db.get_session() as session:
            return [resolve_book(session, book) for book in books]

    def get_book(self, book_id: int) -> BookMetaData | None:
        with self._db.get_session() as session:
            book = _lookup(lambda: BookRepository(session).get(book_id), None, "Book")
            if book is None:
                return None
            return resolve_book(session, book)

    # --- Pagination ---

    def _pages(self, category_id: int | None = None, location_id: int | None = None) -> int:
        with self._db.get_session() as session:
            try:
                total = BookRepository(session).count(
                    category_id=category_id, location_id=location_id
                )
            except SQLAlchemyError as e:
                logger.bind(error_type=type(e).__name__).error("Book count failed: {}", e)
                return 0
        return page_count(total, self._page_size)

    def _page(
        self, page: int, category_id: int | None = None, location_id: int | None = None
    ) -> list[BookMetaData]:
        with self._db.get_session() as session:
            books = _lookup(
                lambda: BookRepository(session).list_page(
                    page_offset(page, self._page_size),
                    self._page_size,
                    category_id=category_id,
                    location_id=location_id,
                ),
                [],
                "Book page",
            )
            return [resolve_book(session, book) for book in books]

    def get_books_pages(self) -> int:
        return self._pages()

    def get_books_by_page(self, page: int) -> list[BookMetaData]:
        return self._page(page)

    def get_books_pages_by_category(self, category_id: int) -> int:
        return self._pages(category_id=category_id)

    def get_books_by_category(self, page: int, category_id: int) -> list[BookMetaData]:
        return self._page(page, category_id=category_id)

    def get_books_pages_by_location(self, location_id: int) -> int:
        return self._pages(location_id=location_id)

    def get_books_by_location(self, page: int, location_id: int) -> list[BookMetaData]:
        return self._page(page, location_id=location_id)

    def get_categories(self) -> list[Category]:
        with self._db.get_session() as session:
            return _lookup(lambda: CategoryRepository(session).list_all(), [], "Category list")

    def get_locations(self) -> list[Location]:
        with self._db.get_session() as session:
            return _lookup(lambda: LocationRepository(session).list_all(), [], "Location list")

    # --- Administration ---

    def _mutate(
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
            return StatusResult.failure(failed, f"{failed_message}: {e.message}", code=e.code)
        except SQLAlchemyError:
            return StatusResult.failure(failed, failed_message, code=500)
        return StatusResult.success(ok, message)

    def _check_refs(self, session: Session, book: Book) -> None:
        if book.location_id and LocationRepository(session).get(book.location_id) is None:
            raise NotFoundError(f"location {book.location_id} does not exist")
        if book.category_id and CategoryRepository(session).get(book.category_id) is None:
            raise NotFoundError(f"category {book.category_id} does not exist")

    def add_book(self, book: Book) -> StatusResult:
        def action(session: Session) -> str:
            if not book.name.strip():
                raise ValidationError("book name is required")
            self._check_refs(session, book)
            created = BookRepository(session).create(book)
            logger.info("Added book {} ({})", created.id, created.name)
            return f"Book {created.id} added"

        return self._mutate(action, StatusCode.ADD_OK, StatusCode.ADD_FAILED, "Failed to add book")

    def update_book(self, book_id: int, book: Book) -> StatusResult:
        def action(session: Session) -> str:
            if not book.name.strip():
                raise ValidationError("book name is required")
            repository = BookRepository(session)
            if repository.get(book_id) is None:
                raise NotFoundError(f"book {book_id} does not exist")
            self._check_refs(session, book)
            repository.update(book.model_copy(update={"id": book_id}))
            return f"Book {book_id} updated"

        return self._mutate(
            action, StatusCode.UPDATE_OK, StatusCode.UPDATE_FAILED, "Failed to update book"
        )

    def delete_book(self, book_id: int) -> StatusResult:
        def action(session: Session) -> str:
            if BorrowRepository(session).has_open(book_id) or ReserveRepository(
                session
            ).has_open(book_id):
                raise ConflictError(f"book {book_id} is reserved or borrowed")
            if not BookRepository(session).delete(book_id):
                raise NotFoundError(f"book {book_id} does not exist")
            logger.info("Deleted book {}", book_id)
            return f"Book {book_id} deleted"

        return self._mutate(
            action, StatusCode.DELETE_OK, StatusCode.DELETE_FAILED, "Failed to delete book"
        )

    def add_category(self, name: str) -> StatusResult:
        def action(session: Session) -> str:
            if not name.strip():
                raise ValidationError("category name is required")
            created = CategoryRepository(session).create(name.strip())
            return f"Category {created.id} added"

        return self._mutate(
            action,
            StatusCode.ADD_CATEGORY_OK,
            StatusCode.ADD_CATEGORY_FAILED,
            "Failed to add category",
        )

    def add_location(self, name: str) -> StatusResult:
        def action(session: Session) -> str:
            if not name.strip():
                raise ValidationError("location name is required")
            created = LocationRepository(session).create(name.strip())
            return f"Location {created.id} added"

        return self._mutate(
            action,
            StatusCode.ADD_LOCATION_OK,
            StatusCode.ADD_LOCATION_FAILED,
            "Failed to add location",
        )

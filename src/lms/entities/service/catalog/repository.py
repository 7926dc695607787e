"""Data-access layer for the catalog tables."""

from sqlmodel import Session, func, select

from src.lms.entities.service.catalog.entity import Book, Category, Location
from src.lms.entities.service.catalog.table import BookTable, CategoryTable, LocationTable


class BookRepository:
    """Data-access layer for books."""

    def __init__(self, session: Session) -> None:
        self._session = session

    @staticmethod
    def _filtered(statement, category_id: int | None, location_id: int | None):
        if category_id is not None:
            statement = statement.where(BookTable.category_id == category_id)
        if location_id is not None:
            statement = statement.where(BookTable.location_id == location_id)
        return statement

    def get(self, book_id: int) -> Book | None:
        row = self._session.get(BookTable, book_id)
        if row is None:
            return None
        return Book.model_validate(row, from_attributes=True)

    def count(self, category_id: int | None = None, location_id: int | None = None) -> int:
        statement = self._filtered(
            select(func.count()).select_from(BookTable), category_id, location_id
        )
        return self._session.exec(statement).one()

    def list_page(
        self,
        offset: int,
        limit: int,
        category_id: int | None = None,
        location_id: int | None = None,
    ) -> list[Book]:
        statement = self._filtered(select(BookTable), category_id, location_id)
        statement = statement.order_by(BookTable.id).offset(offset).limit(limit)
        rows = self._session.exec(statement).all()
        return [Book.model_validate(row, from_attributes=True) for row in rows]

    def create(self, book: Book) -> Book:
        row = BookTable(**book.model_dump(exclude={"id"}))
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Book.model_validate(row, from_attributes=True)

    def update(self, book: Book) -> Book:
        row = self._session.get(BookTable, book.id)
        if row is None:
            raise ValueError(f"Book {book.id} not found")
        for field, value in book.model_dump(exclude={"id"}).items():
            setattr(row, field, value)
        self._session.add(row)
        self._session.flush()
        return Book.model_validate(row, from_attributes=True)

    def delete(self, book_id: int) -> bool:
        row = self._session.get(BookTable, book_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True


class _NamedRepository:
    """Shared access for the id/name lookup tables."""

    table: type[LocationTable] | type[CategoryTable]
    entity: type[Location] | type[Category]

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, item_id: int):
        row = self._session.get(self.table, item_id)
        if row is None:
            return None
        return self.entity.model_validate(row, from_attributes=True)

    def get_name(self, item_id: int) -> str:
        """Return the row's name, or an empty string when no such row exists."""
        item = self.get(item_id)
        return item.name if item is not None else ""

    def list_all(self) -> list:
        rows = self._session.exec(select(self.table).order_by(self.table.id)).all()
        return [self.entity.model_validate(row, from_attributes=True) for row in rows]

    def create(self, name: str):
        row = self.table(name=name)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return self.entity.model_validate(row, from_attributes=True)


class LocationRepository(_NamedRepository):
    """Data-access layer for locations."""

    table = LocationTable
    entity = Location


class CategoryRepository(_NamedRepository):
    """Data-access layer for categories."""

    table = CategoryTable
    entity = Category

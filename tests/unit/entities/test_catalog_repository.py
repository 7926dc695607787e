"""Unit tests for the catalog entity package."""

import pytest
from sqlmodel import Session

from src.lms.entities.service.catalog import (
    Book,
    BookRepository,
    CategoryRepository,
    LocationRepository,
)


class TestBookRepository:
    def test_create_assigns_id(self, session: Session):
        repo = BookRepository(session)

        book = repo.create(Book(name="Dune", author="Frank Herbert", isbn="9780441013593"))

        assert book.id is not None
        assert repo.get(book.id) == book

    def test_get_missing_returns_none(self, session: Session):
        assert BookRepository(session).get(999) is None

    def test_count_with_filters(self, session: Session):
        repo = BookRepository(session)
        repo.create(Book(name="A", category_id=1, location_id=1))
        repo.create(Book(name="B", category_id=1, location_id=2))
        repo.create(Book(name="C", category_id=2, location_id=2))

        assert repo.count() == 3
        assert repo.count(category_id=1) == 2
        assert repo.count(location_id=2) == 2
        assert repo.count(category_id=2, location_id=1) == 0

    def test_list_page_orders_by_id(self, session: Session):
        repo = BookRepository(session)
        ids = [repo.create(Book(name=f"Book {i}")).id for i in range(5)]

        first = repo.list_page(offset=0, limit=2)
        rest = repo.list_page(offset=2, limit=10)

        assert [b.id for b in first] == ids[:2]
        assert [b.id for b in rest] == ids[2:]

    def test_update_and_delete(self, session: Session):
        repo = BookRepository(session)
        book = repo.create(Book(name="Draft"))

        updated = repo.update(book.model_copy(update={"name": "Final", "author": "Me"}))

        assert updated.name == "Final"
        assert repo.get(book.id).author == "Me"
        assert repo.delete(book.id) is True
        assert repo.delete(book.id) is False
        assert repo.get(book.id) is None

    def test_update_missing_raises(self, session: Session):
        with pytest.raises(ValueError):
            BookRepository(session).update(Book(id=42, name="Ghost"))


class TestNamedRepositories:
    def test_get_name_falls_back_to_empty(self, session: Session):
        locations = LocationRepository(session)
        shelf = locations.create("Shelf A")

        assert locations.get_name(shelf.id) == "Shelf A"
        assert locations.get_name(0) == ""
        assert locations.get_name(999) == ""

    def test_list_all_in_id_order(self, session: Session):
        categories = CategoryRepository(session)
        categories.create("History")
        categories.create("Art")

        assert [c.name for c in categories.list_all()] == ["History", "Art"]

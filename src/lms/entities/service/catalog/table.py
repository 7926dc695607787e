"""Catalog database table models."""

from sqlmodel import Field

from src.lms.entities._base import EntityTable


class BookTable(EntityTable, table=True):
    """Database persistence model for books."""

    __tablename__ = "book"

    name: str
    author: str = ""
    isbn: str = ""
    language: str = ""
    location_id: int = Field(default=0, index=True)
    category_id: int = Field(default=0, index=True)


class LocationTable(EntityTable, table=True):
    """Database persistence model for locations."""

    __tablename__ = "location"

    name: str


class CategoryTable(EntityTable, table=True):
    """Database persistence model for categories."""

    __tablename__ = "category"

    name: str

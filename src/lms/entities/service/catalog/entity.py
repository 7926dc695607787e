"""Entities: Book, Location, Category."""

from pydantic import Field

from src.lms.entities._base import Entity


class Book(Entity):
    """A catalog entry. ``location_id``/``category_id`` of 0 mean unassigned."""

    name: str = Field(description="Title")
    author: str = Field(default="", description="Author")
    isbn: str = Field(default="", description="ISBN")
    language: str = Field(default="", description="Language")
    location_id: int = Field(default=0, description="Shelf location id")
    category_id: int = Field(default=0, description="Category id")


class Location(Entity):
    """A shelf or room where books are kept."""

    name: str = Field(description="Name")


class Category(Entity):
    """A subject category."""

    name: str = Field(description="Name")

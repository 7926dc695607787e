"""Entity package: Book, Location, Category."""

from .entity import Book, Category, Location
from .repository import BookRepository, CategoryRepository, LocationRepository
from .table import BookTable, CategoryTable, LocationTable

__all__ = [
    "Book",
    "BookRepository",
    "BookTable",
    "Category",
    "CategoryRepository",
    "CategoryTable",
    "Location",
    "LocationRepository",
    "LocationTable",
]

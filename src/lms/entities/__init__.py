"""Entities grouped by business concept.

Each entity package contains:
- entity.py: Domain model returned to services
- table.py: Database persistence model (table name and columns)
- repository.py: Data access layer

Importing this package registers every table with ``SQLModel.metadata``.
"""

from .core.user import User, UserRepository, UserTable
from .service.catalog import (
    Book,
    BookRepository,
    BookTable,
    Category,
    CategoryRepository,
    CategoryTable,
    Location,
    LocationRepository,
    LocationTable,
)
from .service.circulation import (
    BorrowBook,
    BorrowRepository,
    BorrowTable,
    ReserveBook,
    ReserveRepository,
    ReserveTable,
)
from .service.payment import Pay, PayRepository, PayTable

__all__ = [
    "Book",
    "BookRepository",
    "BookTable",
    "BorrowBook",
    "BorrowRepository",
    "BorrowTable",
    "Category",
    "CategoryRepository",
    "CategoryTable",
    "Location",
    "LocationRepository",
    "LocationTable",
    "Pay",
    "PayRepository",
    "PayTable",
    "ReserveBook",
    "ReserveRepository",
    "ReserveTable",
    "User",
    "UserRepository",
    "UserTable",
]

"""Entity package: ReserveBook, BorrowBook."""

from .entity import BorrowBook, LoanRecord, ReserveBook
from .repository import BorrowRepository, ReserveRepository
from .table import BorrowTable, ReserveTable

__all__ = [
    "BorrowBook",
    "BorrowRepository",
    "BorrowTable",
    "LoanRecord",
    "ReserveBook",
    "ReserveRepository",
    "ReserveTable",
]

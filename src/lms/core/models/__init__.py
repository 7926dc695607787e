"""Status types and derived read models."""

from .book import BookMetaData, BorrowBookStatus, ReserveBookStatus
from .status import BookStatus, StatusCode, StatusResult

__all__ = [
    "BookMetaData",
    "BookStatus",
    "BorrowBookStatus",
    "ReserveBookStatus",
    "StatusCode",
    "StatusResult",
]

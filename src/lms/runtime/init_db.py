"""Database initialization script."""

from src.lms.core.services.database.db_manage import DbManageService
from src.lms.core.services.database.db_session import DbSessionService
from src.lms.runtime.context import get_config


def init_db() -> None:
    """Create all database tables."""
    db_service = DbSessionService(get_config().database)
    try:
        DbManageService(db_service).create_all()
    finally:
        db_service.dispose()


if __name__ == "__main__":
    init_db()

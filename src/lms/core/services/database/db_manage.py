"""Schema management."""

from loguru import logger
from sqlmodel import SQLModel

from src.lms.core.services.database.db_session import DbSessionService


class DbManageService:
    def __init__(self, db_service: DbSessionService):
        self._db_service = db_service

    def create_all(self) -> None:
        """Create all database tables."""
        import src.lms.entities  # noqa: F401  registers every table

        SQLModel.metadata.create_all(self._db_service.engine)
        logger.info("Database initialized with tables: {}", sorted(SQLModel.metadata.tables))

    def drop_all(self) -> None:
        """Drop all database tables."""
        import src.lms.entities  # noqa: F401

        SQLModel.metadata.drop_all(self._db_service.engine)
        logger.warning("Dropped all database tables")

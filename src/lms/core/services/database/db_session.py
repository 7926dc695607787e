"""Database engine and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager

from loguru import logger
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, create_engine

from src.lms.core.exceptions import LibraryError
from src.lms.runtime.config.config_data import DatabaseConfig


class DbSessionService:
    def __init__(self, db_config: DatabaseConfig | None = None, engine: Engine | None = None):
        """Own the engine shared by every service.

        Pass ``engine`` to reuse an existing engine (tests); otherwise one is
        built from ``db_config``.
        """
        self._config = db_config or DatabaseConfig()
        if engine is not None:
            self._engine = engine
            return

        engine_kwargs = {
            "pool_pre_ping": True,
            "echo": self._config.echo,
            "connect_args": self._get_connect_args(self._config),
        }
        if not self._config.is_sqlite:
            engine_kwargs.update(
                {
                    "pool_size": self._config.pool_size,
                    "max_overflow": self._config.max_overflow,
                    "pool_timeout": self._config.pool_timeout,
                    "pool_recycle": self._config.pool_recycle,
                }
            )

        logger.info(
            "Initializing database engine (sqlite={}, environment={})",
            self._config.is_sqlite,
            self._config.environment_mode,
        )
        self._engine = create_engine(self._config.connection_string, **engine_kwargs)

    @property
    def engine(self) -> Engine:
        return self._engine

    def _get_connect_args(self, db_config: DatabaseConfig) -> dict:
        """Get database-specific connection arguments."""
        connect_args = {}

        if db_config.url.startswith("postgresql"):
            connect_args.update(
                {
                    "application_name": f"{db_config.environment_mode}_lms",
                    "connect_timeout": 30,
                    # Abort slow statements server-side
                    "options": f"-c statement_timeout={db_config.statement_timeout_ms}",
                }
            )

        elif db_config.is_sqlite:
            connect_args.update(
                {
                    "check_same_thread": False,
                    "timeout": 20,  # Lock timeout
                }
            )

            if db_config.environment_mode == "production":
                logger.warning(
                    "SQLite is not recommended for production use. "
                    "Consider PostgreSQL for better performance and reliability."
                )

        return connect_args

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(
            self._engine,
            expire_on_commit=False,
            autoflush=True,
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Run the block in one transaction: commit on success, roll back on any error."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except LibraryError as e:
            db.rollback()
            logger.debug("Transaction rolled back: {}", e.message)
            raise
        except SQLAlchemyError as e:
            db.rollback()
            logger.bind(error_type=type(e).__name__).error(
                "Database transaction failed: {}", e
            )
            raise
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except SQLAlchemyError as e:
            logger.bind(error_type=type(e).__name__).error(
                "Database health check failed: {}", e
            )
            return False

    def dispose(self) -> None:
        self._engine.dispose()

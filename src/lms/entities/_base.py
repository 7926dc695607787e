from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict
from sqlmodel import Field, SQLModel


def utcnow() -> datetime:
    return datetime.now(UTC)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes read back from backends that drop tzinfo."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class Entity(BaseModel):
    """Base domain entity with a database-assigned integer identifier."""

    model_config = ConfigDict(from_attributes=True)

    id: int | None = None


class EntityTable(SQLModel, table=False):
    """Base table with an autoincrement integer primary key."""

    id: int | None = Field(default=None, primary_key=True)

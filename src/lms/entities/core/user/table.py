"""User database table model."""

from src.lms.entities._base import EntityTable


class UserTable(EntityTable, table=True):
    """Database persistence model for users."""

    __tablename__ = "user"

    name: str
    password: str

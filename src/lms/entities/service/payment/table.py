"""Pay database table model."""

from sqlmodel import Field

from src.lms.entities._base import EntityTable


class PayTable(EntityTable, table=True):
    """Database persistence model for fines and their settlement state."""

    __tablename__ = "pay"

    user_id: int = Field(index=True)
    amount: int
    done: int = 0

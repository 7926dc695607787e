from sqlmodel import Session

from src.lms.entities.core.user.entity import User
from src.lms.entities.core.user.table import UserTable


class UserRepository:
    """Data-access layer for users."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, user_id: int) -> User | None:
        row = self._session.get(UserTable, user_id)
        if row is None:
            return None
        return User.model_validate(row, from_attributes=True)

    def create(self, name: str, password_hash: str) -> User:
        row = UserTable(name=name, password=password_hash)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return User.model_validate(row, from_attributes=True)

    def update_password(self, user_id: int, password_hash: str) -> bool:
        row = self._session.get(UserTable, user_id)
        if row is None:
            return False
        row.password = password_hash
        self._session.add(row)
        self._session.flush()
        return True

from sqlalchemy import update
from sqlmodel import Session, select

from src.lms.entities.service.payment.entity import Pay
from src.lms.entities.service.payment.table import PayTable


class PayRepository:
    """Data-access layer for payments."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, pay_id: int) -> Pay | None:
        row = self._session.get(PayTable, pay_id)
        if row is None:
            return None
        return Pay.model_validate(row, from_attributes=True)

    def create(self, user_id: int, amount: int) -> Pay:
        row = PayTable(user_id=user_id, amount=amount, done=0)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Pay.model_validate(row, from_attributes=True)

    def list_by_user(self, user_id: int, unpaid_only: bool = False) -> list[Pay]:
        statement = select(PayTable).where(PayTable.user_id == user_id)
        if unpaid_only:
            statement = statement.where(PayTable.done == 0)
        rows = self._session.exec(statement.order_by(PayTable.id)).all()
        return [Pay.model_validate(row, from_attributes=True) for row in rows]

    def mark_done(self, pay_id: int) -> bool:
        """Flip ``done`` from 0 to 1; returns False for unknown or already settled rows."""
        statement = (
            update(PayTable)
            .where(PayTable.id == pay_id, PayTable.done == 0)
            .values(done=1)
        )
        result = self._session.exec(statement)
        return result.rowcount == 1

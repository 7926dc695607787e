"""Settlement of fines confirmed by the payment gateway."""

from collections.abc import Mapping

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from src.lms.core.services.database.db_session import DbSessionService
from src.lms.core.services.payment.gateway import PaymentGateway
from src.lms.entities.service.payment import Pay, PayRepository


class PaymentReconciliationService:
    """Moves Pay records from pending (done=0) to settled (done=1)."""

    def __init__(self, db_service: DbSessionService, gateway: PaymentGateway):
        self._db = db_service
        self._gateway = gateway

    @property
    def gateway(self) -> PaymentGateway:
        return self._gateway

    def handle_notification(self, payload: Mapping[str, str]) -> str:
        """Process a gateway callback and return the acknowledgement body.

        The acknowledgement is returned whatever happens here, so the gateway
        stops redelivering.
        """
        notification = self._gateway.parse_notification(payload)
        if notification is None:
            return self._gateway.ack()

        logger.info(
            "Trade notification for order {}: {}",
            notification.out_trade_no,
            notification.trade_status,
        )
        if notification.trade_status == self._gateway.success_status:
            try:
                self.settle(notification.out_trade_no)
            except SQLAlchemyError:
                logger.error("Settlement of order {} failed", notification.out_trade_no)
        return self._gateway.ack()

    def settle(self, out_trade_no: str | int) -> bool:
        """Mark the Pay row as done. Returns True only on the 0 -> 1 transition.

        Unknown ids, already settled rows and non-numeric order numbers are no-ops.
        """
        try:
            pay_id = int(out_trade_no)
        except (TypeError, ValueError):
            logger.warning("Ignoring non-numeric order number {!r}", out_trade_no)
            return False

        with self._db.session_scope() as session:
            settled = PayRepository(session).mark_done(pay_id)

        if settled:
            logger.info("Pay {} settled", pay_id)
        else:
            logger.info("Pay {} unknown or already settled; nothing to do", pay_id)
        return settled

    def issue_fine(self, user_id: int, amount: int) -> Pay:
        if amount <= 0:
            raise ValueError("fine amount must be positive")
        with self._db.session_scope() as session:
            pay = PayRepository(session).create(user_id, amount)
        logger.info("Issued fine {} of {} to user {}", pay.id, amount, user_id)
        return pay

    def list_fines(self, user_id: int, unpaid_only: bool = False) -> list[Pay]:
        try:
            with self._db.get_session() as session:
                return PayRepository(session).list_by_user(user_id, unpaid_only=unpaid_only)
        except SQLAlchemyError as e:
            logger.bind(error_type=type(e).__name__).error("Fine lookup failed: {}", e)
            return []

"""Unit tests for gateway notification handling and fine settlement."""

import pytest
from alipay.exceptions import AliPayException

from src.lms.core.services import (
    AlipayGateway,
    DbSessionService,
    DisabledGateway,
    PaymentReconciliationService,
    build_gateway,
)
from src.lms.core.services.payment import ALIPAY_ACK, ALIPAY_TRADE_SUCCESS
from src.lms.entities import PayRepository
from src.lms.runtime.config.config_data import AlipayConfig
from tests.fixtures.dummies import RaisingSignatureVerifier


def _issue(db_service: DbSessionService, user_id: int = 1, amount: int = 3) -> int:
    with db_service.session_scope() as session:
        return PayRepository(session).create(user_id, amount).id


def _done(db_service: DbSessionService, pay_id: int) -> int:
    with db_service.get_session() as session:
        return PayRepository(session).get(pay_id).done


class TestAlipayGateway:
    def test_parses_verified_notification(self, alipay_gateway: AlipayGateway, signature_verifier, signed_notification):
        payload = signed_notification(17)

        notification = alipay_gateway.parse_notification(payload)

        assert notification.trade_status == ALIPAY_TRADE_SUCCESS
        assert notification.out_trade_no == "17"
        assert notification.total_amount == "3.00"
        data, signature = signature_verifier.calls[0]
        assert "sign" not in data
        assert signature == "valid-signature"
        assert payload["sign"] == "valid-signature"

    def test_bad_signature(self, alipay_gateway, signed_notification):
        payload = signed_notification(17) | {"sign": "forged"}

        assert alipay_gateway.parse_notification(payload) is None

    def test_missing_signature_or_payload(self, alipay_gateway, signed_notification, signature_verifier):
        payload = signed_notification(17)
        del payload["sign"]

        assert alipay_gateway.parse_notification(payload) is None
        assert alipay_gateway.parse_notification({}) is None
        assert signature_verifier.calls == []

    def test_missing_fields(self, alipay_gateway):
        assert alipay_gateway.parse_notification({"sign": "valid-signature", "foo": "bar"}) is None

    def test_verifier_errors_are_not_raised(self, signed_notification):
        gateway = AlipayGateway(RaisingSignatureVerifier())

        assert gateway.parse_notification(signed_notification(1)) is None

    def test_sdk_exception_is_not_raised(self, signed_notification):
        class SdkFailure:
            def verify(self, data, signature):
                raise AliPayException("40004", "bad key")

        assert AlipayGateway(SdkFailure()).parse_notification(signed_notification(1)) is None

    def test_ack(self, alipay_gateway):
        assert alipay_gateway.ack() == ALIPAY_ACK == "success"


class TestBuildGateway:
    def test_disabled_by_default(self, signed_notification):
        gateway = build_gateway(AlipayConfig())

        assert isinstance(gateway, DisabledGateway)
        assert gateway.parse_notification(signed_notification(1)) is None
        assert gateway.ack() == ALIPAY_ACK


class TestReconciliation:
    def test_success_settles_exactly_once(
        self, reconciliation_service: PaymentReconciliationService, db_service, signed_notification
    ):
        pay_id = _issue(db_service)
        payload = signed_notification(pay_id)

        assert reconciliation_service.handle_notification(payload) == ALIPAY_ACK
        assert _done(db_service, pay_id) == 1

        # Redelivery of the same notification
        assert reconciliation_service.handle_notification(payload) == ALIPAY_ACK
        assert _done(db_service, pay_id) == 1

    def test_settle_reports_transition(self, reconciliation_service, db_service):
        pay_id = _issue(db_service)

        assert reconciliation_service.settle(pay_id) is True
        assert reconciliation_service.settle(str(pay_id)) is False

    def test_unknown_pay_id_is_acknowledged(self, reconciliation_service, db_service, signed_notification):
        other = _issue(db_service)

        assert reconciliation_service.handle_notification(signed_notification(other + 100)) == ALIPAY_ACK
        assert _done(db_service, other) == 0

    @pytest.mark.parametrize("out_trade_no", ["abc", "", "1.5"])
    def test_non_numeric_order_number(self, reconciliation_service, db_service, signed_notification, out_trade_no):
        pay_id = _issue(db_service)

        assert reconciliation_service.handle_notification(signed_notification(out_trade_no)) == ALIPAY_ACK
        assert _done(db_service, pay_id) == 0

    def test_non_success_status_changes_nothing(self, reconciliation_service, db_service, signed_notification):
        pay_id = _issue(db_service)

        ack = reconciliation_service.handle_notification(signed_notification(pay_id, "WAIT_BUYER_PAY"))

        assert ack == ALIPAY_ACK
        assert _done(db_service, pay_id) == 0

    def test_unverifiable_notification_is_acknowledged(self, reconciliation_service, db_service, signed_notification):
        pay_id = _issue(db_service)
        forged = signed_notification(pay_id) | {"sign": "forged"}

        assert reconciliation_service.handle_notification(forged) == ALIPAY_ACK
        assert reconciliation_service.handle_notification({}) == ALIPAY_ACK
        assert _done(db_service, pay_id) == 0

    def test_storage_failure_is_acknowledged(self, reconciliation_service, db_service, engine, signed_notification):
        pay_id = _issue(db_service)
        with engine.begin() as connection:
            connection.exec_driver_sql("DROP TABLE pay")

        assert reconciliation_service.handle_notification(signed_notification(pay_id)) == ALIPAY_ACK

    def test_issue_and_list_fines(self, reconciliation_service):
        first = reconciliation_service.issue_fine(user_id=5, amount=2)
        second = reconciliation_service.issue_fine(user_id=5, amount=4)
        reconciliation_service.settle(first.id)

        assert [f.id for f in reconciliation_service.list_fines(5)] == [first.id, second.id]
        assert [f.id for f in reconciliation_service.list_fines(5, unpaid_only=True)] == [second.id]
        assert reconciliation_service.list_fines(6) == []

    def test_issue_fine_requires_positive_amount(self, reconciliation_service):
        with pytest.raises(ValueError):
            reconciliation_service.issue_fine(user_id=5, amount=0)

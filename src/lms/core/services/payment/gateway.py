"""Payment gateway collaborator: notification parsing and acknowledgement."""

from collections.abc import Mapping
from typing import Any, Protocol

from alipay import AliPay
from alipay.exceptions import AliPayException
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from src.lms.runtime.config.config_data import AlipayConfig

ALIPAY_TRADE_SUCCESS = "TRADE_SUCCESS"
ALIPAY_ACK = "success"


class TradeNotification(BaseModel):
    """Verified asynchronous trade notification."""

    model_config = ConfigDict(extra="ignore")

    trade_status: str = Field(description="Gateway trade status")
    out_trade_no: str = Field(description="Merchant order number (the Pay id)")
    trade_no: str | None = Field(default=None, description="Gateway trade number")
    total_amount: str | None = Field(default=None, description="Paid amount")


class PaymentGateway(Protocol):
    """What reconciliation needs from a payment gateway."""

    success_status: str

    def parse_notification(self, payload: Mapping[str, str]) -> TradeNotification | None:
        """Verify and parse a callback payload; None when absent or unverifiable."""
        ...

    def ack(self) -> str:
        """Body the gateway expects in response to a notification."""
        ...


class SignatureVerifier(Protocol):
    def verify(self, data: dict[str, Any], signature: str) -> bool: ...


class AlipayGateway:
    """Alipay notifications verified through python-alipay-sdk."""

    success_status = ALIPAY_TRADE_SUCCESS

    def __init__(self, client: SignatureVerifier):
        self._client = client

    @classmethod
    def from_config(cls, config: AlipayConfig) -> "AlipayGateway":
        client = AliPay(
            appid=config.app_id,
            app_notify_url=config.notify_url,
            app_private_key_string=config.private_key,
            alipay_public_key_string=config.alipay_public_key,
            sign_type=config.sign_type,
            debug=config.sandbox,
        )
        logger.info("Alipay client initialized (sandbox={})", config.sandbox)
        return cls(client)

    def parse_notification(self, payload: Mapping[str, str]) -> TradeNotification | None:
        data = dict(payload)
        signature = data.pop("sign", None)
        if not data or not signature:
            logger.warning("Alipay notification without payload or signature")
            return None

        try:
            verified = self._client.verify(data, signature)
        except (AliPayException, ValueError) as e:
            logger.warning("Alipay notification verification error: {}", e)
            return None
        if not verified:
            logger.warning("Alipay notification signature mismatch")
            return None

        try:
            return TradeNotification.model_validate(data)
        except PydanticValidationError as e:
            logger.warning("Alipay notification missing fields: {}", e)
            return None

    def ack(self) -> str:
        return ALIPAY_ACK


class DisabledGateway:
    """Gateway used when no payment provider is configured; accepts nothing."""

    success_status = ALIPAY_TRADE_SUCCESS

    def parse_notification(self, payload: Mapping[str, str]) -> TradeNotification | None:
        logger.warning("Payment notification received but no gateway is configured")
        return None

    def ack(self) -> str:
        return ALIPAY_ACK


def build_gateway(config: AlipayConfig) -> PaymentGateway:
    if not config.enabled:
        return DisabledGateway()
    return AlipayGateway.from_config(config)

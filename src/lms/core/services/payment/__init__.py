from .gateway import (
    ALIPAY_ACK,
    ALIPAY_TRADE_SUCCESS,
    AlipayGateway,
    DisabledGateway,
    PaymentGateway,
    TradeNotification,
    build_gateway,
)
from .reconciliation import PaymentReconciliationService

__all__ = [
    "ALIPAY_ACK",
    "ALIPAY_TRADE_SUCCESS",
    "AlipayGateway",
    "DisabledGateway",
    "PaymentGateway",
    "PaymentReconciliationService",
    "TradeNotification",
    "build_gateway",
]

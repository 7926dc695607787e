"""Core services exports."""

from .account import AccountService
from .catalog import CatalogService
from .circulation import CirculationService
from .database import DbManageService, DbSessionService
from .payment import (
    AlipayGateway,
    DisabledGateway,
    PaymentGateway,
    PaymentReconciliationService,
    TradeNotification,
    build_gateway,
)

__all__ = [
    "AccountService",
    "AlipayGateway",
    "CatalogService",
    "CirculationService",
    "DbManageService",
    "DbSessionService",
    "DisabledGateway",
    "PaymentGateway",
    "PaymentReconciliationService",
    "TradeNotification",
    "build_gateway",
]

from dataclasses import dataclass

from src.lms.core.services import (
    AccountService,
    CatalogService,
    CirculationService,
    DbSessionService,
    PaymentGateway,
    PaymentReconciliationService,
    build_gateway,
)
from src.lms.runtime.config.config_data import ConfigData


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
    payment_gateway: PaymentGateway
    catalog_service: CatalogService
    account_service: AccountService
    circulation_service: CirculationService
    reconciliation_service: PaymentReconciliationService

    @classmethod
    def build(
        cls,
        config: ConfigData,
        database_service: DbSessionService | None = None,
        payment_gateway: PaymentGateway | None = None,
    ) -> "ApplicationDependencies":
        """Wire every service around one storage handle and one gateway handle."""
        db = database_service or DbSessionService(config.database)
        gateway = payment_gateway or build_gateway(config.alipay)
        return cls(
            database_service=db,
            payment_gateway=gateway,
            catalog_service=CatalogService(db, config.library),
            account_service=AccountService(db),
            circulation_service=CirculationService(db, config.library),
            reconciliation_service=PaymentReconciliationService(db, gateway),
        )

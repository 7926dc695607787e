"""FastAPI dependency implementations."""

from fastapi import Request

from src.lms.api.http.app_data import ApplicationDependencies
from src.lms.core.services import (
    AccountService,
    CatalogService,
    CirculationService,
    PaymentReconciliationService,
)


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    return request.app.state.app_dependencies


def get_catalog_service(request: Request) -> CatalogService:
    """Get the catalog service instance."""
    return get_app_dependencies(request).catalog_service


def get_account_service(request: Request) -> AccountService:
    """Get the account service instance."""
    return get_app_dependencies(request).account_service


def get_circulation_service(request: Request) -> CirculationService:
    """Get the circulation service instance."""
    return get_app_dependencies(request).circulation_service


def get_reconciliation_service(request: Request) -> PaymentReconciliationService:
    """Get the payment reconciliation service instance."""
    return get_app_dependencies(request).reconciliation_service

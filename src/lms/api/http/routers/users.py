"""Account, circulation and fine endpoints for a user."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from src.lms.api.http.deps import (
    get_account_service,
    get_circulation_service,
    get_reconciliation_service,
)
from src.lms.core.models import BorrowBookStatus, ReserveBookStatus, StatusResult
from src.lms.core.services import (
    AccountService,
    CirculationService,
    PaymentReconciliationService,
)
from src.lms.entities.service.payment import Pay

router = APIRouter(prefix="/users", tags=["users"])


class Registration(BaseModel):
    name: str = Field(description="Display name")
    password: str = Field(description="Initial password")


class LoginRequest(BaseModel):
    user_id: int
    password: str


class PasswordUpdate(BaseModel):
    old_password: str
    new_password: str


@router.post("", response_model=StatusResult)
def register(
    body: Registration,
    accounts: AccountService = Depends(get_account_service),
) -> StatusResult:
    return accounts.register(body.name, body.password)


@router.post("/login", response_model=StatusResult)
def login(
    body: LoginRequest,
    accounts: AccountService = Depends(get_account_service),
) -> StatusResult:
    return accounts.login(body.user_id, body.password)


@router.put("/{user_id}/password", response_model=StatusResult)
def update_password(
    user_id: int,
    body: PasswordUpdate,
    accounts: AccountService = Depends(get_account_service),
) -> StatusResult:
    return accounts.update_password(user_id, body.old_password, body.new_password)


@router.post("/{user_id}/reservations/{book_id}", response_model=StatusResult)
def reserve_book(
    user_id: int,
    book_id: int,
    circulation: CirculationService = Depends(get_circulation_service),
) -> StatusResult:
    return circulation.reserve_book(user_id, book_id)


@router.delete("/{user_id}/reservations/{book_id}", response_model=StatusResult)
def cancel_reserve(
    user_id: int,
    book_id: int,
    circulation: CirculationService = Depends(get_circulation_service),
) -> StatusResult:
    return circulation.cancel_reserve(user_id, book_id)


@router.get("/{user_id}/reservations", response_model=list[ReserveBookStatus])
def get_reserved_books(
    user_id: int,
    circulation: CirculationService = Depends(get_circulation_service),
) -> list[ReserveBookStatus]:
    return circulation.get_reserved_books(user_id)


@router.post("/{user_id}/borrows/{book_id}", response_model=StatusResult)
def borrow_book(
    user_id: int,
    book_id: int,
    circulation: CirculationService = Depends(get_circulation_service),
) -> StatusResult:
    return circulation.borrow_book(user_id, book_id)


@router.delete("/{user_id}/borrows/{book_id}", response_model=StatusResult)
def return_book(
    user_id: int,
    book_id: int,
    circulation: CirculationService = Depends(get_circulation_service),
) -> StatusResult:
    return circulation.return_book(user_id, book_id)


@router.get("/{user_id}/borrows", response_model=list[BorrowBookStatus])
def get_borrowed_books(
    user_id: int,
    circulation: CirculationService = Depends(get_circulation_service),
) -> list[BorrowBookStatus]:
    return circulation.get_borrowed_books(user_id)


@router.get("/{user_id}/fines", response_model=list[Pay])
def get_fines(
    user_id: int,
    unpaid_only: bool = False,
    payments: PaymentReconciliationService = Depends(get_reconciliation_service),
) -> list[Pay]:
    return payments.list_fines(user_id, unpaid_only=unpaid_only)

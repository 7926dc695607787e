"""Payment gateway callback endpoint."""

from urllib.parse import parse_qsl

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import PlainTextResponse

from src.lms.api.http.deps import get_reconciliation_service
from src.lms.core.services import PaymentReconciliationService

router = APIRouter(prefix="/pay", tags=["payment"])


@router.post("/alipay/notify", response_class=PlainTextResponse)
async def alipay_notify(
    request: Request,
    payments: PaymentReconciliationService = Depends(get_reconciliation_service),
) -> PlainTextResponse:
    """Receive an Alipay trade notification (form-encoded) and acknowledge it."""
    body = (await request.body()).decode("utf-8", errors="replace")
    payload = dict(parse_qsl(body, keep_blank_values=True))
    ack = await run_in_threadpool(payments.handle_notification, payload)
    return PlainTextResponse(ack)

from fastapi import APIRouter, Depends
from app.api.v1.responses import result_response
from app.core.auth import get_current_identity
from app.db.session import get_ledger
from app.models.result import OperationResult
from app.schemas.invoice import InvoiceCreate, InvoiceResponse
from app.services.ledger_service import Ledger

router = APIRouter()


@router.post("", response_model=OperationResult)
async def send_invoice(
    invoice_in: InvoiceCreate,
    identity: str = Depends(get_current_identity),
    ledger: Ledger = Depends(get_ledger)
):
    """Invoice a guest. The caller must be a host with nothing outstanding."""
    return result_response(ledger.send_invoice(identity, invoice_in.guest, invoice_in.amount))


@router.get("/latest", response_model=InvoiceResponse)
async def view_invoice(
    identity: str = Depends(get_current_identity),
    ledger: Ledger = Depends(get_ledger)
):
    """Get the newest invoice the caller issued (host) or received (guest)"""
    return InvoiceResponse.from_tuple(ledger.view_invoice(identity))

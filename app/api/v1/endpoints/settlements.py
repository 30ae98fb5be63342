from fastapi import APIRouter, Depends
from app.api.v1.responses import result_response
from app.core.auth import get_current_identity
from app.db.session import get_ledger
from app.models.result import OperationResult
from app.schemas.invoice import InvoicePayment
from app.services.ledger_service import Ledger

router = APIRouter()


@router.post("/pay", response_model=OperationResult)
async def pay_invoice(
    payment: InvoicePayment,
    identity: str = Depends(get_current_identity),
    ledger: Ledger = Depends(get_ledger)
):
    """Pay towards the caller's latest invoice. Only what is still owed is charged."""
    return result_response(ledger.pay_invoice(identity, payment.amount))

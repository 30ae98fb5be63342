from fastapi import APIRouter, Depends
from app.api.v1.responses import result_response
from app.core.auth import get_current_identity
from app.db.session import get_ledger
from app.models.result import OperationResult
from app.schemas.balance import BalanceResponse, TopUpRequest
from app.services.ledger_service import Ledger

router = APIRouter()


@router.get("", response_model=BalanceResponse)
async def view_balance(
    identity: str = Depends(get_current_identity),
    ledger: Ledger = Depends(get_ledger)
):
    """Get the caller's balance"""
    return BalanceResponse(identity=identity, balance=ledger.view_balance(identity))


@router.post("/top-up", response_model=OperationResult)
async def add_balance(
    top_up: TopUpRequest,
    identity: str = Depends(get_current_identity),
    ledger: Ledger = Depends(get_ledger)
):
    """Add credits to the caller's own balance"""
    return result_response(ledger.add_balance(identity, top_up.amount))

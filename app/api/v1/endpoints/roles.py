from fastapi import APIRouter, Depends
from app.api.v1.responses import result_response
from app.core.auth import get_current_identity
from app.db.session import get_ledger
from app.models.result import OperationResult
from app.schemas.role import RoleResponse
from app.services.ledger_service import Ledger

router = APIRouter()


@router.get("/me", response_model=RoleResponse)
async def view_role(
    identity: str = Depends(get_current_identity),
    ledger: Ledger = Depends(get_ledger)
):
    """Get the caller's role"""
    return RoleResponse.for_identity(identity, ledger.view_role(identity))


@router.post("/host", response_model=OperationResult)
async def register_host(
    identity: str = Depends(get_current_identity),
    ledger: Ledger = Depends(get_ledger)
):
    """Register the caller as a host"""
    return result_response(ledger.register_host(identity))


@router.post("/guest", response_model=OperationResult)
async def register_guest(
    identity: str = Depends(get_current_identity),
    ledger: Ledger = Depends(get_ledger)
):
    """Register the caller as a guest"""
    return result_response(ledger.register_guest(identity))

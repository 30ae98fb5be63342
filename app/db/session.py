from fastapi import HTTPException, status

from app.db.store import ledger_store
from app.services.ledger_service import Ledger


def get_ledger() -> Ledger:
    """Return the active ledger."""
    if ledger_store.ledger is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Ledger is not open"
        )
    return ledger_store.ledger

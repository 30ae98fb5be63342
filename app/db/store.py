from typing import Optional

from app.core.config import settings
from app.services.ledger_service import Ledger


class LedgerStore:
    """Holds the process-wide ledger between startup and shutdown."""

    ledger: Optional[Ledger] = None

ledger_store = LedgerStore()

async def open_ledger():
    """Create the ledger, granting the configured identity the administrator role."""
    ledger_store.ledger = Ledger(settings.ADMIN_IDENTITY, settings.MAX_AMOUNT)

async def close_ledger():
    """Drop the ledger. State lives only as long as the process."""
    ledger_store.ledger = None

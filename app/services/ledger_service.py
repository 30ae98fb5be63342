"""
Ledger - the public operation surface.

Every mutating operation runs its whole check-then-mutate sequence under one
lock and inside one repository transaction. Domain failures come back as a
failed OperationResult with nothing written; they are never raised to the
caller. Reads take the same lock and never fail.
"""

import logging
import threading
from typing import Callable

from app.core.config import settings
from app.core.exceptions import LedgerError
from app.models.invoice import InvoiceTuple
from app.models.result import OperationResult
from app.models.role import Role
from app.repositories.ledger_repo import LedgerRepository
from app.services.balance_service import BalanceService
from app.services.invoice_service import InvoiceService
from app.services.registry_service import RegistryService
from app.services.settlement_service import SettlementService

logger = logging.getLogger(__name__)


class Ledger:

    def __init__(self, admin_identity: str, max_amount: int | None = None):
        self.admin_identity = admin_identity
        self.max_amount = settings.MAX_AMOUNT if max_amount is None else max_amount
        self.repo = LedgerRepository()
        self.registry = RegistryService(self.repo)
        self.balances = BalanceService(self.repo, self.registry, self.max_amount)
        self.invoices = InvoiceService(self.repo, self.registry, self.max_amount)
        self.settlements = SettlementService(self.repo, self.registry, self.balances)
        self._lock = threading.RLock()

        self.registry.assign_administrator(admin_identity)
        logger.info("Ledger created with administrator %s", admin_identity)

    # ===== MUTATING OPERATIONS =====

    def add_balance(self, caller: str, amount: int) -> OperationResult:
        return self._execute("add_balance", caller, self.balances.add_balance, caller, amount)

    def register_host(self, caller: str) -> OperationResult:
        return self._execute("register_host", caller, self.registry.register_as_host, caller)

    def register_guest(self, caller: str) -> OperationResult:
        return self._execute("register_guest", caller, self.registry.register_as_guest, caller)

    def send_invoice(self, caller: str, guest: str, amount: int) -> OperationResult:
        return self._execute(
            "send_invoice", caller, self.invoices.send_invoice, caller, guest, amount
        )

    def pay_invoice(self, caller: str, amount: int) -> OperationResult:
        return self._execute("pay_invoice", caller, self.settlements.pay_invoice, caller, amount)

    # ===== QUERIES =====

    def role_of(self, identity: str) -> Role:
        with self._lock:
            return self.registry.role_of(identity)

    def balance_of(self, identity: str) -> int:
        with self._lock:
            return self.balances.balance_of(identity)

    def latest_invoice_for(self, identity: str) -> InvoiceTuple:
        with self._lock:
            return self.invoices.latest_invoice_for(identity)

    def invoice_count(self) -> int:
        with self._lock:
            return self.repo.invoice_count()

    # The caller-implicit names of the public API.
    view_role = role_of
    view_balance = balance_of
    view_invoice = latest_invoice_for

    # ===== INTERNALS =====

    def _execute(self, operation: str, caller: str, action: Callable, *args) -> OperationResult:
        with self._lock:
            try:
                with self.repo.transaction():
                    outcome = action(*args)
            except LedgerError as exc:
                logger.warning("%s by %s rejected (%s): %s", operation, caller, exc.code.value, exc.message)
                return OperationResult.fail(exc)

        logger.info("%s by %s succeeded%s", operation, caller, _describe(args[1:], outcome))
        return OperationResult.ok()


def _describe(args: tuple, outcome) -> str:
    parts = [repr(arg) for arg in args]
    if outcome is not None:
        parts.append(f"-> {outcome}")
    return f" ({', '.join(parts)})" if parts else ""

import logging

from app.core.exceptions import InsufficientBalanceError, NoInvoiceFoundError, RoleMismatchError
from app.models.role import Role
from app.repositories.ledger_repo import LedgerRepository
from app.services.balance_service import BalanceService
from app.services.registry_service import RegistryService
from app.utils.amount_validation import validate_amount

logger = logging.getLogger(__name__)


class SettlementService:
    """Pays a guest's latest invoice out of the guest's balance."""

    def __init__(
        self,
        repo: LedgerRepository,
        registry: RegistryService,
        balances: BalanceService,
    ):
        self.repo = repo
        self.registry = registry
        self.balances = balances

    def pay_invoice(self, guest: str, amount: int) -> int:
        """
        Pay up to amount towards the guest's newest invoice.

        Only min(amount, remaining) is charged; any excess stays in the
        guest's balance. Returns the amount actually transferred.
        """
        if self.registry.role_of(guest) is not Role.GUEST:
            raise RoleMismatchError(f"Only guests pay invoices, {guest} is not a guest")

        amount = validate_amount(amount)

        balance = self.balances.balance_of(guest)
        if amount > balance:
            raise InsufficientBalanceError(f"{guest} has {balance}, cannot pay {amount}")

        position = self.repo.latest_position(guest)
        invoice = self.repo.get_invoice(position)
        if invoice is None:
            raise NoInvoiceFoundError(f"No invoice has been sent to {guest}")

        due = min(amount, invoice.remaining_amount)
        if due == 0:
            return 0

        self.balances.credit(invoice.host, due)
        self.balances.debit(guest, due)
        self.repo.set_remaining(position, invoice.remaining_amount - due)

        logger.debug(
            "Invoice %s: %s paid %s to %s, %s remaining",
            position, guest, due, invoice.host, invoice.remaining_amount,
        )
        return due

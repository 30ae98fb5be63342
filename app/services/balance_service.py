from app.core.exceptions import InsufficientBalanceError, UnauthorizedError
from app.repositories.ledger_repo import LedgerRepository
from app.services.registry_service import RegistryService
from app.utils.amount_validation import checked_add, validate_amount


class BalanceService:
    """
    Per-identity credit balances.

    Balances only change through a self-service top-up or an invoice
    payment, and never go below zero or above max_amount.
    """

    def __init__(self, repo: LedgerRepository, registry: RegistryService, max_amount: int):
        self.repo = repo
        self.registry = registry
        self.max_amount = max_amount

    def balance_of(self, identity: str) -> int:
        return self.repo.get_balance(identity)

    def add_balance(self, identity: str, amount: int) -> int:
        """Top up the caller's own balance. Returns the new balance."""
        if not self.registry.role_of(identity).is_registered():
            raise UnauthorizedError(f"{identity} must be registered to add balance")
        amount = validate_amount(amount, self.max_amount)
        return self.credit(identity, amount)

    def credit(self, identity: str, amount: int) -> int:
        new_balance = checked_add(self.repo.get_balance(identity), amount, self.max_amount)
        self.repo.set_balance(identity, new_balance)
        return new_balance

    def debit(self, identity: str, amount: int) -> int:
        current = self.repo.get_balance(identity)
        if amount > current:
            raise InsufficientBalanceError(
                f"{identity} has {current}, cannot debit {amount}"
            )
        self.repo.set_balance(identity, current - amount)
        return current - amount

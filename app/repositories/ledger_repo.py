"""
LedgerRepository - the single owned aggregate behind the ledger.

State:
1. roles: identity -> Role (absent means UNREGISTERED)
2. balances: identity -> non-negative int (absent means 0)
3. invoices: append-only log, slot 0 is a placeholder
4. latest_invoice: identity -> position of the newest invoice naming it

Writes made inside ``transaction()`` are journaled and undone if the block
raises, so a failed operation leaves no partial state behind.
"""

from contextlib import contextmanager
from typing import Callable, Dict, Iterator, List, Optional

from app.models.invoice import Invoice
from app.models.role import Role


class LedgerRepository:
    """In-process store for roles, balances and the invoice log."""

    def __init__(self):
        self.roles: Dict[str, Role] = {}
        self.balances: Dict[str, int] = {}
        self.invoices: List[Invoice] = [Invoice.placeholder()]
        self.latest_invoice: Dict[str, int] = {}
        self._journal: Optional[List[Callable[[], None]]] = None

    # ===== TRANSACTIONS =====

    @contextmanager
    def transaction(self) -> Iterator["LedgerRepository"]:
        """
        Run a block of writes atomically.

        Nested transactions join the outer one. On exception every write made
        since the outermost ``transaction()`` began is undone in reverse order
        and the exception is re-raised.
        """
        if self._journal is not None:
            yield self
            return

        self._journal = []
        try:
            yield self
        except BaseException:
            for undo in reversed(self._journal):
                undo()
            raise
        finally:
            self._journal = None

    def _record(self, undo: Callable[[], None]) -> None:
        if self._journal is not None:
            self._journal.append(undo)

    def _restore(self, mapping: Dict, key: str) -> Callable[[], None]:
        if key in mapping:
            previous = mapping[key]

            def undo():
                mapping[key] = previous
        else:
            def undo():
                mapping.pop(key, None)
        return undo

    # ===== ROLES =====

    def get_role(self, identity: str) -> Role:
        return self.roles.get(identity, Role.UNREGISTERED)

    def set_role(self, identity: str, role: Role) -> None:
        self._record(self._restore(self.roles, identity))
        self.roles[identity] = role

    # ===== BALANCES =====

    def get_balance(self, identity: str) -> int:
        return self.balances.get(identity, 0)

    def set_balance(self, identity: str, amount: int) -> None:
        if amount < 0:
            raise ValueError(f"Balance of {identity} cannot go negative: {amount}")
        self._record(self._restore(self.balances, identity))
        self.balances[identity] = amount

    # ===== INVOICES =====

    def append_invoice(self, invoice: Invoice) -> int:
        """Append to the log and index it for both parties. Returns its position."""
        position = len(self.invoices)
        self.invoices.append(invoice)
        self._record(self.invoices.pop)
        for identity in (invoice.host, invoice.guest):
            self._record(self._restore(self.latest_invoice, identity))
            self.latest_invoice[identity] = position
        return position

    def set_remaining(self, position: int, remaining: int) -> None:
        invoice = self.invoices[position]
        previous = invoice.remaining_amount
        if remaining > previous:
            raise ValueError("remaining_amount only ever decreases")

        def undo():
            invoice.remaining_amount = previous

        invoice.remaining_amount = remaining
        self._record(undo)

    def latest_position(self, identity: str) -> int:
        """Position of the newest invoice naming identity, 0 if none."""
        return self.latest_invoice.get(identity, 0)

    def get_invoice(self, position: int) -> Optional[Invoice]:
        """Invoice at position, or None for the placeholder slot."""
        if position <= 0:
            return None
        return self.invoices[position]

    def invoice_count(self) -> int:
        return len(self.invoices) - 1

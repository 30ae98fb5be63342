"""
InvoiceService - issuing and looking up invoices.

Rules:
1. Only a host may invoice, and only a guest may be invoiced
2. A host with any outstanding invoice cannot issue another
3. Lookups return the newest invoice naming the caller, paid or not
"""

from typing import Optional

from app.core.exceptions import OutstandingInvoiceExistsError, RoleMismatchError
from app.models.invoice import EMPTY_INVOICE, Invoice, InvoiceTuple
from app.models.role import Role
from app.repositories.ledger_repo import LedgerRepository
from app.services.registry_service import RegistryService
from app.utils.amount_validation import validate_amount


class InvoiceService:

    def __init__(self, repo: LedgerRepository, registry: RegistryService, max_amount: int):
        self.repo = repo
        self.registry = registry
        self.max_amount = max_amount

    def send_invoice(self, host: str, guest: str, amount: int) -> int:
        """
        Issue an invoice from host to guest.

        Returns the log position of the new invoice.
        Raises RoleMismatchError, InvalidAmountError, AmountOverflowError or
        OutstandingInvoiceExistsError, in that order of checking.
        """
        host_role = self.registry.role_of(host)
        guest_role = self.registry.role_of(guest)
        if host_role is not Role.HOST or guest_role is not Role.GUEST:
            raise RoleMismatchError(
                f"Invoices go from a host to a guest, got {host_role.name.lower()} "
                f"-> {guest_role.name.lower()}"
            )

        amount = validate_amount(amount, self.max_amount)

        if self.outstanding_invoice_of(host) is not None:
            raise OutstandingInvoiceExistsError(f"{host} already has an unpaid invoice")

        return self.repo.append_invoice(Invoice.issue(host, guest, amount))

    def outstanding_invoice_of(self, host: str) -> Optional[Invoice]:
        """
        The host's unpaid invoice, if any.

        A host cannot issue while one of its invoices is unpaid, so only its
        newest invoice can ever be outstanding.
        """
        invoice = self.repo.get_invoice(self.repo.latest_position(host))
        if invoice is not None and invoice.is_outstanding():
            return invoice
        return None

    def latest_invoice(self, identity: str) -> Optional[Invoice]:
        """Newest invoice where identity is the host (for hosts) or guest (for guests)."""
        role = self.registry.role_of(identity)
        if role not in (Role.HOST, Role.GUEST):
            return None
        return self.repo.get_invoice(self.repo.latest_position(identity))

    def latest_invoice_for(self, identity: str) -> InvoiceTuple:
        invoice = self.latest_invoice(identity)
        if invoice is None:
            return EMPTY_INVOICE
        return invoice.as_tuple()

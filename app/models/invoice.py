"""
Invoice model - a host's request for payment from a guest.

Design principles:
- Append-only: invoices are never deleted, the log keeps every one ever issued
- Only remaining_amount mutates, and only downwards
- Slot 0 of the log is a placeholder so position 0 can mean "no invoice"
- All amounts are integers in the internal accounting unit
"""

from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, model_validator

InvoiceTuple = Tuple[int, int, Optional[str], Optional[str]]


class Invoice(BaseModel):
    """
    Payment request: guest owes host remaining_amount.

    Invariants:
    - 0 <= remaining_amount <= requested_amount
    - remaining_amount == 0 means fully paid
    - requested_amount, host and guest never change after creation
    """
    model_config = ConfigDict(validate_assignment=True)

    requested_amount: int = Field(ge=0, frozen=True)
    remaining_amount: int = Field(ge=0)
    host: Optional[str] = Field(default=None, frozen=True)
    guest: Optional[str] = Field(default=None, frozen=True)

    @model_validator(mode="after")
    def _remaining_within_requested(self) -> "Invoice":
        if self.remaining_amount > self.requested_amount:
            raise ValueError("remaining_amount cannot exceed requested_amount")
        return self

    @classmethod
    def issue(cls, host: str, guest: str, amount: int) -> "Invoice":
        return cls(requested_amount=amount, remaining_amount=amount, host=host, guest=guest)

    @classmethod
    def placeholder(cls) -> "Invoice":
        return cls(requested_amount=0, remaining_amount=0)

    def is_outstanding(self) -> bool:
        """An invoice is outstanding while anything remains to be paid."""
        return self.remaining_amount != 0

    def as_tuple(self) -> InvoiceTuple:
        return (self.requested_amount, self.remaining_amount, self.host, self.guest)


# What queries return when no invoice matches
EMPTY_INVOICE: InvoiceTuple = (0, 0, None, None)

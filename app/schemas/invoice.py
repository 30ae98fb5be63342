from typing import Optional
from pydantic import BaseModel, Field

from app.models.invoice import InvoiceTuple


class InvoiceCreate(BaseModel):
    """Request body for a host invoicing a guest."""
    guest: str = Field(..., min_length=1)
    amount: int = Field(..., ge=0, strict=True)


class InvoicePayment(BaseModel):
    """Request body for a guest paying its latest invoice."""
    amount: int = Field(..., ge=0, strict=True)


class InvoiceResponse(BaseModel):
    """Latest invoice view. All zero / null when there is none."""
    requested_amount: int
    remaining_amount: int
    host: Optional[str] = None
    guest: Optional[str] = None

    @classmethod
    def from_tuple(cls, invoice: InvoiceTuple) -> "InvoiceResponse":
        requested, remaining, host, guest = invoice
        return cls(
            requested_amount=requested,
            remaining_amount=remaining,
            host=host,
            guest=guest
        )

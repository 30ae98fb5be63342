from pydantic import BaseModel, Field


class TopUpRequest(BaseModel):
    """Request body to add credits to the caller's own balance."""
    amount: int = Field(..., ge=0, strict=True)


class BalanceResponse(BaseModel):
    identity: str
    balance: int

from typing import Optional
from pydantic import BaseModel

from app.core.exceptions import ErrorCode, LedgerError


class OperationResult(BaseModel):
    """Outcome of a mutating ledger operation. Failures change no state."""
    success: bool
    error: Optional[ErrorCode] = None
    message: str = ""

    @classmethod
    def ok(cls, message: str = "") -> "OperationResult":
        return cls(success=True, message=message)

    @classmethod
    def fail(cls, exc: LedgerError) -> "OperationResult":
        return cls(success=False, error=exc.code, message=exc.message)

    def __bool__(self) -> bool:
        return self.success

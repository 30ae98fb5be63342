"""Amount validation utilities."""
from typing import Optional

from app.core.exceptions import AmountOverflowError, InvalidAmountError


def validate_amount(amount, max_amount: Optional[int] = None) -> int:
    """
    Validate an amount in the internal accounting unit.

    Rules:
    - must be an int (bool is rejected even though it subclasses int)
    - must be non-negative
    - must not exceed max_amount, when one is given
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise InvalidAmountError(f"Amount must be an integer, got {amount!r}")
    if amount < 0:
        raise InvalidAmountError(f"Amount must be non-negative, got {amount}")
    if max_amount is not None and amount > max_amount:
        raise AmountOverflowError(f"Amount {amount} exceeds the maximum of {max_amount}")
    return amount


def checked_add(current: int, amount: int, max_amount: int) -> int:
    """Add amount to current, failing instead of going past max_amount."""
    total = current + amount
    if total > max_amount:
        raise AmountOverflowError(
            f"Adding {amount} to {current} would exceed the maximum of {max_amount}"
        )
    return total

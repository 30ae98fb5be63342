"""
Ledger errors.

Every domain failure has a typed exception carrying a machine-readable
``ErrorCode``. Services raise them inside a ledger transaction; the ``Ledger``
facade turns them into a failed ``OperationResult`` once the transaction has
rolled back, so callers of the public operations never see them raised.
"""

from enum import Enum

from fastapi import status


class ErrorCode(str, Enum):
    UNAUTHORIZED = "unauthorized"
    ALREADY_REGISTERED = "already_registered"
    ROLE_MISMATCH = "role_mismatch"
    OUTSTANDING_INVOICE_EXISTS = "outstanding_invoice_exists"
    INSUFFICIENT_BALANCE = "insufficient_balance"
    NO_INVOICE_FOUND = "no_invoice_found"
    OVERFLOW = "overflow"
    INVALID_AMOUNT = "invalid_amount"


# HTTP status reported by the API for a failed operation
ERROR_STATUS = {
    ErrorCode.UNAUTHORIZED: status.HTTP_403_FORBIDDEN,
    ErrorCode.ROLE_MISMATCH: status.HTTP_403_FORBIDDEN,
    ErrorCode.ALREADY_REGISTERED: status.HTTP_409_CONFLICT,
    ErrorCode.OUTSTANDING_INVOICE_EXISTS: status.HTTP_409_CONFLICT,
    ErrorCode.INSUFFICIENT_BALANCE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.OVERFLOW: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_AMOUNT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.NO_INVOICE_FOUND: status.HTTP_404_NOT_FOUND,
}


class LedgerError(Exception):
    """Base exception for ledger operations"""
    code: ErrorCode

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UnauthorizedError(LedgerError):
    """Raised when the caller holds no role at all"""
    code = ErrorCode.UNAUTHORIZED


class AlreadyRegisteredError(LedgerError):
    """Raised when an identity that already has a role registers again"""
    code = ErrorCode.ALREADY_REGISTERED


class RoleMismatchError(LedgerError):
    """Raised when the caller or the target has the wrong role for the action"""
    code = ErrorCode.ROLE_MISMATCH


class OutstandingInvoiceExistsError(LedgerError):
    """Raised when a host with an unpaid invoice tries to issue another"""
    code = ErrorCode.OUTSTANDING_INVOICE_EXISTS


class InsufficientBalanceError(LedgerError):
    """Raised when a payment exceeds the guest's balance"""
    code = ErrorCode.INSUFFICIENT_BALANCE


class NoInvoiceFoundError(LedgerError):
    """Raised when a guest pays but no invoice was ever addressed to it"""
    code = ErrorCode.NO_INVOICE_FOUND


class AmountOverflowError(LedgerError):
    """Raised when a balance or invoice amount would exceed MAX_AMOUNT"""
    code = ErrorCode.OVERFLOW


class InvalidAmountError(LedgerError):
    """Raised when amount is negative or not an integer"""
    code = ErrorCode.INVALID_AMOUNT

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    INVALID_ARGUMENT = "invalid_argument"
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    INSUFFICIENT_FUNDS = "insufficient_funds"


class LedgerError(Exception):
    """Base class for every failure a ledger operation can report."""

    kind: ErrorKind


class InvalidArgumentError(LedgerError):
    """Raised when an id, owner or amount is malformed."""

    kind = ErrorKind.INVALID_ARGUMENT


class AccountNotFoundError(LedgerError):
    """Raised when an account id is missing from the ledger."""

    kind = ErrorKind.NOT_FOUND

    def __init__(
        self,
        message: str,
        account_id: Optional[int] = None,
        side: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.account_id = account_id
        self.side = side  # "source" / "destination" for transfers


class AccountAlreadyExistsError(LedgerError):
    """Raised when an account is created with an id already in use."""

    kind = ErrorKind.ALREADY_EXISTS


class InsufficientFundsError(LedgerError):
    """Raised when a withdrawal/transfer would drop balance below zero."""

    kind = ErrorKind.INSUFFICIENT_FUNDS

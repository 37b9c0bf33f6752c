from .schemas import (
    AccountCreate,
    AccountResponse,
    BalanceResponse,
    ErrorResponse,
    MoneyMovementRequest,
    TransferRequest,
    TransferResponse,
)

__all__ = [
    "AccountCreate",
    "AccountResponse",
    "BalanceResponse",
    "ErrorResponse",
    "MoneyMovementRequest",
    "TransferRequest",
    "TransferResponse",
]

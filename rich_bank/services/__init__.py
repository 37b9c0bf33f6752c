from .ledger import (
    MAX_ACCOUNT_ID,
    SEED_ACCOUNTS,
    Account,
    Ledger,
    is_valid_account_id,
    is_valid_amount,
    is_valid_owner,
)
from .result import LedgerResult

__all__ = [
    "Account",
    "Ledger",
    "LedgerResult",
    "MAX_ACCOUNT_ID",
    "SEED_ACCOUNTS",
    "is_valid_account_id",
    "is_valid_amount",
    "is_valid_owner",
]

from __future__ import annotations

import logging
import math
import threading
from dataclasses import dataclass
from numbers import Real
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..core.errors import (
    AccountAlreadyExistsError,
    AccountNotFoundError,
    InsufficientFundsError,
    InvalidArgumentError,
    LedgerError,
)
from .result import LedgerResult


logger = logging.getLogger(__name__)

# Largest integer that survives a round trip through a JSON number / double.
MAX_ACCOUNT_ID = 2**53 - 1


@dataclass(frozen=True)
class Account:
    id: int
    owner: str
    balance: float


@dataclass
class _AccountRecord:
    id: int
    owner: str
    balance: float

    def snapshot(self) -> Account:
        return Account(id=self.id, owner=self.owner, balance=self.balance)


SEED_ACCOUNTS: Tuple[Account, ...] = (
    Account(id=1, owner="Alice", balance=500),
    Account(id=2, owner="Bob", balance=300),
)


# ----------------------------------------------------------------------
# Validation helpers
# ----------------------------------------------------------------------
def _as_finite_float(value: Any) -> Optional[float]:
    """Float value of a real number, or ``None`` when it has none.

    ``bool`` is not a number here, and neither is ``Decimal`` (it is not a
    ``numbers.Real`` and does not mix with float balances). Ints too large
    for a float are unrepresentable and also give ``None``.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        return None
    try:
        converted = float(value)
    except OverflowError:
        return None
    return converted if math.isfinite(converted) else None


def is_valid_account_id(account_id: Any) -> bool:
    if isinstance(account_id, bool) or not isinstance(account_id, int):
        return False
    return 0 < account_id <= MAX_ACCOUNT_ID


def is_valid_owner(owner: Any) -> bool:
    return isinstance(owner, str) and bool(owner.strip())


def is_valid_amount(amount: Any) -> bool:
    converted = _as_finite_float(amount)
    return converted is not None and converted > 0


def _is_valid_balance(balance: Any) -> bool:
    converted = _as_finite_float(balance)
    return converted is not None and converted >= 0


class Ledger:
    """In-memory set of accounts and the only code allowed to move money.

    Every public operation checks its arguments before touching any record
    and returns a ``LedgerResult``; a rejected call leaves the ledger exactly
    as it was. A single lock covers the whole account map, so a transfer's
    debit and credit are never observed separately.

    Amounts are finite, positive ``int``/``float``-like reals that fit in a
    float; ``Decimal`` is rejected as an invalid argument. A credit that would
    push a balance past the largest float is rejected the same way.
    """

    def __init__(self, accounts: Optional[Iterable[Account]] = None) -> None:
        self._accounts: Dict[int, _AccountRecord] = {}
        self._lock = threading.RLock()
        for account in accounts or ():
            self._load(account)

    @classmethod
    def seeded(cls) -> Ledger:
        return cls(SEED_ACCOUNTS)

    def _load(self, account: Account) -> None:
        if not is_valid_account_id(account.id):
            raise InvalidArgumentError(f"Invalid seed account id: {account.id!r}")
        if not is_valid_owner(account.owner):
            raise InvalidArgumentError(f"Invalid seed owner for account {account.id}")
        if not _is_valid_balance(account.balance):
            raise InvalidArgumentError(f"Invalid seed balance for account {account.id}")
        if account.id in self._accounts:
            raise AccountAlreadyExistsError(f"Account id {account.id} already exists.")
        self._accounts[account.id] = _AccountRecord(
            id=account.id,
            owner=account.owner.strip(),
            balance=account.balance,
        )

    # ------------------------------------------------------------------
    # Helper utilities
    # ------------------------------------------------------------------
    def _reject(self, operation: str, error: LedgerError) -> LedgerResult[Any]:
        logger.debug(
            "ledger.rejected",
            extra={"operation": operation, "kind": error.kind.value, "reason": str(error)},
        )
        return LedgerResult.failure(error)

    def _check_account_id(self, account_id: Any) -> Optional[InvalidArgumentError]:
        if is_valid_account_id(account_id):
            return None
        return InvalidArgumentError("Invalid account id: must be a positive safe integer.")

    def _check_amount(self, amount: Any) -> Optional[InvalidArgumentError]:
        if is_valid_amount(amount):
            return None
        return InvalidArgumentError("Invalid amount: must be a positive finite number.")

    def _check_credit(
        self, record: _AccountRecord, amount: Any
    ) -> Optional[InvalidArgumentError]:
        if _as_finite_float(record.balance + amount) is not None:
            return None
        return InvalidArgumentError(
            f"Invalid amount: crediting account {record.id} would overflow its balance."
        )

    def _find(
        self,
        account_id: Any,
        side: Optional[str] = None,
    ) -> Tuple[Optional[_AccountRecord], Optional[LedgerError]]:
        invalid = self._check_account_id(account_id)
        if invalid is not None:
            return None, invalid

        record = self._accounts.get(account_id)
        if record is None:
            label = f"{side.capitalize()} account" if side else "Account"
            return None, AccountNotFoundError(
                f"{label} {account_id} not found.",
                account_id=account_id,
                side=side,
            )
        return record, None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def lookup(self, account_id: Any) -> LedgerResult[Optional[Account]]:
        """Return the account with ``account_id``, or a successful ``None``
        when the id is valid but unknown."""
        invalid = self._check_account_id(account_id)
        if invalid is not None:
            return self._reject("lookup", invalid)

        with self._lock:
            record = self._accounts.get(account_id)
            return LedgerResult.success(record.snapshot() if record else None)

    def create(self, account_id: Any, owner: Any) -> LedgerResult[Account]:
        invalid = self._check_account_id(account_id)
        if invalid is not None:
            return self._reject("create", invalid)
        if not is_valid_owner(owner):
            return self._reject(
                "create",
                InvalidArgumentError("Invalid owner: must be a non-empty string."),
            )

        with self._lock:
            if account_id in self._accounts:
                return self._reject(
                    "create",
                    AccountAlreadyExistsError(f"Account id {account_id} already exists."),
                )

            record = _AccountRecord(id=account_id, owner=owner.strip(), balance=0)
            self._accounts[account_id] = record
            account = record.snapshot()

        logger.info(
            "account.created",
            extra={"account_id": account.id, "owner": account.owner},
        )
        return LedgerResult.success(account)

    def deposit(self, account_id: Any, amount: Any) -> LedgerResult[float]:
        invalid = self._check_amount(amount)
        if invalid is not None:
            return self._reject("deposit", invalid)

        with self._lock:
            record, error = self._find(account_id)
            if error is not None:
                return self._reject("deposit", error)

            overflow = self._check_credit(record, amount)
            if overflow is not None:
                return self._reject("deposit", overflow)

            record.balance += amount
            balance = record.balance

        logger.info(
            "account.deposit",
            extra={"account_id": account_id, "amount": amount, "balance": balance},
        )
        return LedgerResult.success(balance)

    def withdraw(self, account_id: Any, amount: Any) -> LedgerResult[float]:
        invalid = self._check_amount(amount)
        if invalid is not None:
            return self._reject("withdraw", invalid)

        with self._lock:
            record, error = self._find(account_id)
            if error is not None:
                return self._reject("withdraw", error)

            if amount > record.balance:
                return self._reject(
                    "withdraw",
                    InsufficientFundsError("Insufficient funds."),
                )

            record.balance -= amount
            balance = record.balance

        logger.info(
            "account.withdraw",
            extra={"account_id": account_id, "amount": amount, "balance": balance},
        )
        return LedgerResult.success(balance)

    def transfer(
        self,
        from_account_id: Any,
        to_account_id: Any,
        amount: Any,
    ) -> LedgerResult[Tuple[float, float]]:
        invalid = self._check_amount(amount)
        if invalid is not None:
            return self._reject("transfer", invalid)

        with self._lock:
            source, error = self._find(from_account_id, side="source")
            if error is not None:
                return self._reject("transfer", error)

            dest, error = self._find(to_account_id, side="destination")
            if error is not None:
                return self._reject("transfer", error)

            if amount > source.balance:
                return self._reject(
                    "transfer",
                    InsufficientFundsError("Insufficient funds in source account."),
                )

            if source is not dest:
                overflow = self._check_credit(dest, amount)
                if overflow is not None:
                    return self._reject("transfer", overflow)

            # A self-transfer passes the same checks but nets to zero; skipping
            # the arithmetic keeps float balances bit-for-bit unchanged.
            if source is not dest:
                source.balance -= amount
                dest.balance += amount
            balances = (source.balance, dest.balance)

        logger.info(
            "account.transfer",
            extra={
                "source_account_id": from_account_id,
                "dest_account_id": to_account_id,
                "amount": amount,
            },
        )
        return LedgerResult.success(balances)

    def accounts(self) -> List[Account]:
        with self._lock:
            return [self._accounts[key].snapshot() for key in sorted(self._accounts)]

    def total_balance(self) -> float:
        with self._lock:
            return sum(record.balance for record in self._accounts.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._accounts)

    def __contains__(self, account_id: object) -> bool:
        with self._lock:
            return account_id in self._accounts

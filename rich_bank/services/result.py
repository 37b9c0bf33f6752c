"""
Result wrapper returned by every ledger operation.

Expected failures (bad input, unknown account, duplicate id, insufficient
funds) are returned instead of raised, so callers branch on the error kind:

    result = ledger.withdraw(1, 50)
    if result.ok:
        balance = result.value
    elif result.error.kind is ErrorKind.INSUFFICIENT_FUNDS:
        ...

Callers that prefer exceptions use ``unwrap()``, which raises the held
``LedgerError``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from ..core.errors import ErrorKind, LedgerError

T = TypeVar("T")


@dataclass(frozen=True)
class LedgerResult(Generic[T]):
    value: Optional[T] = None
    error: Optional[LedgerError] = None

    @classmethod
    def success(cls, value: T) -> LedgerResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: LedgerError) -> LedgerResult[T]:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        """Error kind of a failed result, ``None`` on success."""
        return None if self.error is None else self.error.kind

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

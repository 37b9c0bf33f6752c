from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# Range and blank checks are done by the ledger; these schemas only fix the
# JSON shape.


class AccountCreate(BaseModel):
    model_config = ConfigDict(strict=True)

    id: int = Field(..., description="Positive account identifier chosen by the caller")
    owner: str = Field(..., description="Name of the account holder")


class AccountResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    owner: str
    balance: float = Field(..., ge=0)


class MoneyMovementRequest(BaseModel):
    model_config = ConfigDict(strict=True)

    amount: float = Field(..., description="Positive, finite amount to move")


class BalanceResponse(BaseModel):
    id: int
    balance: float


class TransferRequest(BaseModel):
    model_config = ConfigDict(strict=True)

    source_account_id: int
    dest_account_id: int
    amount: float


class TransferResponse(BaseModel):
    source_balance: float
    dest_balance: float


class ErrorResponse(BaseModel):
    detail: str
    kind: str
    side: Optional[str] = None

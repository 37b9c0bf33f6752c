from fastapi import APIRouter, Depends, status

from ..core.dependencies import get_ledger
from ..core.errors import AccountNotFoundError
from ..models import (
    AccountCreate,
    AccountResponse,
    BalanceResponse,
    MoneyMovementRequest,
    TransferRequest,
    TransferResponse,
)
from ..services import Ledger


router = APIRouter(prefix="/accounts", tags=["accounts"])

@router.get("", response_model=list[AccountResponse])
def list_accounts(ledger: Ledger = Depends(get_ledger)) -> list[AccountResponse]:
    return [AccountResponse.model_validate(account) for account in ledger.accounts()]

@router.post("", response_model=AccountResponse, status_code=status.HTTP_201_CREATED)
def create_account(
    payload: AccountCreate,
    ledger: Ledger = Depends(get_ledger),
) -> AccountResponse:
    account = ledger.create(payload.id, payload.owner).unwrap()
    return AccountResponse.model_validate(account)

@router.get("/{account_id}", response_model=AccountResponse)
def get_account(
    account_id: int,
    ledger: Ledger = Depends(get_ledger),
) -> AccountResponse:
    account = ledger.lookup(account_id).unwrap()
    if account is None:
        raise AccountNotFoundError(f"Account {account_id} not found.", account_id=account_id)
    return AccountResponse.model_validate(account)

@router.post("/{account_id}/deposit", response_model=BalanceResponse)
def deposit(
    account_id: int,
    payload: MoneyMovementRequest,
    ledger: Ledger = Depends(get_ledger),
) -> BalanceResponse:
    balance = ledger.deposit(account_id, payload.amount).unwrap()
    return BalanceResponse(id=account_id, balance=balance)

@router.post("/{account_id}/withdraw", response_model=BalanceResponse)
def withdraw(
    account_id: int,
    payload: MoneyMovementRequest,
    ledger: Ledger = Depends(get_ledger),
) -> BalanceResponse:
    balance = ledger.withdraw(account_id, payload.amount).unwrap()
    return BalanceResponse(id=account_id, balance=balance)

transfer_router = APIRouter(prefix="/transfers", tags=["transfers"])

@transfer_router.post("", response_model=TransferResponse)
def create_transfer(
    payload: TransferRequest,
    ledger: Ledger = Depends(get_ledger),
) -> TransferResponse:
    source_balance, dest_balance = ledger.transfer(
        payload.source_account_id,
        payload.dest_account_id,
        payload.amount,
    ).unwrap()
    return TransferResponse(source_balance=source_balance, dest_balance=dest_balance)

__all__ = ["router", "transfer_router"]

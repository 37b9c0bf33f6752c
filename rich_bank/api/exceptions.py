from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..core.errors import (
    AccountAlreadyExistsError,
    AccountNotFoundError,
    InsufficientFundsError,
    InvalidArgumentError,
    LedgerError,
)
from ..models import ErrorResponse


def _error_response(status_code: int, exc: LedgerError) -> JSONResponse:
    body = ErrorResponse(
        detail=str(exc),
        kind=exc.kind.value,
        side=getattr(exc, "side", None),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(InvalidArgumentError)
    async def invalid_argument_handler(
        request: Request, exc: InvalidArgumentError
    ) -> JSONResponse:
        return _error_response(400, exc)

    @app.exception_handler(AccountNotFoundError)
    async def account_not_found_handler(
        request: Request, exc: AccountNotFoundError
    ) -> JSONResponse:
        return _error_response(404, exc)

    @app.exception_handler(AccountAlreadyExistsError)
    async def account_exists_handler(
        request: Request, exc: AccountAlreadyExistsError
    ) -> JSONResponse:
        return _error_response(409, exc)

    @app.exception_handler(InsufficientFundsError)
    async def insufficient_funds_handler(
        request: Request, exc: InsufficientFundsError
    ) -> JSONResponse:
        return _error_response(409, exc)

import logging
from typing import Optional

from fastapi import FastAPI

from .api.exceptions import register_exception_handlers
from .api.routes import router as accounts_router, transfer_router
from .core.config import Settings, get_settings


def read_health() -> dict[str, str]:
    return {"status": "ok"}


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the HTTP adapter around the process-wide ledger."""
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level)

    application = FastAPI(title=settings.app_name)
    application.include_router(accounts_router)
    application.include_router(transfer_router)
    application.add_api_route("/health", read_health, methods=["GET"], tags=["health"])
    register_exception_handlers(application)
    return application


app = create_app()

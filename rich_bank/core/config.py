from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Rich Bank Ledger API"
    log_level: str = "INFO"
    seed_accounts: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="RICH_BANK_",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()

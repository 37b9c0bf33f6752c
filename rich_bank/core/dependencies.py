from functools import lru_cache

from ..services import Ledger
from .config import get_settings


@lru_cache()
def get_ledger() -> Ledger:
    if get_settings().seed_accounts:
        return Ledger.seeded()
    return Ledger()

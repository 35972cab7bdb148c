"""Application ports package."""

from .accounts_repository import AccountsRepositoryPort
from .budgets_repository import AvailableBudgetsRepositoryPort
from .cache import ChartCachePort
from .database import DatabaseEnginePort
from .net_worth import NetWorthPort
from .transactions import TransactionCollectorPort

__all__ = [
    "AccountsRepositoryPort",
    "AvailableBudgetsRepositoryPort",
    "ChartCachePort",
    "DatabaseEnginePort",
    "NetWorthPort",
    "TransactionCollectorPort",
]

"""Domain models package."""

from .accounts import AccountDTO, NetWorthInclusion
from .budgets import AvailableBudgetDTO, AvailableBudgetUpdate
from .charts import ChartDataset, ChartSeries
from .currencies import CurrencyDTO
from .flows import FlowBucket, FlowRecord, NetWorthItem, TransactionType

__all__ = [
    "AccountDTO",
    "NetWorthInclusion",
    "AvailableBudgetDTO",
    "AvailableBudgetUpdate",
    "ChartDataset",
    "ChartSeries",
    "CurrencyDTO",
    "FlowBucket",
    "FlowRecord",
    "NetWorthItem",
    "TransactionType",
]

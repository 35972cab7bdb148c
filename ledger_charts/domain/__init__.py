"""Domain package for business rules and core models."""

from .models import (
    AccountDTO,
    AvailableBudgetDTO,
    AvailableBudgetUpdate,
    ChartDataset,
    ChartSeries,
    CurrencyDTO,
    FlowBucket,
    FlowRecord,
    NetWorthInclusion,
    NetWorthItem,
    TransactionType,
)
from .policies import classify_flow
from .services import (
    PeriodNavigator,
    serialize_chart_dataset,
    validate_budget_amount,
    validate_budget_range,
)

__all__ = [
    "AccountDTO",
    "AvailableBudgetDTO",
    "AvailableBudgetUpdate",
    "ChartDataset",
    "ChartSeries",
    "CurrencyDTO",
    "FlowBucket",
    "FlowRecord",
    "NetWorthInclusion",
    "NetWorthItem",
    "TransactionType",
    "classify_flow",
    "PeriodNavigator",
    "serialize_chart_dataset",
    "validate_budget_amount",
    "validate_budget_range",
]

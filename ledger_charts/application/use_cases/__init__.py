"""Application use cases package."""

from .budget_errors import (
    AvailableBudgetNotFoundError,
    InvalidBudgetUpdateError,
)
from .get_available_budget import GetAvailableBudgetUseCase
from .get_net_worth_chart import GetNetWorthChartUseCase
from .get_operations_chart import GetOperationsChartUseCase
from .update_available_budget import UpdateAvailableBudgetUseCase

__all__ = [
    "AvailableBudgetNotFoundError",
    "InvalidBudgetUpdateError",
    "GetAvailableBudgetUseCase",
    "GetNetWorthChartUseCase",
    "GetOperationsChartUseCase",
    "UpdateAvailableBudgetUseCase",
]

"""Domain services package."""

from .charts import serialize_chart_dataset, serialize_chart_series
from .periods import PeriodNavigator, months_between
from .validation import validate_budget_amount, validate_budget_range

__all__ = [
    "serialize_chart_dataset",
    "serialize_chart_series",
    "PeriodNavigator",
    "months_between",
    "validate_budget_amount",
    "validate_budget_range",
]

"""Domain models for available budgets."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from .currencies import CurrencyDTO


@dataclass(frozen=True)
class AvailableBudgetDTO:
    """Amount available for budgeting in a currency over a period."""

    id: int
    currency: CurrencyDTO
    amount: Decimal
    start: date
    end: date
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class AvailableBudgetUpdate:
    """Partial update of an available budget; None means unchanged."""

    currency_id: int | None = None
    currency_code: str | None = None
    amount: Decimal | None = None
    start: date | None = None
    end: date | None = None


__all__ = ["AvailableBudgetDTO", "AvailableBudgetUpdate"]

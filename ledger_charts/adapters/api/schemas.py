"""Pydantic models for the available budgets REST API."""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from ledger_charts.domain.models import AvailableBudgetDTO, AvailableBudgetUpdate
from ledger_charts.utils.decimal_utils import format_amount, round_amount


# Request Models


class AvailableBudgetUpdateRequest(BaseModel):
    """Partial update of an available budget."""

    currency_id: Optional[int] = Field(default=None, description="Currency id")
    currency_code: Optional[str] = Field(
        default=None,
        min_length=3,
        max_length=3,
        description="ISO currency code, used when currency_id is absent",
    )
    amount: Optional[Decimal] = Field(default=None, description="Amount")
    start: Optional[date] = None
    end: Optional[date] = None

    def to_update(self) -> AvailableBudgetUpdate:
        return AvailableBudgetUpdate(
            currency_id=self.currency_id,
            currency_code=self.currency_code,
            amount=self.amount,
            start=self.start,
            end=self.end,
        )


# Response Models


class AvailableBudgetAttributes(BaseModel):
    """Available budget fields as exposed by the API."""

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    currency_id: str
    currency_code: str
    currency_symbol: str
    currency_decimal_places: int
    amount: str
    start: date
    end: date


class AvailableBudgetResource(BaseModel):
    """JSON:API style resource object."""

    type: str = "available_budgets"
    id: str
    attributes: AvailableBudgetAttributes


class AvailableBudgetResponse(BaseModel):
    """Single available budget response."""

    data: AvailableBudgetResource

    @classmethod
    def from_dto(cls, budget: AvailableBudgetDTO) -> "AvailableBudgetResponse":
        currency = budget.currency
        return cls(
            data=AvailableBudgetResource(
                id=str(budget.id),
                attributes=AvailableBudgetAttributes(
                    created_at=budget.created_at,
                    updated_at=budget.updated_at,
                    currency_id=str(currency.id),
                    currency_code=currency.code,
                    currency_symbol=currency.symbol,
                    currency_decimal_places=currency.decimal_places,
                    amount=format_amount(
                        round_amount(budget.amount, currency.decimal_places)
                    ),
                    start=budget.start,
                    end=budget.end,
                ),
            )
        )


__all__ = [
    "AvailableBudgetUpdateRequest",
    "AvailableBudgetAttributes",
    "AvailableBudgetResource",
    "AvailableBudgetResponse",
]

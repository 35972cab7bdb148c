"""Port for available budget persistence."""

from typing import Protocol

from ledger_charts.domain.models import AvailableBudgetDTO, CurrencyDTO


class AvailableBudgetsRepositoryPort(Protocol):
    """Port exposing available budgets and currency lookups."""

    def fetch_budget(self, budget_id: int) -> AvailableBudgetDTO | None:
        """Return the budget, or None when it does not exist."""

    def fetch_currency_by_id(self, currency_id: int) -> CurrencyDTO | None:
        """Return the currency with this id, or None."""

    def fetch_currency_by_code(self, code: str) -> CurrencyDTO | None:
        """Return the currency with this ISO code, or None."""

    def save_budget(self, budget: AvailableBudgetDTO) -> AvailableBudgetDTO:
        """Persist the budget and return the stored version."""


__all__ = ["AvailableBudgetsRepositoryPort"]

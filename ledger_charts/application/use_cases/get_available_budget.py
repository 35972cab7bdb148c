"""Use case to read a single available budget."""

from ledger_charts.application.ports.budgets_repository import (
    AvailableBudgetsRepositoryPort,
)
from ledger_charts.application.use_cases.budget_errors import (
    AvailableBudgetNotFoundError,
)
from ledger_charts.domain.models import AvailableBudgetDTO


class GetAvailableBudgetUseCase:
    """Load an available budget by id."""

    def __init__(self, budgets_repository: AvailableBudgetsRepositoryPort) -> None:
        self._budgets_repository = budgets_repository

    def execute(self, budget_id: int) -> AvailableBudgetDTO:
        budget = self._budgets_repository.fetch_budget(budget_id)
        if budget is None:
            raise AvailableBudgetNotFoundError(budget_id)
        return budget


__all__ = ["GetAvailableBudgetUseCase"]

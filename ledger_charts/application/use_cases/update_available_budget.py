"""Use case applying a partial update to an available budget."""

from dataclasses import replace

from ledger_charts.application.ports.budgets_repository import (
    AvailableBudgetsRepositoryPort,
)
from ledger_charts.application.use_cases.budget_errors import (
    AvailableBudgetNotFoundError,
    InvalidBudgetUpdateError,
)
from ledger_charts.domain.models import (
    AvailableBudgetDTO,
    AvailableBudgetUpdate,
    CurrencyDTO,
)
from ledger_charts.domain.services.validation import (
    validate_budget_amount,
    validate_budget_range,
)
from ledger_charts.infrastructure.logging.logger import get_app_logger


class UpdateAvailableBudgetUseCase:
    """Validate and persist changes to an available budget."""

    def __init__(
        self,
        budgets_repository: AvailableBudgetsRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            budgets_repository: Port reading and storing budgets.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._budgets_repository = budgets_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        budget_id: int,
        changes: AvailableBudgetUpdate,
    ) -> AvailableBudgetDTO:
        """Apply the submitted changes and return the stored budget.

        A currency id takes precedence over a currency code. The merged
        period must end strictly after it starts.

        Args:
            budget_id: Identifier of the budget to update.
            changes: Fields to change; None values are left untouched.

        Returns:
            AvailableBudgetDTO: The budget as stored after the update.

        Raises:
            AvailableBudgetNotFoundError: If the budget does not exist.
            InvalidBudgetUpdateError: If a submitted value is rejected.
        """
        budget = self._budgets_repository.fetch_budget(budget_id)
        if budget is None:
            raise AvailableBudgetNotFoundError(budget_id)

        currency = self._resolve_currency(budget.currency, changes)
        amount = budget.amount
        if changes.amount is not None:
            try:
                validate_budget_amount(changes.amount)
            except ValueError as exc:
                raise InvalidBudgetUpdateError("amount", str(exc)) from exc
            amount = changes.amount

        start = changes.start or budget.start
        end = changes.end or budget.end
        try:
            validate_budget_range(start, end)
        except ValueError as exc:
            raise InvalidBudgetUpdateError("end", str(exc)) from exc

        updated = replace(
            budget,
            currency=currency,
            amount=amount,
            start=start,
            end=end,
        )
        stored = self._budgets_repository.save_budget(updated)
        self._logger.info(
            f"Available budget {budget_id} updated: "
            f"{stored.currency.code} {stored.amount} "
            f"{stored.start} - {stored.end}"
        )
        return stored

    def _resolve_currency(
        self,
        current: CurrencyDTO,
        changes: AvailableBudgetUpdate,
    ) -> CurrencyDTO:
        if changes.currency_id is not None:
            currency = self._budgets_repository.fetch_currency_by_id(
                changes.currency_id
            )
            if currency is None:
                raise InvalidBudgetUpdateError(
                    "currency_id",
                    f"Unknown currency id: {changes.currency_id}",
                )
            return currency
        if changes.currency_code:
            currency = self._budgets_repository.fetch_currency_by_code(
                changes.currency_code.strip().upper()
            )
            if currency is None:
                raise InvalidBudgetUpdateError(
                    "currency_code",
                    f"Unknown currency code: {changes.currency_code}",
                )
            return currency
        return current


__all__ = ["UpdateAvailableBudgetUseCase"]

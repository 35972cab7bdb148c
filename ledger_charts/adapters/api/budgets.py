"""Available budget routes."""

from fastapi import APIRouter, Depends, Path

from ledger_charts.adapters.api.dependencies import (
    get_available_budget_use_case,
    get_update_available_budget_use_case,
)
from ledger_charts.adapters.api.schemas import (
    AvailableBudgetResponse,
    AvailableBudgetUpdateRequest,
)
from ledger_charts.application.use_cases.get_available_budget import (
    GetAvailableBudgetUseCase,
)
from ledger_charts.application.use_cases.update_available_budget import (
    UpdateAvailableBudgetUseCase,
)

router = APIRouter(prefix="/available_budgets", tags=["available_budgets"])


@router.get("/{budget_id}", response_model=AvailableBudgetResponse)
def show_available_budget(
    budget_id: int = Path(..., ge=1, description="Available budget id"),
    use_case: GetAvailableBudgetUseCase = Depends(
        get_available_budget_use_case
    ),
) -> AvailableBudgetResponse:
    return AvailableBudgetResponse.from_dto(use_case.execute(budget_id))


@router.put("/{budget_id}", response_model=AvailableBudgetResponse)
def update_available_budget(
    submission: AvailableBudgetUpdateRequest,
    budget_id: int = Path(..., ge=1, description="Available budget id"),
    use_case: UpdateAvailableBudgetUseCase = Depends(
        get_update_available_budget_use_case
    ),
) -> AvailableBudgetResponse:
    """Apply a partial update and return the stored budget."""
    budget = use_case.execute(budget_id, submission.to_update())
    return AvailableBudgetResponse.from_dto(budget)


__all__ = ["router"]

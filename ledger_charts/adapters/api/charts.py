"""Chart report routes returning chart-ready JSON."""

from datetime import date
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query

from ledger_charts.application.use_cases.get_net_worth_chart import (
    GetNetWorthChartUseCase,
)
from ledger_charts.application.use_cases.get_operations_chart import (
    GetOperationsChartUseCase,
)
from ledger_charts.adapters.api.dependencies import (
    get_net_worth_chart_use_case,
    get_operations_chart_use_case,
    resolve_accounts,
)
from ledger_charts.domain.models import AccountDTO
from ledger_charts.domain.services.charts import serialize_chart_dataset

router = APIRouter(prefix="/chart/report", tags=["charts"])


def _check_range(start: date, end: date) -> None:
    if start > end:
        raise HTTPException(
            status_code=400,
            detail="start must not be after end",
        )


@router.get("/net-worth")
def net_worth_chart(
    start: date = Query(..., description="First sample date"),
    end: date = Query(..., description="Exclusive end of sampling"),
    accounts: list[AccountDTO] = Depends(resolve_accounts),
    use_case: GetNetWorthChartUseCase = Depends(get_net_worth_chart_use_case),
) -> list[dict[str, Any]]:
    """Weekly net worth per currency for the selected accounts."""
    _check_range(start, end)
    return serialize_chart_dataset(use_case.execute(accounts, start, end))


@router.get("/operations")
def operations_chart(
    start: date = Query(..., description="First day of the range"),
    end: date = Query(..., description="Last day of the range"),
    accounts: list[AccountDTO] = Depends(resolve_accounts),
    use_case: GetOperationsChartUseCase = Depends(
        get_operations_chart_use_case
    ),
) -> list[dict[str, Any]]:
    """Earned and spent bars per currency and month."""
    _check_range(start, end)
    return serialize_chart_dataset(use_case.execute(accounts, start, end))


__all__ = ["router"]

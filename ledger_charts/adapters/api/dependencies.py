"""Dependency providers for the FastAPI adapter.

Tests replace these through ``app.dependency_overrides``.
"""

from functools import lru_cache

from fastapi import Depends, HTTPException, Query

from ledger_charts.application.ports.accounts_repository import (
    AccountsRepositoryPort,
)
from ledger_charts.application.ports.cache import ChartCachePort
from ledger_charts.application.ports.database import DatabaseEnginePort
from ledger_charts.application.use_cases.get_available_budget import (
    GetAvailableBudgetUseCase,
)
from ledger_charts.application.use_cases.get_net_worth_chart import (
    GetNetWorthChartUseCase,
)
from ledger_charts.application.use_cases.get_operations_chart import (
    GetOperationsChartUseCase,
)
from ledger_charts.application.use_cases.update_available_budget import (
    UpdateAvailableBudgetUseCase,
)
from ledger_charts.domain.models import AccountDTO
from ledger_charts.infrastructure.container import (
    build_accounts_repository,
    build_chart_cache,
    build_database_adapter,
    build_get_available_budget_use_case,
    build_net_worth_chart_use_case,
    build_operations_chart_use_case,
    build_update_available_budget_use_case,
)
from ledger_charts.infrastructure.settings import ChartSettings


@lru_cache()
def get_chart_settings() -> ChartSettings:
    """Return chart settings (cached singleton)."""
    return ChartSettings.from_env()


@lru_cache()
def get_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter (cached singleton)."""
    return build_database_adapter()


@lru_cache()
def get_chart_cache() -> ChartCachePort:
    """Return the process-wide chart cache (cached singleton)."""
    return build_chart_cache(get_chart_settings())


def get_accounts_repository(
    db_port: DatabaseEnginePort = Depends(get_database_adapter),
) -> AccountsRepositoryPort:
    return build_accounts_repository(db_port)


def get_net_worth_chart_use_case(
    db_port: DatabaseEnginePort = Depends(get_database_adapter),
    cache: ChartCachePort = Depends(get_chart_cache),
    settings: ChartSettings = Depends(get_chart_settings),
) -> GetNetWorthChartUseCase:
    return build_net_worth_chart_use_case(db_port, cache, settings)


def get_operations_chart_use_case(
    db_port: DatabaseEnginePort = Depends(get_database_adapter),
    cache: ChartCachePort = Depends(get_chart_cache),
) -> GetOperationsChartUseCase:
    return build_operations_chart_use_case(db_port, cache)


def get_available_budget_use_case(
    db_port: DatabaseEnginePort = Depends(get_database_adapter),
) -> GetAvailableBudgetUseCase:
    return build_get_available_budget_use_case(db_port)


def get_update_available_budget_use_case(
    db_port: DatabaseEnginePort = Depends(get_database_adapter),
) -> UpdateAvailableBudgetUseCase:
    return build_update_available_budget_use_case(db_port)


def parse_account_ids(
    accounts: str = Query(
        ...,
        pattern=r"^\d+(,\d+)*$",
        description="Comma-separated account identifiers",
    ),
) -> list[int]:
    """Split the ``accounts`` query parameter into unique identifiers."""
    ids: list[int] = []
    for raw_id in accounts.split(","):
        account_id = int(raw_id)
        if account_id not in ids:
            ids.append(account_id)
    return ids


def resolve_accounts(
    account_ids: list[int] = Depends(parse_account_ids),
    repository: AccountsRepositoryPort = Depends(get_accounts_repository),
) -> list[AccountDTO]:
    """Load the requested accounts, rejecting unknown identifiers."""
    accounts = repository.fetch_accounts(account_ids)
    missing = sorted(set(account_ids) - {account.id for account in accounts})
    if missing:
        raise HTTPException(
            status_code=404,
            detail=f"Unknown accounts: {', '.join(map(str, missing))}",
        )
    return accounts


__all__ = [
    "get_chart_settings",
    "get_database_adapter",
    "get_chart_cache",
    "get_accounts_repository",
    "get_net_worth_chart_use_case",
    "get_operations_chart_use_case",
    "get_available_budget_use_case",
    "get_update_available_budget_use_case",
    "parse_account_ids",
    "resolve_accounts",
]

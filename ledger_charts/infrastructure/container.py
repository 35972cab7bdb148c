"""Composition root for wiring infrastructure adapters."""

from ledger_charts.application.ports.accounts_repository import (
    AccountsRepositoryPort,
)
from ledger_charts.application.ports.budgets_repository import (
    AvailableBudgetsRepositoryPort,
)
from ledger_charts.application.ports.cache import ChartCachePort
from ledger_charts.application.ports.database import DatabaseEnginePort
from ledger_charts.application.ports.net_worth import NetWorthPort
from ledger_charts.application.ports.transactions import (
    TransactionCollectorPort,
)
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
from ledger_charts.domain.services.periods import PeriodNavigator
from ledger_charts.infrastructure.accounts_repository import (
    SqlAlchemyAccountsRepository,
)
from ledger_charts.infrastructure.budgets_repository import (
    SqlAlchemyAvailableBudgetsRepository,
)
from ledger_charts.infrastructure.cache import (
    InMemoryChartCache,
    NullChartCache,
)
from ledger_charts.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from ledger_charts.infrastructure.logging.logger import get_app_logger
from ledger_charts.infrastructure.net_worth_repository import (
    SqlAlchemyNetWorthRepository,
)
from ledger_charts.infrastructure.settings import ChartSettings
from ledger_charts.infrastructure.transactions_repository import (
    SqlAlchemyTransactionCollector,
)


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_accounts_repository(
    db_port: DatabaseEnginePort | None = None,
) -> AccountsRepositoryPort:
    """Return the ledger accounts repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyAccountsRepository(resolved_db)


def build_net_worth_repository(
    db_port: DatabaseEnginePort | None = None,
) -> NetWorthPort:
    """Return the per-currency balance helper."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyNetWorthRepository(resolved_db)


def build_transaction_collector(
    db_port: DatabaseEnginePort | None = None,
) -> TransactionCollectorPort:
    """Return the flow record collector."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyTransactionCollector(resolved_db)


def build_budgets_repository(
    db_port: DatabaseEnginePort | None = None,
) -> AvailableBudgetsRepositoryPort:
    """Return the available budgets repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyAvailableBudgetsRepository(resolved_db)


def build_chart_cache(settings: ChartSettings | None = None) -> ChartCachePort:
    """Return the chart cache selected by settings."""
    resolved = settings or ChartSettings.from_env()
    if resolved.cache_backend == "none":
        return NullChartCache()
    return InMemoryChartCache(max_entries=resolved.cache_max_entries)


def build_net_worth_chart_use_case(
    db_port: DatabaseEnginePort | None = None,
    cache: ChartCachePort | None = None,
    settings: ChartSettings | None = None,
) -> GetNetWorthChartUseCase:
    """Return the net worth chart use case wired to SQL adapters."""
    resolved_settings = settings or ChartSettings.from_env()
    resolved_db = db_port or build_database_adapter()
    return GetNetWorthChartUseCase(
        accounts_repository=build_accounts_repository(resolved_db),
        net_worth=build_net_worth_repository(resolved_db),
        cache=cache or build_chart_cache(resolved_settings),
        logger=get_app_logger(),
        label_format=resolved_settings.net_worth_label_format,
    )


def build_operations_chart_use_case(
    db_port: DatabaseEnginePort | None = None,
    cache: ChartCachePort | None = None,
) -> GetOperationsChartUseCase:
    """Return the operations chart use case wired to SQL adapters."""
    resolved_db = db_port or build_database_adapter()
    return GetOperationsChartUseCase(
        transaction_collector=build_transaction_collector(resolved_db),
        navigator=PeriodNavigator(),
        cache=cache or build_chart_cache(),
        logger=get_app_logger(),
    )


def build_get_available_budget_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetAvailableBudgetUseCase:
    """Return the available budget read use case."""
    return GetAvailableBudgetUseCase(build_budgets_repository(db_port))


def build_update_available_budget_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> UpdateAvailableBudgetUseCase:
    """Return the available budget update use case."""
    return UpdateAvailableBudgetUseCase(
        build_budgets_repository(db_port),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_accounts_repository",
    "build_net_worth_repository",
    "build_transaction_collector",
    "build_budgets_repository",
    "build_chart_cache",
    "build_net_worth_chart_use_case",
    "build_operations_chart_use_case",
    "build_get_available_budget_use_case",
    "build_update_available_budget_use_case",
]

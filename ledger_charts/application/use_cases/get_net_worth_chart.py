"""Use case building the weekly net worth chart per currency."""

from collections.abc import Sequence
from datetime import date, timedelta
from decimal import Decimal

from ledger_charts.application.ports.accounts_repository import (
    AccountsRepositoryPort,
)
from ledger_charts.application.ports.cache import ChartCachePort
from ledger_charts.application.ports.net_worth import NetWorthPort
from ledger_charts.application.use_cases.cache_keys import (
    build_cache_key,
    join_account_ids,
)
from ledger_charts.domain.constants import (
    DEFAULT_NET_WORTH_LABEL_FORMAT,
    INCLUDE_NET_WORTH_META_KEY,
    NET_WORTH_CACHE_NAME,
    NET_WORTH_STEP_DAYS,
)
from ledger_charts.domain.models import (
    AccountDTO,
    ChartDataset,
    ChartSeries,
    CurrencyDTO,
    NetWorthInclusion,
)
from ledger_charts.infrastructure.logging.logger import get_app_logger


class GetNetWorthChartUseCase:
    """Sample net worth per currency every week over a date range."""

    def __init__(
        self,
        accounts_repository: AccountsRepositoryPort,
        net_worth: NetWorthPort,
        cache: ChartCachePort,
        logger=None,
        label_format: str = DEFAULT_NET_WORTH_LABEL_FORMAT,
        step_days: int = NET_WORTH_STEP_DAYS,
    ) -> None:
        """Initialize the use case.

        Args:
            accounts_repository: Port reading account metadata.
            net_worth: Port returning balances per currency at a date.
            cache: Read-through cache for computed datasets.
            logger: Optional logger compatible with logging.Logger-like API.
            label_format: strftime format of the entry labels.
            step_days: Days between two samples.
        """
        self._accounts_repository = accounts_repository
        self._net_worth = net_worth
        self._cache = cache
        self._logger = logger or get_app_logger()
        self._label_format = label_format
        self._step = timedelta(days=step_days)

    def execute(
        self,
        accounts: Sequence[AccountDTO],
        start: date,
        end: date,
    ) -> ChartDataset:
        """Return one line series per currency, sampled over [start, end).

        Args:
            accounts: Accounts to report on.
            start: First sample date (inclusive).
            end: Upper bound of the sampling (exclusive).

        Returns:
            ChartDataset: Series labelled "Net worth in <currency name>".

        Raises:
            ValueError: If start is after end.
        """
        if start > end:
            raise ValueError(
                f"Start date {start.isoformat()} is after end date "
                f"{end.isoformat()}"
            )
        cache_key = build_cache_key(
            NET_WORTH_CACHE_NAME,
            start,
            join_account_ids(accounts),
            end,
        )
        if self._cache.has(cache_key):
            try:
                cached = self._cache.get(cache_key)
            except KeyError:
                self._logger.debug(
                    f"Net worth chart {cache_key} evicted before read"
                )
            else:
                self._logger.debug(
                    f"Net worth chart served from cache {cache_key}"
                )
                return cached

        included = self._filter_included(accounts)
        currencies: dict[int, CurrencyDTO] = {}
        entries: dict[int, dict[str, Decimal]] = {}
        cursor = start
        while included and cursor < end:
            label = cursor.strftime(self._label_format)
            items = self._net_worth.fetch_net_worth_by_currency(
                included,
                cursor,
            )
            for item in items:
                currency_id = item.currency.id
                if currency_id not in currencies:
                    currencies[currency_id] = item.currency
                    entries[currency_id] = {}
                entries[currency_id][label] = item.balance
            cursor += self._step

        dataset = ChartDataset(
            series=tuple(
                ChartSeries(
                    label=f"Net worth in {currency.name}",
                    series_type="line",
                    currency_symbol=currency.symbol,
                    entries=entries[currency_id],
                )
                for currency_id, currency in currencies.items()
            )
        )
        self._cache.store(cache_key, dataset)
        self._logger.info(
            f"Net worth chart computed: accounts={len(included)}, "
            f"currencies={len(dataset)}, start={start}, end={end}"
        )
        return dataset

    def _filter_included(
        self,
        accounts: Sequence[AccountDTO],
    ) -> list[AccountDTO]:
        included: list[AccountDTO] = []
        for account in accounts:
            inclusion = NetWorthInclusion.from_meta_value(
                self._accounts_repository.fetch_meta_value(
                    account,
                    INCLUDE_NET_WORTH_META_KEY,
                )
            )
            if not inclusion.is_included:
                self._logger.debug(
                    f'Will not include "{account.name}" in net worth charts.'
                )
                continue
            included.append(account)
        return included


__all__ = ["GetNetWorthChartUseCase"]

"""Use case building the earned/spent chart per currency and month."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

from ledger_charts.application.ports.cache import ChartCachePort
from ledger_charts.application.ports.transactions import (
    TransactionCollectorPort,
)
from ledger_charts.application.use_cases.cache_keys import (
    build_cache_key,
    join_account_ids,
)
from ledger_charts.domain.constants import (
    EARNED_BACKGROUND_COLOR,
    OPERATIONS_CACHE_NAME,
    OPERATIONS_PERIOD,
    SPENT_BACKGROUND_COLOR,
)
from ledger_charts.domain.models import (
    AccountDTO,
    ChartDataset,
    ChartSeries,
    CurrencyDTO,
    FlowBucket,
    FlowRecord,
)
from ledger_charts.domain.policies import classify_flow
from ledger_charts.domain.services.periods import PeriodNavigator
from ledger_charts.infrastructure.logging.logger import get_app_logger
from ledger_charts.utils.decimal_utils import coerce_decimal, round_amount


class GetOperationsChartUseCase:
    """Compute income and expense bars per currency over a date range."""

    def __init__(
        self,
        transaction_collector: TransactionCollectorPort,
        navigator: PeriodNavigator,
        cache: ChartCachePort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            transaction_collector: Port returning flow records for a range.
            navigator: Period arithmetic used for bucketing and labels.
            cache: Read-through cache for computed datasets.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._transaction_collector = transaction_collector
        self._navigator = navigator
        self._cache = cache
        self._logger = logger or get_app_logger()

    def execute(
        self,
        accounts: Sequence[AccountDTO],
        start: date,
        end: date,
    ) -> ChartDataset:
        """Return an earned and a spent bar series for each currency.

        Amounts are accumulated at full precision and only rounded to the
        currency's decimal places when the series are built.

        Args:
            accounts: Accounts to report on.
            start: First day of the range (inclusive).
            end: Last day of the range (inclusive).

        Returns:
            ChartDataset: Earned series followed by spent series, per
            currency in order of first appearance.

        Raises:
            ValueError: If start is after end.
        """
        if start > end:
            raise ValueError(
                f"Start date {start.isoformat()} is after end date "
                f"{end.isoformat()}"
            )
        cache_key = build_cache_key(
            OPERATIONS_CACHE_NAME,
            start,
            join_account_ids(accounts),
            end,
        )
        if self._cache.has(cache_key):
            try:
                cached = self._cache.get(cache_key)
            except KeyError:
                self._logger.debug(
                    f"Operations chart {cache_key} evicted before read"
                )
            else:
                self._logger.debug(
                    f"Operations chart served from cache {cache_key}"
                )
                return cached

        key_format = self._navigator.preferred_format(start, end)
        records = self._transaction_collector.fetch_flow_records(
            accounts,
            start,
            end,
        )
        self._logger.info(
            f"Fetched {len(records)} flow records for accounts "
            f"{join_account_ids(accounts)}"
        )
        currencies, buckets = self._accumulate(
            records,
            {account.id for account in accounts},
            key_format,
        )

        series: list[ChartSeries] = []
        for currency in currencies.values():
            series.extend(
                self._build_series(currency, buckets, start, end, key_format)
            )
        dataset = ChartDataset(series=tuple(series))
        self._cache.store(cache_key, dataset)
        return dataset

    @staticmethod
    def _accumulate(
        records: Sequence[FlowRecord],
        account_ids: set[int],
        key_format: str,
    ) -> tuple[dict[int, CurrencyDTO], dict[tuple[int, str], FlowBucket]]:
        currencies: dict[int, CurrencyDTO] = {}
        buckets: dict[tuple[int, str], FlowBucket] = {}
        for record in records:
            currency_id = record.currency.id
            currencies.setdefault(currency_id, record.currency)
            period = record.date.strftime(key_format)
            bucket = buckets.setdefault((currency_id, period), FlowBucket())
            bucket.add(
                classify_flow(record, account_ids),
                abs(coerce_decimal(record.amount)),
            )
        return currencies, buckets

    def _build_series(
        self,
        currency: CurrencyDTO,
        buckets: dict[tuple[int, str], FlowBucket],
        start: date,
        end: date,
        key_format: str,
    ) -> tuple[ChartSeries, ChartSeries]:
        title_format = self._navigator.preferred_title_format(start, end)
        earned: dict[str, Decimal] = {}
        spent: dict[str, Decimal] = {}
        cursor = start
        while cursor <= end:
            period = cursor.strftime(key_format)
            title = cursor.strftime(title_format)
            bucket = buckets.get((currency.id, period), FlowBucket())
            earned[title] = round_amount(bucket.earned, currency.decimal_places)
            spent[title] = round_amount(bucket.spent, currency.decimal_places)
            self._logger.debug(
                f"{currency.code} {cursor} - "
                f"{self._navigator.end_of_period(cursor, OPERATIONS_PERIOD)}: "
                f"earned={bucket.earned}, spent={bucket.spent}"
            )
            cursor = self._navigator.add_period(cursor, OPERATIONS_PERIOD)

        return (
            ChartSeries(
                label=f"Earned in {currency.name}",
                series_type="bar",
                currency_symbol=currency.symbol,
                entries=earned,
                currency_id=currency.id,
                background_color=EARNED_BACKGROUND_COLOR,
            ),
            ChartSeries(
                label=f"Spent in {currency.name}",
                series_type="bar",
                currency_symbol=currency.symbol,
                entries=spent,
                currency_id=currency.id,
                background_color=SPENT_BACKGROUND_COLOR,
            ),
        )


__all__ = ["GetOperationsChartUseCase"]

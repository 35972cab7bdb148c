"""Tests for the GetOperationsChartUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from ledger_charts.application.use_cases.get_operations_chart import (
    GetOperationsChartUseCase,
)
from ledger_charts.domain.models import (
    AccountDTO,
    CurrencyDTO,
    FlowRecord,
    TransactionType,
)
from ledger_charts.domain.services.periods import PeriodNavigator
from ledger_charts.infrastructure.cache import InMemoryChartCache


EUR = CurrencyDTO(id=1, code="EUR", name="Euro", symbol="€")
HUF = CurrencyDTO(id=4, code="HUF", name="Hungarian forint", symbol="Ft",
                  decimal_places=0)
CHECKING = AccountDTO(id=1, name="Checking")


def _record(
    day: date,
    transaction_type: TransactionType,
    amount: str,
    source_id: int = 1,
    destination_id: int = 2,
    currency: CurrencyDTO = EUR,
) -> FlowRecord:
    return FlowRecord(
        date=day,
        currency=currency,
        transaction_type=transaction_type,
        source_id=source_id,
        destination_id=destination_id,
        amount=Decimal(amount),
    )


def _build_use_case(
    records: list[FlowRecord],
    cache=None,
) -> tuple[GetOperationsChartUseCase, MagicMock]:
    collector = MagicMock()
    collector.fetch_flow_records.return_value = records
    use_case = GetOperationsChartUseCase(
        transaction_collector=collector,
        navigator=PeriodNavigator(),
        cache=cache if cache is not None else InMemoryChartCache(),
        logger=MagicMock(),
    )
    return use_case, collector


def test_execute_splits_earned_and_spent_per_month() -> None:
    """A deposit and a withdrawal in March land in separate bars."""
    records = [
        _record(date(2021, 3, 10), TransactionType.DEPOSIT, "-50.00",
                source_id=7, destination_id=1),
        _record(date(2021, 3, 15), TransactionType.WITHDRAWAL, "-20.00",
                source_id=1, destination_id=8),
    ]
    use_case, collector = _build_use_case(records)

    dataset = use_case.execute([CHECKING], date(2021, 1, 1), date(2021, 3, 31))

    earned, spent = dataset.series
    assert earned.label == "Earned in Euro"
    assert earned.series_type == "bar"
    assert earned.background_color == "rgba(0, 141, 76, 0.5)"
    assert earned.currency_id == 1
    assert spent.label == "Spent in Euro"
    assert spent.background_color == "rgba(219, 68, 55, 0.5)"
    assert earned.entries == {
        "January 2021": Decimal("0.00"),
        "February 2021": Decimal("0.00"),
        "March 2021": Decimal("50.00"),
    }
    assert spent.entries["March 2021"] == Decimal("20.00")
    collector.fetch_flow_records.assert_called_once_with(
        [CHECKING],
        date(2021, 1, 1),
        date(2021, 3, 31),
    )


def test_execute_classifies_transfers_by_destination() -> None:
    records = [
        _record(date(2021, 2, 1), TransactionType.TRANSFER, "-30.00",
                source_id=5, destination_id=1),
        _record(date(2021, 2, 2), TransactionType.TRANSFER, "-12.00",
                source_id=1, destination_id=5),
    ]
    use_case, _ = _build_use_case(records)

    earned, spent = use_case.execute(
        [CHECKING],
        date(2021, 2, 1),
        date(2021, 2, 28),
    ).series

    assert earned.entries == {"February 2021": Decimal("30.00")}
    assert spent.entries == {"February 2021": Decimal("12.00")}


def test_every_record_counts_exactly_once() -> None:
    """Earned plus spent equals the sum of absolute amounts."""
    records = [
        _record(date(2021, 1, 5), TransactionType.DEPOSIT, "-1.10"),
        _record(date(2021, 1, 6), TransactionType.WITHDRAWAL, "-2.20"),
        _record(date(2021, 1, 7), TransactionType.TRANSFER, "-3.30",
                destination_id=1),
        _record(date(2021, 1, 8), TransactionType.OPENING_BALANCE, "4.40"),
    ]
    use_case, _ = _build_use_case(records)

    earned, spent = use_case.execute(
        [CHECKING],
        date(2021, 1, 1),
        date(2021, 1, 31),
    ).series

    total = earned.entries["January 2021"] + spent.entries["January 2021"]
    assert total == Decimal("11.00")
    assert earned.entries["January 2021"] == Decimal("4.40")


def test_execute_rounds_only_after_accumulating() -> None:
    records = [
        _record(date(2021, 4, day), TransactionType.DEPOSIT, "-10.005")
        for day in (1, 2, 3)
    ]
    use_case, _ = _build_use_case(records)

    earned, _ = use_case.execute(
        [CHECKING],
        date(2021, 4, 1),
        date(2021, 4, 30),
    ).series

    assert str(earned.entries["April 2021"]) == "30.02"


def test_execute_orders_currencies_by_first_appearance() -> None:
    records = [
        _record(date(2021, 1, 5), TransactionType.WITHDRAWAL, "-1000.6",
                currency=HUF),
        _record(date(2021, 1, 6), TransactionType.WITHDRAWAL, "-2.00"),
    ]
    use_case, _ = _build_use_case(records)

    dataset = use_case.execute([CHECKING], date(2021, 1, 1), date(2021, 1, 31))

    assert [series.label for series in dataset] == [
        "Earned in Hungarian forint",
        "Spent in Hungarian forint",
        "Earned in Euro",
        "Spent in Euro",
    ]
    assert str(dataset.series[1].entries["January 2021"]) == "1001"


def test_execute_collapses_months_into_years_for_long_ranges() -> None:
    records = [
        _record(date(2020, 3, 1), TransactionType.DEPOSIT, "-5.00"),
        _record(date(2020, 9, 1), TransactionType.DEPOSIT, "-7.00"),
        _record(date(2021, 2, 1), TransactionType.DEPOSIT, "-1.00"),
    ]
    use_case, _ = _build_use_case(records)

    earned, _ = use_case.execute(
        [CHECKING],
        date(2020, 1, 1),
        date(2021, 6, 30),
    ).series

    assert earned.entries == {"2020": Decimal("12.00"), "2021": Decimal("1.00")}


def test_execute_walks_months_from_a_mid_month_start() -> None:
    """Titles follow the walk from start; the month holding end may be cut."""
    use_case, _ = _build_use_case(
        [
            _record(date(2021, 1, 20), TransactionType.DEPOSIT, "-10.00"),
            _record(date(2021, 3, 5), TransactionType.DEPOSIT, "-30.00"),
        ]
    )

    earned, _ = use_case.execute(
        [CHECKING],
        date(2021, 1, 15),
        date(2021, 3, 10),
    )

    assert earned.entries == {
        "January 2021": Decimal("10.00"),
        "February 2021": Decimal("0.00"),
    }


def test_execute_returns_empty_dataset_without_records() -> None:
    use_case, _ = _build_use_case([])

    dataset = use_case.execute([CHECKING], date(2021, 1, 1), date(2021, 3, 1))

    assert dataset.is_empty


def test_execute_serves_cached_dataset() -> None:
    use_case, collector = _build_use_case(
        [_record(date(2021, 1, 5), TransactionType.DEPOSIT, "-1.00")]
    )

    first = use_case.execute([CHECKING], date(2021, 1, 1), date(2021, 1, 31))
    second = use_case.execute([CHECKING], date(2021, 1, 1), date(2021, 1, 31))

    assert second is first
    collector.fetch_flow_records.assert_called_once()


def test_execute_recomputes_when_entry_is_evicted_before_read() -> None:
    cache = MagicMock()
    cache.has.return_value = True
    cache.get.side_effect = KeyError("evicted")
    use_case, collector = _build_use_case(
        [_record(date(2021, 1, 5), TransactionType.DEPOSIT, "-1.00")],
        cache=cache,
    )

    dataset = use_case.execute([CHECKING], date(2021, 1, 1), date(2021, 1, 31))

    assert [series.label for series in dataset] == [
        "Earned in Euro",
        "Spent in Euro",
    ]
    collector.fetch_flow_records.assert_called_once()
    cache.store.assert_called_once()


def test_execute_propagates_collaborator_errors() -> None:
    use_case, collector = _build_use_case([])
    collector.fetch_flow_records.side_effect = RuntimeError("db down")

    with pytest.raises(RuntimeError, match="db down"):
        use_case.execute([CHECKING], date(2021, 1, 1), date(2021, 1, 31))

"""Tests for the chart report routes."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from ledger_charts.adapters.api import dependencies
from ledger_charts.adapters.api.app import create_app
from ledger_charts.application.use_cases.get_net_worth_chart import (
    GetNetWorthChartUseCase,
)
from ledger_charts.application.use_cases.get_operations_chart import (
    GetOperationsChartUseCase,
)
from ledger_charts.domain.models import (
    AccountDTO,
    CurrencyDTO,
    FlowRecord,
    NetWorthItem,
    TransactionType,
)
from ledger_charts.domain.services.periods import PeriodNavigator
from ledger_charts.infrastructure.cache import InMemoryChartCache


EUR = CurrencyDTO(id=1, code="EUR", name="Euro", symbol="€")
ACCOUNTS = {
    1: AccountDTO(id=1, name="Checking"),
    2: AccountDTO(id=2, name="Savings"),
}


class _AccountsRepository:
    def fetch_accounts(self, account_ids):
        return [ACCOUNTS[i] for i in sorted(set(account_ids)) if i in ACCOUNTS]

    def fetch_meta_value(self, account, key):
        return None


@pytest.fixture
def usage_logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def client(usage_logger):
    app = create_app(usage_logger=usage_logger)
    net_worth = MagicMock()
    net_worth.fetch_net_worth_by_currency.side_effect = (
        lambda accounts, as_of: {
            date(2021, 1, 1): [NetWorthItem(EUR, Decimal("100.00"))],
            date(2021, 1, 8): [NetWorthItem(EUR, Decimal("150.00"))],
        }.get(as_of, [])
    )
    collector = MagicMock()
    collector.fetch_flow_records.return_value = [
        FlowRecord(
            date=date(2021, 3, 10),
            currency=EUR,
            transaction_type=TransactionType.DEPOSIT,
            source_id=7,
            destination_id=1,
            amount=Decimal("-50"),
        ),
        FlowRecord(
            date=date(2021, 3, 15),
            currency=EUR,
            transaction_type=TransactionType.WITHDRAWAL,
            source_id=1,
            destination_id=8,
            amount=Decimal("-20"),
        ),
    ]
    app.dependency_overrides[dependencies.get_accounts_repository] = (
        lambda: _AccountsRepository()
    )
    app.dependency_overrides[dependencies.get_net_worth_chart_use_case] = (
        lambda: GetNetWorthChartUseCase(
            accounts_repository=_AccountsRepository(),
            net_worth=net_worth,
            cache=InMemoryChartCache(),
            logger=MagicMock(),
        )
    )
    app.dependency_overrides[dependencies.get_operations_chart_use_case] = (
        lambda: GetOperationsChartUseCase(
            transaction_collector=collector,
            navigator=PeriodNavigator(),
            cache=InMemoryChartCache(),
            logger=MagicMock(),
        )
    )
    with TestClient(app) as test_client:
        yield test_client


def test_net_worth_route_returns_line_series(client, usage_logger) -> None:
    response = client.get(
        "/chart/report/net-worth",
        params={"accounts": "1", "start": "2021-01-01", "end": "2021-01-15"},
    )

    assert response.status_code == 200
    assert response.json() == [
        {
            "label": "Net worth in Euro",
            "type": "line",
            "currency_symbol": "€",
            "entries": {"Jan 01": "100.00", "Jan 08": "150.00"},
        }
    ]
    usage_logger.info.assert_called_with(
        "GET /chart/report/net-worth -> 200"
    )


def test_operations_route_returns_earned_and_spent_bars(client) -> None:
    response = client.get(
        "/chart/report/operations",
        params={"accounts": "1", "start": "2021-03-01", "end": "2021-03-31"},
    )

    assert response.status_code == 200
    earned, spent = response.json()
    assert earned == {
        "label": "Earned in Euro",
        "type": "bar",
        "currency_symbol": "€",
        "currency_id": 1,
        "backgroundColor": "rgba(0, 141, 76, 0.5)",
        "entries": {"March 2021": "50.00"},
    }
    assert spent["label"] == "Spent in Euro"
    assert spent["backgroundColor"] == "rgba(219, 68, 55, 0.5)"
    assert spent["entries"] == {"March 2021": "20.00"}


def test_empty_range_returns_empty_list(client) -> None:
    response = client.get(
        "/chart/report/net-worth",
        params={"accounts": "1,2", "start": "2021-01-01", "end": "2021-01-01"},
    )

    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.parametrize("route", ["net-worth", "operations"])
@pytest.mark.parametrize("accounts", ["", "1,a", "1,,2", "-1"])
def test_malformed_accounts_are_rejected(client, route, accounts) -> None:
    response = client.get(
        f"/chart/report/{route}",
        params={
            "accounts": accounts,
            "start": "2021-01-01",
            "end": "2021-01-31",
        },
    )

    assert response.status_code == 422


@pytest.mark.parametrize("route", ["net-worth", "operations"])
def test_unknown_accounts_return_404(client, route) -> None:
    response = client.get(
        f"/chart/report/{route}",
        params={"accounts": "1,42", "start": "2021-01-01", "end": "2021-01-31"},
    )

    assert response.status_code == 404
    assert response.json()["detail"] == "Unknown accounts: 42"


@pytest.mark.parametrize("route", ["net-worth", "operations"])
def test_inverted_range_returns_400(client, route) -> None:
    response = client.get(
        f"/chart/report/{route}",
        params={"accounts": "1", "start": "2021-02-01", "end": "2021-01-01"},
    )

    assert response.status_code == 400


def test_parse_account_ids_removes_duplicates() -> None:
    assert dependencies.parse_account_ids("3,1,3,2") == [3, 1, 2]

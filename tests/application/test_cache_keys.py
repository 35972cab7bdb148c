"""Tests for chart cache key helpers."""

from datetime import date
from types import SimpleNamespace

from ledger_charts.application.use_cases.cache_keys import (
    build_cache_key,
    join_account_ids,
)


def test_build_cache_key_is_stable_and_sensitive_to_inputs() -> None:
    key = build_cache_key("chart.report.net-worth", date(2021, 1, 1), "1,2")

    assert key == build_cache_key(
        "chart.report.net-worth",
        date(2021, 1, 1),
        "1,2",
    )
    assert key != build_cache_key(
        "chart.report.operations",
        date(2021, 1, 1),
        "1,2",
    )
    assert key != build_cache_key(
        "chart.report.net-worth",
        date(2021, 1, 2),
        "1,2",
    )
    assert len(key) == 64


def test_join_account_ids_keeps_order() -> None:
    accounts = [SimpleNamespace(id=3), SimpleNamespace(id=1)]

    assert join_account_ids(accounts) == "3,1"

"""Tests for infrastructure settings."""

from unittest.mock import MagicMock

import pytest

from ledger_charts.infrastructure.settings import ChartSettings


def test_from_env_uses_defaults(monkeypatch) -> None:
    for name in (
        "CHART_CACHE_BACKEND",
        "CHART_CACHE_MAX_ENTRIES",
        "NET_WORTH_LABEL_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = ChartSettings.from_env()

    assert settings == ChartSettings()
    assert settings.cache_backend == "memory"
    assert settings.cache_max_entries == 256
    assert settings.net_worth_label_format == "%b %d"


def test_from_env_reads_overrides(monkeypatch) -> None:
    monkeypatch.setenv("CHART_CACHE_BACKEND", " None ")
    monkeypatch.setenv("CHART_CACHE_MAX_ENTRIES", "10")
    monkeypatch.setenv("NET_WORTH_LABEL_FORMAT", "%d/%m")

    settings = ChartSettings.from_env()

    assert settings.cache_backend == "none"
    assert settings.cache_max_entries == 10
    assert settings.net_worth_label_format == "%d/%m"


def test_from_env_rejects_unknown_backend(monkeypatch) -> None:
    monkeypatch.setenv("CHART_CACHE_BACKEND", "redis")

    with pytest.raises(ValueError):
        ChartSettings.from_env()


def test_from_env_ignores_invalid_max_entries(monkeypatch) -> None:
    """Invalid sizes fall back to the default and are logged."""
    fake_logger = MagicMock()
    monkeypatch.delenv("CHART_CACHE_BACKEND", raising=False)
    monkeypatch.setenv("CHART_CACHE_MAX_ENTRIES", "lots")
    monkeypatch.setattr(
        "ledger_charts.infrastructure.settings.get_app_logger",
        lambda: fake_logger,
    )

    settings = ChartSettings.from_env()

    assert settings.cache_max_entries == 256
    fake_logger.warning.assert_called_once()

"""Serialization of chart datasets into JSON-ready structures."""

from typing import Any

from ledger_charts.domain.models.charts import ChartDataset, ChartSeries
from ledger_charts.utils.decimal_utils import format_amount


def serialize_chart_series(series: ChartSeries) -> dict[str, Any]:
    """Return the JSON representation of one series.

    Optional keys are only present when the series carries them. Amounts are
    rendered as decimal strings.
    """
    payload: dict[str, Any] = {
        "label": series.label,
        "type": series.series_type,
        "currency_symbol": series.currency_symbol,
    }
    if series.currency_id is not None:
        payload["currency_id"] = series.currency_id
    if series.background_color is not None:
        payload["backgroundColor"] = series.background_color
    payload["entries"] = {
        label: format_amount(value) for label, value in series.entries.items()
    }
    return payload


def serialize_chart_dataset(dataset: ChartDataset) -> list[dict[str, Any]]:
    """Flatten a dataset into a list of series payloads."""
    return [serialize_chart_series(series) for series in dataset]


__all__ = ["serialize_chart_series", "serialize_chart_dataset"]

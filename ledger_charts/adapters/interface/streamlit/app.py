"""Streamlit dashboard rendering the ledger report charts."""

from collections.abc import Sequence
from datetime import date

import altair as alt
import streamlit as st

from ledger_charts.application.ports.cache import ChartCachePort
from ledger_charts.domain.models import AccountDTO, ChartDataset
from ledger_charts.infrastructure.container import (
    build_accounts_repository,
    build_chart_cache,
    build_net_worth_chart_use_case,
    build_operations_chart_use_case,
)
from ledger_charts.infrastructure.db import SqlAlchemyDatabaseEngineAdapter


def _parse_account_ids(raw: str) -> list[int]:
    """Parse a comma-separated list of account ids, skipping junk."""
    ids: list[int] = []
    for part in raw.split(","):
        candidate = part.strip()
        if candidate.isdigit() and int(candidate) not in ids:
            ids.append(int(candidate))
    return ids


@st.cache_resource(show_spinner=False)
def _get_chart_cache() -> ChartCachePort:
    """Chart cache shared by every session and rerun of the dashboard."""
    return build_chart_cache()


def _fetch_accounts(account_ids: tuple[int, ...]) -> Sequence[AccountDTO]:
    adapter = SqlAlchemyDatabaseEngineAdapter()
    return build_accounts_repository(adapter).fetch_accounts(account_ids)


def _fetch_net_worth_chart(
    account_ids: tuple[int, ...],
    start: date,
    end: date,
) -> ChartDataset:
    adapter = SqlAlchemyDatabaseEngineAdapter()
    accounts = _fetch_accounts(account_ids)
    use_case = build_net_worth_chart_use_case(
        adapter,
        cache=_get_chart_cache(),
    )
    return use_case.execute(accounts, start, end)


@st.cache_data(show_spinner=False)
def _load_net_worth_chart(
    account_ids: tuple[int, ...],
    start: date,
    end: date,
) -> ChartDataset:
    """Cached wrapper around _fetch_net_worth_chart."""
    return _fetch_net_worth_chart(account_ids, start, end)


def _fetch_operations_chart(
    account_ids: tuple[int, ...],
    start: date,
    end: date,
) -> ChartDataset:
    adapter = SqlAlchemyDatabaseEngineAdapter()
    accounts = _fetch_accounts(account_ids)
    use_case = build_operations_chart_use_case(
        adapter,
        cache=_get_chart_cache(),
    )
    return use_case.execute(accounts, start, end)


@st.cache_data(show_spinner=False)
def _load_operations_chart(
    account_ids: tuple[int, ...],
    start: date,
    end: date,
) -> ChartDataset:
    """Cached wrapper around _fetch_operations_chart."""
    return _fetch_operations_chart(account_ids, start, end)


def _get_period_start(period: str, today: date) -> date:
    """Return the start date for the selected period."""
    if period == "YTD":
        return date(today.year, 1, 1)
    if period == "Last 3 Months":
        month_index = today.month - 1 - 3
        return date(today.year + month_index // 12, month_index % 12 + 1, 1)
    return date(today.year - 1, today.month, 1)


def _dataset_to_rows(dataset: ChartDataset) -> list[dict[str, str | float]]:
    """Flatten a dataset into Altair-ready rows, keeping entry order."""
    rows: list[dict[str, str | float]] = []
    for series in dataset:
        for period, amount in series.entries.items():
            rows.append(
                {
                    "series": series.label,
                    "period": period,
                    "amount": float(amount),
                    "amount_label": f"{amount:,} {series.currency_symbol}",
                }
            )
    return rows


def _period_order(dataset: ChartDataset) -> list[str]:
    order: list[str] = []
    for series in dataset:
        for period in series.entries:
            if period not in order:
                order.append(period)
    return order


def _render_net_worth_chart(dataset: ChartDataset) -> None:
    st.subheader("Net worth")
    if dataset.is_empty:
        st.info("No balances found for the selected accounts.")
        return
    chart = alt.Chart(alt.Data(values=_dataset_to_rows(dataset))).mark_line(
        point=True,
    ).encode(
        x=alt.X("period:N", sort=_period_order(dataset), title=None),
        y=alt.Y("amount:Q", title=None),
        color=alt.Color("series:N", legend=alt.Legend(orient="bottom")),
        tooltip=[
            alt.Tooltip("series:N"),
            alt.Tooltip("period:N"),
            alt.Tooltip("amount_label:N"),
        ],
    )
    st.altair_chart(chart, width="stretch")


def _render_operations_chart(dataset: ChartDataset) -> None:
    st.subheader("Income and expenses")
    if dataset.is_empty:
        st.info("No transactions found for the selected accounts.")
        return
    labels = [series.label for series in dataset]
    colors = [series.background_color or "#457b9d" for series in dataset]
    chart = alt.Chart(alt.Data(values=_dataset_to_rows(dataset))).mark_bar(
        cornerRadius=2,
    ).encode(
        x=alt.X("period:N", sort=_period_order(dataset), title=None),
        xOffset=alt.XOffset("series:N", sort=labels),
        y=alt.Y("amount:Q", title=None),
        color=alt.Color(
            "series:N",
            scale=alt.Scale(domain=labels, range=colors),
            legend=alt.Legend(orient="bottom"),
        ),
        tooltip=[
            alt.Tooltip("series:N"),
            alt.Tooltip("period:N"),
            alt.Tooltip("amount_label:N"),
        ],
    )
    st.altair_chart(chart, width="stretch")


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Ledger Charts", layout="wide")
    st.title("Ledger Charts")

    raw_ids = st.sidebar.text_input("Account ids", placeholder="1,2,3")
    period = st.sidebar.selectbox(
        "Period",
        ["YTD", "Last 3 Months", "Last 12 Months"],
    )
    account_ids = tuple(_parse_account_ids(raw_ids))
    if not account_ids:
        st.warning("Enter at least one account id.")
        return

    today = date.today()
    start = _get_period_start(period, today)
    _render_net_worth_chart(_load_net_worth_chart(account_ids, start, today))
    _render_operations_chart(_load_operations_chart(account_ids, start, today))


if __name__ == "__main__":  # pragma: no cover
    main()

"""Port for collecting transaction flows over a date range."""

from collections.abc import Sequence
from datetime import date
from typing import Protocol

from ledger_charts.domain.models import AccountDTO, FlowRecord


class TransactionCollectorPort(Protocol):
    """Port returning journals that touch a set of accounts."""

    def fetch_flow_records(
        self,
        accounts: Sequence[AccountDTO],
        start: date,
        end: date,
    ) -> list[FlowRecord]:
        """Return flow records dated within [start, end], oldest first."""


__all__ = ["TransactionCollectorPort"]

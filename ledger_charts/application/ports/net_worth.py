"""Port for point-in-time balances grouped by currency."""

from collections.abc import Sequence
from datetime import date
from typing import Protocol

from ledger_charts.domain.models import AccountDTO, NetWorthItem


class NetWorthPort(Protocol):
    """Port computing net balances of accounts per currency."""

    def fetch_net_worth_by_currency(
        self,
        accounts: Sequence[AccountDTO],
        as_of: date,
    ) -> list[NetWorthItem]:
        """Return one balance per currency, as of the end of ``as_of``."""


__all__ = ["NetWorthPort"]

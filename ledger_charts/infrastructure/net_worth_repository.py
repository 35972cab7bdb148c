"""SQLAlchemy-backed net worth helper."""

from collections.abc import Sequence
from datetime import date

from sqlalchemy import Date, bindparam, text

from ledger_charts.application.ports.database import DatabaseEnginePort
from ledger_charts.application.ports.net_worth import NetWorthPort
from ledger_charts.domain.models import AccountDTO, CurrencyDTO, NetWorthItem
from ledger_charts.utils.decimal_utils import coerce_decimal, round_amount


class SqlAlchemyNetWorthRepository(NetWorthPort):
    """Sum transaction amounts per currency up to a date."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def fetch_net_worth_by_currency(
        self,
        accounts: Sequence[AccountDTO],
        as_of: date,
    ) -> list[NetWorthItem]:
        """Return balances per currency, rounded to the currency precision.

        Args:
            accounts: Accounts whose balances are summed.
            as_of: Last booking date taken into account (inclusive).

        Returns:
            list[NetWorthItem]: One item per currency, ordered by currency id.
        """
        ids = [account.id for account in accounts]
        if not ids:
            return []
        query = text(
            """
            SELECT c.id AS currency_id,
                   c.code AS currency_code,
                   c.name AS currency_name,
                   c.symbol AS currency_symbol,
                   c.decimal_places AS currency_decimal_places,
                   SUM(t.amount) AS balance
            FROM transactions t
            JOIN transaction_journals j ON j.id = t.transaction_journal_id
            JOIN transaction_currencies c
              ON c.id = j.transaction_currency_id
            WHERE t.account_id IN :account_ids
              AND j.date <= :as_of
            GROUP BY c.id, c.code, c.name, c.symbol, c.decimal_places
            ORDER BY c.id
            """
        ).bindparams(
            bindparam("account_ids", expanding=True),
            bindparam("as_of", type_=Date),
        )
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                query,
                {"account_ids": ids, "as_of": as_of},
            ).all()
        items = []
        for row in rows:
            currency = CurrencyDTO(
                id=row.currency_id,
                code=row.currency_code,
                name=row.currency_name,
                symbol=row.currency_symbol,
                decimal_places=row.currency_decimal_places,
            )
            items.append(
                NetWorthItem(
                    currency=currency,
                    balance=round_amount(
                        coerce_decimal(row.balance),
                        currency.decimal_places,
                    ),
                )
            )
        return items


__all__ = ["SqlAlchemyNetWorthRepository"]

"""SQLAlchemy-backed collector of transaction flows."""

from collections.abc import Sequence
from datetime import date

from sqlalchemy import Date, bindparam, text

from ledger_charts.application.ports.database import DatabaseEnginePort
from ledger_charts.application.ports.transactions import (
    TransactionCollectorPort,
)
from ledger_charts.domain.models import (
    AccountDTO,
    CurrencyDTO,
    FlowRecord,
    TransactionType,
)
from ledger_charts.utils.decimal_utils import coerce_decimal


class SqlAlchemyTransactionCollector(TransactionCollectorPort):
    """Read journals with their source and destination legs."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the collector.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def fetch_flow_records(
        self,
        accounts: Sequence[AccountDTO],
        start: date,
        end: date,
    ) -> list[FlowRecord]:
        """Return one record per source and destination leg pair.

        Split journals yield several pairs. Each pair carries the smaller of
        its two legs, negated, so the pairs of a journal with one source and
        many destinations (or the reverse) add up to the journal total.

        Args:
            accounts: Accounts on either side of the returned journals.
            start: First booking date (inclusive).
            end: Last booking date (inclusive).

        Returns:
            list[FlowRecord]: Records ordered by date and journal.
        """
        ids = [account.id for account in accounts]
        if not ids:
            return []
        query = text(
            """
            SELECT j.id AS journal_id,
                   j.date AS journal_date,
                   j.transaction_type AS transaction_type,
                   c.id AS currency_id,
                   c.code AS currency_code,
                   c.name AS currency_name,
                   c.symbol AS currency_symbol,
                   c.decimal_places AS currency_decimal_places,
                   src.account_id AS source_id,
                   dst.account_id AS destination_id,
                   CASE
                     WHEN -src.amount < dst.amount THEN src.amount
                     ELSE -dst.amount
                   END AS amount
            FROM transaction_journals j
            JOIN transactions src
              ON src.transaction_journal_id = j.id AND src.amount < 0
            JOIN transactions dst
              ON dst.transaction_journal_id = j.id AND dst.amount > 0
            JOIN transaction_currencies c
              ON c.id = j.transaction_currency_id
            WHERE j.date >= :start_date
              AND j.date <= :end_date
              AND (
                src.account_id IN :source_ids
                OR dst.account_id IN :destination_ids
              )
            ORDER BY j.date, j.id, src.id, dst.id
            """
        ).bindparams(
            bindparam("source_ids", expanding=True),
            bindparam("destination_ids", expanding=True),
            bindparam("start_date", type_=Date),
            bindparam("end_date", type_=Date),
        ).columns(journal_date=Date)
        params = {
            "source_ids": ids,
            "destination_ids": ids,
            "start_date": start,
            "end_date": end,
        }
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, params).all()
        currencies: dict[int, CurrencyDTO] = {}
        records = []
        for row in rows:
            currency = currencies.get(row.currency_id)
            if currency is None:
                currency = CurrencyDTO(
                    id=row.currency_id,
                    code=row.currency_code,
                    name=row.currency_name,
                    symbol=row.currency_symbol,
                    decimal_places=row.currency_decimal_places,
                )
                currencies[row.currency_id] = currency
            records.append(
                FlowRecord(
                    date=row.journal_date,
                    currency=currency,
                    transaction_type=TransactionType(row.transaction_type),
                    source_id=row.source_id,
                    destination_id=row.destination_id,
                    amount=coerce_decimal(row.amount),
                )
            )
        return records


__all__ = ["SqlAlchemyTransactionCollector"]

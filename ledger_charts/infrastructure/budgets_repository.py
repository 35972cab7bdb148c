"""SQLAlchemy-backed repository for available budgets."""

from datetime import datetime

from sqlalchemy import Date, DateTime, Numeric, bindparam, text

from ledger_charts.application.ports.budgets_repository import (
    AvailableBudgetsRepositoryPort,
)
from ledger_charts.application.ports.database import DatabaseEnginePort
from ledger_charts.domain.models import AvailableBudgetDTO, CurrencyDTO
from ledger_charts.utils.decimal_utils import coerce_decimal


_CURRENCY_COLUMNS = """
    c.id AS currency_id,
    c.code AS currency_code,
    c.name AS currency_name,
    c.symbol AS currency_symbol,
    c.decimal_places AS currency_decimal_places
"""


def _currency_from_row(row) -> CurrencyDTO:
    return CurrencyDTO(
        id=row.currency_id,
        code=row.currency_code,
        name=row.currency_name,
        symbol=row.currency_symbol,
        decimal_places=row.currency_decimal_places,
    )


class SqlAlchemyAvailableBudgetsRepository(AvailableBudgetsRepositoryPort):
    """Repository backed by SQLAlchemy for available budgets."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def fetch_budget(self, budget_id: int) -> AvailableBudgetDTO | None:
        query = text(
            f"""
            SELECT b.id AS id,
                   b.amount AS amount,
                   b.start_date AS start_date,
                   b.end_date AS end_date,
                   b.created_at AS created_at,
                   b.updated_at AS updated_at,
                   {_CURRENCY_COLUMNS}
            FROM available_budgets b
            JOIN transaction_currencies c
              ON c.id = b.transaction_currency_id
            WHERE b.id = :budget_id
            """
        ).columns(
            start_date=Date,
            end_date=Date,
            created_at=DateTime,
            updated_at=DateTime,
        )
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            row = conn.execute(query, {"budget_id": budget_id}).first()
        if row is None:
            return None
        return AvailableBudgetDTO(
            id=row.id,
            currency=_currency_from_row(row),
            amount=coerce_decimal(row.amount),
            start=row.start_date,
            end=row.end_date,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    def fetch_currency_by_id(self, currency_id: int) -> CurrencyDTO | None:
        return self._fetch_currency("c.id = :value", currency_id)

    def fetch_currency_by_code(self, code: str) -> CurrencyDTO | None:
        return self._fetch_currency("c.code = :value", code)

    def save_budget(self, budget: AvailableBudgetDTO) -> AvailableBudgetDTO:
        """Write the budget fields and refresh ``updated_at``."""
        query = text(
            """
            UPDATE available_budgets
            SET transaction_currency_id = :currency_id,
                amount = :amount,
                start_date = :start_date,
                end_date = :end_date,
                updated_at = :updated_at
            WHERE id = :budget_id
            """
        ).bindparams(
            bindparam("amount", type_=Numeric(32, 12)),
            bindparam("start_date", type_=Date),
            bindparam("end_date", type_=Date),
            bindparam("updated_at", type_=DateTime),
        )
        params = {
            "budget_id": budget.id,
            "currency_id": budget.currency.id,
            "amount": budget.amount,
            "start_date": budget.start,
            "end_date": budget.end,
            "updated_at": datetime.now().replace(microsecond=0),
        }
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            result = conn.execute(query, params)
        if result.rowcount == 0:
            raise RuntimeError(f"Available budget {budget.id} vanished")
        stored = self.fetch_budget(budget.id)
        if stored is None:
            raise RuntimeError(f"Available budget {budget.id} vanished")
        return stored

    def _fetch_currency(self, condition: str, value) -> CurrencyDTO | None:
        query = text(
            f"""
            SELECT {_CURRENCY_COLUMNS}
            FROM transaction_currencies c
            WHERE {condition}
            LIMIT 1
            """
        )
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            row = conn.execute(query, {"value": value}).first()
        if row is None:
            return None
        return _currency_from_row(row)


__all__ = ["SqlAlchemyAvailableBudgetsRepository"]

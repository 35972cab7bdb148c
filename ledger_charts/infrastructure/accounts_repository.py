"""SQLAlchemy-backed repository for ledger accounts."""

from collections.abc import Iterable

from sqlalchemy import bindparam, text

from ledger_charts.application.ports.accounts_repository import (
    AccountsRepositoryPort,
)
from ledger_charts.application.ports.database import DatabaseEnginePort
from ledger_charts.domain.models.accounts import AccountDTO


class SqlAlchemyAccountsRepository(AccountsRepositoryPort):
    """Repository backed by SQLAlchemy for ledger accounts."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def fetch_accounts(self, account_ids: Iterable[int]) -> list[AccountDTO]:
        """Return the accounts matching the identifiers, ordered by id."""
        ids = sorted(set(account_ids))
        if not ids:
            return []
        query = text(
            """
            SELECT id, name, account_type
            FROM accounts
            WHERE id IN :account_ids
            ORDER BY id
            """
        ).bindparams(bindparam("account_ids", expanding=True))
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, {"account_ids": ids}).all()
        return [
            AccountDTO(
                id=row.id,
                name=row.name,
                account_type=row.account_type,
            )
            for row in rows
        ]

    def fetch_meta_value(self, account: AccountDTO, key: str) -> str | None:
        query = text(
            """
            SELECT data
            FROM account_meta
            WHERE account_id = :account_id AND name = :name
            LIMIT 1
            """
        )
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            row = conn.execute(
                query,
                {"account_id": account.id, "name": key},
            ).first()
        if row is None:
            return None
        return row.data


__all__ = ["SqlAlchemyAccountsRepository"]

"""Port for account lookups."""

from collections.abc import Iterable
from typing import Protocol

from ledger_charts.domain.models.accounts import AccountDTO


class AccountsRepositoryPort(Protocol):
    """Port exposing ledger accounts and their metadata."""

    def fetch_accounts(self, account_ids: Iterable[int]) -> list[AccountDTO]:
        """Return the accounts matching the given identifiers."""

    def fetch_meta_value(self, account: AccountDTO, key: str) -> str | None:
        """Return an account metadata value, or None when unset."""


__all__ = ["AccountsRepositoryPort"]

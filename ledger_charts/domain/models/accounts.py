"""Domain models for ledger accounts."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class AccountDTO:
    """Read-only representation of a ledger account."""

    id: int
    name: str
    account_type: str = "asset"


class NetWorthInclusion(Enum):
    """Tri-state net worth preference stored in account metadata."""

    INCLUDED = "included"
    EXCLUDED = "excluded"
    UNSET = "unset"

    @classmethod
    def from_meta_value(cls, value: str | None) -> "NetWorthInclusion":
        """Map a raw ``include_net_worth`` metadata value to a state.

        Args:
            value: Stored metadata value, or None when the account has none.

        Returns:
            NetWorthInclusion: UNSET for None, INCLUDED for "1",
            EXCLUDED for anything else.
        """
        if value is None:
            return cls.UNSET
        if str(value).strip() == "1":
            return cls.INCLUDED
        return cls.EXCLUDED

    @property
    def is_included(self) -> bool:
        """Return True unless the account explicitly opted out."""
        return self is not NetWorthInclusion.EXCLUDED


__all__ = ["AccountDTO", "NetWorthInclusion"]

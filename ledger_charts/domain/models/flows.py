"""Domain models for balances and transaction flows."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum

from .currencies import CurrencyDTO


class TransactionType(str, Enum):
    """Ledger transaction types."""

    WITHDRAWAL = "Withdrawal"
    DEPOSIT = "Deposit"
    TRANSFER = "Transfer"
    OPENING_BALANCE = "Opening balance"
    RECONCILIATION = "Reconciliation"


@dataclass(frozen=True)
class NetWorthItem:
    """Net balance of a set of accounts in one currency at a date."""

    currency: CurrencyDTO
    balance: Decimal


@dataclass(frozen=True)
class FlowRecord:
    """One transaction journal touching the reported accounts.

    Attributes:
        date: Booking date of the journal.
        currency: Currency the journal is recorded in.
        transaction_type: Journal type.
        source_id: Source account id.
        destination_id: Destination account id.
        amount: Signed amount (negative from the source side).
    """

    date: date
    currency: CurrencyDTO
    transaction_type: TransactionType
    source_id: int
    destination_id: int
    amount: Decimal


@dataclass
class FlowBucket:
    """Mutable earned/spent accumulator for one currency and period."""

    earned: Decimal = field(default_factory=lambda: Decimal("0"))
    spent: Decimal = field(default_factory=lambda: Decimal("0"))

    def add(self, key: str, amount: Decimal) -> None:
        """Add an amount to the ``earned`` or ``spent`` side."""
        if key == "earned":
            self.earned += amount
        elif key == "spent":
            self.spent += amount
        else:
            raise ValueError(f"Unknown flow bucket side: {key}")


__all__ = ["TransactionType", "NetWorthItem", "FlowRecord", "FlowBucket"]

"""Domain model for transaction currencies."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CurrencyDTO:
    """Currency reference data.

    Attributes:
        id: Currency identifier used for grouping.
        code: ISO code (e.g., EUR).
        name: Display name (e.g., Euro).
        symbol: Display symbol (e.g., €).
        decimal_places: Digits kept when displaying amounts.
    """

    id: int
    code: str
    name: str
    symbol: str
    decimal_places: int = 2


__all__ = ["CurrencyDTO"]

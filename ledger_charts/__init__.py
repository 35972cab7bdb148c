"""Chart reporting layer for a personal-finance ledger."""

__version__ = "0.1.0"

"""Validation rules for available budget updates."""

from datetime import date
from decimal import Decimal


def validate_budget_amount(amount: Decimal) -> None:
    """Ensure a budget amount is a finite, strictly positive number.

    Raises:
        ValueError: If the amount is not positive.
    """
    if not amount.is_finite() or amount <= 0:
        raise ValueError(f"Amount must be greater than zero, got {amount}")


def validate_budget_range(start: date, end: date) -> None:
    """Ensure a budget period ends after it starts.

    Raises:
        ValueError: If end is not strictly after start.
    """
    if end <= start:
        raise ValueError(
            f"End date {end.isoformat()} must be after start date "
            f"{start.isoformat()}"
        )


__all__ = ["validate_budget_amount", "validate_budget_range"]

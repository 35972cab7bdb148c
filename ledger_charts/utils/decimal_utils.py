"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_UP, Decimal


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL, JSON or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_amount(value: Decimal, decimal_places: int) -> Decimal:
    """Round a money amount half away from zero.

    Args:
        value: Amount to round.
        decimal_places: Number of digits kept after the decimal point.

    Returns:
        Decimal: Rounded amount with exactly ``decimal_places`` digits.
    """
    exponent = Decimal(1).scaleb(-decimal_places)
    return coerce_decimal(value).quantize(exponent, rounding=ROUND_HALF_UP)


def format_amount(value: Decimal) -> str:
    """Render a Decimal as a plain (non-scientific) string."""
    return format(coerce_decimal(value), "f")


__all__ = ["coerce_decimal", "round_amount", "format_amount"]

"""Calendar period arithmetic used to bucket and label chart entries."""

import calendar
from datetime import date, timedelta


_MONTHS_PER_PERIOD = {
    "1M": 1,
    "3M": 3,
    "6M": 6,
    "1Y": 12,
}
_DAYS_PER_PERIOD = {
    "1D": 1,
    "1W": 7,
}


def _add_months(value: date, months: int) -> date:
    """Shift a date by whole months, clamping the day to the month end."""
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def months_between(start: date, end: date) -> int:
    """Return the number of whole months from start to end."""
    months = (end.year - start.year) * 12 + end.month - start.month
    if end.day < start.day:
        months -= 1
    return months


class PeriodNavigator:
    """Chooses bucket granularity and walks calendar periods.

    Spans of up to twelve whole months are bucketed per month, longer spans
    per year.
    """

    def __init__(self, yearly_threshold_months: int = 12) -> None:
        self._yearly_threshold_months = yearly_threshold_months

    def preferred_format(self, start: date, end: date) -> str:
        """Return the strftime format used as the bucket key."""
        if months_between(start, end) > self._yearly_threshold_months:
            return "%Y"
        return "%Y-%m"

    def preferred_title_format(self, start: date, end: date) -> str:
        """Return the strftime format used for displayed period titles."""
        if months_between(start, end) > self._yearly_threshold_months:
            return "%Y"
        return "%B %Y"

    def add_period(self, value: date, period: str, skip: int = 0) -> date:
        """Advance a date by ``skip + 1`` periods.

        Args:
            value: Date to advance.
            period: Period code (1D, 1W, 1M, 3M, 6M or 1Y).
            skip: Number of additional periods to jump over.

        Returns:
            date: The advanced date.

        Raises:
            ValueError: If the period code is unknown.
        """
        steps = skip + 1
        if period in _DAYS_PER_PERIOD:
            return value + timedelta(days=_DAYS_PER_PERIOD[period] * steps)
        if period in _MONTHS_PER_PERIOD:
            return _add_months(value, _MONTHS_PER_PERIOD[period] * steps)
        raise ValueError(f"Unsupported period: {period}")

    def end_of_period(self, value: date, period: str) -> date:
        """Return the last day of the period starting at ``value``."""
        return self.add_period(value, period) - timedelta(days=1)


__all__ = ["PeriodNavigator", "months_between"]

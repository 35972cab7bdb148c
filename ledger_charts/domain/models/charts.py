"""Chart-ready output models."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterator, Literal


SeriesType = Literal["line", "bar"]


@dataclass(frozen=True)
class ChartSeries:
    """One named, chronologically ordered series for a single currency.

    Attributes:
        label: Human readable series label.
        series_type: Rendering hint, ``line`` or ``bar``.
        currency_symbol: Symbol of the series currency.
        entries: Period label to value, in sampling order.
        currency_id: Optional currency identifier.
        background_color: Optional RGBA fill color.
    """

    label: str
    series_type: SeriesType
    currency_symbol: str
    entries: dict[str, Decimal] = field(default_factory=dict)
    currency_id: int | None = None
    background_color: str | None = None


@dataclass(frozen=True)
class ChartDataset:
    """Ordered collection of chart series."""

    series: tuple[ChartSeries, ...] = ()

    def __iter__(self) -> Iterator[ChartSeries]:
        return iter(self.series)

    def __len__(self) -> int:
        return len(self.series)

    @property
    def is_empty(self) -> bool:
        return not self.series


__all__ = ["SeriesType", "ChartSeries", "ChartDataset"]

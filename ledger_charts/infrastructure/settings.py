"""Settings helpers for chart reporting adapters."""

from dataclasses import dataclass
import os

from ledger_charts.domain.constants import DEFAULT_NET_WORTH_LABEL_FORMAT
from ledger_charts.infrastructure.logging.logger import get_app_logger


_CACHE_BACKENDS = ("memory", "none")


@dataclass(frozen=True)
class ChartSettings:
    """Settings for chart computation and caching.

    Attributes:
        cache_backend: Cache implementation identifier (memory or none).
        cache_max_entries: Maximum datasets kept by the memory cache.
        net_worth_label_format: strftime format for net worth labels.
    """

    cache_backend: str = "memory"
    cache_max_entries: int = 256
    net_worth_label_format: str = DEFAULT_NET_WORTH_LABEL_FORMAT

    @classmethod
    def from_env(cls) -> "ChartSettings":
        """Build settings from environment variables.

        Returns:
            ChartSettings: Settings sourced from environment variables.

        Raises:
            ValueError: If the cache backend is not supported.
        """
        backend = os.getenv("CHART_CACHE_BACKEND", "memory").strip().lower()
        if backend not in _CACHE_BACKENDS:
            raise ValueError(
                f"Unsupported chart cache backend: {backend}. "
                "Expected memory or none."
            )
        max_entries = cls._parse_max_entries(
            os.getenv("CHART_CACHE_MAX_ENTRIES")
        )
        label_format = (
            os.getenv("NET_WORTH_LABEL_FORMAT")
            or DEFAULT_NET_WORTH_LABEL_FORMAT
        )
        return cls(
            cache_backend=backend,
            cache_max_entries=max_entries,
            net_worth_label_format=label_format,
        )

    @staticmethod
    def _parse_max_entries(raw_value: str | None) -> int:
        if not raw_value:
            return ChartSettings.cache_max_entries
        try:
            value = int(raw_value)
        except ValueError:
            get_app_logger().warning(
                f"Ignoring invalid CHART_CACHE_MAX_ENTRIES={raw_value!r}"
            )
            return ChartSettings.cache_max_entries
        return max(value, 1)


__all__ = ["ChartSettings"]

"""Port for the chart read-through cache."""

from typing import Any, Protocol


class ChartCachePort(Protocol):
    """Key/value cache for computed chart datasets."""

    def has(self, key: str) -> bool:
        """Return True when a value is cached under key."""

    def get(self, key: str) -> Any:
        """Return the cached value for key.

        Raises:
            KeyError: If nothing is cached under key, including an entry
                evicted after a positive ``has``.
        """

    def store(self, key: str, value: Any) -> None:
        """Cache value under key, replacing any previous value."""


__all__ = ["ChartCachePort"]

"""In-process cache adapters for computed chart datasets."""

import threading
from typing import Any

from ledger_charts.application.ports.cache import ChartCachePort


class InMemoryChartCache(ChartCachePort):
    """Dictionary-backed cache evicting the oldest entry when full.

    Safe to share between the worker threads serving API requests. An entry
    reported by ``has`` may still be evicted before ``get`` is called, in
    which case ``get`` raises ``KeyError``.
    """

    def __init__(self, max_entries: int = 256) -> None:
        """Initialize the cache.

        Args:
            max_entries: Maximum number of cached datasets.
        """
        self._max_entries = max_entries
        self._entries: dict[str, Any] = {}
        self._lock = threading.Lock()

    def has(self, key: str) -> bool:
        with self._lock:
            return key in self._entries

    def get(self, key: str) -> Any:
        with self._lock:
            return self._entries[key]

    def store(self, key: str, value: Any) -> None:
        with self._lock:
            self._entries.pop(key, None)
            self._entries[key] = value
            while len(self._entries) > self._max_entries:
                del self._entries[next(iter(self._entries))]

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class NullChartCache(ChartCachePort):
    """Cache that never holds anything; every lookup recomputes."""

    def has(self, key: str) -> bool:
        return False

    def get(self, key: str) -> Any:
        raise KeyError(key)

    def store(self, key: str, value: Any) -> None:
        return None


__all__ = ["InMemoryChartCache", "NullChartCache"]

"""Cache key construction for chart use cases."""

from datetime import date
import hashlib
import json


def _json_default(value) -> str:
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def build_cache_key(*properties) -> str:
    """Return a stable digest for an ordered tuple of cache properties.

    Args:
        *properties: Operation name followed by every input that influences
            the result (dates, account identifiers, ...).

    Returns:
        str: Hex SHA-256 digest of the JSON-encoded properties.
    """
    encoded = json.dumps(list(properties), default=_json_default)
    return hashlib.sha256(encoded.encode("utf-8")).hexdigest()


def join_account_ids(accounts) -> str:
    """Return account identifiers as a comma-separated string."""
    return ",".join(str(account.id) for account in accounts)


__all__ = ["build_cache_key", "join_account_ids"]

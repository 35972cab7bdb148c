"""Infrastructure adapters (database, cache, settings, logging)."""

"""Adapters exposing the use cases (HTTP API, dashboard, CLI)."""

__all__: list[str] = []

"""FastAPI adapter package."""

__all__: list[str] = []

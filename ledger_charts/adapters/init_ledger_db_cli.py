"""CLI adapter creating the ledger tables.

Wires the schema definitions to the configured database adapter so a fresh
database can be prepared with a single command.
"""

from ledger_charts.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from ledger_charts.infrastructure.logging.logger import get_app_logger
from ledger_charts.infrastructure.schema import create_schema


def main() -> None:
    """Create missing ledger tables in the configured database."""
    logger = get_app_logger()
    adapter = SqlAlchemyDatabaseEngineAdapter()
    engine = adapter.get_ledger_engine()

    create_schema(engine)

    logger.info(f"Ledger schema ensured on {engine.url}")
    print(f"Ledger schema ready on {engine.url}")


if __name__ == "__main__":  # pragma: no cover
    main()

"""SQLAlchemy Core table definitions for the ledger database."""

from sqlalchemy import (
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    UniqueConstraint,
)
from sqlalchemy.engine import Engine


metadata = MetaData()

accounts = Table(
    "accounts",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("name", String(255), nullable=False),
    Column("account_type", String(50), nullable=False, default="asset"),
)

account_meta = Table(
    "account_meta",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("account_id", Integer, ForeignKey("accounts.id"), nullable=False),
    Column("name", String(100), nullable=False),
    Column("data", String(255)),
    UniqueConstraint("account_id", "name", name="uq_account_meta_name"),
)

transaction_currencies = Table(
    "transaction_currencies",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("code", String(3), nullable=False, unique=True),
    Column("name", String(100), nullable=False),
    Column("symbol", String(12), nullable=False),
    Column("decimal_places", Integer, nullable=False, default=2),
)

transaction_journals = Table(
    "transaction_journals",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("date", Date, nullable=False, index=True),
    Column("transaction_type", String(50), nullable=False),
    Column(
        "transaction_currency_id",
        Integer,
        ForeignKey("transaction_currencies.id"),
        nullable=False,
    ),
    Column("description", String(1024)),
)

transactions = Table(
    "transactions",
    metadata,
    Column("id", Integer, primary_key=True),
    Column(
        "transaction_journal_id",
        Integer,
        ForeignKey("transaction_journals.id"),
        nullable=False,
        index=True,
    ),
    Column(
        "account_id",
        Integer,
        ForeignKey("accounts.id"),
        nullable=False,
        index=True,
    ),
    Column("amount", Numeric(32, 12), nullable=False),
)

available_budgets = Table(
    "available_budgets",
    metadata,
    Column("id", Integer, primary_key=True),
    Column(
        "transaction_currency_id",
        Integer,
        ForeignKey("transaction_currencies.id"),
        nullable=False,
    ),
    Column("amount", Numeric(32, 12), nullable=False),
    Column("start_date", Date, nullable=False),
    Column("end_date", Date, nullable=False),
    Column("created_at", DateTime),
    Column("updated_at", DateTime),
)


def create_schema(engine: Engine) -> None:
    """Create every ledger table that does not exist yet."""
    metadata.create_all(engine)


__all__ = [
    "metadata",
    "accounts",
    "account_meta",
    "transaction_currencies",
    "transaction_journals",
    "transactions",
    "available_budgets",
    "create_schema",
]

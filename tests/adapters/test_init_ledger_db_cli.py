"""Tests for the init_ledger_db_cli adapter."""

from sqlalchemy import create_engine, inspect

from ledger_charts.adapters import init_ledger_db_cli


def test_main_creates_schema_and_logs(monkeypatch, tmp_path, capsys):
    """The CLI should create every ledger table and report the URL."""
    engine = create_engine(f"sqlite:///{tmp_path / 'ledger.db'}")

    class _Adapter:
        def get_ledger_engine(self):
            return engine

    log_messages: list[str] = []

    class _Logger:
        def info(self, msg: str) -> None:
            log_messages.append(msg)

    monkeypatch.setattr(
        init_ledger_db_cli,
        "SqlAlchemyDatabaseEngineAdapter",
        lambda: _Adapter(),
    )
    monkeypatch.setattr(
        init_ledger_db_cli,
        "get_app_logger",
        lambda: _Logger(),
    )

    init_ledger_db_cli.main()

    tables = set(inspect(engine).get_table_names())
    assert {
        "accounts",
        "account_meta",
        "transaction_currencies",
        "transaction_journals",
        "transactions",
        "available_budgets",
    } <= tables
    assert "ledger.db" in log_messages[0]
    assert "Ledger schema ready" in capsys.readouterr().out
    engine.dispose()

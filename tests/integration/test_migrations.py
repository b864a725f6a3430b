import sqlite3

import pytest

from src.adapters.sqlite.migrator import SQLiteMigrator


@pytest.fixture
def temp_db_path(tmp_path):
    return str(tmp_path / "test_db.sqlite")


def table_names(db_path: str) -> set[str]:
    conn = sqlite3.connect(db_path)
    try:
        rows = conn.execute("SELECT name FROM sqlite_master WHERE type='table'").fetchall()
        return {row[0] for row in rows}
    finally:
        conn.close()


def test_migrator_applies_all(temp_db_path, migrations_dir):
    applied = SQLiteMigrator(temp_db_path, migrations_dir).run_migrations()

    assert applied == ["001_customers.sql", "002_invoices.sql"]
    assert {"_migrations", "customers", "invoices"} <= table_names(temp_db_path)


def test_migrator_is_idempotent(temp_db_path, migrations_dir):
    migrator = SQLiteMigrator(temp_db_path, migrations_dir)

    migrator.run_migrations()
    assert migrator.run_migrations() == []
    assert migrator.pending() == []

    conn = sqlite3.connect(temp_db_path)
    count = conn.execute("SELECT count(*) FROM _migrations").fetchone()[0]
    conn.close()
    assert count == 2


def test_down_section_is_not_run(tmp_path, temp_db_path):
    migrations = tmp_path / "migrations"
    migrations.mkdir()
    (migrations / "001_t.sql").write_text(
        "-- Up\nCREATE TABLE t (x INTEGER);\n\n-- Down\nDROP TABLE t;\n"
    )

    SQLiteMigrator(temp_db_path, migrations).run_migrations()

    assert "t" in table_names(temp_db_path)


def test_failed_migration_raises(tmp_path, temp_db_path):
    migrations = tmp_path / "migrations"
    migrations.mkdir()
    (migrations / "001_bad.sql").write_text("CREATE TABLE oops (;")

    with pytest.raises(RuntimeError, match="001_bad.sql"):
        SQLiteMigrator(temp_db_path, migrations).run_migrations()


def test_missing_directory(tmp_path, temp_db_path):
    with pytest.raises(FileNotFoundError):
        SQLiteMigrator(temp_db_path, tmp_path / "absent").run_migrations()

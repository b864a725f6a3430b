import sqlite3
from pathlib import Path

import pytest

from src.adapters.sqlite.migrator import SQLiteMigrator

PROJECT_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture
def project_root() -> Path:
    return PROJECT_ROOT


@pytest.fixture
def migrations_dir(project_root: Path) -> Path:
    return project_root / "migrations"


@pytest.fixture
def db_path(tmp_path, migrations_dir) -> str:
    """Path to a freshly migrated SQLite database with two customers."""
    path = str(tmp_path / "invoices.db")
    SQLiteMigrator(path, migrations_dir).run_migrations()

    conn = sqlite3.connect(path)
    conn.executemany(
        "INSERT INTO customers (id, name, email) VALUES (?, ?, ?)",
        [
            ("abc", "Evil Rabbit", "evil@rabbit.com"),
            ("def", "Lee Robinson", "lee@robinson.com"),
        ],
    )
    conn.commit()
    conn.close()
    return path


def fetch_invoices(db_path: str) -> list[tuple]:
    """All invoice rows as (id, customer_id, amount, status, date)."""
    conn = sqlite3.connect(db_path)
    try:
        return conn.execute(
            "SELECT id, customer_id, amount, status, date FROM invoices ORDER BY date, id"
        ).fetchall()
    finally:
        conn.close()


@pytest.fixture
def invoice_rows():
    return fetch_invoices

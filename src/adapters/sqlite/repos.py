import sqlite3
from datetime import date
from typing import Any

from src.components.invoices.models import PersistenceError
from src.domain.entities import Customer, Invoice, InvoiceListing


# Helper to convert sqlite rows to dicts
def dict_factory(cursor: sqlite3.Cursor, row: Any) -> dict[str, Any]:
    d = {}
    for idx, col in enumerate(cursor.description):
        d[col[0]] = row[idx]
    return d


class SQLiteRepoBase:
    def __init__(self, db_path: str):
        self.db_path = db_path

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = dict_factory
        conn.execute("PRAGMA foreign_keys = ON;")
        return conn

    def _execute(self, sql: str, params: tuple[Any, ...]) -> int:
        """Run a single write statement and commit. Returns affected rows."""
        try:
            conn = self._get_conn()
        except sqlite3.Error as e:
            raise PersistenceError(f"Could not open database {self.db_path}") from e
        try:
            cursor = conn.execute(sql, params)
            conn.commit()
            return cursor.rowcount
        except (sqlite3.Error, OverflowError) as e:
            conn.rollback()
            raise PersistenceError(str(e)) from e
        finally:
            conn.close()


class SQLiteInvoiceRepo(SQLiteRepoBase):
    def insert(self, customer_id: str, amount: int, status: str, invoice_date: date) -> None:
        self._execute(
            "INSERT INTO invoices (customer_id, amount, status, date) VALUES (?, ?, ?, ?)",
            (customer_id, amount, status, invoice_date.isoformat()),
        )

    def update(self, invoice_id: str, customer_id: str, amount: int, status: str) -> None:
        self._execute(
            "UPDATE invoices SET customer_id = ?, amount = ?, status = ? WHERE id = ?",
            (customer_id, amount, status, invoice_id),
        )

    def delete(self, invoice_id: str) -> None:
        self._execute("DELETE FROM invoices WHERE id = ?", (invoice_id,))

    def get_by_id(self, invoice_id: str) -> Invoice | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT * FROM invoices WHERE id = ?", (invoice_id,)).fetchone()
            if not row:
                return None
            return Invoice(**row)
        finally:
            conn.close()

    def list_with_customers(self) -> list[InvoiceListing]:
        """All invoices joined with their customer, newest first."""
        conn = self._get_conn()
        try:
            rows = conn.execute(
                """
                SELECT invoices.id, invoices.customer_id, customers.name, customers.email,
                       invoices.amount, invoices.status, invoices.date
                FROM invoices
                JOIN customers ON invoices.customer_id = customers.id
                ORDER BY invoices.date DESC, invoices.id
                """
            ).fetchall()
            return [InvoiceListing(**row) for row in rows]
        finally:
            conn.close()


class SQLiteCustomerRepo(SQLiteRepoBase):
    def save(self, customer: Customer) -> Customer:
        self._execute(
            """
            INSERT INTO customers (id, name, email, image_url) VALUES (?, ?, ?, ?)
            ON CONFLICT(id) DO UPDATE SET
                name=excluded.name,
                email=excluded.email,
                image_url=excluded.image_url
            """,
            (customer.id, customer.name, customer.email, customer.image_url),
        )
        return customer

    def list_all(self) -> list[Customer]:
        conn = self._get_conn()
        try:
            rows = conn.execute("SELECT * FROM customers ORDER BY name ASC").fetchall()
            return [Customer(**row) for row in rows]
        finally:
            conn.close()

"""
Invoices component - Port interfaces.
"""

from __future__ import annotations

from datetime import date
from typing import Protocol


class InvoiceRepoPort(Protocol):
    """Repository interface for invoice mutations.

    Each method issues exactly one statement and raises on failure.
    """

    def insert(self, customer_id: str, amount: int, status: str, invoice_date: date) -> None:
        """Insert a new invoice. The id is generated by the database."""
        ...

    def update(self, invoice_id: str, customer_id: str, amount: int, status: str) -> None:
        """Overwrite customer, amount and status of an invoice."""
        ...

    def delete(self, invoice_id: str) -> None:
        """Delete an invoice. Deleting a missing id is not an error."""
        ...


class CacheInvalidatorPort(Protocol):
    """Marks a cached rendered view as stale."""

    def invalidate_path(self, path: str) -> None: ...


class NavigatorPort(Protocol):
    """Tells the client which view to show next."""

    def navigate(self, path: str) -> None: ...


class ClockPort(Protocol):
    """Port for time operations - enables deterministic testing."""

    def today(self) -> date:
        """Current calendar date."""
        ...

"""
Invoices component - Data models.

Raw form inputs, normalized fields, the mutation result contract and the
immutable form configuration shared by every handler.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from src.domain.entities import InvoiceStatus
from src.rules.models import InvoiceRules

# Form keys as submitted by the browser.
CUSTOMER_ID_FIELD = "customerId"
AMOUNT_FIELD = "amount"
STATUS_FIELD = "status"


# --- Errors ---


class PersistenceError(Exception):
    """Raised by repositories when the database call fails."""


@dataclass(frozen=True)
class InvoiceFieldError:
    """Field-level validation error."""

    field: str
    code: str
    message: str


# --- Configuration ---


@dataclass(frozen=True)
class InvoiceFormSchema:
    """Validation rules for the customer/amount/status form."""

    statuses: tuple[InvoiceStatus, ...] = ("pending", "paid")
    customer_message: str = "Please select a customer."
    amount_message: str = "Please enter an amount greater than $0."
    amount_too_large_message: str = "Please enter a smaller amount."
    status_message: str = "Please select an invoice status."


@dataclass(frozen=True)
class MutationMessages:
    """Top-level messages returned with a mutation result."""

    create_invalid: str = "Missing Fields. Failed to Create Invoice."
    update_invalid: str = "Missing Fields. Failed to Update Invoice."
    create_failed: str = "Database Error: Failed to Create Invoice."
    update_failed: str = "Database Error: Failed to Update Invoice."
    delete_failed: str = "Database Error: Failed to Delete Invoice."
    deleted: str = "Deleted Invoice."


@dataclass(frozen=True)
class InvoiceMutationConfig:
    """Process-wide configuration for the mutation handlers."""

    listing_path: str = "/dashboard/invoices"
    schema: InvoiceFormSchema = field(default_factory=InvoiceFormSchema)
    messages: MutationMessages = field(default_factory=MutationMessages)

    @classmethod
    def from_rules(cls, rules: InvoiceRules) -> InvoiceMutationConfig:
        form = rules.invoice_form
        msgs = rules.messages
        return cls(
            listing_path=rules.listing.path,
            schema=InvoiceFormSchema(
                statuses=tuple(form.statuses),
                customer_message=form.field_messages.customer_id,
                amount_message=form.field_messages.amount,
                amount_too_large_message=form.field_messages.amount_too_large,
                status_message=form.field_messages.status,
            ),
            messages=MutationMessages(
                create_invalid=msgs.create_invalid,
                update_invalid=msgs.update_invalid,
                create_failed=msgs.create_failed,
                update_failed=msgs.update_failed,
                delete_failed=msgs.delete_failed,
                deleted=msgs.deleted,
            ),
        )


DEFAULT_CONFIG = InvoiceMutationConfig()


# --- Input Models ---


@dataclass(frozen=True)
class CreateInvoiceInput:
    """Raw form values for creating an invoice."""

    customer_id: Any = None
    amount: Any = None
    status: Any = None


@dataclass(frozen=True)
class UpdateInvoiceInput:
    """Raw form values for updating an invoice.

    ``invoice_id`` comes from the route, never from the form body.
    """

    invoice_id: str
    customer_id: Any = None
    amount: Any = None
    status: Any = None


@dataclass(frozen=True)
class DeleteInvoiceInput:
    """Input for deleting an invoice."""

    invoice_id: str


@dataclass(frozen=True)
class InvoiceFields:
    """Validated and normalized form fields."""

    customer_id: str
    amount_cents: int
    status: InvoiceStatus


# --- Output Models ---


@dataclass(frozen=True)
class MutationOutput:
    """Result of a mutation handler."""

    success: bool
    message: str | None = None
    errors: dict[str, list[str]] = field(default_factory=dict)

    def to_state(self) -> dict[str, Any]:
        """Form state returned to the browser: ``{errors?, message}``."""
        state: dict[str, Any] = {"message": self.message}
        if self.errors:
            state["errors"] = {k: list(v) for k, v in self.errors.items()}
        return state

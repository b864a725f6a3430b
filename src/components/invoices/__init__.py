"""
Invoices component - Invoice mutation handlers.

Validates invoice form input, writes it with a single SQL statement,
invalidates the cached listing view and redirects back to it.
"""

from ._impl import coerce_amount, flatten_field_errors, to_cents, validate_invoice_form
from .component import (
    run,
    run_create,
    run_delete,
    run_update,
)
from .models import (
    AMOUNT_FIELD,
    CUSTOMER_ID_FIELD,
    DEFAULT_CONFIG,
    STATUS_FIELD,
    CreateInvoiceInput,
    DeleteInvoiceInput,
    InvoiceFieldError,
    InvoiceFields,
    InvoiceFormSchema,
    InvoiceMutationConfig,
    MutationMessages,
    MutationOutput,
    PersistenceError,
    UpdateInvoiceInput,
)
from .ports import (
    CacheInvalidatorPort,
    ClockPort,
    InvoiceRepoPort,
    NavigatorPort,
)

__all__ = [
    # Entry points
    "run",
    "run_create",
    "run_update",
    "run_delete",
    # Validation
    "coerce_amount",
    "to_cents",
    "validate_invoice_form",
    "flatten_field_errors",
    # Input models
    "CreateInvoiceInput",
    "UpdateInvoiceInput",
    "DeleteInvoiceInput",
    # Output models
    "InvoiceFields",
    "InvoiceFieldError",
    "MutationOutput",
    "PersistenceError",
    # Configuration
    "AMOUNT_FIELD",
    "CUSTOMER_ID_FIELD",
    "STATUS_FIELD",
    "DEFAULT_CONFIG",
    "InvoiceFormSchema",
    "InvoiceMutationConfig",
    "MutationMessages",
    # Ports
    "CacheInvalidatorPort",
    "ClockPort",
    "InvoiceRepoPort",
    "NavigatorPort",
]

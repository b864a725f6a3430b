"""
Invoices component - Create, update and delete invoices from form input.

Shell Layer - runs validation, issues one repository call per operation,
converts failures to the form-state result, and signals cache invalidation
and navigation through injected ports.
"""

from __future__ import annotations

import logging

from ._impl import flatten_field_errors, validate_invoice_form
from .models import (
    DEFAULT_CONFIG,
    CreateInvoiceInput,
    DeleteInvoiceInput,
    InvoiceMutationConfig,
    MutationOutput,
    UpdateInvoiceInput,
)
from .ports import CacheInvalidatorPort, ClockPort, InvoiceRepoPort, NavigatorPort

logger = logging.getLogger(__name__)


def run_create(
    inp: CreateInvoiceInput,
    *,
    repo: InvoiceRepoPort,
    cache: CacheInvalidatorPort,
    navigator: NavigatorPort,
    clock: ClockPort,
    config: InvoiceMutationConfig | None = None,
) -> MutationOutput:
    """
    Create an invoice.

    Validation errors are returned per field and nothing is written.
    On success the amount is stored in cents with today's date, the
    listing view is invalidated and the client is sent to it.
    """
    cfg = config or DEFAULT_CONFIG

    fields, errors = validate_invoice_form(inp.customer_id, inp.amount, inp.status, cfg.schema)
    if fields is None:
        return MutationOutput(
            success=False,
            message=cfg.messages.create_invalid,
            errors=flatten_field_errors(errors),
        )

    invoice_date = clock.today()
    try:
        repo.insert(fields.customer_id, fields.amount_cents, fields.status, invoice_date)
    except Exception:
        logger.exception("Failed to create invoice for customer %s", fields.customer_id)
        return MutationOutput(success=False, message=cfg.messages.create_failed)

    logger.info(
        "Created invoice for customer %s (%d cents, %s)",
        fields.customer_id,
        fields.amount_cents,
        fields.status,
    )
    cache.invalidate_path(cfg.listing_path)
    navigator.navigate(cfg.listing_path)
    return MutationOutput(success=True)


def run_update(
    inp: UpdateInvoiceInput,
    *,
    repo: InvoiceRepoPort,
    cache: CacheInvalidatorPort,
    navigator: NavigatorPort,
    config: InvoiceMutationConfig | None = None,
) -> MutationOutput:
    """
    Update customer, amount and status of an invoice.

    Validates exactly like create and reports errors the same way.
    The invoice date is left untouched.
    """
    cfg = config or DEFAULT_CONFIG

    fields, errors = validate_invoice_form(inp.customer_id, inp.amount, inp.status, cfg.schema)
    if fields is None:
        return MutationOutput(
            success=False,
            message=cfg.messages.update_invalid,
            errors=flatten_field_errors(errors),
        )

    try:
        repo.update(inp.invoice_id, fields.customer_id, fields.amount_cents, fields.status)
    except Exception:
        logger.exception("Failed to update invoice %s", inp.invoice_id)
        return MutationOutput(success=False, message=cfg.messages.update_failed)

    logger.info("Updated invoice %s", inp.invoice_id)
    cache.invalidate_path(cfg.listing_path)
    navigator.navigate(cfg.listing_path)
    return MutationOutput(success=True)


def run_delete(
    inp: DeleteInvoiceInput,
    *,
    repo: InvoiceRepoPort,
    cache: CacheInvalidatorPort,
    config: InvoiceMutationConfig | None = None,
) -> MutationOutput:
    """Delete an invoice. A missing id still counts as success."""
    cfg = config or DEFAULT_CONFIG

    try:
        repo.delete(inp.invoice_id)
    except Exception:
        logger.exception("Failed to delete invoice %s", inp.invoice_id)
        return MutationOutput(success=False, message=cfg.messages.delete_failed)

    logger.info("Deleted invoice %s", inp.invoice_id)
    cache.invalidate_path(cfg.listing_path)
    return MutationOutput(success=True, message=cfg.messages.deleted)


def run(
    inp: CreateInvoiceInput | UpdateInvoiceInput | DeleteInvoiceInput,
    *,
    repo: InvoiceRepoPort,
    cache: CacheInvalidatorPort,
    navigator: NavigatorPort | None = None,
    clock: ClockPort | None = None,
    config: InvoiceMutationConfig | None = None,
) -> MutationOutput:
    """
    Main entry point for the invoices component.

    Dispatches to the appropriate handler based on input type.
    """
    if isinstance(inp, CreateInvoiceInput):
        assert navigator and clock
        return run_create(
            inp, repo=repo, cache=cache, navigator=navigator, clock=clock, config=config
        )
    elif isinstance(inp, UpdateInvoiceInput):
        assert navigator
        return run_update(inp, repo=repo, cache=cache, navigator=navigator, config=config)
    elif isinstance(inp, DeleteInvoiceInput):
        return run_delete(inp, repo=repo, cache=cache, config=config)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")

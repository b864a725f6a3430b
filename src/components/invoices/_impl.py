"""
Invoice form validation.

Functional Core - pure parsing and normalization, no I/O.
"""

from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation
from typing import Any, cast

from src.domain.entities import InvoiceStatus

from .models import (
    AMOUNT_FIELD,
    CUSTOMER_ID_FIELD,
    STATUS_FIELD,
    InvoiceFieldError,
    InvoiceFields,
    InvoiceFormSchema,
)

_CENTS = Decimal(100)

# Largest value a signed 64-bit SQLite INTEGER holds.
MAX_CENTS = 2**63 - 1
# Amounts at or above 10**17 cannot fit once scaled to cents.
_MAX_AMOUNT_EXPONENT = 16


# --- Coercion ---


def coerce_amount(raw: Any) -> Decimal | None:
    """
    Coerce a submitted amount to a Decimal.

    Returns None when the value is missing, not numeric, or not finite.
    Floats go through their shortest repr so 12.5 stays 12.5.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, Decimal):
        value = raw
    elif isinstance(raw, int | float):
        value = Decimal(repr(raw)) if isinstance(raw, float) else Decimal(raw)
    elif isinstance(raw, str):
        text = raw.strip()
        if not text:
            return None
        try:
            value = Decimal(text)
        except InvalidOperation:
            return None
    else:
        return None

    if not value.is_finite():
        return None
    return value


def to_cents(amount: Decimal) -> int:
    """Convert a decimal currency amount to integer minor units."""
    return int((amount * _CENTS).to_integral_value(rounding=ROUND_HALF_EVEN))


# --- Validation ---


def validate_invoice_form(
    customer_id: Any,
    amount: Any,
    status: Any,
    schema: InvoiceFormSchema,
) -> tuple[InvoiceFields | None, list[InvoiceFieldError]]:
    """
    Validate raw form values.

    Returns:
        Tuple of (fields, errors). Fields is None if validation fails.
    """
    errors: list[InvoiceFieldError] = []

    if not isinstance(customer_id, str) or not customer_id.strip():
        errors.append(
            InvoiceFieldError(
                field=CUSTOMER_ID_FIELD,
                code="required",
                message=schema.customer_message,
            )
        )

    value = coerce_amount(amount)
    if value is None:
        errors.append(
            InvoiceFieldError(
                field=AMOUNT_FIELD,
                code="invalid_number",
                message=schema.amount_message,
            )
        )
    elif value <= 0:
        errors.append(
            InvoiceFieldError(
                field=AMOUNT_FIELD,
                code="too_small",
                message=schema.amount_message,
            )
        )
    elif value.adjusted() > _MAX_AMOUNT_EXPONENT or to_cents(value) > MAX_CENTS:
        errors.append(
            InvoiceFieldError(
                field=AMOUNT_FIELD,
                code="too_large",
                message=schema.amount_too_large_message,
            )
        )

    if not isinstance(status, str) or status not in schema.statuses:
        errors.append(
            InvoiceFieldError(
                field=STATUS_FIELD,
                code="invalid_value",
                message=schema.status_message,
            )
        )

    if errors:
        return None, errors

    assert value is not None
    return (
        InvoiceFields(
            customer_id=cast(str, customer_id).strip(),
            amount_cents=to_cents(value),
            status=cast(InvoiceStatus, status),
        ),
        [],
    )


def flatten_field_errors(errors: list[InvoiceFieldError]) -> dict[str, list[str]]:
    """Group error messages by field, keeping first-seen order."""
    flat: dict[str, list[str]] = {}
    for err in errors:
        flat.setdefault(err.field, []).append(err.message)
    return flat

"""
Invoice form validation tests.

Covers amount coercion, cent conversion and per-field error reporting.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from src.components.invoices import (
    InvoiceFieldError,
    InvoiceFormSchema,
    coerce_amount,
    flatten_field_errors,
    to_cents,
    validate_invoice_form,
)

SCHEMA = InvoiceFormSchema()


class TestCoerceAmount:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("12.50", Decimal("12.50")),
            (" 7 ", Decimal("7")),
            (3, Decimal("3")),
            (0.1, Decimal("0.1")),
            (Decimal("4.2"), Decimal("4.2")),
            ("-3", Decimal("-3")),
            ("1e2", Decimal("100")),
        ],
    )
    def test_numeric_values(self, raw, expected: Decimal) -> None:
        assert coerce_amount(raw) == expected

    @pytest.mark.parametrize(
        "raw", [None, "", "twelve", "12,50", "NaN", "Infinity", float("inf"), True, [], {}]
    )
    def test_non_numeric_values(self, raw) -> None:
        assert coerce_amount(raw) is None


class TestToCents:
    def test_float_drift_is_avoided(self) -> None:
        # float 19.99 * 100 lands just below 1999
        assert to_cents(Decimal("19.99")) == 1999

    def test_sub_cent_values_round_half_even(self) -> None:
        assert to_cents(Decimal("0.125")) == 12
        assert to_cents(Decimal("0.135")) == 14

    def test_large_amount(self) -> None:
        assert to_cents(Decimal("1234567.89")) == 123456789


class TestValidateInvoiceForm:
    def test_valid_form_is_normalized(self) -> None:
        fields, errors = validate_invoice_form("  abc  ", "12.50", "pending", SCHEMA)

        assert errors == []
        assert fields is not None
        assert fields.customer_id == "abc"
        assert fields.amount_cents == 1250
        assert fields.status == "pending"

    def test_non_positive_amount_has_too_small_code(self) -> None:
        fields, errors = validate_invoice_form("abc", "0", "paid", SCHEMA)

        assert fields is None
        assert [(e.field, e.code) for e in errors] == [("amount", "too_small")]

    @pytest.mark.parametrize("amount", ["1e999999", "1e17", "99999999999999999"])
    def test_oversized_amount_has_too_large_code(self, amount: str) -> None:
        fields, errors = validate_invoice_form("abc", amount, "paid", SCHEMA)

        assert fields is None
        assert [(e.field, e.code) for e in errors] == [("amount", "too_large")]

    def test_tiny_exponent_does_not_raise(self) -> None:
        fields, errors = validate_invoice_form("abc", "1e-999999", "paid", SCHEMA)

        assert errors == []
        assert fields is not None
        assert fields.amount_cents == 0

    def test_non_numeric_amount_has_invalid_number_code(self) -> None:
        _, errors = validate_invoice_form("abc", "ten", "paid", SCHEMA)

        assert [(e.field, e.code) for e in errors] == [("amount", "invalid_number")]

    def test_customer_must_be_a_string(self) -> None:
        _, errors = validate_invoice_form(42, "10", "paid", SCHEMA)

        assert [e.field for e in errors] == ["customerId"]

    def test_custom_schema_statuses_and_messages(self) -> None:
        schema = InvoiceFormSchema(statuses=("paid",), status_message="Pick one.")

        fields, _ = validate_invoice_form("abc", "1", "paid", schema)
        _, errors = validate_invoice_form("abc", "1", "pending", schema)

        assert fields is not None
        assert errors[0].message == "Pick one."


def test_flatten_field_errors_groups_by_field() -> None:
    errors = [
        InvoiceFieldError(field="amount", code="a", message="first"),
        InvoiceFieldError(field="status", code="b", message="other"),
        InvoiceFieldError(field="amount", code="c", message="second"),
    ]

    assert flatten_field_errors(errors) == {
        "amount": ["first", "second"],
        "status": ["other"],
    }

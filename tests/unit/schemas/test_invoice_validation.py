from __future__ import annotations

from decimal import Decimal

import pytest

from dashboard.core.enums import InvoiceStatus
from dashboard.schemas.invoices import (
    AMOUNT_MESSAGE,
    CUSTOMER_MESSAGE,
    MAX_AMOUNT_CENTS,
    STATUS_MESSAGE,
    InvoiceForm,
    to_cents,
    validate_invoice_form,
)


def _form(**overrides):
    form = {"customerId": "cust-1", "amount": "12.50", "status": "pending"}
    form.update(overrides)
    return form


def test_valid_form_is_coerced():
    result = validate_invoice_form(_form())
    assert result.success is True
    assert result.errors is None
    assert result.data.customer_id == "cust-1"
    assert result.data.amount == Decimal("12.50")
    assert result.data.status == InvoiceStatus.PENDING
    assert result.data.amount_in_cents == 1250


@pytest.mark.parametrize("amount", ["0", "-1", "-0.01", "", None, "abc", "NaN", "Infinity"])
def test_non_positive_or_non_numeric_amount_fails(amount):
    result = validate_invoice_form(_form(amount=amount))
    assert result.success is False
    assert result.errors == {"amount": [AMOUNT_MESSAGE]}


@pytest.mark.parametrize("amount", ["0.004", "0.0001", "1e20", "1e30", "21474836.48"])
def test_amount_outside_storable_cents_fails(amount):
    result = validate_invoice_form(_form(amount=amount))
    assert result.success is False
    assert result.errors == {"amount": [AMOUNT_MESSAGE]}


def test_largest_storable_amount_passes():
    result = validate_invoice_form(_form(amount="21474836.47"))
    assert result.success is True
    assert result.data.amount_in_cents == MAX_AMOUNT_CENTS


@pytest.mark.parametrize(
    ("amount", "cents"),
    [("0.01", 1), ("1", 100), ("19.99", 1999), ("0.005", 1), ("10.125", 1013), (" 42 ", 4200)],
)
def test_positive_amount_converts_to_rounded_cents(amount, cents):
    result = validate_invoice_form(_form(amount=amount))
    assert result.success is True
    assert result.data.amount_in_cents == cents


@pytest.mark.parametrize("status", ["overdue", "PAID", "", None, "draft"])
def test_status_outside_allowed_set_fails(status):
    result = validate_invoice_form(_form(status=status))
    assert result.success is False
    assert result.errors == {"status": [STATUS_MESSAGE]}


@pytest.mark.parametrize("customer_id", [None, "", "   "])
def test_missing_customer_fails(customer_id):
    result = validate_invoice_form(_form(customerId=customer_id))
    assert result.success is False
    assert result.errors == {"customerId": [CUSTOMER_MESSAGE]}


def test_empty_form_reports_every_field():
    result = validate_invoice_form({})
    assert result.success is False
    assert result.errors == {
        "customerId": [CUSTOMER_MESSAGE],
        "amount": [AMOUNT_MESSAGE],
        "status": [STATUS_MESSAGE],
    }


def test_id_and_date_are_ignored_on_submission():
    result = validate_invoice_form(_form(id="ignored", date="not-a-date"))
    assert result.success is True


def test_to_cents_rounds_half_up():
    assert to_cents(Decimal("2.675")) == 268


def test_invoice_form_prefills_from_record():
    class _Row:
        id = "inv-1"
        customer_id = "cust-1"
        amount = 15795
        status = "pending"
        date = "2022-12-06"

    form = InvoiceForm.from_record(_Row())
    dumped = form.model_dump(mode="json", by_alias=True)
    assert dumped["customerId"] == "cust-1"
    assert dumped["amount"] == "157.95"
    assert dumped["date"] == "2022-12-06"

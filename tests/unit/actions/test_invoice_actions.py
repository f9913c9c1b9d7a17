from __future__ import annotations

import pytest

from dashboard.actions import invoices as invoice_actions
from dashboard.actions.invoices import create_invoice, delete_invoice, update_invoice
from dashboard.core.exceptions import DatabaseError
from dashboard.models import Invoice
from dashboard.navigation import Redirect
from dashboard.schemas.forms import FormState
from dashboard.schemas.invoices import AMOUNT_MESSAGE


@pytest.fixture
def primed_cache(view_cache, settings):
    view_cache.set(settings.INVOICES_PATH, [{"id": "stale"}])
    return view_cache


def _form(customer_id: str, **overrides):
    form = {"customerId": customer_id, "amount": "120.00", "status": "paid"}
    form.update(overrides)
    return form


def test_create_redirects_and_revalidates(db_session, customer, primed_cache, settings):
    result = create_invoice(None, _form(customer.id), db=db_session, cache=primed_cache, settings=settings)

    assert result == Redirect(url=settings.INVOICES_PATH)
    assert primed_cache.is_cached(settings.INVOICES_PATH) is False
    invoice = db_session.query(Invoice).one()
    assert invoice.amount == 12000


def test_create_returns_field_errors_without_writing(db_session, customer, primed_cache, settings):
    result = create_invoice(None, _form(customer.id, amount="0"), db=db_session, cache=primed_cache, settings=settings)

    assert isinstance(result, FormState)
    assert result.errors == {"amount": [AMOUNT_MESSAGE]}
    assert result.message == "Missing Fields. Failed to Create Invoice."
    assert db_session.query(Invoice).count() == 0
    assert primed_cache.is_cached(settings.INVOICES_PATH) is True


def test_create_with_unknown_customer_reports_database_error(db_session, customer, primed_cache, settings):
    result = create_invoice(None, _form("missing-customer"), db=db_session, cache=primed_cache, settings=settings)

    assert result == FormState(message="Database Error: Failed to Create Invoice.")
    assert primed_cache.is_cached(settings.INVOICES_PATH) is True


def test_update_redirects_after_write(db_session, customer, primed_cache, settings):
    create_invoice(None, _form(customer.id), db=db_session, cache=primed_cache, settings=settings)
    invoice_id = db_session.query(Invoice).one().id
    primed_cache.set(settings.INVOICES_PATH, [{"id": "stale"}])

    result = update_invoice(
        invoice_id,
        None,
        _form(customer.id, amount="5", status="pending"),
        db=db_session,
        cache=primed_cache,
        settings=settings,
    )

    assert isinstance(result, Redirect)
    assert primed_cache.is_cached(settings.INVOICES_PATH) is False
    db_session.expire_all()
    invoice = db_session.get(Invoice, invoice_id)
    assert (invoice.amount, invoice.status) == (500, "pending")


def test_update_unknown_id_still_redirects(db_session, customer, primed_cache, settings):
    result = update_invoice("missing", None, _form(customer.id), db=db_session, cache=primed_cache, settings=settings)
    assert isinstance(result, Redirect)


def test_update_validation_message(db_session, customer, primed_cache, settings):
    result = update_invoice("any", None, {}, db=db_session, cache=primed_cache, settings=settings)
    assert result.message == "Missing Fields. Failed to Update Invoice."
    assert set(result.errors) == {"customerId", "amount", "status"}


def test_update_database_failure(monkeypatch, db_session, customer, primed_cache, settings):
    def _boom(self, invoice_id, record):
        raise DatabaseError("Failed to Update Invoice.")

    monkeypatch.setattr(invoice_actions.InvoiceService, "update", _boom)
    result = update_invoice("any", None, _form(customer.id), db=db_session, cache=primed_cache, settings=settings)
    assert result == FormState(message="Database Error: Failed to Update Invoice.")
    assert primed_cache.is_cached(settings.INVOICES_PATH) is True


def test_delete_revalidates_without_redirect(db_session, customer, primed_cache, settings):
    result = delete_invoice("missing", db=db_session, cache=primed_cache, settings=settings)

    assert result == FormState(message="Deleted Invoice.", succeeded=True)
    assert primed_cache.is_cached(settings.INVOICES_PATH) is False


def test_delete_database_failure(monkeypatch, db_session, primed_cache, settings):
    def _boom(self, invoice_id):
        raise DatabaseError("Failed to Delete Invoice.")

    monkeypatch.setattr(invoice_actions.InvoiceService, "delete", _boom)
    result = delete_invoice("any", db=db_session, cache=primed_cache, settings=settings)
    assert result == FormState(message="Database Error: Failed to Delete Invoice.")
    assert primed_cache.is_cached(settings.INVOICES_PATH) is True


@pytest.mark.parametrize("amount", ["0.004", "1e20", "1e30"])
def test_create_rejects_unstorable_amount_as_field_error(db_session, customer, primed_cache, settings, amount):
    result = create_invoice(None, _form(customer.id, amount=amount), db=db_session, cache=primed_cache, settings=settings)

    assert result == FormState(
        errors={"amount": [AMOUNT_MESSAGE]},
        message="Missing Fields. Failed to Create Invoice.",
    )
    assert db_session.query(Invoice).count() == 0

"""Invoice form actions.

Each action validates the submitted fields, writes through
:class:`InvoiceService`, revalidates the cached invoice listing and returns
either a :class:`FormState` for the caller to render or a terminal
:class:`Redirect`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy.orm import Session

from dashboard.actions.lifecycle import Submission
from dashboard.cache.revalidation import PathCache, get_cache
from dashboard.core.config import Config, get_config
from dashboard.core.enums import SubmissionStage
from dashboard.core.exceptions import DatabaseError
from dashboard.navigation import Redirect, redirect
from dashboard.schemas.forms import FormState
from dashboard.schemas.invoices import CreateInvoice, UpdateInvoice, validate_invoice_form
from dashboard.services.invoice_service import InvoiceService

logger = logging.getLogger(__name__)

DELETE_FAILED_MESSAGE = "Database Error: Failed to Delete Invoice."
DELETED_MESSAGE = "Deleted Invoice."


def _finish(submission: Submission, cache: PathCache, path: str) -> None:
    submission.advance(SubmissionStage.SUCCEEDED)
    cache.revalidate(path)
    submission.advance(SubmissionStage.INVALIDATED)


def create_invoice(
    prev_state: FormState | None,
    form: Mapping[str, Any],
    *,
    db: Session,
    cache: PathCache | None = None,
    settings: Config | None = None,
) -> FormState | Redirect:
    settings = settings or get_config()
    cache = cache or get_cache()
    submission = Submission("create_invoice")

    submission.advance(SubmissionStage.VALIDATING)
    validated = validate_invoice_form(form, schema=CreateInvoice)
    if not validated.success:
        submission.advance(SubmissionStage.INVALID)
        return FormState(errors=validated.errors, message="Missing Fields. Failed to Create Invoice.")

    submission.advance(SubmissionStage.PERSISTING)
    try:
        InvoiceService(db=db).create(validated.data)
    except DatabaseError:
        submission.advance(SubmissionStage.FAILED)
        return FormState(message="Database Error: Failed to Create Invoice.")

    _finish(submission, cache, settings.INVOICES_PATH)
    submission.advance(SubmissionStage.REDIRECTED)
    return redirect(settings.INVOICES_PATH)


def update_invoice(
    invoice_id: str,
    prev_state: FormState | None,
    form: Mapping[str, Any],
    *,
    db: Session,
    cache: PathCache | None = None,
    settings: Config | None = None,
) -> FormState | Redirect:
    """Update ``invoice_id``; an id matching no row still redirects."""
    settings = settings or get_config()
    cache = cache or get_cache()
    submission = Submission("update_invoice")

    submission.advance(SubmissionStage.VALIDATING)
    validated = validate_invoice_form(form, schema=UpdateInvoice)
    if not validated.success:
        submission.advance(SubmissionStage.INVALID)
        return FormState(errors=validated.errors, message="Missing Fields. Failed to Update Invoice.")

    submission.advance(SubmissionStage.PERSISTING)
    try:
        affected = InvoiceService(db=db).update(invoice_id, validated.data)
    except DatabaseError:
        submission.advance(SubmissionStage.FAILED)
        return FormState(message="Database Error: Failed to Update Invoice.")

    if affected == 0:
        logger.warning(
            "invoice.update.no_rows",
            extra={"event": "invoice.update.no_rows", "invoice_id": invoice_id},
        )
    _finish(submission, cache, settings.INVOICES_PATH)
    submission.advance(SubmissionStage.REDIRECTED)
    return redirect(settings.INVOICES_PATH)


def delete_invoice(
    invoice_id: str,
    *,
    db: Session,
    cache: PathCache | None = None,
    settings: Config | None = None,
) -> FormState:
    settings = settings or get_config()
    cache = cache or get_cache()
    submission = Submission("delete_invoice")

    submission.advance(SubmissionStage.PERSISTING)
    try:
        InvoiceService(db=db).delete(invoice_id)
    except DatabaseError:
        submission.advance(SubmissionStage.FAILED)
        return FormState(message=DELETE_FAILED_MESSAGE)

    _finish(submission, cache, settings.INVOICES_PATH)
    return FormState(message=DELETED_MESSAGE, succeeded=True)

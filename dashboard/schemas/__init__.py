"""Pydantic schemas for dashboard forms and responses."""

from dashboard.schemas.auth import Credentials, SessionUser
from dashboard.schemas.forms import FormState
from dashboard.schemas.invoices import (
    CreateInvoice,
    InvoiceFields,
    InvoiceForm,
    InvoiceResponse,
    UpdateInvoice,
    ValidationResult,
    validate_invoice_form,
)

__all__ = [
    "CreateInvoice",
    "Credentials",
    "FormState",
    "InvoiceFields",
    "InvoiceForm",
    "InvoiceResponse",
    "SessionUser",
    "UpdateInvoice",
    "ValidationResult",
    "validate_invoice_form",
]

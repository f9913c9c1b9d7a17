"""Invoice form schemas and validation.

Form input arrives as loosely typed string fields keyed by their HTML names
(``customerId``, ``amount``, ``status``). :func:`validate_invoice_form` coerces
them into :class:`InvoiceFields` and never raises: failures come back as a
field-error map keyed by the same form names.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

from dashboard.core.enums import InvoiceStatus

CUSTOMER_MESSAGE = "Please select a customer."
AMOUNT_MESSAGE = "Please enter an amount greater than $0."
STATUS_MESSAGE = "Please select an invoice status."

CENTS = Decimal("100")
# Largest value the INTEGER amount column holds on Postgres.
MAX_AMOUNT_CENTS = 2_147_483_647


def to_cents(amount: Decimal) -> int:
    """Convert major currency units to integer minor units, rounding half up."""
    return int((amount * CENTS).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def from_cents(amount: int) -> Decimal:
    return (Decimal(amount) / CENTS).quantize(Decimal("0.01"))


class InvoiceFields(BaseModel):
    """Fields submitted by the create and edit invoice forms."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    customer_id: str = Field(default=None, alias="customerId", validate_default=True)
    amount: Decimal = Field(default=None, validate_default=True)
    status: InvoiceStatus = Field(default=None, validate_default=True)

    @field_validator("customer_id", mode="before")
    @classmethod
    def require_customer(cls, value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise PydanticCustomError("customer_required", CUSTOMER_MESSAGE)
        return value.strip()

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_amount(cls, value: Any) -> Decimal:
        if value is None or isinstance(value, bool):
            raise PydanticCustomError("amount_positive", AMOUNT_MESSAGE)
        raw = str(value).strip()
        try:
            amount = Decimal(raw) if raw else Decimal(0)
        except InvalidOperation:
            raise PydanticCustomError("amount_positive", AMOUNT_MESSAGE) from None
        if not amount.is_finite() or amount <= 0:
            raise PydanticCustomError("amount_positive", AMOUNT_MESSAGE)
        try:
            cents = to_cents(amount)
        except InvalidOperation:
            raise PydanticCustomError("amount_positive", AMOUNT_MESSAGE) from None
        if cents < 1 or cents > MAX_AMOUNT_CENTS:
            raise PydanticCustomError("amount_positive", AMOUNT_MESSAGE)
        return amount

    @field_validator("status", mode="before")
    @classmethod
    def require_status(cls, value: Any) -> str:
        allowed = {status.value for status in InvoiceStatus}
        if isinstance(value, InvoiceStatus):
            return value.value
        if not isinstance(value, str) or value.strip() not in allowed:
            raise PydanticCustomError("status_choice", STATUS_MESSAGE)
        return value.strip()

    @property
    def amount_in_cents(self) -> int:
        return to_cents(self.amount)


# The create and edit forms submit the same fields; id and date are never user input.
CreateInvoice = InvoiceFields
UpdateInvoice = InvoiceFields


class InvoiceForm(InvoiceFields):
    """Full invoice shape, used to prefill the edit form."""

    id: str
    date: dt.date

    @classmethod
    def from_record(cls, invoice: Any) -> "InvoiceForm":
        return cls(
            id=invoice.id,
            customerId=invoice.customer_id,
            amount=from_cents(invoice.amount),
            status=invoice.status,
            date=invoice.date,
        )


class InvoiceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    customer_id: str
    name: str | None = None
    email: str | None = None
    amount: int
    status: str
    date: dt.date


@dataclass(frozen=True)
class ValidationResult:
    success: bool
    data: InvoiceFields | None = None
    errors: dict[str, list[str]] | None = None


def _field_key(model_cls: type[BaseModel], loc: tuple) -> str:
    if not loc:
        return "__root__"
    name = str(loc[0])
    field = model_cls.model_fields.get(name)
    if field is not None and field.alias:
        return field.alias
    return name


def flatten_errors(model_cls: type[BaseModel], exc: PydanticValidationError) -> dict[str, list[str]]:
    """Collapse a pydantic error list into ``{form field: [messages]}``."""
    field_errors: dict[str, list[str]] = {}
    for error in exc.errors():
        key = _field_key(model_cls, tuple(error.get("loc", ())))
        field_errors.setdefault(key, []).append(error["msg"])
    return field_errors


def validate_invoice_form(
    form: Mapping[str, Any],
    schema: type[InvoiceFields] = InvoiceFields,
) -> ValidationResult:
    """Validate raw form fields without raising."""
    payload = {key: form.get(key) for key in ("customerId", "amount", "status")}
    try:
        data = schema.model_validate(payload)
    except PydanticValidationError as exc:
        return ValidationResult(success=False, errors=flatten_errors(schema, exc))
    return ValidationResult(success=True, data=data)

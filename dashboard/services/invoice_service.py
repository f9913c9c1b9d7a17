"""Invoice persistence: bound insert/update/delete statements and read helpers."""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone

from sqlalchemy import String, cast, delete, insert, or_, select, update
from sqlalchemy.exc import SQLAlchemyError

from dashboard.core.exceptions import DatabaseError
from dashboard.models import Customer, Invoice
from dashboard.schemas.invoices import InvoiceFields, InvoiceResponse
from dashboard.services.base_service import BaseService

logger = logging.getLogger(__name__)

invoices = Invoice.__table__


class InvoiceService(BaseService):
    """Writes invoice rows from validated form data.

    Every statement binds its values; store failures are rolled back and
    re-raised as :class:`DatabaseError` with the driver error chained.
    """

    def _today(self) -> date:
        return datetime.now(timezone.utc).date()

    def _execute(self, statement, operation: str):
        try:
            result = self.db.execute(statement)
            self.commit()
        except SQLAlchemyError as exc:
            self.rollback()
            logger.exception(
                "invoice.%s.failed",
                operation,
                extra={"event": f"invoice.{operation}.failed"},
            )
            raise DatabaseError(f"Failed to {operation.capitalize()} Invoice.") from exc
        return result

    def create(self, record: InvoiceFields) -> str:
        """Insert a new invoice dated today and return its id."""
        statement = insert(invoices).values(
            customer_id=record.customer_id,
            amount=record.amount_in_cents,
            status=record.status.value,
            date=self._today(),
        )
        result = self._execute(statement, "create")
        invoice_id = result.inserted_primary_key[0]
        logger.info("invoice.created", extra={"event": "invoice.created", "invoice_id": invoice_id})
        return invoice_id

    def update(self, invoice_id: str, record: InvoiceFields) -> int:
        """Update an invoice; an unknown id affects zero rows and is not an error."""
        statement = (
            update(invoices)
            .where(invoices.c.id == invoice_id)
            .values(
                customer_id=record.customer_id,
                amount=record.amount_in_cents,
                status=record.status.value,
            )
        )
        affected = self._execute(statement, "update").rowcount
        logger.info(
            "invoice.updated",
            extra={"event": "invoice.updated", "invoice_id": invoice_id, "rows": affected},
        )
        return affected

    def delete(self, invoice_id: str) -> int:
        statement = delete(invoices).where(invoices.c.id == invoice_id)
        affected = self._execute(statement, "delete").rowcount
        logger.info(
            "invoice.deleted",
            extra={"event": "invoice.deleted", "invoice_id": invoice_id, "rows": affected},
        )
        return affected

    def get_invoice(self, invoice_id: str) -> Invoice | None:
        return self.db.get(Invoice, invoice_id)

    def list_invoices(self, query: str = "") -> list[InvoiceResponse]:
        """Return invoices joined with their customer, newest first."""
        statement = (
            select(
                Invoice.id,
                Invoice.customer_id,
                Customer.name,
                Customer.email,
                Invoice.amount,
                Invoice.status,
                Invoice.date,
            )
            .join(Customer, Customer.id == Invoice.customer_id)
            .order_by(Invoice.date.desc(), Invoice.id)
        )
        term = query.strip()
        if term:
            pattern = f"%{term}%"
            statement = statement.where(
                or_(
                    Customer.name.ilike(pattern),
                    Customer.email.ilike(pattern),
                    Invoice.status.ilike(pattern),
                    cast(Invoice.amount, String).ilike(pattern),
                    cast(Invoice.date, String).ilike(pattern),
                )
            )
        rows = self.db.execute(statement).all()
        return [InvoiceResponse.model_validate(dict(row._mapping)) for row in rows]

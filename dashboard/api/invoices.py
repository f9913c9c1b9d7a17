"""Invoice listing and form endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from sqlalchemy.orm import Session

from dashboard.actions.invoices import create_invoice, delete_invoice, update_invoice
from dashboard.api.responses import action_response, state_response
from dashboard.cache.revalidation import PathCache
from dashboard.core.config import Config
from dashboard.core.dependencies import get_db_session, get_settings, get_view_cache
from dashboard.schemas.invoices import InvoiceForm
from dashboard.services.invoice_service import InvoiceService

router = APIRouter(prefix="/dashboard/invoices", tags=["invoices"])


@router.get("")
def list_invoices(
    query: str = Query(default="", max_length=200),
    db: Session = Depends(get_db_session),
    cache: PathCache = Depends(get_view_cache),
    settings: Config = Depends(get_settings),
) -> list[dict]:
    """Full listing is served from the view cache; searches always hit the database."""

    def _compute() -> list[dict]:
        return [item.model_dump(mode="json") for item in InvoiceService(db=db).list_invoices(query)]

    if query.strip():
        return _compute()
    return cache.get_or_compute(settings.INVOICES_PATH, _compute)


@router.get("/{invoice_id}")
def get_invoice(invoice_id: str, db: Session = Depends(get_db_session)) -> dict:
    invoice = InvoiceService(db=db).get_invoice(invoice_id)
    if invoice is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Invoice not found: {invoice_id}")
    return InvoiceForm.from_record(invoice).model_dump(mode="json", by_alias=True)


@router.post("/create")
async def submit_create(
    request: Request,
    db: Session = Depends(get_db_session),
    cache: PathCache = Depends(get_view_cache),
    settings: Config = Depends(get_settings),
):
    form = await request.form()
    result = create_invoice(None, form, db=db, cache=cache, settings=settings)
    return action_response(result, settings)


@router.post("/{invoice_id}/edit")
async def submit_update(
    invoice_id: str,
    request: Request,
    db: Session = Depends(get_db_session),
    cache: PathCache = Depends(get_view_cache),
    settings: Config = Depends(get_settings),
):
    form = await request.form()
    result = update_invoice(invoice_id, None, form, db=db, cache=cache, settings=settings)
    return action_response(result, settings)


@router.post("/{invoice_id}/delete")
def submit_delete(
    invoice_id: str,
    db: Session = Depends(get_db_session),
    cache: PathCache = Depends(get_view_cache),
    settings: Config = Depends(get_settings),
):
    return state_response(delete_invoice(invoice_id, db=db, cache=cache, settings=settings))

# dashboard/api/invoices.py

from decimal import Decimal
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy import select
from sqlalchemy.engine import Engine
from starlette.datastructures import FormData

from dashboard.actions import create_invoice, delete_invoice, update_invoice
from dashboard.api.deps import action_response, get_cache, get_db, get_form
from dashboard.cache import ViewCache
from dashboard.config import INVOICES_PATH
from dashboard.db.schema import customers, invoices
from dashboard.models.invoices import InvoiceForm, InvoiceOut

router = APIRouter(prefix=INVOICES_PATH, tags=["invoices"])


def _dollars(cents: int) -> Decimal:
    return Decimal(cents) / 100


@router.get("", response_model=List[InvoiceOut])
def list_invoices(
    engine: Engine = Depends(get_db),
    cache: ViewCache = Depends(get_cache),
) -> List[InvoiceOut]:
    """
    Return all invoices, newest first, with the customer they belong to.
    """
    cached = cache.get(INVOICES_PATH)
    if cached is not None:
        return cached

    generation = cache.generation(INVOICES_PATH)

    with engine.connect() as conn:
        stmt = (
            select(
                invoices.c.id,
                invoices.c.customer_id,
                customers.c.name,
                customers.c.email,
                customers.c.image_url,
                invoices.c.amount,
                invoices.c.status,
                invoices.c.date,
            )
            .select_from(invoices.join(customers))
            .order_by(invoices.c.date.desc(), customers.c.name)
        )

        rows = conn.execute(stmt).mappings().all()

    items = [
        InvoiceOut(
            id=row["id"],
            customer_id=row["customer_id"],
            name=row["name"],
            email=row["email"],
            image_url=row["image_url"],
            amount=_dollars(row["amount"]),
            status=row["status"],
            date=row["date"],
        )
        for row in rows
    ]

    cache.put(INVOICES_PATH, items, generation)
    return items


@router.get("/{invoice_id}", response_model=InvoiceForm)
def get_invoice(invoice_id: str, engine: Engine = Depends(get_db)) -> InvoiceForm:
    """
    Look up a single invoice to prefill its edit form.
    """
    with engine.connect() as conn:
        stmt = select(
            invoices.c.id,
            invoices.c.customer_id,
            invoices.c.amount,
            invoices.c.status,
        ).where(invoices.c.id == invoice_id)

        row = conn.execute(stmt).mappings().first()

    if row is None:
        raise HTTPException(status_code=404, detail="Invoice not found")

    return InvoiceForm(
        id=row["id"],
        customer_id=row["customer_id"],
        amount=_dollars(row["amount"]),
        status=row["status"],
    )


@router.post("")
def create_invoice_form(
    form: FormData = Depends(get_form),
    engine: Engine = Depends(get_db),
    cache: ViewCache = Depends(get_cache),
) -> Response:
    return action_response(create_invoice(form, engine=engine, cache=cache))


@router.post("/{invoice_id}")
def update_invoice_form(
    invoice_id: str,
    form: FormData = Depends(get_form),
    engine: Engine = Depends(get_db),
    cache: ViewCache = Depends(get_cache),
) -> Response:
    return action_response(update_invoice(invoice_id, form, engine=engine, cache=cache))


@router.post("/{invoice_id}/delete", status_code=204)
def delete_invoice_form(
    invoice_id: str,
    engine: Engine = Depends(get_db),
    cache: ViewCache = Depends(get_cache),
) -> Response:
    delete_invoice(invoice_id, engine=engine, cache=cache)
    return Response(status_code=204)

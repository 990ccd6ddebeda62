# dashboard/api/customers.py

from decimal import Decimal
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy import case, func, select
from sqlalchemy.engine import Engine
from starlette.datastructures import FormData

from dashboard.actions import create_customer, delete_customer, update_customer
from dashboard.api.deps import action_response, get_cache, get_db, get_form
from dashboard.cache import ViewCache
from dashboard.config import CUSTOMERS_PATH
from dashboard.db.schema import customers, invoices
from dashboard.models.customers import CustomerOut, CustomerTableRow

router = APIRouter(prefix=CUSTOMERS_PATH, tags=["customers"])


def _sum_where_status(status: str):
    return func.coalesce(
        func.sum(case((invoices.c.status == status, invoices.c.amount), else_=0)),
        0,
    )


@router.get("", response_model=List[CustomerTableRow])
def list_customers(
    engine: Engine = Depends(get_db),
    cache: ViewCache = Depends(get_cache),
) -> List[CustomerTableRow]:
    """
    Return all customers with their invoice count and pending/paid totals.
    """
    cached = cache.get(CUSTOMERS_PATH)
    if cached is not None:
        return cached

    generation = cache.generation(CUSTOMERS_PATH)

    with engine.connect() as conn:
        stmt = (
            select(
                customers.c.id,
                customers.c.name,
                customers.c.email,
                customers.c.image_url,
                func.count(invoices.c.id).label("total_invoices"),
                _sum_where_status("pending").label("total_pending"),
                _sum_where_status("paid").label("total_paid"),
            )
            .select_from(customers.outerjoin(invoices))
            .group_by(
                customers.c.id,
                customers.c.name,
                customers.c.email,
                customers.c.image_url,
            )
            .order_by(customers.c.name)
        )

        rows = conn.execute(stmt).mappings().all()

    items = [
        CustomerTableRow(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            image_url=row["image_url"],
            total_invoices=row["total_invoices"],
            total_pending=Decimal(row["total_pending"]) / 100,
            total_paid=Decimal(row["total_paid"]) / 100,
        )
        for row in rows
    ]

    cache.put(CUSTOMERS_PATH, items, generation)
    return items


@router.get("/{customer_id}", response_model=CustomerOut)
def get_customer(customer_id: str, engine: Engine = Depends(get_db)) -> CustomerOut:
    """
    Return a single customer by ID.
    """
    with engine.connect() as conn:
        stmt = (
            select(
                customers.c.id,
                customers.c.name,
                customers.c.email,
                customers.c.image_url,
            )
            .where(customers.c.id == customer_id)
        )

        row = conn.execute(stmt).mappings().first()

    if row is None:
        raise HTTPException(status_code=404, detail="Customer not found")

    return CustomerOut(
        id=row["id"],
        name=row["name"],
        email=row["email"],
        image_url=row["image_url"],
    )


@router.post("")
def create_customer_form(
    form: FormData = Depends(get_form),
    engine: Engine = Depends(get_db),
    cache: ViewCache = Depends(get_cache),
) -> Response:
    return action_response(create_customer(form, engine=engine, cache=cache))


@router.post("/{customer_id}")
def update_customer_form(
    customer_id: str,
    form: FormData = Depends(get_form),
    engine: Engine = Depends(get_db),
    cache: ViewCache = Depends(get_cache),
) -> Response:
    return action_response(update_customer(customer_id, form, engine=engine, cache=cache))


@router.post("/{customer_id}/delete", status_code=204)
def delete_customer_form(
    customer_id: str,
    engine: Engine = Depends(get_db),
    cache: ViewCache = Depends(get_cache),
) -> Response:
    delete_customer(customer_id, engine=engine, cache=cache)
    return Response(status_code=204)

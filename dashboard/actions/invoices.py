# dashboard/actions/invoices.py

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Mapping, Optional
from zoneinfo import ZoneInfo

from sqlalchemy.engine import Engine

from dashboard.actions.base import FormAction, run_delete, run_form_action
from dashboard.cache import ViewCache
from dashboard.config import CUSTOMERS_PATH, INVOICES_PATH, TIMEZONE
from dashboard.db.schema import invoices
from dashboard.models.invoices import CreateInvoice, UpdateInvoice
from dashboard.models.results import ActionResult

CREATE_INVOICE = FormAction(
    entity="Invoice",
    verb="Create",
    schema=CreateInvoice,
    list_path=INVOICES_PATH,
    invalidates=(INVOICES_PATH, CUSTOMERS_PATH),
)

UPDATE_INVOICE = FormAction(
    entity="Invoice",
    verb="Update",
    schema=UpdateInvoice,
    list_path=INVOICES_PATH,
    invalidates=(INVOICES_PATH, CUSTOMERS_PATH),
)


def to_cents(amount: Decimal) -> int:
    """Convert a validated dollar amount to integer cents."""
    return int((amount * 100).to_integral_value(rounding=ROUND_HALF_UP))


def today() -> date:
    return datetime.now(ZoneInfo(TIMEZONE)).date()


def create_invoice(
    form: Mapping[str, Any],
    *,
    engine: Engine,
    cache: ViewCache,
    on_date: Optional[date] = None,
) -> ActionResult:
    def insert_invoice(fields: CreateInvoice):
        return invoices.insert().values(
            customer_id=fields.customer_id,
            amount=to_cents(fields.amount),
            status=fields.status,
            date=on_date or today(),
        )

    return run_form_action(CREATE_INVOICE, form, insert_invoice, engine=engine, cache=cache)


def update_invoice(
    invoice_id: str,
    form: Mapping[str, Any],
    *,
    engine: Engine,
    cache: ViewCache,
) -> ActionResult:
    # date is set once on insert and left alone here
    def update_statement(fields: UpdateInvoice):
        return (
            invoices.update()
            .where(invoices.c.id == invoice_id)
            .values(
                customer_id=fields.customer_id,
                amount=to_cents(fields.amount),
                status=fields.status,
            )
        )

    return run_form_action(UPDATE_INVOICE, form, update_statement, engine=engine, cache=cache)


def delete_invoice(invoice_id: str, *, engine: Engine, cache: ViewCache) -> None:
    run_delete(
        invoices,
        invoice_id,
        failure_message="Failed to Delete Invoice",
        invalidates=(INVOICES_PATH, CUSTOMERS_PATH),
        engine=engine,
        cache=cache,
    )

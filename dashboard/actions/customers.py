# dashboard/actions/customers.py

from typing import Any, Mapping

from sqlalchemy.engine import Engine

from dashboard.actions.base import FormAction, run_delete, run_form_action
from dashboard.cache import ViewCache
from dashboard.config import CUSTOMERS_PATH, INVOICES_PATH
from dashboard.db.schema import customers
from dashboard.models.customers import CreateCustomer, UpdateCustomer
from dashboard.models.results import ActionResult, CustomerState

CREATE_CUSTOMER = FormAction(
    entity="Customer",
    verb="Create",
    schema=CreateCustomer,
    list_path=CUSTOMERS_PATH,
    state_class=CustomerState,
)

UPDATE_CUSTOMER = FormAction(
    entity="Customer",
    verb="Update",
    schema=UpdateCustomer,
    list_path=CUSTOMERS_PATH,
    invalidates=(CUSTOMERS_PATH, INVOICES_PATH),
    state_class=CustomerState,
)


def create_customer(form: Mapping[str, Any], *, engine: Engine, cache: ViewCache) -> ActionResult:
    def insert_customer(fields: CreateCustomer):
        return customers.insert().values(
            name=fields.name,
            email=fields.email,
            image_url=fields.image_url,
        )

    return run_form_action(CREATE_CUSTOMER, form, insert_customer, engine=engine, cache=cache)


def update_customer(
    customer_id: str,
    form: Mapping[str, Any],
    *,
    engine: Engine,
    cache: ViewCache,
) -> ActionResult:
    def update_statement(fields: UpdateCustomer):
        return (
            customers.update()
            .where(customers.c.id == customer_id)
            .values(
                name=fields.name,
                email=fields.email,
                image_url=fields.image_url,
            )
        )

    return run_form_action(UPDATE_CUSTOMER, form, update_statement, engine=engine, cache=cache)


def delete_customer(customer_id: str, *, engine: Engine, cache: ViewCache) -> None:
    """
    Delete a customer.

    Raises StoreMutationError when the store refuses, e.g. while invoices
    still reference the customer.
    """
    run_delete(
        customers,
        customer_id,
        failure_message="Failed to delete customer (check for linked invoices).",
        invalidates=(CUSTOMERS_PATH, INVOICES_PATH),
        engine=engine,
        cache=cache,
    )

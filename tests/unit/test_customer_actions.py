from unittest.mock import Mock

import pytest
from sqlalchemy.exc import OperationalError

from dashboard.actions import (
    StoreMutationError,
    create_customer,
    delete_customer,
    update_customer,
)
from dashboard.db.schema import customers
from dashboard.models.results import CustomerState, Redirect


def test_create_customer_without_image_stores_null(engine, cache, fetch_rows):
    result = create_customer(
        {"name": "Amy Burns", "email": "amy@burns.com", "image_url": ""},
        engine=engine,
        cache=cache,
    )

    assert result == Redirect(location="/dashboard/customers")
    rows = fetch_rows(customers)
    assert len(rows) == 1
    assert rows[0]["name"] == "Amy Burns"
    assert rows[0]["email"] == "amy@burns.com"
    assert rows[0]["image_url"] is None


def test_create_customer_invalid_fields():
    engine, cache = Mock(), Mock()

    result = create_customer(
        {"name": "", "email": "amy", "image_url": "nope"},
        engine=engine,
        cache=cache,
    )

    assert isinstance(result, CustomerState)
    assert result.errors == {
        "name": ["Name is required."],
        "email": ["Invalid email address."],
        "image_url": ["Invalid URL."],
    }
    assert result.message == "Missing Fields. Failed to Create Customer."
    engine.begin.assert_not_called()


def test_update_customer_clears_image(engine, cache, customer_id, fetch_rows):
    cache.put("/dashboard/customers", ["stale"], 0)

    result = update_customer(
        customer_id,
        {"name": "Delba Oliveira", "email": "delba@oliveira.com"},
        engine=engine,
        cache=cache,
    )

    assert result == Redirect(location="/dashboard/customers")
    assert cache.get("/dashboard/customers") is None
    row = fetch_rows(customers)[0]
    assert row["id"] == customer_id
    assert row["name"] == "Delba Oliveira"
    assert row["image_url"] is None


def test_update_customer_store_failure():
    engine = Mock()
    engine.begin.side_effect = OperationalError("UPDATE", {}, Exception("timeout"))

    result = update_customer(
        "c1",
        {"name": "Amy Burns", "email": "amy@burns.com"},
        engine=engine,
        cache=Mock(),
    )

    assert result == CustomerState(message="Database Error: Failed to Update Customer.")


def test_delete_customer_without_invoices(engine, cache, customer_id, fetch_rows):
    cache.put("/dashboard/customers", ["stale"], 0)

    delete_customer(customer_id, engine=engine, cache=cache)

    assert fetch_rows(customers) == []
    assert cache.get("/dashboard/customers") is None


def test_delete_customer_with_invoices_raises(engine, cache, customer_id, make_invoice, fetch_rows):
    make_invoice(customer_id)
    cache.put("/dashboard/customers", ["cached"], 0)

    with pytest.raises(StoreMutationError, match="check for linked invoices"):
        delete_customer(customer_id, engine=engine, cache=cache)

    assert len(fetch_rows(customers)) == 1
    assert cache.get("/dashboard/customers") == ["cached"]

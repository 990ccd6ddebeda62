from decimal import Decimal

import pytest
from pydantic import ValidationError

from dashboard.actions.base import flatten_errors, read_form_fields
from dashboard.models.customers import CreateCustomer, UpdateCustomer
from dashboard.models.invoices import CreateInvoice, UpdateInvoice

AMOUNT_MESSAGE = "Please enter an amount greater than $0."


def _errors(schema, form):
    with pytest.raises(ValidationError) as exc_info:
        schema.model_validate(read_form_fields(schema, form))
    return flatten_errors(exc_info.value)


@pytest.mark.parametrize("schema", [CreateInvoice, UpdateInvoice])
def test_invoice_empty_form_reports_every_field(schema):
    assert _errors(schema, {}) == {
        "customerId": ["Please select a customer."],
        "amount": [AMOUNT_MESSAGE],
        "status": ["Please select an invoice status."],
    }


@pytest.mark.parametrize(
    "amount",
    ["0", "-5", "", "abc", "NaN", "Infinity", "  ", "1e30", "1e999999999", "92233720368547758.08"],
)
def test_amount_must_be_a_positive_number(amount):
    errors = _errors(
        CreateInvoice,
        {"customerId": "abc", "amount": amount, "status": "pending"},
    )
    assert errors == {"amount": [AMOUNT_MESSAGE]}


def test_amount_is_coerced_from_form_text():
    fields = CreateInvoice.model_validate(
        {"customerId": "abc", "amount": " 49.99 ", "status": "paid"}
    )
    assert fields.customer_id == "abc"
    assert fields.amount == Decimal("49.99")
    assert fields.status == "paid"


def test_status_outside_known_values():
    errors = _errors(
        UpdateInvoice,
        {"customerId": "abc", "amount": "10", "status": "overdue"},
    )
    assert errors == {"status": ["Please select an invoice status."]}


def test_read_form_fields_ignores_extra_keys():
    form = {"customerId": "abc", "amount": "1", "status": "paid", "id": "forged"}
    assert read_form_fields(CreateInvoice, form) == {
        "customerId": "abc",
        "amount": "1",
        "status": "paid",
    }


@pytest.mark.parametrize("schema", [CreateCustomer, UpdateCustomer])
def test_customer_empty_form(schema):
    # image_url is optional, so only name and email are reported
    assert _errors(schema, {}) == {
        "name": ["Name is required."],
        "email": ["Invalid email address."],
    }


def test_customer_invalid_email_and_url():
    errors = _errors(
        CreateCustomer,
        {"name": "Lee Robinson", "email": "lee-at-robinson", "image_url": "not a url"},
    )
    assert errors == {
        "email": ["Invalid email address."],
        "image_url": ["Invalid URL."],
    }


@pytest.mark.parametrize("image_url", [None, "", "   "])
def test_missing_image_url_becomes_none(image_url):
    fields = CreateCustomer.model_validate(
        {"name": "Lee Robinson", "email": "lee@robinson.com", "image_url": image_url}
    )
    assert fields.image_url is None


def test_valid_image_url_is_kept_as_submitted():
    fields = UpdateCustomer.model_validate(
        {
            "name": "Lee Robinson",
            "email": "lee@robinson.com",
            "image_url": "https://cdn.robinson.com/lee.png",
        }
    )
    assert fields.image_url == "https://cdn.robinson.com/lee.png"


def test_largest_amount_that_fits_in_cents():
    fields = CreateInvoice.model_validate(
        {"customerId": "abc", "amount": "92233720368547758.07", "status": "paid"}
    )
    assert fields.amount == Decimal("92233720368547758.07")

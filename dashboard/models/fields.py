# dashboard/models/fields.py
"""
Reusable field rules for the dashboard forms.

Every rule runs before pydantic's own type check and raises a
``PydanticCustomError`` so the message shown next to the form input is
exactly the one declared here. Rules also receive ``None`` for fields the
form did not submit, so a missing field reports the same message as an
invalid one.
"""

from decimal import Decimal, InvalidOperation
from typing import Annotated, Any, Literal, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import AnyUrl, BeforeValidator, TypeAdapter, ValidationError
from pydantic_core import PydanticCustomError

INVOICE_STATUSES = ("pending", "paid")

MAX_AMOUNT_CENTS = 2**63 - 1

_url_adapter = TypeAdapter(AnyUrl)


def _require_customer(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise PydanticCustomError("customer_required", "Please select a customer.")
    return value.strip()


def _positive_amount(value: Any) -> Decimal:
    amount = None
    if isinstance(value, (str, int, float, Decimal)) and not isinstance(value, bool):
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation:
            amount = None

    if (
        amount is None
        or not amount.is_finite()
        or amount <= 0
        # cents must fit a 64-bit integer column
        or amount.adjusted() > 18
        or amount * 100 > MAX_AMOUNT_CENTS
    ):
        raise PydanticCustomError(
            "amount_not_positive", "Please enter an amount greater than $0."
        )
    return amount


def _known_status(value: Any) -> str:
    if value not in INVOICE_STATUSES:
        raise PydanticCustomError("status_unknown", "Please select an invoice status.")
    return value


def _non_empty_name(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise PydanticCustomError("name_required", "Name is required.")
    return value.strip()


def _email_address(value: Any) -> str:
    if not isinstance(value, str):
        raise PydanticCustomError("email_invalid", "Invalid email address.")
    try:
        validate_email(value.strip(), check_deliverability=False)
    except EmailNotValidError:
        raise PydanticCustomError("email_invalid", "Invalid email address.")
    return value.strip()


def _optional_url(value: Any) -> Optional[str]:
    # empty inputs are stored as NULL, never as ""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if not isinstance(value, str):
        raise PydanticCustomError("url_invalid", "Invalid URL.")
    try:
        _url_adapter.validate_python(value.strip())
    except ValidationError:
        raise PydanticCustomError("url_invalid", "Invalid URL.")
    return value.strip()


CustomerId = Annotated[str, BeforeValidator(_require_customer)]
Amount = Annotated[Decimal, BeforeValidator(_positive_amount)]
InvoiceStatus = Annotated[Literal["pending", "paid"], BeforeValidator(_known_status)]
Name = Annotated[str, BeforeValidator(_non_empty_name)]
Email = Annotated[str, BeforeValidator(_email_address)]
ImageUrl = Annotated[Optional[str], BeforeValidator(_optional_url)]

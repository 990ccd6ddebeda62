# dashboard/models/invoices.py

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from dashboard.models.fields import Amount, CustomerId, InvoiceStatus


class CreateInvoice(BaseModel):
    model_config = ConfigDict(validate_default=True)

    customer_id: CustomerId = Field(None, alias="customerId")
    amount: Amount = None
    status: InvoiceStatus = None


class UpdateInvoice(BaseModel):
    # same fields as CreateInvoice; the id comes from the URL, never the body
    model_config = ConfigDict(validate_default=True)

    customer_id: CustomerId = Field(None, alias="customerId")
    amount: Amount = None
    status: InvoiceStatus = None


class InvoiceOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    customer_id: str
    name: str
    email: str
    image_url: Optional[str] = None
    amount: Decimal
    status: str
    date: date


class InvoiceForm(BaseModel):
    """Values used to prefill the edit form; amount in dollars."""

    id: str
    customer_id: str
    amount: Decimal
    status: str

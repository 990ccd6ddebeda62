# dashboard/models/customers.py

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict

from dashboard.models.fields import Email, ImageUrl, Name


class CreateCustomer(BaseModel):
    model_config = ConfigDict(validate_default=True)

    name: Name = None
    email: Email = None
    image_url: ImageUrl = None


class UpdateCustomer(BaseModel):
    model_config = ConfigDict(validate_default=True)

    name: Name = None
    email: Email = None
    image_url: ImageUrl = None


class CustomerOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
    image_url: Optional[str] = None


class CustomerTableRow(BaseModel):
    id: str
    name: str
    email: str
    image_url: Optional[str] = None
    total_invoices: int
    total_pending: Decimal
    total_paid: Decimal

# dashboard/db/schema.py

from uuid import uuid4

from sqlalchemy import (
    MetaData, Table, Column, Integer, String,
    Date, ForeignKey, CheckConstraint, Text
)

metadata = MetaData()


def _new_id() -> str:
    return str(uuid4())


users = Table(
    "users",
    metadata,
    Column("id", String(36), primary_key=True, default=_new_id),
    Column("name", String, nullable=False),
    Column("email", Text, nullable=False, unique=True),
    Column("password", Text, nullable=False),
)

customers = Table(
    "customers",
    metadata,
    Column("id", String(36), primary_key=True, default=_new_id),
    Column("name", String, nullable=False),
    Column("email", String, nullable=False),
    Column("image_url", String, nullable=True),
)

invoices = Table(
    "invoices",
    metadata,
    Column("id", String(36), primary_key=True, default=_new_id),
    Column("customer_id", String(36), ForeignKey("customers.id"), nullable=False),
    # minor units (cents)
    Column("amount", Integer, nullable=False),
    Column("status", String, nullable=False),
    Column("date", Date, nullable=False),
    CheckConstraint("amount > 0", name="ck_invoices_amount_positive"),
    CheckConstraint("status IN ('pending', 'paid')", name="ck_invoices_status"),
)

from .base import StoreMutationError
from .customers import create_customer, delete_customer, update_customer
from .invoices import create_invoice, delete_invoice, update_invoice

__all__ = [
    "StoreMutationError",
    "create_invoice",
    "update_invoice",
    "delete_invoice",
    "create_customer",
    "update_customer",
    "delete_customer",
]

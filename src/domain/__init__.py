from .base import BaseModel
from .user import User, ApiToken
from .customer import Customer
from .invoice import Invoice
from .invoice_item import InvoiceItem, calculate_subtotal, calculate_total
from .invoice_sequence import InvoiceSequence

__all__ = [
    "BaseModel",
    "User",
    "ApiToken",
    "Customer",
    "Invoice",
    "InvoiceItem",
    "calculate_subtotal",
    "calculate_total",
    "InvoiceSequence",
]

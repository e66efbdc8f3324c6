from .invoice_repository import InvoiceRepository
from .invoice_item_repository import InvoiceItemRepository
from .customer_repository import CustomerRepository
from .user_repository import UserRepository

__all__ = [
    "InvoiceRepository",
    "InvoiceItemRepository",
    "CustomerRepository",
    "UserRepository",
]

from .invoice_repository import SqlAlchemyInvoiceRepository
from .invoice_item_repository import SqlAlchemyInvoiceItemRepository
from .customer_repository import SqlAlchemyCustomerRepository
from .user_repository import SqlAlchemyUserRepository

__all__ = [
    "SqlAlchemyInvoiceRepository",
    "SqlAlchemyInvoiceItemRepository",
    "SqlAlchemyCustomerRepository",
    "SqlAlchemyUserRepository",
]

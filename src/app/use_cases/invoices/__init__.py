"""Invoice aggregate use cases"""
from .create_invoice import CreateInvoice
from .update_invoice import UpdateInvoice
from .delete_invoice import DeleteInvoice
from .get_invoice import GetInvoice
from .list_invoices import ListInvoices
from .authorize_invoice import AuthorizeInvoiceAccess
from .policy import InvoiceAction, InvoicePolicy
from .dtos import (
    InvoiceItemInputDTO,
    CreateInvoiceCommandDTO,
    UpdateInvoiceCommandDTO,
    InvoiceItemDTO,
    InvoiceResponseDTO,
    InvoicePageDTO,
    MessageResponseDTO,
)

__all__ = [
    "CreateInvoice",
    "UpdateInvoice",
    "DeleteInvoice",
    "GetInvoice",
    "ListInvoices",
    "AuthorizeInvoiceAccess",
    "InvoiceAction",
    "InvoicePolicy",
    "InvoiceItemInputDTO",
    "CreateInvoiceCommandDTO",
    "UpdateInvoiceCommandDTO",
    "InvoiceItemDTO",
    "InvoiceResponseDTO",
    "InvoicePageDTO",
    "MessageResponseDTO",
]

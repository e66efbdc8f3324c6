from .unit_of_work import UnitOfWork
from .invoice_number_generator import (
    InvoiceNumberGenerator,
    InvoiceNumberingError,
    format_invoice_number,
)
from .credential_service import CredentialService

__all__ = [
    "UnitOfWork",
    "InvoiceNumberGenerator",
    "InvoiceNumberingError",
    "format_invoice_number",
    "CredentialService",
]

from .unit_of_work import SqlAlchemyUnitOfWork
from .invoice_number_generator import SqlAlchemyInvoiceNumberGenerator
from .credential_service import Pbkdf2CredentialService

__all__ = [
    "SqlAlchemyUnitOfWork",
    "SqlAlchemyInvoiceNumberGenerator",
    "Pbkdf2CredentialService",
]

"""DeleteInvoice Use Case

Removes an invoice and all of its items in one transaction.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.invoice import Invoice
from .dtos import MessageResponseDTO

logger = logging.getLogger(__name__)


class DeleteInvoice:
    """
    Use Case: Delete invoice (irreversible)

    Items are deleted explicitly before the invoice row so the cascade does
    not depend on the storage engine enforcing foreign keys.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        item_repo: InvoiceItemRepository,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.item_repo = item_repo

    async def execute(self, invoice: Invoice) -> Result[MessageResponseDTO]:
        invoice_id = invoice.id
        invoice_number = invoice.invoice_number

        try:
            await self.item_repo.delete_by_invoice_id(invoice_id)
            await self.invoice_repo.delete(invoice)
            await self.uow.commit()

            logger.info(f"Deleted invoice {invoice_number}")
            return Return.ok(MessageResponseDTO(message="Invoice deleted"))

        except Exception as e:
            await self.uow.rollback()
            logger.exception(f"Deletion of invoice {invoice_id} rolled back")
            return Return.err(
                Error(
                    code="TRANSACTION_FAILED",
                    message="Failed to delete invoice",
                    reason=str(e),
                )
            )

"""UpdateInvoice Use Case

Replaces an invoice's customer, due date and complete item set, then
recomputes the total, in a single transaction.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.invoice import Invoice
from src.domain.invoice_item import InvoiceItem
from .assembler import recompute_total, to_invoice_response
from .dtos import UpdateInvoiceCommandDTO, InvoiceResponseDTO
from .validation import validate_invoice_input

logger = logging.getLogger(__name__)


class UpdateInvoice:
    """
    Use Case: Update invoice with full item replacement

    Business Rules:
    1. Same input rules as CreateInvoice
    2. All existing items are deleted and the new set inserted (no diffing)
    3. invoice_number never changes
    4. Any failure rolls back to the prior state

    The caller passes an invoice already cleared by AuthorizeInvoiceAccess.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        item_repo: InvoiceItemRepository,
        customer_repo: CustomerRepository,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.item_repo = item_repo
        self.customer_repo = customer_repo

    async def execute(
        self, invoice: Invoice, command: UpdateInvoiceCommandDTO
    ) -> Result[InvoiceResponseDTO]:
        """
        Execute invoice update

        Args:
            invoice: Invoice to update
            command: UpdateInvoiceCommandDTO with customer, due date and new items

        Returns:
            Result[InvoiceResponseDTO]: Success with hydrated invoice or error
        """
        problems = validate_invoice_input(command.customer_id, command.due_date, command.items)
        if problems:
            return Return.err(
                Error(
                    code="VALIDATION_ERROR",
                    message="The given data was invalid",
                    details=problems,
                )
            )

        invoice_id = invoice.id

        try:
            if not await self.customer_repo.exists(command.customer_id):
                return Return.err(
                    Error(
                        code="CUSTOMER_NOT_FOUND",
                        message=f"Customer with ID {command.customer_id} not found",
                        reason="Customer does not exist",
                    )
                )

            invoice.customer_id = command.customer_id
            invoice.due_date = command.due_date

            removed = await self.item_repo.delete_by_invoice_id(invoice_id)

            items = []
            for item in command.items:
                created_item = await self.item_repo.create(
                    InvoiceItem.for_invoice(invoice_id, item.item_name, item.qty, item.price)
                )
                items.append(created_item)

            invoice = await recompute_total(invoice, self.invoice_repo, self.item_repo)

            customer = await self.customer_repo.get_by_id(command.customer_id)

            await self.uow.commit()

            logger.info(
                f"Updated invoice {invoice.invoice_number}: replaced {removed} items "
                f"with {len(items)}, total={invoice.total}"
            )

            return Return.ok(to_invoice_response(invoice, items, customer))

        except Exception as e:
            await self.uow.rollback()
            logger.exception(f"Update of invoice {invoice_id} rolled back")
            return Return.err(
                Error(
                    code="TRANSACTION_FAILED",
                    message="Failed to update invoice",
                    reason=str(e),
                )
            )

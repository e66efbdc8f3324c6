"""CreateInvoice Use Case

Creates an invoice together with its line items and derived total in a
single transaction.
"""

import logging
from decimal import Decimal
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.invoice_number_generator import (
    InvoiceNumberGenerator,
    InvoiceNumberingError,
)
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.invoice import Invoice
from src.domain.invoice_item import InvoiceItem
from .assembler import recompute_total, to_invoice_response
from .dtos import CreateInvoiceCommandDTO, InvoiceResponseDTO
from .validation import validate_invoice_input

logger = logging.getLogger(__name__)


class CreateInvoice:
    """
    Use Case: Create invoice with items

    Business Rules:
    1. At least one item; each item has a name, qty >= 1 and price >= 0
    2. Customer must exist
    3. Invoice number is assigned once, here (INV-YYYYMMDD-NNNN)
    4. subtotal = qty * price for every item; total = sum of subtotals
    5. All writes happen in one transaction; any failure leaves no rows

    Flow:
    1. Validate input (no writes yet)
    2. Check customer exists
    3. Assign invoice number
    4. Insert invoice
    5. Insert items with computed subtotals
    6. Recompute total from persisted items
    7. Commit transaction
    8. Return hydrated invoice
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        item_repo: InvoiceItemRepository,
        customer_repo: CustomerRepository,
        number_generator: InvoiceNumberGenerator,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.item_repo = item_repo
        self.customer_repo = customer_repo
        self.number_generator = number_generator

    async def execute(self, command: CreateInvoiceCommandDTO) -> Result[InvoiceResponseDTO]:
        """
        Execute invoice creation

        Args:
            command: CreateInvoiceCommandDTO with owner, customer, due date and items

        Returns:
            Result[InvoiceResponseDTO]: Success with hydrated invoice or error
        """
        # Step 1: Validate input before any write
        problems = validate_invoice_input(command.customer_id, command.due_date, command.items)
        if problems:
            return Return.err(
                Error(
                    code="VALIDATION_ERROR",
                    message="The given data was invalid",
                    details=problems,
                )
            )

        try:
            # Step 2: Customer must exist
            if not await self.customer_repo.exists(command.customer_id):
                return Return.err(
                    Error(
                        code="CUSTOMER_NOT_FOUND",
                        message=f"Customer with ID {command.customer_id} not found",
                        reason="Customer does not exist",
                    )
                )

            # Step 3: Assign invoice number
            invoice_number = await self.number_generator.next_number()

            # Step 4: Insert invoice, total is derived below
            invoice = await self.invoice_repo.create(
                Invoice(
                    user_id=command.user_id,
                    customer_id=command.customer_id,
                    invoice_number=invoice_number,
                    due_date=command.due_date,
                    total=Decimal("0.00"),
                )
            )

            # Step 5: Insert items
            items = []
            for item in command.items:
                created_item = await self.item_repo.create(
                    InvoiceItem.for_invoice(invoice.id, item.item_name, item.qty, item.price)
                )
                items.append(created_item)

            # Step 6: Recompute total
            invoice = await recompute_total(invoice, self.invoice_repo, self.item_repo)

            customer = await self.customer_repo.get_by_id(command.customer_id)

            # Step 7: Commit transaction
            await self.uow.commit()

            logger.info(
                f"Created invoice {invoice.invoice_number} for user {invoice.user_id} "
                f"with {len(items)} items, total={invoice.total}"
            )

            # Step 8: Build response
            return Return.ok(to_invoice_response(invoice, items, customer))

        except InvoiceNumberingError as e:
            await self.uow.rollback()
            logger.error(f"Invoice numbering unavailable: {e}")
            return Return.err(
                Error(
                    code="INVOICE_NUMBERING_UNAVAILABLE",
                    message="Invoice number could not be generated",
                    reason=str(e),
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.exception("Invoice creation rolled back")
            return Return.err(
                Error(
                    code="TRANSACTION_FAILED",
                    message="Failed to create invoice",
                    reason=str(e),
                )
            )

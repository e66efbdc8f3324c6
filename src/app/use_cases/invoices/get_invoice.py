"""GetInvoice Use Case

Hydrates an invoice with its items and customer.
"""

from libs.result import Result, Return, Error
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.domain.invoice import Invoice
from .assembler import load_invoice_response
from .dtos import InvoiceResponseDTO


class GetInvoice:
    """Use Case: Show an invoice already cleared by AuthorizeInvoiceAccess"""

    def __init__(
        self,
        item_repo: InvoiceItemRepository,
        customer_repo: CustomerRepository,
    ):
        self.item_repo = item_repo
        self.customer_repo = customer_repo

    async def execute(self, invoice: Invoice) -> Result[InvoiceResponseDTO]:
        try:
            response = await load_invoice_response(invoice, self.item_repo, self.customer_repo)
            return Return.ok(response)

        except Exception as e:
            return Return.err(
                Error(
                    code="GET_INVOICE_FAILED",
                    message="Failed to load invoice",
                    reason=str(e),
                )
            )

"""ListInvoices Use Case

Pages through the invoices owned by the acting user.
"""

import math
from libs.result import Result, Return, Error
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from .assembler import to_invoice_response
from .dtos import InvoicePageDTO


class ListInvoices:
    """
    Use Case: List owner's invoices with items and customer

    Business Rules:
    1. Only invoices owned by user_id are returned
    2. Pages are 1-based; a page past the end is empty
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        item_repo: InvoiceItemRepository,
        customer_repo: CustomerRepository,
    ):
        self.invoice_repo = invoice_repo
        self.item_repo = item_repo
        self.customer_repo = customer_repo

    async def execute(self, user_id: int, page: int = 1, per_page: int = 10) -> Result[InvoicePageDTO]:
        """
        Execute invoice listing

        Args:
            user_id: Acting user
            page: 1-based page number
            per_page: Page size

        Returns:
            Result[InvoicePageDTO]: page of hydrated invoices or error
        """
        if page < 1 or per_page < 1:
            return Return.err(
                Error(
                    code="VALIDATION_ERROR",
                    message="page and per_page must be positive",
                    details=[{"loc": ["page"], "msg": "must be >= 1"}],
                )
            )

        try:
            total = await self.invoice_repo.count_by_user_id(user_id)
            invoices = await self.invoice_repo.get_by_user_id(
                user_id, limit=per_page, offset=(page - 1) * per_page
            )

            items_by_invoice = await self.item_repo.get_by_invoice_ids([i.id for i in invoices])
            customers = await self.customer_repo.get_by_ids([i.customer_id for i in invoices])

            data = [
                to_invoice_response(
                    invoice,
                    items_by_invoice.get(invoice.id, []),
                    customers.get(invoice.customer_id),
                )
                for invoice in invoices
            ]

            return Return.ok(
                InvoicePageDTO(
                    data=data,
                    page=page,
                    per_page=per_page,
                    total=total,
                    last_page=max(1, math.ceil(total / per_page)),
                )
            )

        except Exception as e:
            return Return.err(
                Error(
                    code="LIST_INVOICES_FAILED",
                    message="Failed to list invoices",
                    reason=str(e),
                )
            )

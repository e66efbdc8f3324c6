"""AuthorizeInvoiceAccess Use Case

Loads an invoice and checks the acting user may perform an action on it.
"""

from typing import Optional
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.invoice import Invoice
from .policy import InvoiceAction, InvoicePolicy


class AuthorizeInvoiceAccess:
    """
    Use Case: Ownership gate for view/update/delete

    Business Rules:
    1. Missing invoice -> INVOICE_NOT_FOUND
    2. Existing invoice owned by someone else -> INVOICE_ACCESS_DENIED
       (existence is confirmed, access is refused)
    """

    def __init__(self, invoice_repo: InvoiceRepository, policy: Optional[InvoicePolicy] = None):
        self.invoice_repo = invoice_repo
        self.policy = policy or InvoicePolicy()

    async def execute(self, user_id: int, invoice_id: int, action: InvoiceAction) -> Result[Invoice]:
        invoice = await self.invoice_repo.get_by_id(invoice_id)

        if not invoice:
            return Return.err(
                Error(
                    code="INVOICE_NOT_FOUND",
                    message=f"Invoice with ID {invoice_id} not found",
                    reason="Invoice does not exist",
                )
            )

        if not self.policy.allows(user_id, action, invoice):
            return Return.err(
                Error(
                    code="INVOICE_ACCESS_DENIED",
                    message="This action is unauthorized",
                    reason=f"User {user_id} may not {action.value} invoice {invoice_id}",
                )
            )

        return Return.ok(invoice)

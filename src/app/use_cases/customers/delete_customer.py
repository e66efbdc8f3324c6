"""DeleteCustomer Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.use_cases.invoices.dtos import MessageResponseDTO

logger = logging.getLogger(__name__)


class DeleteCustomer:
    """
    Use Case: Delete customer

    Business Rules:
    1. Customer must exist
    2. A customer still referenced by invoices is kept (CUSTOMER_IN_USE)
    """

    def __init__(
        self,
        uow: UnitOfWork,
        customer_repo: CustomerRepository,
        invoice_repo: InvoiceRepository,
    ):
        self.uow = uow
        self.customer_repo = customer_repo
        self.invoice_repo = invoice_repo

    async def execute(self, customer_id: int) -> Result[MessageResponseDTO]:
        try:
            customer = await self.customer_repo.get_by_id(customer_id)
            if not customer:
                return Return.err(
                    Error(
                        code="CUSTOMER_NOT_FOUND",
                        message=f"Customer with ID {customer_id} not found",
                        reason="Customer does not exist",
                    )
                )

            if await self.invoice_repo.exists_for_customer(customer_id):
                return Return.err(
                    Error(
                        code="CUSTOMER_IN_USE",
                        message="Customer is referenced by invoices",
                        reason=f"Invoices exist for customer {customer_id}",
                    )
                )

            await self.customer_repo.delete(customer)
            await self.uow.commit()

            logger.info(f"Deleted customer {customer_id}")
            return Return.ok(MessageResponseDTO(message="Customer deleted successfully"))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="DELETE_CUSTOMER_FAILED",
                    message="Failed to delete customer",
                    reason=str(e),
                )
            )

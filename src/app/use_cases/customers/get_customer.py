"""GetCustomer Use Case"""

from libs.result import Result, Return, Error
from src.app.repositories.customer_repository import CustomerRepository
from .dtos import CustomerResponseDTO


class GetCustomer:

    def __init__(self, customer_repo: CustomerRepository):
        self.customer_repo = customer_repo

    async def execute(self, customer_id: int) -> Result[CustomerResponseDTO]:
        customer = await self.customer_repo.get_by_id(customer_id)

        if not customer:
            return Return.err(
                Error(
                    code="CUSTOMER_NOT_FOUND",
                    message=f"Customer with ID {customer_id} not found",
                    reason="Customer does not exist",
                )
            )

        return Return.ok(CustomerResponseDTO.model_validate(customer))

"""UpdateCustomer Use Case"""

from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.customer_repository import CustomerRepository
from .dtos import CustomerCommandDTO, CustomerResponseDTO


class UpdateCustomer:
    """
    Use Case: Replace a customer's name, email and phone

    Business Rules:
    1. Customer must exist
    2. email stays unique; keeping the customer's own email is allowed
    """

    def __init__(self, uow: UnitOfWork, customer_repo: CustomerRepository):
        self.uow = uow
        self.customer_repo = customer_repo

    async def execute(self, customer_id: int, command: CustomerCommandDTO) -> Result[CustomerResponseDTO]:
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

            if command.email:
                holder = await self.customer_repo.get_by_email(command.email)
                if holder and holder.id != customer_id:
                    return Return.err(
                        Error(
                            code="CUSTOMER_EMAIL_TAKEN",
                            message="The email has already been taken",
                            details=[{"loc": ["email"], "msg": "The email has already been taken"}],
                        )
                    )

            customer.name = command.name
            customer.email = command.email
            customer.phone = command.phone
            customer = await self.customer_repo.update(customer)
            await self.uow.commit()

            return Return.ok(CustomerResponseDTO.model_validate(customer))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="UPDATE_CUSTOMER_FAILED",
                    message="Failed to update customer",
                    reason=str(e),
                )
            )

"""CreateCustomer Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.customer_repository import CustomerRepository
from src.domain.customer import Customer
from .dtos import CustomerCommandDTO, CustomerResponseDTO

logger = logging.getLogger(__name__)


class CreateCustomer:
    """
    Use Case: Create customer

    Business Rules:
    1. email, when given, is unique across customers
    """

    def __init__(self, uow: UnitOfWork, customer_repo: CustomerRepository):
        self.uow = uow
        self.customer_repo = customer_repo

    async def execute(self, command: CustomerCommandDTO) -> Result[CustomerResponseDTO]:
        try:
            if command.email and await self.customer_repo.get_by_email(command.email):
                return Return.err(
                    Error(
                        code="CUSTOMER_EMAIL_TAKEN",
                        message="The email has already been taken",
                        details=[{"loc": ["email"], "msg": "The email has already been taken"}],
                    )
                )

            customer = await self.customer_repo.create(
                Customer(name=command.name, email=command.email, phone=command.phone)
            )
            await self.uow.commit()

            logger.info(f"Created customer {customer.id}")
            return Return.ok(CustomerResponseDTO.model_validate(customer))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="CREATE_CUSTOMER_FAILED",
                    message="Failed to create customer",
                    reason=str(e),
                )
            )

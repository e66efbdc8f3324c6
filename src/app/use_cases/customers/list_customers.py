"""ListCustomers Use Case"""

import math
from libs.result import Result, Return, Error
from src.app.repositories.customer_repository import CustomerRepository
from .dtos import CustomerPageDTO, CustomerResponseDTO


class ListCustomers:

    def __init__(self, customer_repo: CustomerRepository):
        self.customer_repo = customer_repo

    async def execute(self, page: int = 1, per_page: int = 10) -> Result[CustomerPageDTO]:
        if page < 1 or per_page < 1:
            return Return.err(
                Error(
                    code="VALIDATION_ERROR",
                    message="page and per_page must be positive",
                    details=[{"loc": ["page"], "msg": "must be >= 1"}],
                )
            )

        try:
            total = await self.customer_repo.count()
            customers = await self.customer_repo.list(limit=per_page, offset=(page - 1) * per_page)

            return Return.ok(
                CustomerPageDTO(
                    data=[CustomerResponseDTO.model_validate(c) for c in customers],
                    page=page,
                    per_page=per_page,
                    total=total,
                    last_page=max(1, math.ceil(total / per_page)),
                )
            )

        except Exception as e:
            return Return.err(
                Error(
                    code="LIST_CUSTOMERS_FAILED",
                    message="Failed to list customers",
                    reason=str(e),
                )
            )

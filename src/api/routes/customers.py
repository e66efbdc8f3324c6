"""Customer API Routes"""

from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.api.error import raise_for_error
from src.api.schemas.customer_request import CustomerRequestSchema
from src.app.use_cases.customers import (
    CreateCustomer,
    DeleteCustomer,
    GetCustomer,
    ListCustomers,
    UpdateCustomer,
    CustomerCommandDTO,
    CustomerPageDTO,
    CustomerResponseDTO,
)
from src.app.use_cases.invoices.dtos import MessageResponseDTO
from src.adapter.repositories.customer_repository import SqlAlchemyCustomerRepository
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_current_user, get_session

router = APIRouter(
    prefix="/customers",
    tags=["Customers"],
    dependencies=[Depends(get_current_user)],
)


def _to_command(request: CustomerRequestSchema) -> CustomerCommandDTO:
    return CustomerCommandDTO(
        name=request.name,
        email=str(request.email) if request.email else None,
        phone=request.phone,
    )


@router.get("", response_model=CustomerPageDTO)
async def list_customers(
    page: int = Query(1, ge=1),
    session: AsyncSession = Depends(get_session),
):
    """List customers, paginated."""
    use_case = ListCustomers(SqlAlchemyCustomerRepository(session))
    result = await use_case.execute(page=page, per_page=ApplicationConfig.PAGE_SIZE)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("", response_model=CustomerResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_customer(
    request: CustomerRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    """
    Create a customer.

    **Returns:**
    - 201: Customer created
    - 422: Invalid request or email already taken
    """
    use_case = CreateCustomer(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyCustomerRepository(session),
    )
    result = await use_case.execute(_to_command(request))

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{customer_id}", response_model=CustomerResponseDTO)
async def show_customer(
    customer_id: int,
    session: AsyncSession = Depends(get_session),
):
    use_case = GetCustomer(SqlAlchemyCustomerRepository(session))
    result = await use_case.execute(customer_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("/{customer_id}", response_model=CustomerResponseDTO)
async def update_customer(
    customer_id: int,
    request: CustomerRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    use_case = UpdateCustomer(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyCustomerRepository(session),
    )
    result = await use_case.execute(customer_id, _to_command(request))

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete("/{customer_id}", response_model=MessageResponseDTO)
async def delete_customer(
    customer_id: int,
    session: AsyncSession = Depends(get_session),
):
    """
    Delete a customer.

    **Returns:**
    - 200: Customer deleted
    - 404: Customer not found
    - 409: Customer still referenced by invoices
    """
    use_case = DeleteCustomer(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyCustomerRepository(session),
        SqlAlchemyInvoiceRepository(session),
    )
    result = await use_case.execute(customer_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value

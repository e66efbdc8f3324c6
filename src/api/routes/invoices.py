"""Invoice API Routes

FastAPI routes for the invoice aggregate: list, create, show, update, delete.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.api.error import raise_for_error
from src.api.schemas.invoice_request import InvoiceRequestSchema
from src.app.use_cases.invoices import (
    AuthorizeInvoiceAccess,
    CreateInvoice,
    DeleteInvoice,
    GetInvoice,
    ListInvoices,
    UpdateInvoice,
    InvoiceAction,
    InvoiceItemInputDTO,
    CreateInvoiceCommandDTO,
    UpdateInvoiceCommandDTO,
    InvoicePageDTO,
    InvoiceResponseDTO,
    MessageResponseDTO,
)
from src.adapter.repositories.customer_repository import SqlAlchemyCustomerRepository
from src.adapter.repositories.invoice_item_repository import SqlAlchemyInvoiceItemRepository
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_current_user, get_invoice_number_generator, get_session
from src.domain.invoice import Invoice
from src.domain.user import User

router = APIRouter(prefix="/invoices", tags=["Invoices"])

ERROR_EXAMPLES = {
    403: {
        "description": "Invoice belongs to another user",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "INVOICE_ACCESS_DENIED",
                        "message": "This action is unauthorized"
                    }
                }
            }
        }
    },
    404: {
        "description": "Invoice or customer not found",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "INVOICE_NOT_FOUND",
                        "message": "Invoice with ID 123 not found"
                    }
                }
            }
        }
    },
    422: {
        "description": "Validation error",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "VALIDATION_ERROR",
                        "message": "The given data was invalid",
                        "details": [{"loc": ["body", "items"], "msg": "List should have at least 1 item"}]
                    }
                }
            }
        }
    },
}


def authorized_invoice(action: InvoiceAction):
    """
    Dependency factory: load the invoice and apply the ownership gate

    Runs before request-body validation, so a non-owner is refused with 403
    whatever the body contains.
    """

    async def dependency(
        invoice_id: int,
        current_user: User = Depends(get_current_user),
        session: AsyncSession = Depends(get_session),
    ) -> Invoice:
        use_case = AuthorizeInvoiceAccess(SqlAlchemyInvoiceRepository(session))
        result = await use_case.execute(current_user.id, invoice_id, action)

        if result.is_err():
            raise_for_error(result.error)

        return result.value

    return dependency


def _to_items(request: InvoiceRequestSchema):
    return [
        InvoiceItemInputDTO(item_name=item.item_name, qty=item.qty, price=item.price)
        for item in request.items
    ]


@router.get(
    "",
    response_model=InvoicePageDTO,
    status_code=status.HTTP_200_OK,
)
async def list_invoices(
    page: int = Query(1, ge=1, description="1-based page number"),
    current_user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    """
    List the acting user's invoices with items and customer, paginated.

    **Query parameters:**
    - `page` (optional): page number, default 1
    """
    use_case = ListInvoices(
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceItemRepository(session),
        SqlAlchemyCustomerRepository(session),
    )
    result = await use_case.execute(
        current_user.id, page=page, per_page=ApplicationConfig.PAGE_SIZE
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={404: ERROR_EXAMPLES[404], 422: ERROR_EXAMPLES[422]},
)
async def create_invoice(
    request: InvoiceRequestSchema,
    current_user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    """
    Create an invoice with its items.

    The invoice number, item subtotals and the total are computed by the
    server; the whole invoice is written in one transaction.

    Prices are money amounts with at most 2 decimal places: a price such as
    `0.125` is rejected with 422, never rounded. `qty` is at most 2147483647,
    and every subtotal and the total must fit 16 integer digits.

    **Example request:**
    ```json
    {
      "customer_id": 1,
      "due_date": "2024-02-29",
      "items": [
        {"item_name": "Service 1", "qty": 2, "price": 50000},
        {"item_name": "Product 1", "qty": 1, "price": 75000}
      ]
    }
    ```

    **Returns:**
    - 201: Invoice created (total 175000.00 for the example)
    - 404: Customer not found
    - 422: Invalid request
    """
    command = CreateInvoiceCommandDTO(
        user_id=current_user.id,
        customer_id=request.customer_id,
        due_date=request.due_date,
        items=_to_items(request),
    )

    use_case = CreateInvoice(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceItemRepository(session),
        SqlAlchemyCustomerRepository(session),
        get_invoice_number_generator(session),
    )
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{invoice_id}",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={403: ERROR_EXAMPLES[403], 404: ERROR_EXAMPLES[404]},
)
async def show_invoice(
    invoice: Invoice = Depends(authorized_invoice(InvoiceAction.VIEW)),
    session: AsyncSession = Depends(get_session),
):
    """
    Show one invoice with items and customer.

    **Returns:**
    - 200: Invoice
    - 403: Invoice belongs to another user
    - 404: Invoice not found
    """
    use_case = GetInvoice(
        SqlAlchemyInvoiceItemRepository(session),
        SqlAlchemyCustomerRepository(session),
    )
    result = await use_case.execute(invoice)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put(
    "/{invoice_id}",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_200_OK,
    responses=ERROR_EXAMPLES,
)
async def update_invoice(
    request: InvoiceRequestSchema,
    invoice: Invoice = Depends(authorized_invoice(InvoiceAction.UPDATE)),
    session: AsyncSession = Depends(get_session),
):
    """
    Update an invoice, replacing its whole item list.

    Existing items are deleted and the supplied ones inserted; the total is
    recomputed. The invoice number never changes.
    Item limits are the same as for creation.

    **Returns:**
    - 200: Updated invoice
    - 403: Invoice belongs to another user
    - 404: Invoice or customer not found
    - 422: Invalid request
    """
    command = UpdateInvoiceCommandDTO(
        customer_id=request.customer_id,
        due_date=request.due_date,
        items=_to_items(request),
    )

    use_case = UpdateInvoice(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceItemRepository(session),
        SqlAlchemyCustomerRepository(session),
    )
    result = await use_case.execute(invoice, command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/{invoice_id}",
    response_model=MessageResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={403: ERROR_EXAMPLES[403], 404: ERROR_EXAMPLES[404]},
)
async def delete_invoice(
    invoice: Invoice = Depends(authorized_invoice(InvoiceAction.DELETE)),
    session: AsyncSession = Depends(get_session),
):
    """
    Delete an invoice and its items.

    **Returns:**
    - 200: `{"message": "Invoice deleted"}`
    - 403: Invoice belongs to another user
    - 404: Invoice not found
    """
    use_case = DeleteInvoice(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceItemRepository(session),
    )
    result = await use_case.execute(invoice)

    if result.is_err():
        raise_for_error(result.error)

    return result.value

"""Invoice response assembly and total recomputation"""

from typing import List, Optional
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.use_cases.customers.dtos import CustomerResponseDTO
from src.domain.customer import Customer
from src.domain.invoice import Invoice
from src.domain.invoice_item import InvoiceItem, calculate_total
from .dtos import InvoiceItemDTO, InvoiceResponseDTO


async def recompute_total(
    invoice: Invoice,
    invoice_repo: InvoiceRepository,
    item_repo: InvoiceItemRepository,
) -> Invoice:
    """
    Re-sum the persisted item subtotals into invoice.total

    Items are read back from storage so the total reflects exactly the rows
    written in this transaction.

    Must run inside the same transaction as the item writes.
    """
    items = await item_repo.get_by_invoice_id(invoice.id)
    invoice.total = calculate_total(item.subtotal for item in items)
    return await invoice_repo.update(invoice)


def to_invoice_response(
    invoice: Invoice, items: List[InvoiceItem], customer: Optional[Customer]
) -> InvoiceResponseDTO:
    return InvoiceResponseDTO(
        id=invoice.id,
        user_id=invoice.user_id,
        customer_id=invoice.customer_id,
        invoice_number=invoice.invoice_number,
        due_date=invoice.due_date,
        total=invoice.total,
        created_at=invoice.created_at,
        updated_at=invoice.updated_at,
        items=[
            InvoiceItemDTO(
                id=item.id,
                invoice_id=item.invoice_id,
                item_name=item.item_name,
                qty=item.qty,
                price=item.price,
                subtotal=item.subtotal,
            )
            for item in items
        ],
        customer=CustomerResponseDTO.model_validate(customer) if customer else None,
    )


async def load_invoice_response(
    invoice: Invoice,
    item_repo: InvoiceItemRepository,
    customer_repo: CustomerRepository,
) -> InvoiceResponseDTO:
    """Load items and customer from storage and build the response"""
    items = await item_repo.get_by_invoice_id(invoice.id)
    customer = await customer_repo.get_by_id(invoice.customer_id)
    return to_invoice_response(invoice, items, customer)

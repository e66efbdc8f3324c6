"""Data Transfer Objects for Invoice Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field
from src.app.use_cases.customers.dtos import CustomerResponseDTO


class InvoiceItemInputDTO(BaseModel):
    """
    One requested line item

    Range checks (non-empty name, qty >= 1, price >= 0) are applied by the
    invoice use cases before anything is written.
    """

    item_name: str = Field(..., description="Line item name")

    qty: int = Field(..., description="Quantity (must be >= 1)")

    price: Decimal = Field(..., description="Unit price (must be >= 0)")


class CreateInvoiceCommandDTO(BaseModel):
    """
    Command DTO for creating an invoice with its items

    Used as input to CreateInvoice use case.
    """

    user_id: int = Field(..., description="Authenticated owner")

    customer_id: int = Field(..., description="Billed customer")

    due_date: date = Field(..., description="Payment due date")

    items: List[InvoiceItemInputDTO] = Field(
        default_factory=list,
        description="Line items (at least one)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "user_id": 1,
                "customer_id": 1,
                "due_date": "2024-02-29",
                "items": [
                    {"item_name": "Service 1", "qty": 2, "price": "50000"},
                    {"item_name": "Product 1", "qty": 1, "price": "75000"}
                ]
            }
        }


class UpdateInvoiceCommandDTO(BaseModel):
    """
    Command DTO for replacing an invoice's customer, due date and items

    Used as input to UpdateInvoice use case. Items are replaced as a whole.
    """

    customer_id: int = Field(..., description="Billed customer")

    due_date: date = Field(..., description="Payment due date")

    items: List[InvoiceItemInputDTO] = Field(
        default_factory=list,
        description="New line items (at least one)"
    )


class InvoiceItemDTO(BaseModel):
    id: int
    invoice_id: int
    item_name: str
    qty: int
    price: Decimal
    subtotal: Decimal


class InvoiceResponseDTO(BaseModel):
    """
    Response DTO for a fully hydrated invoice

    Returned by CreateInvoice, UpdateInvoice, GetInvoice and ListInvoices.
    """

    id: int = Field(..., description="Invoice ID")

    user_id: int = Field(..., description="Owner ID")

    customer_id: int = Field(..., description="Customer ID")

    invoice_number: str = Field(..., description="Server-assigned invoice number")

    due_date: date

    total: Decimal = Field(..., description="Sum of item subtotals")

    created_at: datetime

    updated_at: datetime

    items: List[InvoiceItemDTO] = Field(default_factory=list)

    customer: Optional[CustomerResponseDTO] = None

    class Config:
        json_schema_extra = {
            "example": {
                "id": 1,
                "user_id": 1,
                "customer_id": 1,
                "invoice_number": "INV-20240131-0001",
                "due_date": "2024-02-29",
                "total": "175000.00",
                "created_at": "2024-01-31T00:00:00Z",
                "updated_at": "2024-01-31T00:00:00Z",
                "items": [
                    {
                        "id": 1,
                        "invoice_id": 1,
                        "item_name": "Service 1",
                        "qty": 2,
                        "price": "50000.00",
                        "subtotal": "100000.00"
                    }
                ],
                "customer": None
            }
        }


class InvoicePageDTO(BaseModel):
    """One page of an owner's invoices"""

    data: List[InvoiceResponseDTO]
    page: int = Field(..., description="Current page (1-based)")
    per_page: int
    total: int = Field(..., description="Total number of invoices owned by the user")
    last_page: int


class MessageResponseDTO(BaseModel):
    message: str

"""Request schemas for Invoice API

Pydantic models for validating incoming HTTP requests.
Server-computed fields (invoice_number, total, subtotal) are not part of
the schemas and are ignored when supplied.

Prices are money amounts with at most 2 decimal places; a price with more
places (e.g. 0.125) is rejected with 422 instead of being rounded.
"""

from datetime import date
from decimal import Decimal
from typing import List
from pydantic import BaseModel, Field, field_validator
from src.domain.invoice_item import MAX_ITEM_QTY


class InvoiceItemRequestSchema(BaseModel):
    """One line item of a create/update request"""

    item_name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Line item name (required, non-empty)"
    )

    qty: int = Field(
        ...,
        ge=1,
        le=MAX_ITEM_QTY,
        description=f"Quantity (integer, 1 to {MAX_ITEM_QTY})"
    )

    price: Decimal = Field(
        ...,
        ge=0,
        max_digits=18,
        decimal_places=2,
        description="Unit price (>= 0, at most 2 decimal places; 0.125 is rejected, not rounded)"
    )

    @field_validator('item_name')
    @classmethod
    def validate_item_name(cls, v):
        """Reject whitespace-only names"""
        if not v.strip():
            raise ValueError("item_name must not be blank")
        return v


class InvoiceRequestSchema(BaseModel):
    """
    Request schema for creating or updating an invoice

    Used for POST /invoices and PUT /invoices/{invoice_id}.
    Update replaces the complete item list.
    """

    customer_id: int = Field(
        ...,
        ge=1,
        description="Existing customer ID"
    )

    due_date: date = Field(
        ...,
        description="Due date (ISO-8601)"
    )

    items: List[InvoiceItemRequestSchema] = Field(
        ...,
        min_length=1,
        description="Line items (at least one)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "customer_id": 1,
                "due_date": "2024-02-29",
                "items": [
                    {"item_name": "Service 1", "qty": 2, "price": 50000},
                    {"item_name": "Product 1", "qty": 1, "price": 75000}
                ]
            }
        }

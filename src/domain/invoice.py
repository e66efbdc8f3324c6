"""Invoice Domain Entity

Invoice aggregate root. Owns its line items.
"""

from datetime import datetime, date
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, Numeric, String, Date
from src.domain.base import BaseModel, ID_TYPE, TIMESTAMP_TYPE, utc_now


class Invoice(BaseModel, table=True):
    """
    Invoice - Bill issued by a user to a customer

    Domain Rules:
    - invoice_number is unique, assigned once at creation and never changed
    - total is the sum of all invoice_items.subtotal, never set by callers
    - Only the owning user may view, update or delete the invoice
    - Deleting an invoice deletes its items
    """

    __tablename__ = "invoices"
    __table_args__ = (
        Index('ix_invoices_user_id', 'user_id'),
        Index('ix_invoices_customer_id', 'customer_id'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(ID_TYPE, primary_key=True, autoincrement=True),
        description="Unique invoice identifier (auto-increment)"
    )

    user_id: int = Field(
        sa_column=Column(ID_TYPE, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        description="Owning user"
    )

    customer_id: int = Field(
        sa_column=Column(ID_TYPE, ForeignKey("customers.id"), nullable=False),
        description="Billed customer"
    )

    invoice_number: str = Field(
        sa_column=Column(String(50), nullable=False, unique=True),
        description="Unique invoice number (e.g., INV-20240131-0001)"
    )

    due_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Payment due date"
    )

    total: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="Sum of item subtotals (precision: 18,2)"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_type=TIMESTAMP_TYPE,
        description="Invoice creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_type=TIMESTAMP_TYPE,
        description="Last update timestamp"
    )

    def is_owned_by(self, user_id: int) -> bool:
        return self.user_id == user_id

"""Invoice Item Domain Entity

Tracks individual line items within an invoice and the value
arithmetic for them.
"""

from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional, Union
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, Integer, Numeric, String
from src.domain.base import BaseModel, ID_TYPE, TIMESTAMP_TYPE, utc_now

MONEY_QUANT = Decimal("0.01")

# Numeric(18, 2) columns hold 16 integer digits
MONEY_INTEGER_DIGITS = 16
MONEY_LIMIT = Decimal(10) ** MONEY_INTEGER_DIGITS

# qty is a 32-bit Integer column
MAX_ITEM_QTY = 2_147_483_647


def to_money(value: Union[Decimal, int, float, str]) -> Decimal:
    """Coerce a number to a 2-place Decimal without going through binary floats"""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(MONEY_QUANT, rounding=ROUND_HALF_UP)


def fits_money_column(value: Decimal) -> bool:
    """True when value, rounded to cents, fits a Numeric(18, 2) column"""
    if abs(value) >= MONEY_LIMIT:
        return False
    return abs(to_money(value)) < MONEY_LIMIT


def calculate_subtotal(qty: int, price: Union[Decimal, int, float, str]) -> Decimal:
    """Line value: qty * price"""
    return to_money(Decimal(qty) * to_money(price))


def calculate_total(subtotals: Iterable[Decimal]) -> Decimal:
    """Invoice value: sum of line subtotals (0.00 for no lines)"""
    return to_money(sum((to_money(s) for s in subtotals), Decimal("0")))


class InvoiceItem(BaseModel, table=True):
    """
    Invoice Item - Individual line item within an invoice

    Domain Rules:
    - Each item belongs to exactly one invoice
    - subtotal = qty * price, always derived
    - Items are replaced as a whole batch when the invoice is updated
    """

    __tablename__ = "invoice_items"
    __table_args__ = (
        Index('ix_invoice_items_invoice_id', 'invoice_id'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(ID_TYPE, primary_key=True, autoincrement=True),
        description="Unique invoice item identifier (auto-increment)"
    )

    invoice_id: int = Field(
        sa_column=Column(ID_TYPE, ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to Invoice"
    )

    item_name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Line item name (e.g., 'Consulting hours')"
    )

    qty: int = Field(
        sa_column=Column(Integer, nullable=False),
        description="Quantity (>= 1)"
    )

    price: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="Unit price (precision: 18,2)"
    )

    subtotal: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="qty * price"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_type=TIMESTAMP_TYPE,
        description="Line item creation timestamp"
    )

    @classmethod
    def for_invoice(cls, invoice_id: int, item_name: str, qty: int, price: Decimal) -> "InvoiceItem":
        """Build an item with its subtotal computed from qty and price"""
        return cls(
            invoice_id=invoice_id,
            item_name=item_name,
            qty=qty,
            price=to_money(price),
            subtotal=calculate_subtotal(qty, price),
        )

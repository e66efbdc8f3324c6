"""Invoice Sequence Domain Entity

Named counter backing invoice number generation.
"""

from sqlmodel import Field, Column
from sqlalchemy import BigInteger, String
from src.domain.base import BaseModel


class InvoiceSequence(BaseModel, table=True):
    """
    Invoice Sequence - Monotonic counter row

    Domain Rules:
    - last_value only ever increases
    - Incremented inside the transaction that creates the invoice
    """

    __tablename__ = "invoice_sequences"

    name: str = Field(
        sa_column=Column(String(50), primary_key=True),
        description="Sequence name"
    )

    last_value: int = Field(
        default=0,
        sa_column=Column(BigInteger, nullable=False),
        description="Last issued value"
    )

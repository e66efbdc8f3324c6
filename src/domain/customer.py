"""Customer Domain Entity

Customers are billed through invoices. They are shared between users.
"""

from datetime import datetime
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import String
from src.domain.base import BaseModel, ID_TYPE, TIMESTAMP_TYPE, utc_now


class Customer(BaseModel, table=True):
    """
    Customer - Party an invoice is addressed to

    Domain Rules:
    - email is optional but unique when present
    - A customer referenced by invoices cannot be deleted
    """

    __tablename__ = "customers"

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(ID_TYPE, primary_key=True, autoincrement=True),
        description="Unique customer identifier (auto-increment)"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Customer name"
    )

    email: Optional[str] = Field(
        default=None,
        sa_column=Column(String(255), nullable=True, unique=True),
        description="Contact email (unique when present)"
    )

    phone: Optional[str] = Field(
        default=None,
        sa_column=Column(String(20), nullable=True),
        description="Contact phone"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_type=TIMESTAMP_TYPE,
        description="Customer creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_type=TIMESTAMP_TYPE,
        description="Last update timestamp"
    )

"""Request schemas for Customer API"""

from typing import Optional
from pydantic import BaseModel, EmailStr, Field


class CustomerRequestSchema(BaseModel):
    """
    Request schema for creating or updating a customer

    Used for POST /customers and PUT /customers/{customer_id}.
    """

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Customer name (required)"
    )

    email: Optional[EmailStr] = Field(
        default=None,
        description="Contact email (unique when present)"
    )

    phone: Optional[str] = Field(
        default=None,
        max_length=20,
        description="Contact phone"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "name": "PT Maju Jaya",
                "email": "billing@majujaya.co.id",
                "phone": "+62215550101"
            }
        }

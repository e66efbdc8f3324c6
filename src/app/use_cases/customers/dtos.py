"""Data Transfer Objects for Customer Use Cases"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field


class CustomerCommandDTO(BaseModel):
    """
    Command DTO for creating or updating a customer

    Update replaces all fields, like create.
    """

    name: str = Field(..., description="Customer name")

    email: Optional[str] = Field(default=None, description="Contact email (unique)")

    phone: Optional[str] = Field(default=None, description="Contact phone")


class CustomerResponseDTO(BaseModel):
    id: int
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
        json_schema_extra = {
            "example": {
                "id": 1,
                "name": "PT Maju Jaya",
                "email": "billing@majujaya.co.id",
                "phone": "+62215550101",
                "created_at": "2024-01-31T00:00:00Z",
                "updated_at": "2024-01-31T00:00:00Z"
            }
        }


class CustomerPageDTO(BaseModel):
    """One page of customers"""

    data: List[CustomerResponseDTO]
    page: int = Field(..., description="Current page (1-based)")
    per_page: int
    total: int = Field(..., description="Total number of customers")
    last_page: int

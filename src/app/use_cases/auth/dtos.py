"""Data Transfer Objects for Authentication Use Cases"""

from datetime import datetime
from pydantic import BaseModel, Field


class LoginCommandDTO(BaseModel):
    email: str = Field(..., description="Login email")
    password: str = Field(..., description="Plain password")


class CreateUserCommandDTO(BaseModel):
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Login email (unique)")
    password: str = Field(..., description="Plain password")


class TokenResponseDTO(BaseModel):
    """
    Response DTO for login

    The access token is shown once and only its digest is stored.
    """

    access_token: str
    token_type: str = "Bearer"

    class Config:
        json_schema_extra = {
            "example": {
                "access_token": "q0o3m9m0mJ3x7lV2rUQ0n7r1W2b8FZ0p9s3iY6kq4Xc",
                "token_type": "Bearer"
            }
        }


class UserResponseDTO(BaseModel):
    id: int
    name: str
    email: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

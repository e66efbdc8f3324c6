"""Request schemas for Authentication API"""

from pydantic import BaseModel, EmailStr, Field


class LoginRequestSchema(BaseModel):
    """Used for POST /login"""

    email: EmailStr = Field(..., description="Login email")

    password: str = Field(..., min_length=1, description="Password")

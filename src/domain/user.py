"""User Domain Entities

Users authenticate with email/password and act through API tokens.
"""

from datetime import datetime, timedelta
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, String
from src.domain.base import BaseModel, ID_TYPE, TIMESTAMP_TYPE, as_utc, utc_now


class User(BaseModel, table=True):
    """
    User - Authenticated actor who owns invoices

    Domain Rules:
    - email is unique
    - password is never stored in plain text
    """

    __tablename__ = "users"

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(ID_TYPE, primary_key=True, autoincrement=True),
        description="Unique user identifier (auto-increment)"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Display name"
    )

    email: str = Field(
        sa_column=Column(String(255), nullable=False, unique=True),
        description="Login email (unique)"
    )

    password_hash: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Salted password hash"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_type=TIMESTAMP_TYPE,
        description="User creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_type=TIMESTAMP_TYPE,
        description="Last update timestamp"
    )


class ApiToken(BaseModel, table=True):
    """
    ApiToken - Bearer token issued at login

    Domain Rules:
    - Only the SHA-256 digest of the token is persisted
    - Tokens are revoked by deletion (logout)
    """

    __tablename__ = "api_tokens"
    __table_args__ = (
        Index('ix_api_tokens_user_id', 'user_id'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(ID_TYPE, primary_key=True, autoincrement=True),
    )

    user_id: int = Field(
        sa_column=Column(ID_TYPE, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to User"
    )

    name: str = Field(
        default="api-token",
        sa_column=Column(String(100), nullable=False),
    )

    token_hash: str = Field(
        sa_column=Column(String(64), nullable=False, unique=True),
        description="SHA-256 hex digest of the plain token"
    )

    last_used_at: Optional[datetime] = Field(default=None, sa_type=TIMESTAMP_TYPE)

    created_at: datetime = Field(default_factory=utc_now, sa_type=TIMESTAMP_TYPE)

    def needs_touch(self, now: datetime, interval: timedelta) -> bool:
        """True when last_used_at is unset or older than interval"""
        if self.last_used_at is None:
            return True
        return now - as_utc(self.last_used_at) >= interval

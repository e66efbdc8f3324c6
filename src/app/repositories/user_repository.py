"""User Repository Interface

Covers users and the API tokens issued to them.
"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.user import User, ApiToken


class UserRepository(ABC):
    """Repository interface for User and ApiToken persistence"""

    @abstractmethod
    async def create(self, user: User) -> User:
        pass

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[User]:
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        pass

    @abstractmethod
    async def add_token(self, token: ApiToken) -> ApiToken:
        pass

    @abstractmethod
    async def get_token_by_hash(self, token_hash: str) -> Optional[ApiToken]:
        pass

    @abstractmethod
    async def touch_token(self, token: ApiToken) -> None:
        """Record token usage time"""
        pass

    @abstractmethod
    async def delete_tokens(self, user_id: int) -> int:
        """
        Revoke all tokens of a user

        Returns:
            Number of revoked tokens
        """
        pass

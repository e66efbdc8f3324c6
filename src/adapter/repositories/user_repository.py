"""SQLAlchemy User Repository Implementation

Persists users and their API tokens.
"""

from typing import Optional
from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.user_repository import UserRepository
from src.domain.base import utc_now
from src.domain.user import User, ApiToken


class SqlAlchemyUserRepository(UserRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, user: User) -> User:
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def get_by_id(self, user_id: int) -> Optional[User]:
        statement = select(User).where(User.id == user_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        statement = select(User).where(User.email == email)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def add_token(self, token: ApiToken) -> ApiToken:
        self.session.add(token)
        await self.session.flush()
        await self.session.refresh(token)
        return token

    async def get_token_by_hash(self, token_hash: str) -> Optional[ApiToken]:
        statement = select(ApiToken).where(ApiToken.token_hash == token_hash)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def touch_token(self, token: ApiToken) -> None:
        token.last_used_at = utc_now()
        self.session.add(token)
        await self.session.flush()

    async def delete_tokens(self, user_id: int) -> int:
        statement = delete(ApiToken).where(ApiToken.user_id == user_id)
        result = await self.session.execute(statement)
        return result.rowcount

"""AuthenticateToken Use Case

Resolves a bearer token to the user it was issued to.
"""

from datetime import timedelta
from typing import Optional
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.credential_service import CredentialService
from src.app.repositories.user_repository import UserRepository
from src.domain.base import utc_now
from src.domain.user import User

DEFAULT_TOUCH_INTERVAL = timedelta(seconds=60)


class AuthenticateToken:
    """
    Business Rules:
    1. Unknown, revoked or missing tokens are UNAUTHENTICATED
    2. last_used_at is written at most once per touch_interval, so most
       authenticated reads do not write
    """

    def __init__(
        self,
        uow: UnitOfWork,
        user_repo: UserRepository,
        credentials: CredentialService,
        touch_interval: timedelta = DEFAULT_TOUCH_INTERVAL,
    ):
        self.uow = uow
        self.user_repo = user_repo
        self.credentials = credentials
        self.touch_interval = touch_interval

    async def execute(self, plain_token: Optional[str]) -> Result[User]:
        unauthenticated = Return.err(
            Error(
                code="UNAUTHENTICATED",
                message="Unauthenticated.",
            )
        )

        if not plain_token:
            return unauthenticated

        token = await self.user_repo.get_token_by_hash(self.credentials.hash_token(plain_token))
        if not token:
            return unauthenticated

        user = await self.user_repo.get_by_id(token.user_id)
        if not user:
            return unauthenticated

        if token.needs_touch(utc_now(), self.touch_interval):
            await self.user_repo.touch_token(token)
            await self.uow.commit()

        return Return.ok(user)

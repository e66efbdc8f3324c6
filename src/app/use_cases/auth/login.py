"""Login Use Case

Exchanges email and password for a bearer token.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.credential_service import CredentialService
from src.app.repositories.user_repository import UserRepository
from src.domain.user import ApiToken
from .dtos import LoginCommandDTO, TokenResponseDTO

logger = logging.getLogger(__name__)


class Login:
    """
    Use Case: Issue API token

    Business Rules:
    1. Unknown email and wrong password fail the same way
    2. Each login issues a new token; earlier tokens stay valid until logout
    """

    def __init__(
        self,
        uow: UnitOfWork,
        user_repo: UserRepository,
        credentials: CredentialService,
    ):
        self.uow = uow
        self.user_repo = user_repo
        self.credentials = credentials

    async def execute(self, command: LoginCommandDTO) -> Result[TokenResponseDTO]:
        try:
            user = await self.user_repo.get_by_email(command.email)
            if not user or not self.credentials.verify_password(command.password, user.password_hash):
                logger.info(f"Rejected login for {command.email}")
                return Return.err(
                    Error(
                        code="INVALID_CREDENTIALS",
                        message="Invalid credentials",
                    )
                )

            plain_token, token_hash = self.credentials.issue_token()
            await self.user_repo.add_token(ApiToken(user_id=user.id, token_hash=token_hash))
            await self.uow.commit()

            return Return.ok(TokenResponseDTO(access_token=plain_token))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="LOGIN_FAILED",
                    message="Failed to log in",
                    reason=str(e),
                )
            )

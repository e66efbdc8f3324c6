"""CreateUser Use Case

Provisions a user account (used by the create_user command).
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.credential_service import CredentialService
from src.app.repositories.user_repository import UserRepository
from src.domain.user import User
from .dtos import CreateUserCommandDTO, UserResponseDTO

logger = logging.getLogger(__name__)


class CreateUser:

    def __init__(
        self,
        uow: UnitOfWork,
        user_repo: UserRepository,
        credentials: CredentialService,
    ):
        self.uow = uow
        self.user_repo = user_repo
        self.credentials = credentials

    async def execute(self, command: CreateUserCommandDTO) -> Result[UserResponseDTO]:
        if not command.password:
            return Return.err(
                Error(
                    code="VALIDATION_ERROR",
                    message="The given data was invalid",
                    details=[{"loc": ["password"], "msg": "password is required"}],
                )
            )

        try:
            if await self.user_repo.get_by_email(command.email):
                return Return.err(
                    Error(
                        code="USER_EMAIL_TAKEN",
                        message="The email has already been taken",
                        details=[{"loc": ["email"], "msg": "The email has already been taken"}],
                    )
                )

            user = await self.user_repo.create(
                User(
                    name=command.name,
                    email=command.email,
                    password_hash=self.credentials.hash_password(command.password),
                )
            )
            await self.uow.commit()

            logger.info(f"Created user {user.id} <{user.email}>")
            return Return.ok(UserResponseDTO.model_validate(user))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="CREATE_USER_FAILED",
                    message="Failed to create user",
                    reason=str(e),
                )
            )

"""Logout Use Case

Revokes every token of the acting user.
"""

from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.user_repository import UserRepository
from src.app.use_cases.invoices.dtos import MessageResponseDTO


class Logout:

    def __init__(self, uow: UnitOfWork, user_repo: UserRepository):
        self.uow = uow
        self.user_repo = user_repo

    async def execute(self, user_id: int) -> Result[MessageResponseDTO]:
        try:
            await self.user_repo.delete_tokens(user_id)
            await self.uow.commit()
            return Return.ok(MessageResponseDTO(message="Logged out"))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="LOGOUT_FAILED",
                    message="Failed to log out",
                    reason=str(e),
                )
            )

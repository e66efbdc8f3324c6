"""Authentication API Routes

Token login/logout and the current-user endpoint.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.error import raise_for_error
from src.api.schemas.auth_request import LoginRequestSchema
from src.app.use_cases.auth import Login, Logout, LoginCommandDTO, TokenResponseDTO, UserResponseDTO
from src.app.use_cases.invoices.dtos import MessageResponseDTO
from src.adapter.repositories.user_repository import SqlAlchemyUserRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_credential_service, get_current_user, get_session
from src.domain.user import User

router = APIRouter(tags=["Auth"])


@router.post(
    "/login",
    response_model=TokenResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={
        401: {
            "description": "Invalid credentials",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "INVALID_CREDENTIALS",
                            "message": "Invalid credentials"
                        }
                    }
                }
            }
        }
    }
)
async def login(
    request: LoginRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    """
    Exchange email and password for a bearer token.

    Send the token as `Authorization: Bearer <access_token>` on every other
    endpoint.
    """
    use_case = Login(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyUserRepository(session),
        get_credential_service(),
    )
    result = await use_case.execute(
        LoginCommandDTO(email=str(request.email), password=request.password)
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/logout", response_model=MessageResponseDTO)
async def logout(
    current_user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    """Revoke all tokens of the current user."""
    use_case = Logout(SqlAlchemyUnitOfWork(session), SqlAlchemyUserRepository(session))
    result = await use_case.execute(current_user.id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/user", response_model=UserResponseDTO)
async def show_current_user(current_user: User = Depends(get_current_user)):
    return UserResponseDTO.model_validate(current_user)

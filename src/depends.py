from datetime import timedelta
from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.repositories.user_repository import SqlAlchemyUserRepository
from src.adapter.services.credential_service import Pbkdf2CredentialService
from src.adapter.services.invoice_number_generator import SqlAlchemyInvoiceNumberGenerator
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.app.use_cases.auth import AuthenticateToken
from src.domain.user import User

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

bearer_scheme = HTTPBearer(auto_error=False)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


def get_credential_service() -> Pbkdf2CredentialService:
    return Pbkdf2CredentialService(iterations=ApplicationConfig.PASSWORD_HASH_ITERATIONS)


def get_invoice_number_generator(session: AsyncSession) -> SqlAlchemyInvoiceNumberGenerator:
    return SqlAlchemyInvoiceNumberGenerator(
        session,
        prefix=ApplicationConfig.INVOICE_NUMBER_PREFIX,
        min_digits=ApplicationConfig.INVOICE_NUMBER_MIN_DIGITS,
    )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    session: AsyncSession = Depends(get_session),
) -> User:
    """Resolve the bearer token to the acting user, or fail with 401"""
    use_case = AuthenticateToken(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyUserRepository(session),
        get_credential_service(),
        touch_interval=timedelta(seconds=ApplicationConfig.TOKEN_TOUCH_INTERVAL_SECONDS),
    )
    result = await use_case.execute(credentials.credentials if credentials else None)

    if result.is_err():
        raise ClientError(result.error, status_code=401)

    return result.value

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import src.domain  # noqa: F401 - registers table metadata
from src.adapter.services.credential_service import Pbkdf2CredentialService
from src.depends import get_session
from src.domain.customer import Customer
from src.domain.user import ApiToken, User

PASSWORD = "s3cret-pass"


@pytest_asyncio.fixture(scope="function")
async def engine(tmp_path):
    """Create a throwaway SQLite database per test"""
    test_db_url = f"sqlite+aiosqlite:///{tmp_path}/test.db"

    engine = create_async_engine(test_db_url, echo=False, future=True)

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    """Create a new database session for each test"""
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    async with Session() as session:
        yield session


@pytest.fixture
def credentials():
    return Pbkdf2CredentialService(iterations=1000)


async def _create_user(db_session, credentials, name, email):
    user = User(name=name, email=email, password_hash=credentials.hash_password(PASSWORD))
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


async def _issue_token(db_session, credentials, user):
    plain, token_hash = credentials.issue_token()
    db_session.add(ApiToken(user_id=user.id, token_hash=token_hash))
    await db_session.commit()
    return plain


@pytest_asyncio.fixture
async def owner(db_session, credentials):
    return await _create_user(db_session, credentials, "Alice", "alice@acme.com")


@pytest_asyncio.fixture
async def other_user(db_session, credentials):
    return await _create_user(db_session, credentials, "Mallory", "mallory@acme.com")


@pytest_asyncio.fixture
async def owner_headers(db_session, credentials, owner):
    token = await _issue_token(db_session, credentials, owner)
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def other_headers(db_session, credentials, other_user):
    token = await _issue_token(db_session, credentials, other_user)
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def customer(db_session):
    customer = Customer(name="PT Maju Jaya", email="billing@majujaya.co.id", phone="+62215550101")
    db_session.add(customer)
    await db_session.commit()
    await db_session.refresh(customer)
    return customer


@pytest_asyncio.fixture
async def client(db_session):
    """Create test client with database session override"""
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

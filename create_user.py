"""Provision a user account

Usage:
    python create_user.py --name "Alice" --email alice@acme.com --password secret
"""

import argparse
import asyncio
import logging
import sys
from sqlmodel import SQLModel

from config import ApplicationConfig
from src.adapter.repositories.user_repository import SqlAlchemyUserRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.auth import CreateUser, CreateUserCommandDTO
from src.depends import AsyncSessionLocal, engine, get_credential_service
import src.domain  # noqa: F401 - registers table metadata

logger = logging.getLogger("create_user")


async def main(name: str, email: str, password: str) -> int:
    if ApplicationConfig.AUTO_CREATE_TABLES:
        async with engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

    async with AsyncSessionLocal() as session:
        use_case = CreateUser(
            SqlAlchemyUnitOfWork(session),
            SqlAlchemyUserRepository(session),
            get_credential_service(),
        )
        result = await use_case.execute(
            CreateUserCommandDTO(name=name, email=email, password=password)
        )

    await engine.dispose()

    if result.is_err():
        logger.error(f"{result.error.code}: {result.error.message}")
        return 1

    logger.info(f"Created user {result.value.id} <{result.value.email}>")
    return 0


if __name__ == "__main__":
    logging.basicConfig(
        level=ApplicationConfig.LOG_LEVEL,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    parser = argparse.ArgumentParser(description="Create an invoicing user")
    parser.add_argument("--name", required=True)
    parser.add_argument("--email", required=True)
    parser.add_argument("--password", required=True)
    args = parser.parse_args()

    sys.exit(asyncio.run(main(args.name, args.email, args.password)))

"""SQLAlchemy Customer Repository Implementation"""

from typing import Dict, List, Optional
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.customer_repository import CustomerRepository
from src.domain.customer import Customer


class SqlAlchemyCustomerRepository(CustomerRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, customer: Customer) -> Customer:
        self.session.add(customer)
        await self.session.flush()
        await self.session.refresh(customer)
        return customer

    async def get_by_id(self, customer_id: int) -> Optional[Customer]:
        statement = select(Customer).where(Customer.id == customer_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_ids(self, customer_ids: List[int]) -> Dict[int, Customer]:
        if not customer_ids:
            return {}
        statement = select(Customer).where(Customer.id.in_(set(customer_ids)))
        result = await self.session.execute(statement)
        return {customer.id: customer for customer in result.scalars().all()}

    async def get_by_email(self, email: str) -> Optional[Customer]:
        statement = select(Customer).where(Customer.email == email)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def exists(self, customer_id: int) -> bool:
        statement = (
            select(func.count())
            .select_from(Customer)
            .where(Customer.id == customer_id)
        )
        result = await self.session.execute(statement)
        return result.scalar_one() > 0

    async def list(self, limit: int = 10, offset: int = 0) -> List[Customer]:
        statement = select(Customer).order_by(Customer.id).limit(limit).offset(offset)
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def count(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(Customer))
        return result.scalar_one()

    async def update(self, customer: Customer) -> Customer:
        customer.touch()
        self.session.add(customer)
        await self.session.flush()
        await self.session.refresh(customer)
        return customer

    async def delete(self, customer: Customer) -> None:
        await self.session.delete(customer)
        await self.session.flush()

"""Customer Repository Interface"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional
from src.domain.customer import Customer


class CustomerRepository(ABC):
    """Repository interface for Customer persistence"""

    @abstractmethod
    async def create(self, customer: Customer) -> Customer:
        pass

    @abstractmethod
    async def get_by_id(self, customer_id: int) -> Optional[Customer]:
        pass

    @abstractmethod
    async def get_by_ids(self, customer_ids: List[int]) -> Dict[int, Customer]:
        """Retrieve several customers keyed by ID"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Customer]:
        pass

    @abstractmethod
    async def exists(self, customer_id: int) -> bool:
        """customer_exists capability used when accepting an invoice"""
        pass

    @abstractmethod
    async def list(self, limit: int = 10, offset: int = 0) -> List[Customer]:
        pass

    @abstractmethod
    async def count(self) -> int:
        pass

    @abstractmethod
    async def update(self, customer: Customer) -> Customer:
        pass

    @abstractmethod
    async def delete(self, customer: Customer) -> None:
        pass

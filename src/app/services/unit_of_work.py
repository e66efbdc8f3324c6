"""Unit of Work Interface

Transaction boundary for use cases.
"""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """
    Wraps one storage transaction

    Use cases call commit() once all writes of an operation succeeded and
    rollback() on any failure, so no partial state is ever visible.
    """

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass

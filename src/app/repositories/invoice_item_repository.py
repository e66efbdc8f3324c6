"""Invoice Item Repository Interface

Defines the contract for invoice item persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Dict, List
from src.domain.invoice_item import InvoiceItem


class InvoiceItemRepository(ABC):
    """Repository interface for InvoiceItem persistence"""

    @abstractmethod
    async def get_by_invoice_id(self, invoice_id: int) -> List[InvoiceItem]:
        """
        Retrieve all line items for an invoice in insertion order

        Args:
            invoice_id: Invoice ID

        Returns:
            List of InvoiceItem rows
        """
        pass

    @abstractmethod
    async def get_by_invoice_ids(self, invoice_ids: List[int]) -> Dict[int, List[InvoiceItem]]:
        """Retrieve items for several invoices, grouped by invoice ID"""
        pass

    @abstractmethod
    async def create(self, invoice_item: InvoiceItem) -> InvoiceItem:
        """
        Create a new invoice item

        Args:
            invoice_item: InvoiceItem entity to persist

        Returns:
            Created InvoiceItem with generated ID
        """
        pass

    @abstractmethod
    async def delete_by_invoice_id(self, invoice_id: int) -> int:
        """
        Delete every item of an invoice

        Returns:
            Number of deleted rows
        """
        pass

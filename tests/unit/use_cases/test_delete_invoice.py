"""Unit tests for DeleteInvoice use case"""

import pytest
from unittest.mock import AsyncMock

from src.app.use_cases.invoices.delete_invoice import DeleteInvoice
from tests.unit.use_cases.factories import make_invoice, make_invoice_repo, make_item_repo


@pytest.mark.asyncio
class TestDeleteInvoice:

    async def test_delete_removes_items_then_invoice(self, mock_uow):
        # Arrange
        invoice = make_invoice()
        invoice_repo = make_invoice_repo()
        item_repo = make_item_repo()
        use_case = DeleteInvoice(mock_uow, invoice_repo, item_repo)

        # Act
        result = await use_case.execute(invoice)

        # Assert
        assert result.is_ok()
        assert result.value.message == "Invoice deleted"
        item_repo.delete_by_invoice_id.assert_awaited_once_with(invoice.id)
        invoice_repo.delete.assert_awaited_once_with(invoice)
        mock_uow.commit.assert_awaited_once()

    async def test_delete_failure_rolls_back(self, mock_uow):
        # Arrange
        invoice_repo = make_invoice_repo()
        invoice_repo.delete = AsyncMock(side_effect=RuntimeError("deadlock detected"))
        use_case = DeleteInvoice(mock_uow, invoice_repo, make_item_repo())

        # Act
        result = await use_case.execute(make_invoice())

        # Assert
        assert result.is_err()
        assert result.error.code == "TRANSACTION_FAILED"
        mock_uow.rollback.assert_awaited_once()
        mock_uow.commit.assert_not_called()

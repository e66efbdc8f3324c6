"""Unit tests for the invoice ownership gate"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.invoices.authorize_invoice import AuthorizeInvoiceAccess
from src.app.use_cases.invoices.policy import InvoiceAction, InvoicePolicy
from tests.unit.use_cases.factories import make_invoice


class TestInvoicePolicy:

    def test_owner_may_view_update_delete(self):
        policy = InvoicePolicy()
        invoice = make_invoice(user_id=1)

        for action in (InvoiceAction.VIEW, InvoiceAction.UPDATE, InvoiceAction.DELETE):
            assert policy.allows(1, action, invoice)

    def test_other_user_is_denied(self):
        policy = InvoicePolicy()
        invoice = make_invoice(user_id=1)

        for action in (InvoiceAction.VIEW, InvoiceAction.UPDATE, InvoiceAction.DELETE):
            assert not policy.allows(2, action, invoice)

    def test_anonymous_user_is_denied(self):
        invoice = make_invoice(user_id=1)

        assert not InvoicePolicy().allows(None, InvoiceAction.VIEW, invoice)

    def test_actions_cover_view_update_delete_only(self):
        assert {action.value for action in InvoiceAction} == {"view", "update", "delete"}


@pytest.mark.asyncio
class TestAuthorizeInvoiceAccess:

    async def test_owner_gets_invoice(self):
        # Arrange
        invoice = make_invoice(user_id=1)
        repo = MagicMock()
        repo.get_by_id = AsyncMock(return_value=invoice)

        # Act
        result = await AuthorizeInvoiceAccess(repo).execute(1, invoice.id, InvoiceAction.VIEW)

        # Assert
        assert result.is_ok()
        assert result.value is invoice

    async def test_non_owner_is_denied_not_not_found(self):
        # Arrange
        repo = MagicMock()
        repo.get_by_id = AsyncMock(return_value=make_invoice(user_id=1))

        # Act
        result = await AuthorizeInvoiceAccess(repo).execute(2, 1, InvoiceAction.UPDATE)

        # Assert
        assert result.is_err()
        assert result.error.code == "INVOICE_ACCESS_DENIED"

    async def test_missing_invoice_is_not_found(self):
        # Arrange
        repo = MagicMock()
        repo.get_by_id = AsyncMock(return_value=None)

        # Act
        result = await AuthorizeInvoiceAccess(repo).execute(1, 999, InvoiceAction.DELETE)

        # Assert
        assert result.is_err()
        assert result.error.code == "INVOICE_NOT_FOUND"

"""Integration tests for CreateInvoice against a real database"""

import re
import pytest
from decimal import Decimal

from src.adapter.repositories.invoice_item_repository import SqlAlchemyInvoiceItemRepository
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from tests.integration.invoice_helpers import (
    count_invoices,
    count_items,
    create_command,
    create_invoice_use_case,
    item,
)


class ExplodingItemRepository(SqlAlchemyInvoiceItemRepository):
    """Fails on the second item insert"""

    def __init__(self, session):
        super().__init__(session)
        self.calls = 0

    async def create(self, invoice_item):
        self.calls += 1
        if self.calls == 2:
            raise RuntimeError("disk full")
        return await super().create(invoice_item)


@pytest.mark.asyncio
class TestCreateInvoiceIntegration:

    async def test_totals_are_derived_from_items(self, db_session, owner, customer):
        # Arrange
        command = create_command(
            owner.id,
            customer.id,
            [item("Service 1", 2, "50000"), item("Product 1", 1, "75000")],
        )

        # Act
        result = await create_invoice_use_case(db_session).execute(command)

        # Assert
        assert result.is_ok()
        invoice = result.value
        assert invoice.total == Decimal("175000")
        assert [i.subtotal for i in invoice.items] == [Decimal("100000"), Decimal("75000")]
        assert invoice.customer.id == customer.id

        stored = await SqlAlchemyInvoiceRepository(db_session).get_by_id(invoice.id)
        assert stored.total == Decimal("175000")
        assert stored.user_id == owner.id
        assert await count_items(db_session) == 2

    async def test_empty_items_write_nothing(self, db_session, owner, customer):
        result = await create_invoice_use_case(db_session).execute(
            create_command(owner.id, customer.id, [])
        )

        assert result.is_err()
        assert result.error.code == "VALIDATION_ERROR"
        assert await count_invoices(db_session) == 0
        assert await count_items(db_session) == 0

    async def test_missing_customer_writes_nothing(self, db_session, owner):
        result = await create_invoice_use_case(db_session).execute(
            create_command(owner.id, 999, [item("Service 1", 1, "10")])
        )

        assert result.error.code == "CUSTOMER_NOT_FOUND"
        assert await count_invoices(db_session) == 0

    async def test_failure_mid_write_rolls_back_everything(self, db_session, owner, customer):
        # Arrange
        owner_id, customer_id = owner.id, customer.id
        use_case = create_invoice_use_case(
            db_session, item_repo=ExplodingItemRepository(db_session)
        )

        # Act
        result = await use_case.execute(
            create_command(
                owner_id,
                customer_id,
                [item("Service 1", 2, "50000"), item("Product 1", 1, "75000")],
            )
        )

        # Assert
        assert result.is_err()
        assert result.error.code == "TRANSACTION_FAILED"
        assert await count_invoices(db_session) == 0
        assert await count_items(db_session) == 0

    async def test_invoice_numbers_are_unique_and_well_formed(self, db_session, owner, customer):
        numbers = []
        for _ in range(3):
            result = await create_invoice_use_case(db_session).execute(
                create_command(owner.id, customer.id, [item("Service 1", 1, "10")])
            )
            numbers.append(result.value.invoice_number)

        assert len(set(numbers)) == 3
        for number in numbers:
            assert re.fullmatch(r"INV-\d{8}-\d{4,}", number)
        assert [n[-4:] for n in numbers] == ["0001", "0002", "0003"]

"""Unit tests for CreateInvoice use case

Tests cover:
- Invoice, items and total written in one unit of work
- Input validation before any write
- Customer existence check
- Rollback on failure
"""

import pytest
from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.services.invoice_number_generator import InvoiceNumberingError
from src.app.use_cases.invoices.create_invoice import CreateInvoice
from src.app.use_cases.invoices.dtos import CreateInvoiceCommandDTO, InvoiceItemInputDTO
from tests.unit.use_cases.factories import (
    make_customer,
    make_customer_repo,
    make_invoice_repo,
    make_item_repo,
)


@pytest.fixture
def mock_invoice_repo():
    return make_invoice_repo()


@pytest.fixture
def mock_item_repo():
    return make_item_repo()


@pytest.fixture
def mock_customer_repo():
    return make_customer_repo(make_customer())


@pytest.fixture
def mock_number_generator():
    generator = MagicMock()
    generator.next_number = AsyncMock(return_value="INV-20240131-0001")
    return generator


@pytest.fixture
def create_invoice_use_case(
    mock_uow, mock_invoice_repo, mock_item_repo, mock_customer_repo, mock_number_generator
):
    """CreateInvoice use case instance with mocked dependencies"""
    return CreateInvoice(
        uow=mock_uow,
        invoice_repo=mock_invoice_repo,
        item_repo=mock_item_repo,
        customer_repo=mock_customer_repo,
        number_generator=mock_number_generator,
    )


@pytest.fixture
def sample_command():
    """Two items: 2 x 50000 and 1 x 75000"""
    return CreateInvoiceCommandDTO(
        user_id=1,
        customer_id=1,
        due_date=date(2024, 2, 29),
        items=[
            InvoiceItemInputDTO(item_name="Service 1", qty=2, price=Decimal("50000")),
            InvoiceItemInputDTO(item_name="Product 1", qty=1, price=Decimal("75000")),
        ],
    )


@pytest.mark.asyncio
class TestCreateInvoiceSuccess:

    async def test_create_invoice_computes_subtotals_and_total(
        self, create_invoice_use_case, mock_item_repo, mock_uow, sample_command
    ):
        """
        Given: Valid command with two items
        When: CreateInvoice is executed
        Then: Items carry qty * price and total is their sum
        """
        # Act
        result = await create_invoice_use_case.execute(sample_command)

        # Assert
        assert result.is_ok()
        response = result.value

        assert response.total == Decimal("175000.00")
        assert [i.subtotal for i in response.items] == [Decimal("100000.00"), Decimal("75000.00")]
        assert response.invoice_number == "INV-20240131-0001"
        assert response.user_id == 1
        assert response.customer.id == 1

        assert mock_item_repo.create.await_count == 2
        mock_uow.commit.assert_awaited_once()
        mock_uow.rollback.assert_not_called()

    async def test_number_is_assigned_before_invoice_insert(
        self, create_invoice_use_case, mock_invoice_repo, mock_number_generator, sample_command
    ):
        # Act
        await create_invoice_use_case.execute(sample_command)

        # Assert
        mock_number_generator.next_number.assert_awaited_once()
        created = mock_invoice_repo.create.call_args.args[0]
        assert created.invoice_number == "INV-20240131-0001"

    async def test_total_is_recomputed_after_items(
        self, create_invoice_use_case, mock_item_repo, mock_invoice_repo, sample_command
    ):
        # Act
        await create_invoice_use_case.execute(sample_command)

        # Assert - total is read back from persisted items, then written
        mock_item_repo.get_by_invoice_id.assert_awaited_once_with(1)
        updated = mock_invoice_repo.update.call_args.args[0]
        assert updated.total == Decimal("175000.00")


@pytest.mark.asyncio
class TestCreateInvoiceValidation:

    async def test_empty_items_is_rejected_without_writes(
        self, create_invoice_use_case, mock_invoice_repo, mock_number_generator, mock_uow
    ):
        # Arrange
        command = CreateInvoiceCommandDTO(
            user_id=1, customer_id=1, due_date=date(2024, 2, 29), items=[]
        )

        # Act
        result = await create_invoice_use_case.execute(command)

        # Assert
        assert result.is_err()
        assert result.error.code == "VALIDATION_ERROR"
        assert result.error.details[0]["loc"] == ["items"]
        mock_number_generator.next_number.assert_not_called()
        mock_invoice_repo.create.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_invalid_item_is_reported_with_its_position(
        self, create_invoice_use_case, mock_invoice_repo
    ):
        # Arrange - second item is invalid on every field
        command = CreateInvoiceCommandDTO(
            user_id=1,
            customer_id=1,
            due_date=date(2024, 2, 29),
            items=[
                InvoiceItemInputDTO(item_name="Ok", qty=1, price=Decimal("10")),
                InvoiceItemInputDTO(item_name=" ", qty=0, price=Decimal("-1")),
            ],
        )

        # Act
        result = await create_invoice_use_case.execute(command)

        # Assert
        assert result.is_err()
        locs = [d["loc"] for d in result.error.details]
        assert ["items", 1, "item_name"] in locs
        assert ["items", 1, "qty"] in locs
        assert ["items", 1, "price"] in locs
        mock_invoice_repo.create.assert_not_called()

    async def test_unknown_customer_is_not_found(
        self, mock_uow, mock_invoice_repo, mock_item_repo, mock_number_generator, sample_command
    ):
        # Arrange
        use_case = CreateInvoice(
            mock_uow, mock_invoice_repo, mock_item_repo, make_customer_repo(None), mock_number_generator
        )

        # Act
        result = await use_case.execute(sample_command)

        # Assert
        assert result.is_err()
        assert result.error.code == "CUSTOMER_NOT_FOUND"
        mock_invoice_repo.create.assert_not_called()

    async def test_subtotal_beyond_money_column_is_rejected(
        self, create_invoice_use_case, mock_invoice_repo, mock_number_generator
    ):
        # Arrange - qty fits the Integer column, 2000000000 x 9999999.99 has 17 integer digits
        command = CreateInvoiceCommandDTO(
            user_id=1,
            customer_id=1,
            due_date=date(2024, 2, 29),
            items=[InvoiceItemInputDTO(item_name="Bulk", qty=2_000_000_000, price=Decimal("9999999.99"))],
        )

        # Act
        result = await create_invoice_use_case.execute(command)

        # Assert
        assert result.is_err()
        assert result.error.code == "VALIDATION_ERROR"
        assert result.error.details[0]["loc"] == ["items", 0, "qty"]
        mock_number_generator.next_number.assert_not_called()
        mock_invoice_repo.create.assert_not_called()

    async def test_huge_qty_is_a_validation_error_not_a_crash(
        self, create_invoice_use_case, mock_invoice_repo
    ):
        for qty, price in ((123456789012345, "99.99"), (10 ** 30, "1")):
            command = CreateInvoiceCommandDTO(
                user_id=1,
                customer_id=1,
                due_date=date(2024, 2, 29),
                items=[InvoiceItemInputDTO(item_name="Bulk", qty=qty, price=Decimal(price))],
            )

            result = await create_invoice_use_case.execute(command)

            assert result.error.code == "VALIDATION_ERROR"
            assert result.error.details[0]["loc"] == ["items", 0, "qty"]

        mock_invoice_repo.create.assert_not_called()

    async def test_running_total_beyond_money_column_is_rejected(
        self, create_invoice_use_case, mock_invoice_repo
    ):
        # Arrange - each line fits, their sum has 17 integer digits
        line = InvoiceItemInputDTO(item_name="Plant", qty=1, price=Decimal("6000000000000000.00"))
        command = CreateInvoiceCommandDTO(
            user_id=1, customer_id=1, due_date=date(2024, 2, 29), items=[line, line]
        )

        # Act
        result = await create_invoice_use_case.execute(command)

        # Assert
        assert result.error.code == "VALIDATION_ERROR"
        assert [d["loc"] for d in result.error.details] == [["items", 1, "qty"]]
        mock_invoice_repo.create.assert_not_called()

    async def test_largest_fitting_line_is_accepted(self, create_invoice_use_case, mock_uow):
        command = CreateInvoiceCommandDTO(
            user_id=1,
            customer_id=1,
            due_date=date(2024, 2, 29),
            items=[InvoiceItemInputDTO(item_name="Plant", qty=1, price=Decimal("9999999999999999.99"))],
        )

        result = await create_invoice_use_case.execute(command)

        assert result.is_ok()
        assert result.value.total == Decimal("9999999999999999.99")
        mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
class TestCreateInvoiceFailures:

    async def test_item_insert_failure_rolls_back(
        self, create_invoice_use_case, mock_item_repo, mock_uow, sample_command
    ):
        # Arrange - second item insert fails
        original = mock_item_repo.create.side_effect
        calls = {"n": 0}

        async def flaky_create(item):
            calls["n"] += 1
            if calls["n"] == 2:
                raise RuntimeError("connection lost")
            return await original(item)

        mock_item_repo.create = AsyncMock(side_effect=flaky_create)

        # Act
        result = await create_invoice_use_case.execute(sample_command)

        # Assert
        assert result.is_err()
        assert result.error.code == "TRANSACTION_FAILED"
        assert "connection lost" in result.error.reason
        mock_uow.rollback.assert_awaited_once()
        mock_uow.commit.assert_not_called()

    async def test_numbering_failure_is_configuration_error(
        self, create_invoice_use_case, mock_number_generator, mock_invoice_repo, mock_uow, sample_command
    ):
        # Arrange
        mock_number_generator.next_number = AsyncMock(
            side_effect=InvoiceNumberingError("Clock unavailable")
        )

        # Act
        result = await create_invoice_use_case.execute(sample_command)

        # Assert
        assert result.is_err()
        assert result.error.code == "INVOICE_NUMBERING_UNAVAILABLE"
        mock_invoice_repo.create.assert_not_called()
        mock_uow.rollback.assert_awaited_once()

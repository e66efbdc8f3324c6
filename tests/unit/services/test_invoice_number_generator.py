"""Unit tests for invoice numbering"""

import re
import pytest
from datetime import date, datetime
from unittest.mock import AsyncMock, MagicMock

from src.app.services.invoice_number_generator import (
    InvoiceNumberingError,
    format_invoice_number,
)
from src.adapter.services.invoice_number_generator import SqlAlchemyInvoiceNumberGenerator

NUMBER_PATTERN = re.compile(r"^INV-\d{8}-\d{4,}$")


class TestFormatInvoiceNumber:

    def test_format_pads_sequence_to_four_digits(self):
        assert format_invoice_number("INV", date(2023, 8, 7), 1) == "INV-20230807-0001"

    def test_format_grows_past_four_digits(self):
        number = format_invoice_number("INV", date(2023, 8, 7), 12345)

        assert number == "INV-20230807-12345"
        assert NUMBER_PATTERN.match(number)

    def test_format_honours_custom_width(self):
        assert format_invoice_number("INV", date(2024, 1, 31), 7, min_digits=6) == "INV-20240131-000007"

    def test_format_rejects_non_positive_sequence(self):
        with pytest.raises(InvoiceNumberingError):
            format_invoice_number("INV", date(2024, 1, 31), 0)


def _execute_results(*results):
    session = MagicMock()
    session.execute = AsyncMock(side_effect=list(results))
    session.flush = AsyncMock()
    return session


@pytest.mark.asyncio
class TestSqlAlchemyInvoiceNumberGenerator:

    async def test_next_number_increments_existing_sequence(self):
        # Arrange - UPDATE hits the row, SELECT returns the new value
        update_result = MagicMock(rowcount=1)
        select_result = MagicMock()
        select_result.scalar_one.return_value = 42
        session = _execute_results(update_result, select_result)

        generator = SqlAlchemyInvoiceNumberGenerator(
            session, clock=lambda: datetime(2024, 1, 31, 10, 0, 0)
        )

        # Act
        number = await generator.next_number()

        # Assert
        assert number == "INV-20240131-0042"
        session.add.assert_not_called()

    async def test_next_number_starts_sequence_at_one(self):
        # Arrange - no sequence row yet
        session = _execute_results(MagicMock(rowcount=0))

        generator = SqlAlchemyInvoiceNumberGenerator(
            session, clock=lambda: datetime(2024, 2, 1)
        )

        # Act
        number = await generator.next_number()

        # Assert
        assert number == "INV-20240201-0001"
        session.add.assert_called_once()
        session.flush.assert_awaited_once()

    async def test_clock_failure_raises_numbering_error(self):
        def broken_clock():
            raise OSError("clock unavailable")

        session = _execute_results()
        generator = SqlAlchemyInvoiceNumberGenerator(session, clock=broken_clock)

        with pytest.raises(InvoiceNumberingError):
            await generator.next_number()

        session.execute.assert_not_called()

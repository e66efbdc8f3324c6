"""Sequence-backed Invoice Number Generator

Increments a counter row in ``invoice_sequences`` inside the caller's
transaction. The row lock taken by the UPDATE serializes concurrent
creators until they commit or roll back, so two invoices can never be
handed the same sequence value and a rolled back creation does not burn
a number.
"""

import logging
from datetime import datetime
from typing import Callable, Optional
from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.services.invoice_number_generator import (
    InvoiceNumberGenerator,
    InvoiceNumberingError,
    format_invoice_number,
)
from src.domain.invoice_sequence import InvoiceSequence

logger = logging.getLogger(__name__)

INVOICE_SEQUENCE_NAME = "invoice"


class SqlAlchemyInvoiceNumberGenerator(InvoiceNumberGenerator):
    """
    Invoice numbers from a database counter

    Format: <prefix>-YYYYMMDD-NNNN (e.g., INV-20240131-0001)
    """

    def __init__(
        self,
        session: AsyncSession,
        prefix: str = "INV",
        min_digits: int = 4,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.session = session
        self.prefix = prefix
        self.min_digits = min_digits
        self.clock = clock or datetime.now

    async def next_number(self) -> str:
        try:
            issued_on = self.clock().date()
        except Exception as e:
            raise InvoiceNumberingError(f"Clock unavailable: {e}") from e

        sequence = await self._increment()
        number = format_invoice_number(self.prefix, issued_on, sequence, self.min_digits)
        logger.debug(f"Assigned invoice number {number}")
        return number

    async def _increment(self) -> int:
        statement = (
            update(InvoiceSequence)
            .where(InvoiceSequence.name == INVOICE_SEQUENCE_NAME)
            .values(last_value=InvoiceSequence.last_value + 1)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(statement)

        if result.rowcount == 0:
            # First invoice ever; a concurrent first insert fails on the primary key
            self.session.add(InvoiceSequence(name=INVOICE_SEQUENCE_NAME, last_value=1))
            await self.session.flush()
            return 1

        current = await self.session.execute(
            select(InvoiceSequence.last_value)
            .where(InvoiceSequence.name == INVOICE_SEQUENCE_NAME)
        )
        return current.scalar_one()

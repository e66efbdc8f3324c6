"""Invoice Number Generator Interface

Invoice numbers look like INV-20240131-0001: a prefix, the creation date,
and a global sequence zero-padded to at least four digits.
"""

from abc import ABC, abstractmethod
from datetime import date


class InvoiceNumberingError(Exception):
    """Raised when a number cannot be produced (e.g. clock unavailable)"""


def format_invoice_number(
    prefix: str, issued_on: date, sequence: int, min_digits: int = 4
) -> str:
    """
    Render an invoice number

    Args:
        prefix: Number prefix (e.g., "INV")
        issued_on: Creation date
        sequence: Global sequence value (>= 1)
        min_digits: Minimum zero-padded width of the sequence

    Returns:
        Invoice number string
    """
    if sequence < 1:
        raise InvoiceNumberingError(f"Invalid invoice sequence value: {sequence}")
    return f"{prefix}-{issued_on.strftime('%Y%m%d')}-{sequence:0{min_digits}d}"


class InvoiceNumberGenerator(ABC):
    """
    Source of unique invoice numbers

    Implementations take part in the caller's transaction so that a rolled
    back creation does not consume a number.
    """

    @abstractmethod
    async def next_number(self) -> str:
        """
        Produce the next invoice number

        Returns:
            Unique invoice number string

        Raises:
            InvoiceNumberingError: if no number can be produced
        """
        pass

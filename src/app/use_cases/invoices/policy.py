"""Invoice authorization policy

Only the owner may view, update or delete an invoice. Creating one needs
nothing beyond an authenticated user, which the current-user dependency
already guarantees.
"""

from enum import Enum
from typing import Optional
from src.domain.invoice import Invoice


class InvoiceAction(str, Enum):
    VIEW = "view"
    UPDATE = "update"
    DELETE = "delete"


class InvoicePolicy:

    def allows(self, user_id: Optional[int], action: InvoiceAction, invoice: Invoice) -> bool:
        if user_id is None:
            return False
        return invoice.is_owned_by(user_id)

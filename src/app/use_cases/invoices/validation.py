"""Input checks shared by CreateInvoice and UpdateInvoice

Run before any write so a rejected request never leaves partial state.
"""

from datetime import date
from decimal import Decimal
from typing import Any, Dict, List, Sequence
from src.domain.invoice_item import (
    MAX_ITEM_QTY,
    MONEY_INTEGER_DIGITS,
    calculate_subtotal,
    fits_money_column,
)
from .dtos import InvoiceItemInputDTO

AMOUNT_TOO_LARGE = f"amount must have at most {MONEY_INTEGER_DIGITS} integer digits"


def validate_invoice_input(
    customer_id: int, due_date: date, items: Sequence[InvoiceItemInputDTO]
) -> List[Dict[str, Any]]:
    """
    Check invoice input constraints

    Every line subtotal and the running invoice total must fit the
    Numeric(18, 2) money columns; an overflow is reported against the
    qty of the item that caused it.

    Returns:
        Field-level problems as {"loc": [...], "msg": str}; empty when valid
    """
    problems: List[Dict[str, Any]] = []

    if customer_id is None or customer_id < 1:
        problems.append({"loc": ["customer_id"], "msg": "customer_id must reference a customer"})

    if not isinstance(due_date, date):
        problems.append({"loc": ["due_date"], "msg": "due_date must be a valid date"})

    if not items:
        problems.append({"loc": ["items"], "msg": "at least one item is required"})
        return problems

    running_total = Decimal("0")
    for index, item in enumerate(items):
        if not item.item_name or not item.item_name.strip():
            problems.append({"loc": ["items", index, "item_name"], "msg": "item_name is required"})

        qty_ok = price_ok = False
        if item.qty < 1:
            problems.append({"loc": ["items", index, "qty"], "msg": "qty must be at least 1"})
        elif item.qty > MAX_ITEM_QTY:
            problems.append({"loc": ["items", index, "qty"], "msg": f"qty must be at most {MAX_ITEM_QTY}"})
        else:
            qty_ok = True

        if item.price < Decimal("0"):
            problems.append({"loc": ["items", index, "price"], "msg": "price must not be negative"})
        elif not fits_money_column(item.price):
            problems.append({"loc": ["items", index, "price"], "msg": f"price {AMOUNT_TOO_LARGE}"})
        else:
            price_ok = True

        if not (qty_ok and price_ok):
            continue

        if not fits_money_column(Decimal(item.qty) * item.price):
            problems.append({"loc": ["items", index, "qty"], "msg": f"qty * price {AMOUNT_TOO_LARGE}"})
            continue

        subtotal = calculate_subtotal(item.qty, item.price)
        if not fits_money_column(subtotal):
            problems.append({"loc": ["items", index, "qty"], "msg": f"qty * price {AMOUNT_TOO_LARGE}"})
            continue

        running_total += subtotal
        if not fits_money_column(running_total):
            problems.append({"loc": ["items", index, "qty"], "msg": f"invoice total {AMOUNT_TOO_LARGE}"})

    return problems

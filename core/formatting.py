"""Formatting helpers for rupee amounts and invoice table cells."""

from __future__ import annotations

from typing import Any

import numpy as np

__all__ = ["ZERO_CURRENCY", "format_cell", "format_currency", "group_indian_digits", "profit_tone"]

CURRENCY_SYMBOL = "₹"
ZERO_CURRENCY = f"{CURRENCY_SYMBOL}0"
EMPTY_CELL = "—"


def group_indian_digits(digits: str) -> str:
    """Group an integer digit string the en-IN way: ``1234567`` -> ``12,34,567``."""

    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups: list[str] = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_currency(value: Any) -> str:
    """Render ``value`` as Indian Rupees with two fraction digits.

    ``None`` renders as ``₹0``; values that cannot be formatted fall back to
    their plain string form.
    """

    if value is None:
        return ZERO_CURRENCY

    try:
        amount = float(value)
        if not np.isfinite(amount):
            return str(value)
        rounded = f"{abs(amount):.2f}"
    except (TypeError, ValueError, OverflowError):
        return str(value)

    integer_part, fraction = rounded.split(".")
    sign = "-" if amount < 0 and rounded != "0.00" else ""
    return f"{sign}{CURRENCY_SYMBOL}{group_indian_digits(integer_part)}.{fraction}"


def format_cell(value: Any) -> str:
    if value is None or (isinstance(value, str) and not value.strip()):
        return EMPTY_CELL
    return str(value)


def profit_tone(value: float) -> str:
    if value > 0:
        return "positive"
    if value < 0:
        return "negative"
    return ""

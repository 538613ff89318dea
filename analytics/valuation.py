"""Mark-to-market profit estimate for gold and silver holdings."""

from __future__ import annotations

from typing import Any, Optional

from core.models import Holdings, InvestedTotals, Profits
from core.parsing import parse_amount

__all__ = ["compute_metal_profit", "compute_profits"]


def _positive(value: Any) -> Optional[float]:
    amount = parse_amount(value)
    if amount is None or amount <= 0:
        return None
    return amount


def compute_metal_profit(grams: Any, rate: Any, invested_total: float) -> float:
    """Return ``grams * rate - invested_total``, or 0 until every input is positive.

    This values all invested capital at a single current rate; it is a display
    estimate, not lot accounting.
    """

    quantity = _positive(grams)
    current_rate = _positive(rate)
    if quantity is None or current_rate is None or not invested_total > 0:
        return 0.0
    return quantity * current_rate - float(invested_total)


def compute_profits(invested: InvestedTotals, holdings: Optional[Holdings] = None) -> Profits:
    holdings = holdings or Holdings()
    return {
        "gold": compute_metal_profit(holdings.gold_grams, holdings.gold_rate, invested["gold"]),
        "silver": compute_metal_profit(
            holdings.silver_grams, holdings.silver_rate, invested["silver"]
        ),
    }

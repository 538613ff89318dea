"""Date range and metal filters for the revenue dashboard."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional

import pandas as pd

from core.models import FilterCriteria
from core.parsing import metal_label, parse_invoice_date

__all__ = ["END_OF_DAY", "filter_invoices", "resolve_date_bounds"]

END_OF_DAY = pd.Timedelta(hours=23, minutes=59, seconds=59, milliseconds=999)


def resolve_date_bounds(
    criteria: FilterCriteria,
) -> tuple[Optional[pd.Timestamp], Optional[pd.Timestamp]]:
    """Return ``(start, end)`` with ``end`` pushed to the last millisecond of its day."""

    start = parse_invoice_date(criteria.start_date)
    end = parse_invoice_date(criteria.end_date)
    if end is not None:
        end = end.normalize() + END_OF_DAY
    return start, end


def filter_invoices(
    records: Iterable[Mapping[str, Any]],
    criteria: Optional[FilterCriteria] = None,
) -> list[Mapping[str, Any]]:
    """Return the records matching ``criteria`` in their original order."""

    criteria = criteria or FilterCriteria()
    start, end = resolve_date_bounds(criteria)
    metal_token = criteria.metal_filter

    selected: list[Mapping[str, Any]] = []
    for record in records:
        if not isinstance(record, Mapping):
            continue

        if start is not None or end is not None:
            invoice_date = parse_invoice_date(record.get("invoiceDate"))
            if invoice_date is None:
                continue
            if start is not None and invoice_date < start:
                continue
            if end is not None and invoice_date > end:
                continue

        if metal_token != "ALL":
            label = metal_label(record.get("metalType")) or ""
            if not label.startswith(metal_token):
                continue

        selected.append(record)
    return selected

"""Core logic for assembling Aura Gold dashboard views."""

from __future__ import annotations

from typing import Any, Optional

import pandas as pd

from analytics.aggregation import (
    build_daily_totals,
    build_gst_rows,
    build_invested_share,
    build_invoice_frame,
    build_metal_distribution,
    build_monthly_totals,
    compute_invested_totals,
    compute_kpis,
)
from analytics.filters import filter_invoices
from analytics.valuation import compute_profits
from core.models import DashboardData, FilterCriteria, Holdings, HomeData
from core.parsing import coerce_records

__all__ = ["prepare_dashboard_data", "prepare_home_data"]


def prepare_dashboard_data(
    records: Any,
    criteria: Optional[FilterCriteria] = None,
    holdings: Optional[Holdings] = None,
    now: Optional[pd.Timestamp] = None,
) -> DashboardData:
    """Filter ``records`` and derive every dashboard view from the result."""

    filtered = filter_invoices(coerce_records(records), criteria)
    frame = build_invoice_frame(filtered)
    invested = compute_invested_totals(frame)

    return {
        "filtered_records": [dict(record) for record in filtered],
        "kpi": compute_kpis(frame),
        "monthly": build_monthly_totals(frame),
        "daily": build_daily_totals(frame, now=now),
        "metal_distribution": build_metal_distribution(frame),
        "gst_rows": build_gst_rows(frame),
        "invested": invested,
        "profits": compute_profits(invested, holdings),
    }


def prepare_home_data(records: Any) -> HomeData:
    frame = build_invoice_frame(coerce_records(records))
    invested = compute_invested_totals(frame)
    return {"invested": invested, "invested_share": build_invested_share(invested)}
